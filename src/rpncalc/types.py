## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from enum import Enum
from typing import ClassVar
from dataclasses import dataclass

import numpy as np


# Enum values are the canonical symbol text, matched case-insensitively for words.
class ConstantKind(Enum):
    PI = 'pi'
    E = 'e'

class UnaryKind(Enum):
    LN = 'ln'
    LOG2 = 'log2'
    LOG10 = 'log10'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'

class BinaryKind(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '.'
    DIVIDE = '/'
    LOG = 'log'


@dataclass(frozen=True)
class Number:
    value: np.float32
    arity: ClassVar[int] = 0

    def __repr__(self):
        return f"{self.value}"

@dataclass(frozen=True)
class Constant:
    kind: ConstantKind
    arity: ClassVar[int] = 0

    def __repr__(self):
        return self.kind.value

@dataclass(frozen=True)
class UnaryOperator:
    kind: UnaryKind
    arity: ClassVar[int] = 1

    def __repr__(self):
        return self.kind.value

@dataclass(frozen=True)
class BinaryOperator:
    kind: BinaryKind
    arity: ClassVar[int] = 2

    def __repr__(self):
        return self.kind.value

@dataclass(frozen=True)
class Invalid:
    arity: ClassVar[int] = 0

    def __repr__(self):
        return "≪invalid≫"


Token = Number | Constant | UnaryOperator | BinaryOperator | Invalid
