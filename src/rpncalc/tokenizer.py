## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# rpncalc — A small reverse-Polish-notation calculator for the command line.
#

from functools import cache
from fractions import Fraction
from typing import Iterable

import lark
import numpy as np

from .types import Token, Number, Constant, UnaryOperator, BinaryOperator, Invalid
from .types import ConstantKind, UnaryKind, BinaryKind


# One word per parse; no whitespace is ignored, so padded words are rejected.
# Terminal names match the kind enums, `.` is multiplication and never a decimal point on its own.
GRAMMAR = r"""?start: constant | unary | binary | number
constant: PI | E
unary: LN | LOG2 | LOG10 | SIN | COS | TAN
binary: ADD | SUBTRACT | MULTIPLY | DIVIDE | LOG
number: FLOAT

// CONSTANTS
PI: "pi"i
E: "e"i

// OPERATORS
LN: "ln"i
LOG2: "log2"i
LOG10: "log10"i
SIN: "sin"i
COS: "cos"i
TAN: "tan"i
LOG: "log"i
ADD: "+"
SUBTRACT: "-"
MULTIPLY: "."
DIVIDE: "/"

// LITERALS
FLOAT: /[+-]?(?:inf(?:inity)?|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)/i
"""


SYMBOLS: dict[str, Token] = {
    **{k.value: Constant(k) for k in ConstantKind},
    **{k.value: UnaryOperator(k) for k in UnaryKind},
    **{k.value: BinaryOperator(k) for k in BinaryKind},
}


# Smallest magnitude that rounds to infinity is halfway from the largest float32 to 2**128.
_F32_LIMIT = Fraction(2) ** 128

def _exact(x: np.float32) -> Fraction:
    return _F32_LIMIT * int(np.sign(x)) if np.isinf(x) else Fraction(float(x))

def to_float32(text: str) -> np.float32:
    """Round a decimal literal once, directly to the nearest float32 with ties to even."""
    approx = float(text)
    # Zero, inf and nan (including underflow and overflow of float64) are already exact in 32 bits.
    if approx == 0.0 or not np.isfinite(approx) or abs(approx) >= _F32_LIMIT:
        with np.errstate(over='ignore'):
            return np.float32(approx)

    exact = Fraction(text)
    # The float64 value is at most one float32 step away from the correctly rounded result.
    with np.errstate(over='ignore'):
        guess = np.float32(approx)
    neighbours = (guess, np.nextafter(guess, np.float32(-np.inf)), np.nextafter(guess, np.float32(np.inf)))
    return min(neighbours, key=lambda c: (abs(_exact(c) - exact), int(c.view(np.uint32)) & 1))


class _TokenBuilder(lark.Transformer):
    def constant(self, children):
        (tok,) = children
        return Constant(ConstantKind[tok.type])

    def unary(self, children):
        (tok,) = children
        return UnaryOperator(UnaryKind[tok.type])

    def binary(self, children):
        (tok,) = children
        return BinaryOperator(BinaryKind[tok.type])

    def number(self, children):
        (tok,) = children
        return Number(to_float32(tok.value))


@cache
def _parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, start='start', parser='lalr', lexer='basic', transformer=_TokenBuilder())


def tokenize(word: str) -> Token:
    """Classify a single word; anything unrecognized becomes `Invalid` instead of raising."""
    try:
        return _parser().parse(word)
    except lark.exceptions.UnexpectedInput:
        return Invalid()


def split_words(line: str) -> list[str]:
    # Single spaces only: doubled spaces yield empty words, which tokenize as invalid.
    return line.rstrip('\r\n').split(' ')

def tokenize_words(words: Iterable[str]) -> list[Token]:
    return [tokenize(w) for w in words]

def find_invalid(tokens: Iterable[Token]) -> list[int]:
    return [i for i, tok in enumerate(tokens) if isinstance(tok, Invalid)]
