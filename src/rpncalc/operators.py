## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Callable

import numpy as np

from .types import ConstantKind, UnaryKind, BinaryKind


f32 = np.float32

## CONSTANTS
CONSTANTS: dict[ConstantKind, f32] = {
    ConstantKind.PI: f32(np.pi),
    ConstantKind.E: f32(np.e),
}

## TRANSCENDENTAL
def op_ln(x: f32) -> f32: return np.log(x)
def op_log2(x: f32) -> f32: return np.log2(x)
def op_log10(x: f32) -> f32: return np.log10(x)
def op_sin(x: f32) -> f32: return np.sin(x)
def op_cos(x: f32) -> f32: return np.cos(x)
def op_tan(x: f32) -> f32: return np.tan(x)
## ARITHMETIC
def op_add(b: f32, a: f32) -> f32: return b + a
def op_sub(b: f32, a: f32) -> f32: return b - a
def op_mul(b: f32, a: f32) -> f32: return b * a
def op_div(b: f32, a: f32) -> f32: return b / a
def op_log(b: f32, a: f32) -> f32: return np.log(b) / np.log(a)


UNARY_OPERATORS: dict[UnaryKind, Callable[[f32], f32]] = {
    UnaryKind.LN: op_ln,
    UnaryKind.LOG2: op_log2,
    UnaryKind.LOG10: op_log10,
    UnaryKind.SIN: op_sin,
    UnaryKind.COS: op_cos,
    UnaryKind.TAN: op_tan,
}

BINARY_OPERATORS: dict[BinaryKind, Callable[[f32, f32], f32]] = {
    BinaryKind.ADD: op_add,
    BinaryKind.SUBTRACT: op_sub,
    BinaryKind.MULTIPLY: op_mul,
    BinaryKind.DIVIDE: op_div,
    BinaryKind.LOG: op_log,
}
