## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import click
import numpy as np

from .types import Token, Number, Constant, UnaryOperator, BinaryOperator, Invalid
from .errors import RpnError, InsufficientOperands, UnbalancedExpression
from .operators import CONSTANTS, UNARY_OPERATORS, BINARY_OPERATORS
from .formatting import format_program_and_stack


class Stack:
    """Operand stack for a single evaluation; values are 32-bit floats, top is last."""

    def __init__(self, values=()):
        self.values: list[np.float32] = [np.float32(v) for v in values]

    def __len__(self):
        return len(self.values)

    def _require(self, token: Token) -> None:
        if len(self.values) < token.arity:
            raise InsufficientOperands(
                f"`{token!r}` needs {token.arity} value(s) on the stack, but {len(self.values)} available.",
                rpn_token=token)

    def push(self, token: Token) -> None:
        # Division by zero and log of non-positive values follow IEEE rules silently.
        with np.errstate(all='ignore'):
            match token:
                case Number(value):
                    self.values.append(np.float32(value))
                case Constant(kind):
                    self.values.append(CONSTANTS[kind])
                case UnaryOperator(kind):
                    self._require(token)
                    x = self.values.pop()
                    self.values.append(np.float32(UNARY_OPERATORS[kind](x)))
                case BinaryOperator(kind):
                    self._require(token)
                    a = self.values.pop()
                    b = self.values.pop()
                    self.values.append(np.float32(BINARY_OPERATORS[kind](b, a)))
                case Invalid():
                    pass
                case _:
                    raise NotImplementedError(f"Unknown token `{token!r}`.")

    def value(self) -> np.float32 | None:
        """Pop the final result when exactly one value is left, otherwise return None."""
        if len(self.values) > 1:
            return None
        return self.values.pop() if self.values else None


def _trace(step: int, program: list[Token], stack: Stack, color: bool | None = None) -> None:
    click.echo(f"\033[90m{step:>3} :\033[0m  " + format_program_and_stack(program, stack.values), err=True, color=color)


def interpret(tokens: list[Token], stack: Stack | None = None, verbosity=0, stats=None, color=None) -> np.float32:
    stack = Stack() if stack is None else stack
    tokens = list(tokens)

    def is_notable(tok):
        return isinstance(tok, (UnaryOperator, BinaryOperator))

    step = 0
    for index, token in enumerate(tokens):
        if verbosity == 2 or (verbosity == 1 and (is_notable(token) or step == 0)):
            _trace(step, tokens[index:], stack, color=color)

        step += 1
        try:
            stack.push(token)
        except RpnError as exc:
            exc.rpn_index = index
            exc.rpn_token = token
            exc.rpn_stack = list(stack.values)
            raise

    if verbosity > 0:
        _trace(step, [], stack, color=color)
    if stats is not None:
        stats['steps'] = stats.get('steps', 0) + step

    depth = len(stack)
    if (result := stack.value()) is None:
        raise UnbalancedExpression(
            f"Stack holds {depth} value(s) after applying all operators, expected exactly one.",
            depth=depth, rpn_stack=list(stack.values))
    return result
