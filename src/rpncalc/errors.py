## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class RpnError(Exception):
    def __init__(self, message: str = "", *, rpn_token=None, rpn_index=None, rpn_stack=None):
        """Base class for all errors raised while evaluating an expression."""
        super().__init__(message)
        self.rpn_token: object = rpn_token
        self.rpn_index: int = rpn_index
        self.rpn_stack: list = rpn_stack


class InsufficientOperands(RpnError, IndexError):
    """An operator needed more values than the stack held when it was pushed."""
    pass


class UnbalancedExpression(RpnError, ValueError):
    """Zero or more than one value remained once all tokens were consumed."""
    def __init__(self, message: str = "", *, depth: int = 0, rpn_stack=None):
        super().__init__(message, rpn_stack=rpn_stack)
        self.depth = depth


class NoInputError(RpnError, ValueError):
    pass
