## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import numpy as np

from .types import Token, Number


def format_value(value) -> str:
    """Render a 32-bit float with the shortest digits that round-trip, never in exponent form."""
    value = np.float32(value)
    if np.isnan(value): return 'NaN'
    if np.isinf(value): return 'inf' if value > 0 else '-inf'
    return np.format_float_positional(value, unique=True, trim='-')

def format_item(it) -> str:
    if isinstance(it, Number): return format_value(it.value)
    return repr(it)

def format_stack(values: list, width=72) -> str:
    stack_str = ' '.join(format_value(v) for v in values) if values else '∅'
    if width is not None and len(stack_str) > width:
        stack_str = '… ' + stack_str[-width+2:]
    return f"{stack_str:>{width}}" if width else stack_str

def format_program_and_stack(program: list[Token], values: list, width=72) -> str:
    prog_str = ' '.join(format_item(p) for p in program) if program else '∅'
    if len(prog_str) > width:
        prog_str = prog_str[:+width-2] + ' …'
    return f"{format_stack(values, width=width)} \033[36m <=> \033[0m {prog_str:<{width}}"


def format_token_pointer(words: list[str], indices, color='\033[32m') -> str:
    """Echo the input words on one line and underline them on the next, with `^` under marked ones."""
    marked = set(indices)
    upper, lower = [], []
    for i, word in enumerate(words):
        if i in marked:
            # Empty words are shown as `␣` so the marker has a column of its own.
            shown = word or '␣'
            upper.append(f"{color}{shown}\033[0m")
            lower.append('^' * len(shown))
        else:
            upper.append(word)
            lower.append('─' * len(word))
    return ' '.join(upper) + '\n' + '─'.join(lower)
