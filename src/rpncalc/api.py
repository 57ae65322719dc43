## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

import numpy as np

from .types import Token, Number, Constant, UnaryOperator, BinaryOperator, Invalid
from .errors import *
from .tokenizer import tokenize, tokenize_words, split_words, find_invalid, SYMBOLS
from .interpreter import Stack, interpret


def evaluate(source: str | Iterable[str], verbosity=0, stats=None) -> np.float32:
    """Evaluate one expression, given as a line of text or as already-split words."""
    words = split_words(source) if isinstance(source, str) else list(source)
    return interpret(tokenize_words(words), verbosity=verbosity, stats=stats)
