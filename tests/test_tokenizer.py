## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import math

import numpy as np
import pytest

from rpncalc.tokenizer import tokenize, tokenize_words, split_words, find_invalid, SYMBOLS
from rpncalc.types import Number, Constant, UnaryOperator, BinaryOperator, Invalid
from rpncalc.types import ConstantKind, UnaryKind, BinaryKind


@pytest.mark.parametrize("word, expected", [
    ("+", BinaryOperator(BinaryKind.ADD)),
    ("-", BinaryOperator(BinaryKind.SUBTRACT)),
    (".", BinaryOperator(BinaryKind.MULTIPLY)),
    ("/", BinaryOperator(BinaryKind.DIVIDE)),
    ("log", BinaryOperator(BinaryKind.LOG)),
    ("ln", UnaryOperator(UnaryKind.LN)),
    ("log2", UnaryOperator(UnaryKind.LOG2)),
    ("log10", UnaryOperator(UnaryKind.LOG10)),
    ("sin", UnaryOperator(UnaryKind.SIN)),
    ("cos", UnaryOperator(UnaryKind.COS)),
    ("tan", UnaryOperator(UnaryKind.TAN)),
    ("pi", Constant(ConstantKind.PI)),
    ("e", Constant(ConstantKind.E)),
])
def test_symbols_map_to_tokens(word, expected):
    assert tokenize(word) == expected


@pytest.mark.parametrize("word", ["PI", "Pi", "E", "LN", "Log10", "LOG2", "SiN", "COS", "Tan", "LOG"])
def test_word_symbols_are_case_insensitive(word):
    assert tokenize(word) == SYMBOLS[word.lower()]


def test_dot_is_multiplication_not_a_number():
    assert tokenize(".") == BinaryOperator(BinaryKind.MULTIPLY)
    # A dot followed by digits is still a decimal literal.
    assert tokenize(".5") == Number(np.float32(0.5))


@pytest.mark.parametrize("word, value", [
    ("3", 3.0), ("-5", -5.0), ("+2", 2.0), ("0.25", 0.25), ("5.", 5.0),
    (".5", 0.5), ("1e3", 1000.0), ("-2.5E-1", -0.25), ("1E+2", 100.0),
])
def test_numbers_parse_as_float32(word, value):
    token = tokenize(word)
    assert isinstance(token, Number)
    assert isinstance(token.value, np.float32)
    assert token.value == np.float32(value)


def test_number_is_rounded_to_32_bits():
    token = tokenize("0.1")
    assert token.value == np.float32(0.1)
    assert float(token.value) != 0.1


@pytest.mark.parametrize("word, sign", [("inf", 1), ("-inf", -1), ("Infinity", 1), ("+INF", 1), ("1e39", 1), ("-1e39", -1)])
def test_infinite_literals(word, sign):
    token = tokenize(word)
    assert isinstance(token, Number)
    assert math.isinf(token.value) and np.sign(token.value) == sign


def test_nan_literal():
    token = tokenize("NaN")
    assert isinstance(token, Number) and math.isnan(token.value)


@pytest.mark.parametrize("word", [
    "foo", "", " ", "3 ", " 3", "1_000", "3+", "+.", "e5", "0x10", "π", "--", "..", "1e", "pie", "log3",
    "٣", "３", "1.٥", "1e٣",
])
def test_unrecognized_words_are_invalid(word):
    assert tokenize(word) == Invalid()


def test_tokenize_is_deterministic():
    for word in ["3", "-1.5", "pi", "log", "+", "foo", ""]:
        assert tokenize(word) == tokenize(word)


def test_split_words_keeps_empty_words_and_drops_line_ending():
    assert split_words("3 5 +\n") == ["3", "5", "+"]
    assert split_words("3  5\r\n") == ["3", "", "5"]


def test_find_invalid_reports_indices():
    tokens = tokenize_words(["foo", "3", "", "5", "+", "bar"])
    assert find_invalid(tokens) == [0, 2, 5]
    assert find_invalid(tokenize_words(["3", "5", "+"])) == []


def test_symbols_table_covers_every_kind():
    assert set(SYMBOLS) == {"pi", "e", "ln", "log2", "log10", "sin", "cos", "tan", "+", "-", ".", "/", "log"}
    for text, token in SYMBOLS.items():
        assert tokenize(text) == token


def test_decimal_literals_round_once_to_float32():
    above_halfway = tokenize("1.0000000596046447753906251")
    assert above_halfway.value == np.nextafter(np.float32(1), np.float32(2))
    # Exactly halfway between 1 and the next float32 rounds to the even neighbour.
    assert tokenize("1.000000059604644775390625").value == np.float32(1)
    assert tokenize("-1.0000000596046447753906251").value == -np.nextafter(np.float32(1), np.float32(2))


def test_literals_at_the_float32_limits():
    largest = np.finfo(np.float32).max
    assert tokenize("340282346638528859811704183484516925440").value == largest
    # Halfway between the largest float32 and 2**128 rounds up to infinity.
    assert math.isinf(tokenize("340282356779733661637539395458142568448").value)
    assert tokenize("340282356779733661637539395458142568447").value == largest
    assert str(tokenize("-0").value) == "-0.0"
    assert tokenize("1e-50").value == 0
