import logging
import math

import pytest

from listcalc.errors import InvalidSyntaxError, UnbalancedGroupError
from listcalc.evaluator import sum_additive
from listcalc.reducer import ieee_divide, reduce_groups, reduce_multiplicative
from listcalc.tokenizer import Token, TokenKind, TokenSequence, tokenize


@pytest.mark.parametrize(
    "line, expected",
    [
        pytest.param("(1+2)", "+ 3"),
        pytest.param("(1+2)*(3+4)", "+ 3 * 7"),
        pytest.param("((2+3)*4)", "+ 20"),
        pytest.param("1-(2*(3-(4/2)))", "+ 1 - 2"),
        pytest.param("(((((7)))))", "+ 7"),
        pytest.param("1+2*3", "+ 1 + 2 * 3"),
    ],
)
def test_reduce_groups(line: str, expected: str) -> None:
    sequence = reduce_groups(tokenize(line))
    assert str(sequence) == expected
    assert TokenKind.GROUP_START not in sequence.kinds()
    assert TokenKind.GROUP_END not in sequence.kinds()


@pytest.mark.parametrize(
    "line, expected",
    [
        pytest.param("2*3", "+ 6"),
        pytest.param("1+2*3+4/2-5", "+ 1 + 6 + 2 - 5"),
        pytest.param("2*3*4", "+ 24"),
        pytest.param("8/2/2", "+ 2"),
        pytest.param("8/2*3", "+ 12"),
        pytest.param("1-2", "+ 1 - 2"),
    ],
)
def test_reduce_multiplicative(line: str, expected: str) -> None:
    sequence = reduce_multiplicative(tokenize(line))
    assert str(sequence) == expected
    assert TokenKind.MULTIPLY not in sequence.kinds()
    assert TokenKind.DIVIDE not in sequence.kinds()


def test_reduced_sequence_alternates() -> None:
    sequence = reduce_multiplicative(reduce_groups(tokenize("(1+2)*3-4/(5-6)+7")))
    kinds = sequence.kinds()
    assert all(kind in (TokenKind.PLUS, TokenKind.MINUS) for kind in kinds[::2])
    assert all(kind is TokenKind.NUMBER for kind in kinds[1::2])
    assert sum_additive(sequence) == pytest.approx(20.0)


def test_deep_nesting() -> None:
    depth = 50
    line = "(" * depth + "1" + "+1)" * depth
    assert str(reduce_groups(tokenize(line))) == f"+ {depth + 1}"


def test_group_keeps_tail_consistent() -> None:
    sequence = reduce_groups(tokenize("1*(2+3)"))
    assert sequence.tail.kind is TokenKind.NUMBER
    assert sequence.tail.value == 5.0
    assert sequence.tail.next is None
    assert sequence.tail.prev.kind is TokenKind.MULTIPLY


@pytest.mark.parametrize(
    "line, error_char_idx",
    [
        pytest.param("(1+2", 0),
        pytest.param("1+((2)", 2),
        pytest.param("(1))", 3),
    ],
)
def test_unbalanced_group(line: str, error_char_idx: int) -> None:
    with pytest.raises(UnbalancedGroupError) as exc_info:
        reduce_groups(tokenize(line))
    assert exc_info.value.error_char_idx == error_char_idx


def test_empty_group() -> None:
    with pytest.raises(InvalidSyntaxError):
        reduce_groups(tokenize("1+()"))


@pytest.mark.parametrize("line", ["*2", "2/", "2*/3", "2*-"])
def test_missing_operand(line: str) -> None:
    with pytest.raises(InvalidSyntaxError):
        reduce_multiplicative(tokenize(line))


def test_sum_additive_rejects_number_after_number() -> None:
    sequence = TokenSequence("12")
    sequence.append(Token(TokenKind.NUMBER, value=1.0, pos=0))
    sequence.append(Token(TokenKind.NUMBER, value=2.0, pos=1))
    with pytest.raises(InvalidSyntaxError) as exc_info:
        sum_additive(sequence)
    assert exc_info.value.error_char_idx == 1


def test_sum_additive_accepts_repeated_operators() -> None:
    assert sum_additive(tokenize("1++2")) == 3.0


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(1.0, 0.0, math.inf),
        pytest.param(-1.0, 0.0, -math.inf),
        pytest.param(1.0, -0.0, -math.inf),
        pytest.param(-1.0, -0.0, math.inf),
        pytest.param(6.0, 3.0, 2.0),
    ],
)
def test_ieee_divide(a: float, b: float, expected: float) -> None:
    assert ieee_divide(a, b) == expected


@pytest.mark.parametrize("a", [0.0, -0.0, math.nan])
def test_ieee_divide_nan(a: float) -> None:
    assert math.isnan(ieee_divide(a, 0.0))


def test_reductions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="listcalc.reducer"):
        reduce_multiplicative(reduce_groups(tokenize("(1+2)*3")))
    assert "group + 1 + 2 collapsed to 3" in caplog.messages
    assert "3 * 3 collapsed to 9" in caplog.messages
