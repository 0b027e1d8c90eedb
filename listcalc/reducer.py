import logging
import math
from typing import Callable, Optional

from listcalc.errors import InvalidSyntaxError, UnbalancedGroupError
from listcalc.evaluator import sum_additive
from listcalc.tokenizer import Token, TokenKind, TokenSequence

logger = logging.getLogger(__name__)


def ieee_divide(a: float, b: float) -> float:
    """Float division that yields inf/-inf/nan for a zero divisor instead of raising"""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


MULTIPLICATIVE_OPS: dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.MULTIPLY: lambda a, b: a * b,
    TokenKind.DIVIDE: ieee_divide,
}


def reduce_groups(sequence: TokenSequence) -> TokenSequence:
    """Collapses every ``( ... )`` into a single number, innermost groups first.

    The sequence is walked from the tail, so by the time a group start is
    reached every group nested in it has already been collapsed and the
    nearest following group end is its match.
    """
    token: Optional[Token] = sequence.tail
    while token is not None and token is not sequence.head:
        if token.kind is TokenKind.GROUP_START:
            group_end = token.next
            while group_end is not None and group_end.kind is not TokenKind.GROUP_END:
                group_end = group_end.next
            if group_end is None:
                raise UnbalancedGroupError("Unclosed group", line=sequence.line, error_char_idx=token.pos)
            if token.next is group_end:
                raise InvalidSyntaxError("Empty group", line=sequence.line, error_char_idx=group_end.pos)

            assert token.next is not None and group_end.prev is not None
            inner = sequence.detach(token.next, group_end.prev)
            value = sum_additive(reduce_multiplicative(inner))
            logger.debug("group %s collapsed to %g", inner, value)
            token = sequence.splice(token, group_end, Token(TokenKind.NUMBER, value=value, pos=token.pos))
        token = token.prev

    for token in sequence:
        if token.kind is TokenKind.GROUP_END:
            raise UnbalancedGroupError("Unopened group", line=sequence.line, error_char_idx=token.pos)
    return sequence


def reduce_multiplicative(sequence: TokenSequence) -> TokenSequence:
    """Collapses every ``n * n`` and ``n / n`` into a single number, left to right"""
    token: Optional[Token] = sequence.head
    while token is not None:
        if token.kind in MULTIPLICATIVE_OPS:
            left, right = token.prev, token.next
            if left is None or left.kind is not TokenKind.NUMBER:
                raise InvalidSyntaxError(
                    f"Left operand expected for {token.kind}", line=sequence.line, error_char_idx=token.pos
                )
            if right is None or right.kind is not TokenKind.NUMBER:
                raise InvalidSyntaxError(
                    f"Right operand expected for {token.kind}", line=sequence.line, error_char_idx=token.pos + 1
                )
            value = MULTIPLICATIVE_OPS[token.kind](left.value, right.value)
            logger.debug("%s %s %s collapsed to %g", left, token, right, value)
            token = sequence.splice(left, right, Token(TokenKind.NUMBER, value=value, pos=left.pos))
        token = token.next
    return sequence
