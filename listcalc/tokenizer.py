import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from listcalc.errors import InvalidCharacterError
from listcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


class TokenKind(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()
    GROUP_START = enum.auto()
    GROUP_END = enum.auto()


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "(": TokenKind.GROUP_START,
    ")": TokenKind.GROUP_END,
}

TOKEN_LEXEMES = {kind: char for char, kind in SINGLE_CHAR_TOKENS.items()}

# a "-" right after one of these subtracts
OPERAND_ENDS = (TokenKind.NUMBER, TokenKind.GROUP_END)


@dataclass(eq=False)
class Token:
    kind: TokenKind
    value: float = 0.0
    pos: int = 0
    prev: Optional["Token"] = field(default=None, repr=False)
    next: Optional["Token"] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"{self.value:g}"
        return TOKEN_LEXEMES[self.kind]


class TokenSequence:
    """Doubly-linked tokens of one line, headed by a sentinel '+' of value 0.

    The sentinel gives the first number a preceding operator. Reduction passes
    rewrite the sequence in place with ``splice`` and ``detach``.
    """

    def __init__(self, line: str = "") -> None:
        self.line = line
        self.head = Token(TokenKind.PLUS)
        self.tail = self.head

    def append(self, token: Token) -> Token:
        self.tail.next = token
        token.prev = self.tail
        self.tail = token
        return token

    def __iter__(self) -> Iterator[Token]:
        token: Optional[Token] = self.head
        while token is not None:
            yield token
            token = token.next

    def __str__(self) -> str:
        return " ".join(str(t) for t in self)

    def kinds(self) -> list[TokenKind]:
        return [t.kind for t in self]

    def splice(self, first: Token, last: Token, replacement: Token) -> Token:
        """Replaces the span first..last (inclusive) with a single token"""
        before, after = first.prev, last.next
        assert before is not None, "the sentinel is never spliced out"
        before.next = replacement
        replacement.prev = before
        replacement.next = after
        if after is None:
            self.tail = replacement
        else:
            after.prev = replacement
        first.prev = None
        last.next = None
        return replacement

    def detach(self, first: Token, last: Token) -> "TokenSequence":
        """Unlinks the span first..last (inclusive) into a sequence of its own"""
        before, after = first.prev, last.next
        assert before is not None, "the sentinel is never detached"
        before.next = after
        if after is None:
            self.tail = before
        else:
            after.prev = before
        detached = TokenSequence(self.line)
        detached.head.pos = first.pos
        detached.head.next = first
        first.prev = detached.head
        last.next = None
        detached.tail = last
        return detached


def _is_valid_in_number(s: str) -> bool:
    return s.isdecimal() or s == "."


def _read_number(line: str, i: int) -> tuple[float, int]:
    value = 0.0
    place = 1.0
    seen_point = False
    while i < len(line) and _is_valid_in_number(line[i]):
        if line[i] == ".":
            if seen_point:
                break
            seen_point = True
        elif seen_point:
            place *= 0.1
            value += int(line[i]) * place
        else:
            value = value * 10 + int(line[i])
        i += 1
    return value, i


def tokenize(line: str) -> TokenSequence:
    sequence = TokenSequence(line)
    negate_next = False
    i = 0
    while i < len(line):
        char = line[i]
        if char.isdecimal():
            value, number_end_idx = _read_number(line, i)
            if negate_next:
                value = -value
                negate_next = False
            sequence.append(Token(TokenKind.NUMBER, value=value, pos=i))
            i = number_end_idx
            continue
        elif char == "-" and sequence.tail.kind not in OPERAND_ENDS:
            # unary minus, applied to the next number literal
            negate_next = True
        elif char in SINGLE_CHAR_TOKENS:
            sequence.append(Token(SINGLE_CHAR_TOKENS[char], pos=i))
        else:
            raise InvalidCharacterError(f"Unexpected character: {char!r} at index {i}", line=line, error_char_idx=i)
        i += 1

    logger.debug("tokenized %r into %s", line, sequence)
    return sequence
