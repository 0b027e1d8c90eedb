from listcalc.errors import InvalidSyntaxError
from listcalc.tokenizer import TokenKind, TokenSequence


def sum_additive(sequence: TokenSequence) -> float:
    """Sums a reduced sequence of the form ``+ n (+|-) n (+|-) n ...``"""
    answer = 0.0
    for token in sequence:
        if token.kind is not TokenKind.NUMBER:
            continue
        assert token.prev is not None, "a number never heads a sequence"
        if token.prev.kind is TokenKind.PLUS:
            answer += token.value
        elif token.prev.kind is TokenKind.MINUS:
            answer -= token.value
        else:
            raise InvalidSyntaxError(
                f"Number must follow '+' or '-', found {token.prev.kind}",
                line=sequence.line,
                error_char_idx=token.pos,
            )
    return answer
