import logging

from listcalc.evaluator import sum_additive
from listcalc.reducer import reduce_groups, reduce_multiplicative
from listcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def calculate(line: str) -> float:
    """Evaluates one line like ``"1+2*(3-4)"``; raises ``CalculatorError`` on malformed input"""
    sequence = tokenize(line)
    reduce_groups(sequence)
    reduce_multiplicative(sequence)
    answer = sum_additive(sequence)
    logger.debug("%r = %g", line, answer)
    return answer


def trace(line: str) -> list[tuple[str, str]]:
    """Same as ``calculate``, recording the sequence after each reduction pass"""
    sequence = tokenize(line)
    stages = [("tokens", str(sequence))]
    reduce_groups(sequence)
    stages.append(("groups", str(sequence)))
    reduce_multiplicative(sequence)
    stages.append(("multiplicative", str(sequence)))
    stages.append(("answer", str(sum_additive(sequence))))
    return stages
