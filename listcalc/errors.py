from dataclasses import dataclass

from listcalc.utils import point_at


@dataclass
class CalculatorError(Exception):
    errmsg: str
    line: str
    error_char_idx: int

    label = "Calculator error"

    def __str__(self) -> str:
        return "\n".join([f"[{self.label}] {self.errmsg}", *point_at(self.line, self.error_char_idx)])


@dataclass
class InvalidCharacterError(CalculatorError):
    label = "Invalid character"

    @property
    def char(self) -> str:
        return self.line[self.error_char_idx]


@dataclass
class UnbalancedGroupError(CalculatorError):
    label = "Unbalanced group"


@dataclass
class InvalidSyntaxError(CalculatorError):
    label = "Invalid syntax"
