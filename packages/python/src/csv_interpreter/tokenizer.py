from typing import NamedTuple

from csv_interpreter.errors import InvalidFormulaFormat
from csv_interpreter.operators import (
    SIGN_SYMBOLS,
    Operator,
    operator_from_symbol,
)


class FormulaTokens(NamedTuple):
    left: str
    operator: Operator
    right: str


class FormulaTokenizer:
    """Splits a formula of the form "=ARG1OPARG2" into its three parts.

    There are no delimiters between the parts. The first operator character
    ends the left operand, unless the left operand is still empty and the
    character is a sign, in which case it starts a signed literal. Everything
    after the operator is the right operand.
    """

    def __init__(self, formula: str):
        self.formula = formula
        self.pos = 0
        self.length = len(formula)

    def tokenize(self) -> FormulaTokens:
        if not self.formula.startswith("="):
            raise InvalidFormulaFormat(self.formula)
        self.pos = 1

        left = self._tokenize_left_operand()
        if self.pos >= self.length:
            # Ran out of characters without meeting an operator
            raise InvalidFormulaFormat(self.formula)

        operator = operator_from_symbol(self.formula[self.pos])
        assert operator is not None
        self.pos += 1

        right = self.formula[self.pos :]
        if not right:
            raise InvalidFormulaFormat(self.formula)
        return FormulaTokens(left=left, operator=operator, right=right)

    def _tokenize_left_operand(self) -> str:
        """Consume characters up to, not including, the operator."""
        start = self.pos
        while self.pos < self.length:
            char = self.formula[self.pos]
            if operator_from_symbol(char) is not None:
                if self.pos > start:
                    break
                if char not in SIGN_SYMBOLS:
                    # Formula starts with * or /
                    raise InvalidFormulaFormat(self.formula)
            self.pos += 1
        return self.formula[start : self.pos]


def tokenize_formula(formula: str) -> FormulaTokens:
    return FormulaTokenizer(formula).tokenize()
