"""
Port: Evaluator
Odpowiedzialność: deterministyczne, dokładne liczenie wyrażeń AST.
"""
from fractions import Fraction
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST) -> Fraction:
        """
        Reduces an expression tree to its exact rational value.
        Children are evaluated depth-first, left before right; the first
        failure is raised unchanged and nothing to its right is evaluated.
        Raises UnknownIdentifierError for names outside the constant table.
        Raises DivisionByZeroError on a zero divisor.
        Raises InvalidExponentError when a power has no exact rational result.
        """
        ...

    def explain(self, ast: ExprAST) -> EvalResult:
        """
        Same reduction as evaluate(), returning EvalResult with:
          - value: the exact result
          - steps: list of human-readable computation steps, in evaluation order
        """
        ...
