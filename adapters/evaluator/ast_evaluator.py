"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście ExprAST z Fraction.

Fractions zapewniają dokładną arytmetykę (unikamy błędów zmiennoprzecinkowych).
Sam ewaluator nie liczy: arytmetykę deleguje do NumberType, nazwy do
IdentifierResolver.

evaluate() — oblicza wartość; pierwszy błąd (od lewej, w głąb) leci dalej bez zmian
explain()  — to samo + lista kroków obliczenia
"""
from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional

from adapters.identifier_resolver.constant_resolver import ConstantResolver
from adapters.number_type.fraction_number import FractionNumber
from contracts import (
    AddNode,
    ApplyNode,
    DivNode,
    EvalResult,
    EvaluationError,
    ExprAST,
    IdentifierNode,
    MulNode,
    NegNode,
    NumberNode,
    ParensNode,
    PosNode,
    PowNode,
    SubNode,
)
from ports.identifier_resolver import IdentifierResolver
from ports.number_type import NumberType

logger = logging.getLogger("exact_calc.ast_evaluator")

# Mapowanie węzłów binarnych na operacje NumberType
_BINARY_OPS: dict[type, str] = {
    AddNode:   "add",
    SubNode:   "sub",
    MulNode:   "mul",
    DivNode:   "div",
    PowNode:   "pow",
    ApplyNode: "mul",  # juxtapozycja = mnożenie
}


def _op_symbol(node: ExprAST) -> str:
    return "*" if isinstance(node, ApplyNode) else node.symbol


class ASTEvaluator:
    """Dokładny ewaluator wyrażeń arytmetycznych oparty na AST."""

    def __init__(
        self,
        number: NumberType | None = None,
        resolver: IdentifierResolver | None = None,
    ) -> None:
        self._number = number or FractionNumber()
        self._resolver = resolver or ConstantResolver(self._number)

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST) -> Fraction:
        try:
            return self._eval(ast, None)
        except EvaluationError as exc:
            logger.debug("Evaluation of %s failed: %s", ast, exc)
            raise

    def explain(self, ast: ExprAST) -> EvalResult:
        steps: list[str] = []
        try:
            value = self._eval(ast, steps)
        except EvaluationError as exc:
            logger.debug("Evaluation of %s failed after %d steps: %s", ast, len(steps), exc)
            raise
        return EvalResult(value=value, is_integer=value.denominator == 1, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: ExprAST, steps: Optional[list[str]]) -> Fraction:
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, IdentifierNode):
            val = self._resolver.resolve(node.name)
            if steps is not None:
                steps.append(f"{node.name} = {self._fmt(val)}")
            return val

        if isinstance(node, (ParensNode, PosNode)):
            inner = node.inner if isinstance(node, ParensNode) else node.operand
            return self._eval(inner, steps)

        if isinstance(node, NegNode):
            val = self._eval(node.operand, steps)
            result = self._number.neg(val)
            if steps is not None:
                steps.append(f"-({self._fmt(val)}) = {self._fmt(result)}")
            return result

        op_name = _BINARY_OPS.get(type(node))
        if op_name is None:
            raise TypeError(f"Nieznany typ węzła AST: {type(node)}")

        # kolejność ma znaczenie: lewy błąd przerywa, prawy nie jest liczony
        left_val = self._eval(node.left, steps)
        right_val = self._eval(node.right, steps)
        result = getattr(self._number, op_name)(left_val, right_val)
        if steps is not None:
            steps.append(
                f"{self._fmt(left_val)} {_op_symbol(node)} {self._fmt(right_val)} = {self._fmt(result)}"
            )
        return result

    def _fmt(self, v: Fraction) -> str:
        return self._number.to_text(v)
