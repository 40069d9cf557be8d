"""
contracts.py — Jedyne źródło prawdy dla typów danych ExactCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

AST jest niemutowalny (frozen) i serializowalny do JSON (dyskryminator node_type).
Wartości liczbowe to zawsze fractions.Fraction — nigdy float.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
)

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Helpers ─────────────────────────────────────

# Literały tekstowe: bez notacji wykładniczej ("1e30000000" to 10**30000000 cyfr pracy)
# i poniżej limitu konwersji str -> int interpretera (4300 cyfr).
_MAX_LITERAL_LEN = 4000

# ~1200 cyfr dziesiętnych na kawałek, poniżej limitu int -> str
_CHUNK_BITS = 4000


def _int_text(n: int) -> str:
    """Decimal text of n without hitting the interpreter's int -> str digit limit."""
    if n < 0:
        return "-" + _int_text(-n)
    if n.bit_length() <= _CHUNK_BITS:
        return str(n)
    k = n.bit_length() * 3 // 20  # ~ połowa cyfr dziesiętnych
    hi, lo = divmod(n, 10 ** k)
    return _int_text(hi) + _int_text(lo).zfill(k)


def format_rational(v: Fraction) -> str:
    """Canonical text of an exact rational: '5', '-5/6'. No size limit."""
    if v.denominator == 1:
        return _int_text(v.numerator)
    return f"{_int_text(v.numerator)}/{_int_text(v.denominator)}"


def _to_fraction(v: Any) -> Fraction:
    # bool to podklasa int — "true" nie jest liczbą
    if isinstance(v, bool):
        raise ValueError("Expected an exact rational, got a boolean")
    if isinstance(v, Fraction):
        return v
    if isinstance(v, int):
        return Fraction(v)
    if isinstance(v, str):
        text = v.strip()
        if len(text) > _MAX_LITERAL_LEN:
            raise ValueError(f"Rational literal longer than {_MAX_LITERAL_LEN} characters")
        if "e" in text or "E" in text:
            raise ValueError(f"Exponent notation is not allowed in rational literals: {v!r}")
        try:
            return Fraction(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"Invalid rational literal: {v!r}") from exc
    raise ValueError(f"Expected int or rational string, got {type(v).__name__}")


Rational = Annotated[
    Fraction,
    PlainValidator(_to_fraction),
    PlainSerializer(format_rational, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["5", "-1/3", "0.25"]}),
]


# ─────────────────────────── Errors ──────────────────────────────────────

class EvaluationError(Exception):
    """Base for every failure the evaluator can report."""

    kind: ClassVar[str] = "evaluation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownIdentifierError(EvaluationError, ValueError):
    kind = "unknown_identifier"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown identifier '{name}'")
        self.name = name


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    kind = "division_by_zero"

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


class InvalidExponentError(EvaluationError, ValueError):
    kind = "invalid_exponent"


# ─────────────────────────── Expression AST ──────────────────────────────

class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render_expr(self)  # type: ignore[arg-type]


class NumberNode(_Node):
    node_type: Literal["number"] = "number"
    value: Rational


class IdentifierNode(_Node):
    node_type: Literal["identifier"] = "identifier"
    name: str


class ParensNode(_Node):
    """Explicit parentheses; kept for display, transparent to evaluation."""
    node_type: Literal["parens"] = "parens"
    inner: "ExprAST"


class NegNode(_Node):
    node_type: Literal["neg"] = "neg"
    operand: "ExprAST"


class PosNode(_Node):
    node_type: Literal["pos"] = "pos"
    operand: "ExprAST"


class _BinaryNode(_Node):
    symbol: ClassVar[str]
    left: "ExprAST"
    right: "ExprAST"


class AddNode(_BinaryNode):
    symbol = "+"
    node_type: Literal["add"] = "add"


class SubNode(_BinaryNode):
    symbol = "-"
    node_type: Literal["sub"] = "sub"


class MulNode(_BinaryNode):
    symbol = "*"
    node_type: Literal["mul"] = "mul"


class DivNode(_BinaryNode):
    symbol = "/"
    node_type: Literal["div"] = "div"


class PowNode(_BinaryNode):
    symbol = "^"
    node_type: Literal["pow"] = "pow"


class ApplyNode(_BinaryNode):
    """Juxtaposition, e.g. ``2(3+4)`` or ``2 pi``; evaluates as a product."""
    symbol = " "
    node_type: Literal["apply"] = "apply"


ExprAST = Annotated[
    Union[
        NumberNode, IdentifierNode, ParensNode, NegNode, PosNode,
        AddNode, SubNode, MulNode, DivNode, PowNode, ApplyNode,
    ],
    Field(discriminator="node_type"),
]

for _model in (ParensNode, NegNode, PosNode, AddNode, SubNode, MulNode, DivNode, PowNode, ApplyNode):
    _model.model_rebuild()


def render_expr(node: ExprAST) -> str:
    """
    Fully parenthesised debug form, e.g. ``(1+(2*3))``.
    Diagnostics only — nie jest to format wejściowy parsera.
    """
    if isinstance(node, NumberNode):
        return format_rational(node.value)
    if isinstance(node, IdentifierNode):
        return node.name
    if isinstance(node, ParensNode):
        return f"({render_expr(node.inner)})"
    if isinstance(node, NegNode):
        return f"(-{render_expr(node.operand)})"
    if isinstance(node, PosNode):
        return f"(+{render_expr(node.operand)})"
    if isinstance(node, _BinaryNode):
        return f"({render_expr(node.left)}{node.symbol}{render_expr(node.right)})"
    raise TypeError(f"Nieznany typ węzła AST: {type(node)}")


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: Rational
    is_integer: bool = True
    steps: list[str] = Field(default_factory=list)  # czytelne kroki

