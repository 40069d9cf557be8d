from __future__ import annotations

from fractions import Fraction

import pytest
from pydantic import TypeAdapter, ValidationError

from contracts import (
    AddNode,
    ApplyNode,
    DivNode,
    ExprAST,
    IdentifierNode,
    MulNode,
    NegNode,
    NumberNode,
    ParensNode,
    PosNode,
    PowNode,
    SubNode,
    format_rational,
    render_expr,
)

_adapter = TypeAdapter(ExprAST)


def _n(v) -> NumberNode:
    return NumberNode(value=Fraction(v))


def test_render_nested_binary():
    ast = AddNode(left=_n(1), right=MulNode(left=_n(2), right=_n(3)))

    assert render_expr(ast) == "(1+(2*3))"


def test_render_every_node_kind():
    x = IdentifierNode(name="pi")

    assert render_expr(NumberNode(value=Fraction(-5, 6))) == "-5/6"
    assert render_expr(x) == "pi"
    assert render_expr(ParensNode(inner=x)) == "(pi)"
    assert render_expr(NegNode(operand=x)) == "(-pi)"
    assert render_expr(PosNode(operand=x)) == "(+pi)"
    assert render_expr(SubNode(left=_n(1), right=x)) == "(1-pi)"
    assert render_expr(DivNode(left=_n(1), right=x)) == "(1/pi)"
    assert render_expr(PowNode(left=_n(2), right=_n(3))) == "(2^3)"
    assert render_expr(ApplyNode(left=_n(2), right=ParensNode(inner=x))) == "(2 (pi))"


def test_str_uses_debug_rendering():
    assert str(SubNode(left=_n(4), right=NegNode(operand=_n(1)))) == "(4-(-1))"


def test_nodes_are_immutable():
    node = AddNode(left=_n(1), right=_n(2))

    with pytest.raises(ValidationError):
        node.left = _n(3)


def test_json_tree_keeps_fractions_exact():
    payload = {
        "node_type": "add",
        "left": {"node_type": "number", "value": "1/2"},
        "right": {"node_type": "number", "value": 3},
    }

    ast = _adapter.validate_python(payload)

    assert isinstance(ast, AddNode)
    assert ast.left.value == Fraction(1, 2)
    assert ast.right.value == Fraction(3)
    assert _adapter.dump_python(ast, mode="json")["left"]["value"] == "1/2"


def test_decimal_string_literal_is_exact():
    ast = _adapter.validate_python({"node_type": "number", "value": "0.1"})

    assert ast.value == Fraction(1, 10)


@pytest.mark.parametrize("value", [0.5, True, "abc", "1/0", None])
def test_non_exact_or_invalid_literals_are_rejected(value):
    with pytest.raises(ValidationError):
        _adapter.validate_python({"node_type": "number", "value": value})


def test_unknown_node_type_is_rejected():
    with pytest.raises(ValidationError):
        _adapter.validate_python({"node_type": "call", "name": "sin"})


def test_render_literal_beyond_int_str_digit_limit():
    big = 10 ** 5000

    assert render_expr(NumberNode(value=big)) == "1" + "0" * 5000
    assert render_expr(NegNode(operand=NumberNode(value=big))) == "(-1" + "0" * 5000 + ")"


def test_format_rational_large_values():
    assert format_rational(Fraction(10 ** 5000 - 1)) == "9" * 5000
    assert format_rational(Fraction(10 ** 5000 + 7)) == "1" + "0" * 4999 + "7"
    assert format_rational(Fraction(-(10 ** 6000), 7)) == "-1" + "0" * 6000 + "/7"
    assert format_rational(Fraction(3, 10 ** 4500)) == "3/1" + "0" * 4500


def test_large_literal_serialises_to_canonical_text():
    ast = NumberNode(value=10 ** 4400)

    assert _adapter.dump_python(ast, mode="json")["value"] == "1" + "0" * 4400


@pytest.mark.parametrize("value", ["1e30000000", "2E5", "1.5e-3"])
def test_exponent_notation_literals_are_rejected(value):
    with pytest.raises(ValidationError, match="Exponent notation"):
        _adapter.validate_json(f'{{"node_type": "number", "value": "{value}"}}')


def test_overlong_literal_is_rejected():
    with pytest.raises(ValidationError, match="longer than"):
        _adapter.validate_python({"node_type": "number", "value": "1" * 4001})
