from __future__ import annotations

import pytest

from adapters.identifier_resolver.constant_resolver import ConstantResolver
from adapters.number_type.fraction_number import PI_APPROX
from contracts import UnknownIdentifierError
from ports.identifier_resolver import IdentifierResolver


def test_constant_resolver_implements_port():
    assert isinstance(ConstantResolver(), IdentifierResolver)


def test_pi_resolves_to_fixed_approximation():
    resolver = ConstantResolver()

    assert resolver.resolve("pi") == PI_APPROX
    assert resolver.resolve("pi") == resolver.resolve("pi")


@pytest.mark.parametrize("name", ["x", "PI", "Pi", "p", "pi ", ""])
def test_unknown_names_fail_with_name(name):
    with pytest.raises(UnknownIdentifierError) as exc_info:
        ConstantResolver().resolve(name)

    assert exc_info.value.name == name
    assert str(exc_info.value) == f"Unknown identifier '{name}'"
    assert exc_info.value.kind == "unknown_identifier"


def test_names_lists_constants():
    assert ConstantResolver().names() == ["pi"]
