"""
Adapter: ConstantResolver
Implementuje port IdentifierResolver — stała, tylko-do-odczytu tabela nazw.
"""
from __future__ import annotations

from fractions import Fraction
from types import MappingProxyType
from typing import Mapping

from adapters.number_type.fraction_number import FractionNumber
from contracts import UnknownIdentifierError
from ports.number_type import NumberType


class ConstantResolver:
    """Resolves the fixed set of named constants ("pi")."""

    def __init__(self, number: NumberType | None = None) -> None:
        number = number or FractionNumber()
        self._table: Mapping[str, Fraction] = MappingProxyType({
            "pi": number.approx_pi(),
        })

    def resolve(self, name: str) -> Fraction:
        try:
            return self._table[name]
        except KeyError:
            raise UnknownIdentifierError(name) from None

    def names(self) -> list[str]:
        return sorted(self._table)
