"""Shipping option model type definitions for database operations."""

from datetime import datetime
from decimal import Decimal
from typing import TypedDict

# Brazilian federative units, in the order the frete table declares them
STATE_CODES: tuple[str, ...] = (
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO",
    "MA", "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI",
    "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
)

# "to" is a reserved word in Postgres, so Tocantins lives in its own column name
_COLUMN_OVERRIDES = {"TO": "tocantins"}


def state_column(state: str) -> str:
    """Return the frete column holding the price for a state code."""
    return _COLUMN_OVERRIDES.get(state, state.lower())


STATE_COLUMNS: dict[str, str] = {state: state_column(state) for state in STATE_CODES}


class ShippingRow(TypedDict, total=False):
    """Frete table row representation.

    One price column per state plus the insurance percentage in ``seguro``.
    Only the fixed columns are declared; state columns are addressed
    through ``STATE_COLUMNS``.
    """

    id: int
    nome: str
    seguro: Decimal | None
    created_at: datetime
    updated_at: datetime
