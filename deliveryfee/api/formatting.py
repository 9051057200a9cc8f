"""Display formatting for price breakdowns ("101.90 €", "200 m")."""

from decimal import Decimal


def format_money(minor_units: int, currency_symbol: str) -> str:
    return f"{Decimal(minor_units) / 100:.2f} {currency_symbol}"


def format_distance(meters: int) -> str:
    return f"{meters} m"
