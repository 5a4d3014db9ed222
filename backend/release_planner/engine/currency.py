"""Display formatting for monetary amounts."""
from decimal import ROUND_HALF_UP, Decimal

_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
}


def format_currency(amount: Decimal | float, currency: str = "USD") -> str:
    """Render an amount with grouping and symbol, e.g. $16,800.00 or CA$132.00."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = _SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
