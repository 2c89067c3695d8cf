"""Value formatters for display."""

from decimal import Decimal

MESES_ABREVIADOS = (
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
)


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    negative = value < 0
    value = abs(value)

    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_percentage(value: Decimal, decimals: int = 1) -> str:
    """
    Format decimal as percentage.

    Trailing zeros are dropped, so 50 renders as "50%" and 12.5 as "12,5%".

    Args:
        value: Decimal value (e.g., 15.5 for 15.5%)
        decimals: Maximum number of decimal places

    Returns:
        Formatted string like "15,5%"
    """
    formatted = f"{value:.{decimals}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    return f"{formatted.replace('.', ',')}%"


def format_month_label(year: int, month: int) -> str:
    """Format a calendar month as "Dez/25"."""
    return f"{MESES_ABREVIADOS[month - 1]}/{year % 100:02d}"
