"""
Data formatting utilities for the booking client
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union


class CurrencyFormatter:
    """Currency formatting utilities"""

    CURRENCY_SYMBOLS = {
        'GHS': 'GH₵',
        'USD': '$',
        'EUR': '€',
        'GBP': '£'
    }

    @classmethod
    def quantize(cls, amount: Union[Decimal, float, int], decimal_places: int = 2) -> Decimal:
        exponent = Decimal(1).scaleb(-decimal_places)
        return Decimal(str(amount)).quantize(exponent, rounding=ROUND_HALF_UP)

    @classmethod
    def format_amount(cls, amount: Union[Decimal, float, int],
                      currency: str = 'GHS',
                      include_symbol: bool = False,
                      decimal_places: int = 2) -> str:
        """Format monetary amount, e.g. ``GHS 1,250.00`` or ``GH₵1,250.00``"""
        value = cls.quantize(amount, decimal_places)
        number = f"{value:,.{decimal_places}f}"
        if include_symbol and currency in cls.CURRENCY_SYMBOLS:
            return f"{cls.CURRENCY_SYMBOLS[currency]}{number}"
        return f"{currency} {number}"


def format_price(amount: Union[Decimal, float, int], currency: str = 'GHS') -> str:
    return CurrencyFormatter.format_amount(amount, currency)
