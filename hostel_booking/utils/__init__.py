from hostel_booking.utils.formatters import CurrencyFormatter, format_price

__all__ = ["CurrencyFormatter", "format_price"]
