"""
Pricing — операции над ценами товаров корзины/каталога.

Суммирование, фильтрация по закрытому ценовому интервалу и их композиция.
"""

from src.core.pricing.cart_totals import (
    # Parameters
    PRICE_FIELD,
    TOTAL_FALLBACK_CENTS,
    # Exceptions
    EmptyInputError,
    InvalidBoundError,
    InvalidRangeError,
    MalformedRecordError,
    PriceUtilsError,
    # Operations
    filter_by_price_range,
    sum_prices,
    total_by_price_range,
)

__all__ = [
    # Parameters
    "PRICE_FIELD",
    "TOTAL_FALLBACK_CENTS",
    # Exceptions
    "PriceUtilsError",
    "EmptyInputError",
    "InvalidBoundError",
    "InvalidRangeError",
    "MalformedRecordError",
    # Operations
    "sum_prices",
    "filter_by_price_range",
    "total_by_price_range",
]
