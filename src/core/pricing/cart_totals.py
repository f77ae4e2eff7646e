"""
Cart Totals — Суммирование и фильтрация товаров по цене

Три чистые функции над упорядоченной последовательностью товарных записей:
- sum_prices: сумма priceInCents
- filter_by_price_range: валидация входов + фильтр по закрытому интервалу [min, max]
- total_by_price_range: композиция фильтра и суммы, любые ошибки → 0

Запись товара — либо dict во внешней форме {"id", "name", "priceInCents"},
либо модель Product (поле price_in_cents).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные записи никогда не изменяются и не копируются
2. Фильтр сохраняет исходный порядок записей
3. Границы интервала включаются: min <= priceInCents <= max
4. total_by_price_range никогда не выбрасывает исключений
"""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Final

from src.core.domain.product import Product

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Ключ цены во внешней форме записи
PRICE_FIELD: Final[str] = "priceInCents"

# Результат total_by_price_range при любой ошибке
TOTAL_FALLBACK_CENTS: Final[int] = 0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PriceUtilsError(ValueError):
    """Базовая ошибка операций над ценами товаров."""


class EmptyInputError(PriceUtilsError):
    """Пустая последовательность там, где нужен хотя бы один элемент."""


class InvalidBoundError(PriceUtilsError):
    """Граница интервала нечисловая, отрицательная или max == 0."""


class InvalidRangeError(PriceUtilsError):
    """min больше max."""


class MalformedRecordError(PriceUtilsError):
    """
    Запись товара без числового поля priceInCents.

    Attributes:
        index: Позиция записи во входной последовательности
    """

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _is_number(value: Any) -> bool:
    # bool — подкласс int, но числом-границей не считается
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # NaN/Inf бывают только у float
    return not isinstance(value, float) or math.isfinite(value)


def _price_of(record: Any, index: int) -> int | float:
    """
    Извлечение цены из записи.

    Raises:
        MalformedRecordError: Если у записи нет числовой цены
    """
    if isinstance(record, Product):
        price = record.price_in_cents
    elif isinstance(record, Mapping):
        price = record.get(PRICE_FIELD)
    else:
        price = None

    if not _is_number(price):
        raise MalformedRecordError(
            f"Product at index {index} does not have a numeric `{PRICE_FIELD}`, "
            f"got {price!r}",
            index=index,
        )
    return price


def _as_non_empty_list(items: Iterable[Any] | None, name: str) -> list[Any]:
    """
    Материализация входа в список (генератор читается ровно один раз).

    Raises:
        EmptyInputError: Если вход пуст или None
    """
    records = list(items) if items is not None else []
    if not records:
        raise EmptyInputError(f"`{name}` sequence is empty")
    return records


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def sum_prices(items: Iterable[Any]) -> int:
    """
    Сумма цен всех товаров в корзине.

    Дубликаты суммируются по каждому вхождению.

    Args:
        items: Непустая последовательность товарных записей

    Returns:
        Сумма priceInCents

    Raises:
        EmptyInputError: Если последовательность пуста
        MalformedRecordError: Если у записи нет числовой цены

    Examples:
        >>> sum_prices([{"id": 1, "name": "Lamp", "priceInCents": 1999}])
        1999
    """
    items = _as_non_empty_list(items, "items")

    total = 0
    for index, record in enumerate(items):
        total += _price_of(record, index)
    return total


def filter_by_price_range(
    items: Iterable[Any],
    min_price: int | float,
    max_price: int | float,
) -> list[Any]:
    """
    Товары с ценой в закрытом интервале [min_price, max_price].

    Порядок проверок (срабатывает первая):
    1. Пустая последовательность → EmptyInputError
    2. min/max не число → InvalidBoundError
    3. max == 0 → InvalidBoundError
    4. min > max → InvalidRangeError
    5. min < 0 или max < 0 → InvalidBoundError
    6. Запись без числового priceInCents → MalformedRecordError

    Args:
        items: Непустая последовательность товарных записей
        min_price: Нижняя граница (включительно)
        max_price: Верхняя граница (включительно)

    Returns:
        Новый список исходных записей в исходном порядке.
        Пустой список, если ни одна запись не попала в интервал.

    Examples:
        >>> catalog = [{"id": 1, "name": "Rug", "priceInCents": 1399}]
        >>> filter_by_price_range(catalog, 1000, 2000)
        [{'id': 1, 'name': 'Rug', 'priceInCents': 1399}]
        >>> filter_by_price_range(catalog, 2000, 3000)
        []
    """
    items = _as_non_empty_list(items, "items")

    if not _is_number(min_price) or not _is_number(max_price):
        raise InvalidBoundError(
            f"`min` or `max` is not a number: min={min_price!r}, max={max_price!r}"
        )

    if max_price == 0:
        raise InvalidBoundError("`max` is equal to 0")

    if min_price > max_price:
        raise InvalidRangeError(
            f"`min` ({min_price}) is greater than `max` ({max_price})"
        )

    if min_price < 0 or max_price < 0:
        raise InvalidBoundError(
            f"`min` or `max` is less than 0: min={min_price}, max={max_price}"
        )

    # Валидируем все записи до фильтрации: одна битая запись → ошибка целиком
    prices = [_price_of(record, index) for index, record in enumerate(items)]

    result = [
        record
        for record, price in zip(items, prices)
        if min_price <= price <= max_price
    ]

    logger.debug(
        "Price range [%s, %s]: %d of %d products matched",
        min_price,
        max_price,
        len(result),
        len(prices),
    )
    return result


def total_by_price_range(
    items: Iterable[Any],
    min_price: Any,
    max_price: Any,
) -> int:
    """
    Сумма цен товаров в интервале [min_price, max_price].

    Композиция filter_by_price_range → sum_prices. Любая ошибка внутри
    (валидация, пустой вход, пустой результат фильтра, некорректные типы)
    превращается в TOTAL_FALLBACK_CENTS. Функция никогда не выбрасывает
    исключений, поэтому 0 неотличим от "вход был невалидным".

    Args:
        items: Последовательность товарных записей
        min_price: Нижняя граница (включительно)
        max_price: Верхняя граница (включительно)

    Returns:
        Сумма priceInCents отобранных товаров или 0

    Examples:
        >>> total_by_price_range([], 1000, 2000)
        0
    """
    try:
        return sum_prices(filter_by_price_range(items, min_price, max_price))
    except Exception as e:
        logger.debug(
            "total_by_price_range fell back to %d: %s: %s",
            TOTAL_FALLBACK_CENTS,
            type(e).__name__,
            e,
        )
        return TOTAL_FALLBACK_CENTS
