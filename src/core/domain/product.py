"""
Product — Модель товарной записи каталога/корзины

Immutable Pydantic модель товара. Внешняя форма записи:
    {"id": int, "name": str, "priceInCents": int}

Внутри Python используется поле price_in_cents, внешний ключ priceInCents
задаётся через alias. Цена хранится в минимальных денежных единицах (центах),
чтобы избежать ошибок округления float.
"""

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# PRODUCT MODEL
# =============================================================================


class Product(BaseModel):
    """
    Модель товара.

    Immutable модель (frozen=True): операции над корзиной только читают
    записи и никогда их не изменяют.
    """

    id: int = Field(..., description="Уникальный идентификатор товара")
    name: str = Field(..., min_length=1, description="Название товара")
    price_in_cents: int = Field(
        ...,
        ge=0,
        alias="priceInCents",
        description="Цена в центах (неотрицательное целое)",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("price_in_cents", mode="before")
    @classmethod
    def validate_price_is_integer(cls, v: Any) -> Any:
        """
        Цена должна быть целым числом центов.

        bool формально является int, но ценой не является.
        """
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"priceInCents must be an integer, got {v!r}")
        return v

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Product":
        """
        Создание модели из внешней записи.

        Args:
            record: Запись во внешней форме ({"id", "name", "priceInCents"})

        Returns:
            Product

        Raises:
            ValidationError: Если запись не соответствует модели
        """
        return cls.model_validate(dict(record))

    def to_record(self) -> dict[str, Any]:
        """Внешняя форма записи (ключ priceInCents)."""
        return self.model_dump(by_alias=True)
