"""
JSON Schema Contract Validators

Валидация внешней формы товарной записи {"id", "name", "priceInCents"}
по JSON Schema (Draft 2020-12).

Схемы лежат в пакете рядом с модулем (src/core/contracts/schema/*.json)
и устанавливаются вместе с ним как package data.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Mapping

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Каталог схем по умолчанию
DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Каждая схема читается один раз и проходит meta-validation.
    """

    def __init__(self, schema_dir: Path = DEFAULT_SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'product')

        Returns:
            Схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def default_schema_loader() -> SchemaLoader:
    """Общий загрузчик для схем пакета (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение схемы
        """
        self.validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы, без exception."""
        return self.validator.iter_errors(data)


class ProductRecordValidator(ContractValidator):
    """Валидатор записи товара (schema/product.json)."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("product", loader=loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_product_record(data: Mapping[str, Any]) -> None:
    """
    Валидация внешней формы записи товара.

    Raises:
        ValidationError: Если запись не соответствует схеме
    """
    ProductRecordValidator().validate(data)
