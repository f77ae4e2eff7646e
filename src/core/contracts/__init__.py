"""
Contract Validation Module

Модуль для валидации внешней формы товарных записей по JSON Schema.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    ProductRecordValidator,
    SchemaLoader,
    default_schema_loader,
    validate_product_record,
)

__all__ = [
    # Parameters
    "DEFAULT_SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ProductRecordValidator",
    # Functions
    "default_schema_loader",
    "validate_product_record",
]
