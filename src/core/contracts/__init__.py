"""
Contract Validation Module

Модуль для валидации JSON контрактов (tailoring-документы локалей).
"""

from .validators import (
    SchemaLoader,
    TailoringTableValidator,
    validate_tailoring_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "TailoringTableValidator",
    # Functions
    "validate_tailoring_table",
]
