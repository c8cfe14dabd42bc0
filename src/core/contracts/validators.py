"""
Algebra Error Payload Contract

Модуль для валидации сериализованных ошибок алгебры (JSON payload) против
формальной JSON Schema. Схема строится из Pydantic модели AlgebraError
(model_json_schema) и проходит meta-validation.

Payload формат:
    {"error": {"kind": "empty_collection", "context": "pnl batch"}}
"""

from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.errors import AlgebraError


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class AlgebraErrorContract:
    """
    Валидатор payload ошибок алгебры.

    Инкапсулирует JSON Schema, сгенерированную из AlgebraError.
    """

    def __init__(self):
        schema = AlgebraError.model_json_schema()

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for AlgebraError: {e}")

        self.schema: Dict[str, Any] = schema
        self.validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация payload против схемы.

        Raises:
            ValidationError: Если payload не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности payload без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


# Глобальный экземпляр контракта
_ALGEBRA_ERROR_CONTRACT = AlgebraErrorContract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def dump_algebra_error(error: AlgebraError) -> Dict[str, Any]:
    """
    Сериализация AlgebraError в JSON-совместимый dict.

    Returns:
        {"error": {"context": ..., "kind": ...}}
    """
    return error.model_dump(mode="json")


def validate_algebra_error_payload(data: Dict[str, Any]) -> None:
    """
    Валидация payload ошибки алгебры.

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    _ALGEBRA_ERROR_CONTRACT.validate(data)


def load_algebra_error(data: Dict[str, Any]) -> AlgebraError:
    """
    Десериализация payload: JSON Schema валидация, затем Pydantic.

    Raises:
        ValidationError (jsonschema): Если payload не соответствует схеме
    """
    _ALGEBRA_ERROR_CONTRACT.validate(data)
    return AlgebraError.model_validate(data)
