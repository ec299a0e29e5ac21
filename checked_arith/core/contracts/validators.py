"""
JSON Schema Contract Validators

Валидация payload-ов отказов checked-арифметики (MathError.to_payload()).

Два уровня проверки:
1. Структура: JSON Schema arithmetic_failure.json (jsonschema, Draft 2020-12)
2. Согласованность: message совпадает с шаблоном вида отказа для данного
   контекста, т.е. payload восстанавливается в тот же ArithmeticFailure

Схемы:
- arithmetic_failure.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from checked_arith.core.domain.failure import X, Y, ArithmeticFailure
from checked_arith.core.math.errors import MathError

SCHEMA_DIR = Path(__file__).parent / "schema"

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema из каталога пакета, с кэшем и meta-validation."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()

# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка данных против одной схемы из SCHEMA_DIR."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ArithmeticFailureValidator(ContractValidator):
    """
    Валидатор payload-а отказа.

    Сверх схемы проверяет, что message совпадает с шаблоном kind для context.
    """

    def __init__(self):
        super().__init__("arithmetic_failure")

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload не соответствует схеме или message
                не совпадает с сообщением восстановленного ArithmeticFailure
        """
        super().validate(data)

        expected = to_failure(data).message
        if data["message"] != expected:
            raise ValidationError(
                f"message does not match kind {data['kind']}: "
                f"expected {expected!r}, got {data['message']!r}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def validate_error(self, error: Union[MathError, ArithmeticFailure]) -> None:
        """Валидация payload-а отказа, построенного из MathError или ArithmeticFailure."""
        self.validate(error.to_payload())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def to_failure(data: Dict[str, Any]) -> ArithmeticFailure:
    """
    Восстановление ArithmeticFailure из payload-а (обратное to_payload()).

    Args:
        data: Payload, уже прошедший проверку схемой

    Returns:
        Frozen ArithmeticFailure с kind и операндами из context
    """
    context = data["context"]
    return ArithmeticFailure(kind=data["kind"], x=context.get(X), y=context.get(Y))


def validate_arithmetic_failure(data: Dict[str, Any]) -> None:
    """
    Валидация payload-а отказа.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    ArithmeticFailureValidator().validate(data)
