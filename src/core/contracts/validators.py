"""
JSON Schema Contract Validators

Валидация декларативных описаний порядка против JSON Schema контракта
(Draft 2020-12) до построения pydantic-моделей.

Схемы:
- ordering_spec.json (составной порядок: список критериев по приоритету)

Схема читается и компилируется один раз на загрузчик: повторные
ContractValidator для той же схемы разделяют один Draft202012Validator.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

ORDERING_SPEC_SCHEMA = "ordering_spec"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов пакета (contracts/schema/).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Чтение схемы с meta-валидацией.

        Args:
            schema_name: Имя схемы без расширения (например, 'ordering_spec')

        Raises:
            FileNotFoundError: Файл схемы не найден
            ValueError: Файл не является валидной JSON Schema
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
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def get_validator(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный validator схемы (один экземпляр на имя)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка данных против одной именованной схемы.

    Args:
        schema_name: Имя схемы
        loader: Источник схем; по умолчанию общий загрузчик пакета
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        loader = loader or _SCHEMA_LOADER
        self.schema_name = schema_name
        self.validator = loader.get_validator(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая (наиболее релевантная) ошибка контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все ошибки валидации в порядке пути внутри документа."""
        return iter(sorted(self.validator.iter_errors(data), key=lambda e: e.json_path))

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Ошибки в виде строк '<json path>: <message>' для логов и CLI."""
        return [f"{error.json_path}: {error.message}" for error in self.iter_errors(data)]


class OrderingSpecValidator(ContractValidator):
    """Валидатор для ordering_spec контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(ORDERING_SPEC_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ordering_spec(data: Dict[str, Any]) -> None:
    """
    Валидация декларативного описания порядка.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderingSpecValidator().validate(data)
