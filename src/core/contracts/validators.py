"""
Number Contracts — JSON Schema проверка снапшотов чисел

Внешние данные (dict, распарсенный JSON) проходят два уровня проверки:
1. JSON Schema контракт (jsonschema, Draft 2020-12) — структура и диапазоны
2. Pydantic снапшот (src.core.domain.snapshots) — конверсия в BigInt/Rational

Схемы поставляются вместе с пакетом (src/core/contracts/schema/*.json) и
читаются через importlib.resources, поэтому работают и из установленного
дистрибутива. Загрузка ленивая: импорт модуля не читает файлы.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Final, Mapping

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.snapshots import BigIntSnapshot, RationalSnapshot
from src.core.math.bigint import BigInt
from src.core.math.rational import Rational

# =============================================================================
# СХЕМЫ
# =============================================================================

BIGINT_SCHEMA: Final[str] = "bigint"
RATIONAL_SCHEMA: Final[str] = "rational"
SCHEMA_NAMES: Final[tuple[str, ...]] = (BIGINT_SCHEMA, RATIONAL_SCHEMA)


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Чтение и meta-валидация схемы из package data.

    Args:
        schema_name: Имя схемы без расширения ('bigint' или 'rational')

    Returns:
        Схема как dict (кэшируется на процесс)

    Raises:
        FileNotFoundError: Если схема не поставляется с пакетом
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = resources.files(__package__) / "schema" / f"{schema_name}.json"
    if not resource.is_file():
        raise FileNotFoundError(f"Schema {schema_name!r} is not packaged with {__package__}")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(schema_name))


def contract_errors(schema_name: str, data: Mapping[str, Any]) -> list[str]:
    """
    Все нарушения контракта в виде "<path>: <message>", отсортированные по пути.

    Пустой список — данные соответствуют схеме.
    """
    errors = sorted(_validator(schema_name).iter_errors(data), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]


# =============================================================================
# BIGINT
# =============================================================================


def validate_bigint(data: Mapping[str, Any]) -> BigInt:
    """
    Проверка bigint данных и конверсия в канонический BigInt.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют bigint.json
        pydantic.ValidationError: Если данные не проходят BigIntSnapshot

    Examples:
        >>> str(validate_bigint({"sign": True, "magnitude": [45, 23, 1, 0]}))
        '-12345'
    """
    _validator(BIGINT_SCHEMA).validate(data)
    return BigIntSnapshot.model_validate(data).to_bigint()


def dump_bigint(value: BigInt) -> dict[str, Any]:
    """BigInt → JSON-совместимый dict, соответствующий bigint.json."""
    data = BigIntSnapshot.from_bigint(value).model_dump(mode="json")
    _validator(BIGINT_SCHEMA).validate(data)
    return data


# =============================================================================
# RATIONAL
# =============================================================================


def validate_rational(data: Mapping[str, Any]) -> Rational:
    """
    Проверка rational данных и конверсия в Rational в нормальной форме.

    Несокращённая дробь и отрицательный знаменатель допустимы:
    нормализация выполняется конструктором Rational.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют rational.json
            (в том числе нулевой знаменатель)
        pydantic.ValidationError: Если данные не проходят RationalSnapshot
    """
    _validator(RATIONAL_SCHEMA).validate(data)
    return RationalSnapshot.model_validate(data).to_rational()


def dump_rational(value: Rational) -> dict[str, Any]:
    """Rational → JSON-совместимый dict, соответствующий rational.json."""
    data = RationalSnapshot.from_rational(value).model_dump(mode="json")
    _validator(RATIONAL_SCHEMA).validate(data)
    return data
