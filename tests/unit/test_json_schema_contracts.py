"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema контрактов чисел:
- Схемы поставляются как package data и читаются лениво
- validate_* возвращают нормализованные BigInt/Rational
- dump_* выдают данные, соответствующие схемам
- Детекция нарушений required/типов/constraints (minimum/maximum/contains)
"""

import importlib
from importlib import resources

import jsonschema
import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BIGINT_SCHEMA,
    RATIONAL_SCHEMA,
    SCHEMA_NAMES,
    contract_errors,
    dump_bigint,
    dump_rational,
    load_schema,
    validate_bigint,
    validate_rational,
)
from src.core.math import BigInt, Rational


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_bigint():
    """-12345 в виде данных."""
    return {"sign": True, "magnitude": [45, 23, 1]}


@pytest.fixture
def valid_rational():
    """-1/2 в виде данных."""
    return {
        "numerator": {"sign": True, "magnitude": [1]},
        "denominator": {"sign": False, "magnitude": [2]},
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схем из пакета."""

    @pytest.mark.parametrize("name", SCHEMA_NAMES)
    def test_schema_is_package_resource(self, name):
        """Схема лежит внутри пакета, а не рядом с checkout."""
        resource = resources.files("src.core.contracts") / "schema" / f"{name}.json"
        assert resource.is_file()

    @pytest.mark.parametrize("name", SCHEMA_NAMES)
    def test_load_known_schemas(self, name):
        schema = load_schema(name)
        assert schema["type"] == "object"
        jsonschema.Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        assert load_schema(BIGINT_SCHEMA) is load_schema(BIGINT_SCHEMA)

    def test_unknown_schema(self):
        with pytest.raises(FileNotFoundError, match="does_not_exist"):
            load_schema("does_not_exist")

    def test_import_reads_no_schema(self):
        """Импорт модуля не трогает файлы: схемы читаются при первом обращении."""
        import src.core.contracts.validators as validators

        module = importlib.reload(validators)
        assert module.load_schema.cache_info().currsize == 0

        module.load_schema(RATIONAL_SCHEMA)
        assert module.load_schema.cache_info().currsize == 1


# =============================================================================
# BIGINT CONTRACT
# =============================================================================


class TestBigIntContract:
    """Тесты контракта bigint."""

    def test_valid_returns_bigint(self, valid_bigint):
        value = validate_bigint(valid_bigint)
        assert isinstance(value, BigInt)
        assert value == -12345
        assert contract_errors(BIGINT_SCHEMA, valid_bigint) == []

    def test_zero(self):
        assert validate_bigint({"sign": False, "magnitude": []}).is_zero

    def test_non_canonical_normalized(self):
        """Ведущие нули и отрицательный ноль нормализуются в BigInt."""
        value = validate_bigint({"sign": True, "magnitude": [0, 0]})
        assert value.is_zero
        assert not value.is_negative
        assert validate_bigint({"sign": False, "magnitude": [7, 0, 0]}).magnitude == (7,)

    def test_missing_required(self, valid_bigint):
        del valid_bigint["magnitude"]
        with pytest.raises(ValidationError):
            validate_bigint(valid_bigint)

    def test_wrong_types(self):
        assert contract_errors(BIGINT_SCHEMA, {"sign": "yes", "magnitude": []})
        assert contract_errors(BIGINT_SCHEMA, {"sign": False, "magnitude": "123"})

    def test_bool_digit_rejected(self):
        with pytest.raises(ValidationError):
            validate_bigint({"sign": False, "magnitude": [True]})

    def test_digit_out_of_range(self, valid_bigint):
        valid_bigint["magnitude"] = [1, 100]
        with pytest.raises(ValidationError):
            validate_bigint(valid_bigint)

    def test_negative_digit(self, valid_bigint):
        valid_bigint["magnitude"] = [-1]
        assert contract_errors(BIGINT_SCHEMA, valid_bigint)

    def test_additional_properties_rejected(self, valid_bigint):
        valid_bigint["radix"] = 100
        with pytest.raises(ValidationError):
            validate_bigint(valid_bigint)

    def test_contract_errors_collects_all(self):
        errors = contract_errors(BIGINT_SCHEMA, {"sign": 1, "magnitude": [200, -3]})
        assert len(errors) == 3
        assert errors[0].startswith("$.magnitude[0]:")
        assert errors[1].startswith("$.magnitude[1]:")
        assert errors[2].startswith("$.sign:")

    def test_dump(self):
        assert dump_bigint(BigInt.from_int(-12345)) == {"sign": True, "magnitude": [45, 23, 1]}
        assert dump_bigint(BigInt.from_int(0)) == {"sign": False, "magnitude": []}

    def test_dump_validates_back(self):
        for n in (1, -99, 100, 10**30, -(2**63)):
            value = BigInt.from_int(n)
            assert validate_bigint(dump_bigint(value)) == value


# =============================================================================
# RATIONAL CONTRACT
# =============================================================================


class TestRationalContract:
    """Тесты контракта rational."""

    def test_valid_returns_rational(self, valid_rational):
        value = validate_rational(valid_rational)
        assert isinstance(value, Rational)
        assert str(value) == "-1/2"
        assert contract_errors(RATIONAL_SCHEMA, valid_rational) == []

    def test_zero_denominator(self, valid_rational):
        valid_rational["denominator"]["magnitude"] = []
        with pytest.raises(ValidationError):
            validate_rational(valid_rational)

    def test_zero_denominator_with_zero_digits(self, valid_rational):
        valid_rational["denominator"]["magnitude"] = [0, 0]
        assert contract_errors(RATIONAL_SCHEMA, valid_rational)

    def test_negative_denominator_normalized(self, valid_rational):
        """Отрицательный знаменатель допустим — знак переносится в числитель."""
        valid_rational["denominator"]["sign"] = True
        value = validate_rational(valid_rational)
        assert str(value) == "1/2"
        assert not value.denominator.is_negative

    def test_unreduced_fraction_reduced(self):
        value = validate_rational(
            {
                "numerator": {"sign": False, "magnitude": [6]},
                "denominator": {"sign": False, "magnitude": [8]},
            }
        )
        assert str(value) == "3/4"

    def test_zero_numerator(self, valid_rational):
        valid_rational["numerator"]["magnitude"] = []
        value = validate_rational(valid_rational)
        assert value.is_zero
        assert str(value) == "0"

    def test_missing_denominator(self, valid_rational):
        del valid_rational["denominator"]
        assert contract_errors(RATIONAL_SCHEMA, valid_rational)

    def test_nested_digit_out_of_range(self, valid_rational):
        valid_rational["numerator"]["magnitude"] = [150]
        errors = contract_errors(RATIONAL_SCHEMA, valid_rational)
        assert errors
        assert errors[0].startswith("$.numerator.magnitude[0]:")

    def test_dump(self):
        data = dump_rational(Rational(BigInt.from_int(-3), BigInt.from_int(6)))
        assert data == {
            "numerator": {"sign": True, "magnitude": [1]},
            "denominator": {"sign": False, "magnitude": [2]},
        }

    def test_dump_validates_back(self):
        for n, d in ((0, 1), (7, 3), (-10**20, 3), (12, -18)):
            value = Rational(BigInt.from_int(n), BigInt.from_int(d))
            assert validate_rational(dump_rational(value)) == value
