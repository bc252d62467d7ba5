"""
Contract Validation Module

JSON Schema контракты для снапшотов чисел (BigInt, Rational).
"""

from .validators import (
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

__all__ = [
    # Schema names
    "BIGINT_SCHEMA",
    "RATIONAL_SCHEMA",
    "SCHEMA_NAMES",
    # Functions
    "load_schema",
    "contract_errors",
    "validate_bigint",
    "validate_rational",
    "dump_bigint",
    "dump_rational",
]
