"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора fraction:
- Валидность самой схемы
- Валидация правильных данных (dict и текстовая форма)
- Детекция нарушений required полей, типов и диапазонов
- Интеграция с Pydantic моделью Fraction32
"""

import json
from pathlib import Path

import pytest
import pydantic
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    FractionValidator,
    SchemaLoader,
    load_fraction,
    validate_fraction,
)
from src.core.domain import Fraction32, FractionContractViolation


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def schema_path() -> Path:
    return Path(__file__).parent.parent.parent / "contracts" / "schema" / "fraction.json"


@pytest.fixture
def validator() -> FractionValidator:
    return FractionValidator()


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchema:
    """Тесты самой схемы"""

    def test_schema_file_is_valid_json_schema(self, schema_path: Path) -> None:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
        Draft202012Validator.check_schema(schema)

    def test_loader_caches_schema(self) -> None:
        loader = SchemaLoader()
        first = loader.load_schema("fraction")
        assert loader.load_schema("fraction") is first

    def test_loader_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# VALIDATION
# =============================================================================


class TestFractionValidator:
    """Тесты для FractionValidator / validate_fraction"""

    @pytest.mark.parametrize(
        "payload",
        [
            {"numerator": 3, "denominator": 4},
            {"numerator": -32768, "denominator": 1},
            {"numerator": 0, "denominator": 1},
            "3/4",
            "-7",
            "+1/+2",
        ],
    )
    def test_valid_payloads(self, validator: FractionValidator, payload) -> None:
        assert validator.is_valid(payload)
        validate_fraction(payload)

    @pytest.mark.parametrize(
        "payload",
        [
            {"numerator": 3},
            {"denominator": 4},
            {"numerator": 1, "denominator": 0},
            {"numerator": 1, "denominator": 32768},
            {"numerator": 32768, "denominator": 1},
            {"numerator": "3", "denominator": 4},
            {"numerator": True, "denominator": 4},
            {"numerator": 1, "denominator": 2, "extra": 1},
            "1/x",
            "1/-2",
            " 1/2",
            12,
            None,
        ],
    )
    def test_invalid_payloads(self, validator: FractionValidator, payload) -> None:
        assert not validator.is_valid(payload)
        with pytest.raises(ValidationError):
            validate_fraction(payload)

    def test_iter_errors_reports_violation(self, validator: FractionValidator) -> None:
        errors = list(validator.iter_errors({"numerator": 1, "denominator": 0}))
        assert len(errors) >= 1


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestLoadFraction:
    """Тесты для load_fraction: схема + Fraction32"""

    def test_load_dict(self) -> None:
        assert load_fraction({"numerator": 3, "denominator": 4}) == Fraction32.new(3, 4)

    def test_load_text_reduces(self) -> None:
        assert load_fraction("6/8") == Fraction32.new(3, 4)

    def test_model_dump_conforms_to_schema(self) -> None:
        value = Fraction32.new(-10, 4)
        validate_fraction(value.model_dump())
        validate_fraction(str(value))

    def test_schema_violation_raises_schema_error(self) -> None:
        with pytest.raises(ValidationError):
            load_fraction({"numerator": 1, "denominator": 0})

    def test_unreduced_pair_passes_schema_but_not_model(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            load_fraction({"numerator": 2, "denominator": 4})

    def test_zero_denominator_text_passes_schema_but_not_model(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            load_fraction("1/0")

    def test_large_denominator_text_is_contract_violation(self) -> None:
        with pytest.raises(FractionContractViolation):
            load_fraction("1/40000")
