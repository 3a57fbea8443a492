"""
Tests for JSON Schema Contract Validators and stock config loading

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Загрузка Stock из конфигурации хоста
- Интеграция с DispenseResult
"""

import json

import pytest
from jsonschema import ValidationError

from cash_dispenser.core.config import load_stock_config, load_stock_config_file
from cash_dispenser.core.contracts import (
    DispenseResultValidator,
    SchemaLoader,
    StockConfigValidator,
    validate_dispense_result,
    validate_stock_config,
)
from cash_dispenser.core.domain import Denomination
from cash_dispenser.dispenser import Inventory


def D(value: int) -> Denomination:
    return Denomination.of(value)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_stock_config():
    """Валидный stock_config для тестирования."""
    return {
        "schema_version": "1",
        "denominations": [
            {"value": 2000, "count": 10},
            {"value": 500, "count": 20},
            {"value": 100, "count": 100},
        ],
    }


@pytest.fixture
def valid_dispense_result():
    """Валидный dispense_result для тестирования."""
    return {
        "amount": 2600,
        "notes": [
            {"denomination": 2000, "count": 1},
            {"denomination": 500, "count": 1},
            {"denomination": 100, "count": 1},
        ],
        "note_count": 3,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["stock_config", "dispense_result"])
    def test_packaged_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)

        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("stock_config") is loader.load_schema("stock_config")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# STOCK CONFIG CONTRACT
# =============================================================================


class TestStockConfigContract:
    """Тесты stock_config контракта."""

    def test_valid(self, valid_stock_config):
        validate_stock_config(valid_stock_config)
        assert StockConfigValidator().is_valid(valid_stock_config)

    def test_empty_denominations_valid(self):
        validate_stock_config({"schema_version": "1", "denominations": []})

    def test_missing_required_field(self, valid_stock_config):
        del valid_stock_config["schema_version"]

        with pytest.raises(ValidationError):
            validate_stock_config(valid_stock_config)

    def test_wrong_schema_version(self, valid_stock_config):
        valid_stock_config["schema_version"] = "2"

        with pytest.raises(ValidationError):
            validate_stock_config(valid_stock_config)

    @pytest.mark.parametrize("value", [15, 0, -100, "100", 100.5])
    def test_invalid_denomination_value(self, valid_stock_config, value):
        valid_stock_config["denominations"][0]["value"] = value

        with pytest.raises(ValidationError):
            validate_stock_config(valid_stock_config)

    def test_negative_count(self, valid_stock_config):
        valid_stock_config["denominations"][0]["count"] = -1

        with pytest.raises(ValidationError):
            validate_stock_config(valid_stock_config)

    def test_additional_property(self, valid_stock_config):
        valid_stock_config["currency"] = "INR"

        with pytest.raises(ValidationError):
            validate_stock_config(valid_stock_config)

    def test_is_valid_false_on_violation(self, valid_stock_config):
        valid_stock_config["denominations"][0]["value"] = 15

        assert not StockConfigValidator().is_valid(valid_stock_config)


# =============================================================================
# DISPENSE RESULT CONTRACT
# =============================================================================


class TestDispenseResultContract:
    """Тесты dispense_result контракта."""

    def test_valid(self, valid_dispense_result):
        validate_dispense_result(valid_dispense_result)

    def test_zero_count_rejected(self, valid_dispense_result):
        valid_dispense_result["notes"][0]["count"] = 0

        assert not DispenseResultValidator().is_valid(valid_dispense_result)

    def test_empty_notes_rejected(self, valid_dispense_result):
        valid_dispense_result["notes"] = []

        with pytest.raises(ValidationError):
            validate_dispense_result(valid_dispense_result)

    def test_withdraw_result_matches_contract(self, valid_dispense_result):
        inventory = Inventory({2000: 10, 500: 20, 100: 100})

        payload = inventory.withdraw(2600).to_contract()

        validate_dispense_result(payload)
        assert payload == valid_dispense_result


# =============================================================================
# STOCK CONFIG LOADING
# =============================================================================


class TestStockConfigLoading:
    """Тесты load_stock_config / load_stock_config_file."""

    def test_load_stock_config(self, valid_stock_config):
        stock = load_stock_config(valid_stock_config)

        assert stock == {D(2000): 10, D(500): 20, D(100): 100}

    def test_zero_count_kept(self):
        stock = load_stock_config(
            {"schema_version": "1", "denominations": [{"value": 50, "count": 0}]}
        )

        assert stock == {D(50): 0}

    def test_duplicate_denomination_rejected(self):
        data = {
            "schema_version": "1",
            "denominations": [{"value": 100, "count": 1}, {"value": 100, "count": 2}],
        }

        with pytest.raises(ValueError, match="Duplicate denomination"):
            load_stock_config(data)

    @pytest.mark.parametrize(
        "entry",
        [
            {"value": 100, "count": 5.0},
            {"value": 100.0, "count": 5},
        ],
    )
    def test_integral_float_rejected(self, entry):
        """JSON Schema "integer" пропускает 5.0, загрузчик - нет"""
        data = {"schema_version": "1", "denominations": [entry]}
        validate_stock_config(data)

        with pytest.raises(ValueError, match="must be an int"):
            load_stock_config(data)

    def test_integral_float_count_not_silently_dropped(self):
        data = {
            "schema_version": "1",
            "denominations": [{"value": 100, "count": 5.0}],
        }

        with pytest.raises(ValueError, match="count must be an int"):
            Inventory.from_config(data)

    def test_load_from_file(self, tmp_path, valid_stock_config):
        path = tmp_path / "stock.json"
        path.write_text(json.dumps(valid_stock_config), encoding="utf-8")

        assert load_stock_config_file(path) == {D(2000): 10, D(500): 20, D(100): 100}
        assert load_stock_config_file(str(path)) == load_stock_config(valid_stock_config)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_stock_config_file(tmp_path / "missing.json")

    def test_invalid_file_contents(self, tmp_path):
        path = tmp_path / "stock.json"
        path.write_text(json.dumps({"schema_version": "1"}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_stock_config_file(path)
