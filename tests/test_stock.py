# tests/test_stock.py
"""
Tests for the Stock entity: exact price comparison, validation and timestamps.
"""
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from monitor.stock import Stock, to_price
from monitor.exceptions.monitor_exceptions import InvalidPriceError


START = datetime(2024, 1, 2, 10, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


class TestToPrice:
    """Test price coercion"""

    def test_accepts_decimal_int_str_and_float(self):
        assert to_price(Decimal("35.50")) == Decimal("35.50")
        assert to_price(10) == Decimal("10")
        assert to_price("36.20") == Decimal("36.20")
        assert to_price(0.1) == Decimal("0.1")

    def test_zero_is_allowed(self):
        assert to_price(0) == Decimal("0")

    @pytest.mark.parametrize("value", [-1, "-0.01", float("inf"), float("nan"), "NaN", "abc", None, True])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(InvalidPriceError):
            to_price(value)

    def test_invalid_price_error_is_value_error(self):
        with pytest.raises(ValueError) as exc_info:
            to_price(-5, "PETR4")
        assert "INVALID_PRICE" in str(exc_info.value)
        assert exc_info.value.symbol == "PETR4"


class TestStock:
    """Test Stock state changes"""

    def test_initial_state(self):
        stock = Stock("PETR4", "35.50", last_update=START)
        assert stock.symbol == "PETR4"
        assert stock.price == Decimal("35.50")
        assert stock.last_update == START

    def test_symbol_is_read_only(self):
        stock = Stock("PETR4", 35)
        with pytest.raises(AttributeError):
            stock.symbol = "VALE3"

    def test_invalid_initial_price_rejected(self):
        with pytest.raises(InvalidPriceError):
            Stock("PETR4", -1)

    def test_update_with_new_price_reports_change(self):
        later = START + timedelta(seconds=5)
        stock = Stock("PETR4", "35.50", last_update=START, clock=FakeClock(later))

        assert stock.update_price("36.20") is True
        assert stock.price == Decimal("36.20")
        assert stock.last_update == later

    def test_same_price_is_noop(self):
        stock = Stock("PETR4", "35.50", last_update=START, clock=FakeClock())

        # 35.5 and 35.50 are the same Decimal value
        assert stock.update_price("35.5") is False
        assert stock.last_update == START

    def test_exact_comparison_without_tolerance(self):
        stock = Stock("PETR4", "35.50", last_update=START,
                      clock=FakeClock(START + timedelta(seconds=1)))
        assert stock.update_price("35.500000001") is True

    def test_last_update_never_moves_backwards(self):
        earlier = START - timedelta(hours=1)
        stock = Stock("PETR4", 100, last_update=START, clock=FakeClock(earlier))

        assert stock.update_price(101) is True
        assert stock.last_update == START

    def test_rejected_update_leaves_state_unchanged(self):
        stock = Stock("PETR4", 100, last_update=START, clock=FakeClock())

        with pytest.raises(InvalidPriceError):
            stock.update_price(float("inf"))
        with pytest.raises(InvalidPriceError):
            stock.update_price(-3)

        assert stock.price == Decimal("100")
        assert stock.last_update == START

    def test_naive_last_update_is_treated_as_utc(self):
        naive = datetime(2024, 1, 2, 10, 0)
        stock = Stock("PETR4", 100, last_update=naive)

        assert stock.last_update == START
        assert stock.last_update.tzinfo is timezone.utc

    def test_naive_clock_updates_price_and_timestamp_together(self):
        later = datetime(2024, 1, 2, 10, 5)
        stock = Stock("PETR4", 100, last_update=START, clock=FakeClock(later))

        assert stock.update_price(110) is True
        assert stock.price == Decimal("110")
        assert stock.last_update == later.replace(tzinfo=timezone.utc)

    def test_failing_clock_leaves_price_unchanged(self):
        def broken_clock():
            raise RuntimeError("clock unavailable")

        stock = Stock("PETR4", 100, last_update=START, clock=broken_clock)

        with pytest.raises(RuntimeError):
            stock.update_price(110)

        assert stock.price == Decimal("100")
        assert stock.last_update == START
