"""Tests for the input data model and unit conversion."""

import math

import pytest
from bscalc.core import OptionQuote, ModelInputs, DAYS_PER_YEAR, PERCENT
from bscalc.exceptions import DomainError, BSCalcError


class TestOptionQuote:
    def test_converts_units_once(self):
        m = OptionQuote(100, 100, 365, 20, 5).to_model()
        assert m == ModelInputs(S=100, K=100, T=1.0, sigma=0.20, r=0.05)

    def test_partial_year(self):
        m = OptionQuote(50, 55, 182.5, 30, 3).to_model()
        assert m.T == 0.5
        assert m.sigma == pytest.approx(0.3)
        assert m.r == pytest.approx(0.03)

    def test_negative_rate(self):
        m = OptionQuote(100, 100, 30, 25, -0.5).to_model()
        assert m.r == pytest.approx(-0.005)

    def test_constants(self):
        assert DAYS_PER_YEAR == 365.0
        assert PERCENT == 100.0

    def test_frozen(self):
        q = OptionQuote(100, 100, 365, 20, 5)
        with pytest.raises(AttributeError):
            q.stock_price = 1.0


class TestModelInputs:
    def test_no_validation_on_construction(self):
        m = ModelInputs(S=100, K=100, T=0.0, sigma=0.0, r=0.05)
        assert m.T == 0.0

    def test_check_domain_accepts_valid(self):
        ModelInputs(S=100, K=100, T=1.0, sigma=0.2, r=-0.01).check_domain()

    @pytest.mark.parametrize("T, sigma, field", [
        (0.0, 0.2, "T"),
        (-1.0, 0.2, "T"),
        (math.nan, 0.2, "T"),
        (1.0, 0.0, "sigma"),
        (1.0, -0.1, "sigma"),
    ])
    def test_check_domain_rejects(self, T, sigma, field):
        m = ModelInputs(S=100, K=100, T=T, sigma=sigma, r=0.05)
        with pytest.raises(DomainError) as exc:
            m.check_domain()
        assert exc.value.field == field
        assert isinstance(exc.value, ValueError)
        assert isinstance(exc.value, BSCalcError)
