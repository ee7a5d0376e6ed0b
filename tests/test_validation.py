"""Validate input defaulting and rejection rules for one sample."""

import warnings
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from flenley.errors import ValidationError
from flenley.validation import (
    DEFAULT_PCO2_MMHG,
    DEFAULT_PH,
    SamplePoint,
    validate_sample_input,
)


class TestDefaults:
    def test_no_arguments_gives_normal_sample(self):
        sample = validate_sample_input()
        assert sample == SamplePoint(ph=7.40, pco2=40.0)
        assert sample.ph == DEFAULT_PH
        assert sample.pco2 == DEFAULT_PCO2_MMHG

    @pytest.mark.parametrize("empty", [None, "", "   ", [], (), np.array([])])
    def test_empty_values_select_defaults(self, empty):
        sample = validate_sample_input(empty, empty)
        assert sample.ph == DEFAULT_PH
        assert sample.pco2 == DEFAULT_PCO2_MMHG

    def test_only_ph_supplied(self):
        sample = validate_sample_input(7.5)
        assert sample.ph == 7.5
        assert sample.pco2 == DEFAULT_PCO2_MMHG

    def test_h_plus_is_derived(self):
        sample = validate_sample_input(7.0, 45)
        assert np.isclose(sample.h_plus, 100.0)
        assert sample.as_xy() == (45.0, sample.h_plus)


class TestAcceptedTypes:
    @pytest.mark.parametrize(
        "value", [7, 7.4, np.float64(7.4), np.int32(7), np.array(7.4)]
    )
    def test_real_scalars_are_accepted(self, value):
        sample = validate_sample_input(value, 40)
        assert isinstance(sample.ph, float)
        assert sample.ph == float(value)

    def test_kpa_is_converted_to_mmhg(self):
        sample = validate_sample_input(7.4, 5.3328947, pco2_unit="kPa")
        assert np.isclose(sample.pco2, 40.0, atol=1e-4)

    def test_kpa_overflow_after_conversion_raises(self):
        with pytest.raises(ValidationError, match="finite"):
            validate_sample_input(7.4, 1e308, pco2_unit="kPa")

    @pytest.mark.parametrize(
        "value, expected", [(Decimal("7.4"), 7.4), (Fraction(37, 5), 7.4)]
    )
    def test_decimal_and_fraction_are_accepted(self, value, expected):
        sample = validate_sample_input(value, 40)
        assert isinstance(sample.ph, float)
        assert np.isclose(sample.ph, expected)

    def test_non_finite_decimal_raises(self):
        with pytest.raises(ValidationError):
            validate_sample_input(Decimal("NaN"), 40)

    def test_kpa_default_stays_in_mmhg(self):
        sample = validate_sample_input(7.4, None, pco2_unit="kPa")
        assert sample.pco2 == DEFAULT_PCO2_MMHG


class TestRejection:
    def test_negative_ph_raises(self):
        with pytest.raises(ValidationError):
            validate_sample_input(-1)

    @pytest.mark.parametrize("bad", [0, -40.0, np.nan, np.inf, -np.inf])
    def test_non_positive_or_non_finite_pco2_raises(self, bad):
        with pytest.raises(ValidationError):
            validate_sample_input(7.4, bad)

    @pytest.mark.parametrize("bad", ["7.4", "abc", True, object(), 7.4 + 0j])
    def test_non_numeric_raises(self, bad):
        with pytest.raises(ValidationError):
            validate_sample_input(bad, 40)

    @pytest.mark.parametrize("bad", [[7.4, 7.5], (7.4,), np.array([7.4, 7.5])])
    def test_non_scalar_raises(self, bad):
        with pytest.raises(ValidationError):
            validate_sample_input(bad, 40)

    def test_unknown_unit_raises(self):
        with pytest.raises(ValidationError):
            validate_sample_input(7.4, 40, pco2_unit="psi")

    def test_validation_error_is_a_value_error(self):
        assert issubclass(ValidationError, ValueError)


class TestPlausibility:
    def test_implausible_ph_warns(self):
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            sample = validate_sample_input(6.5, 40)

        assert sample.ph == 6.5
        assert len(w) == 1
        assert "physiological" in str(w[0].message)

    def test_plausible_ph_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_sample_input(7.1, 60)
