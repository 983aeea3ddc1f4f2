"""Tests for the exception hierarchy and error handling."""

import pytest

from boostmon.exceptions import (
    BoostmonError,
    ConfigurationError,
    UnknownFeatureError,
    RiskComputationError,
    StateError,
    InconsistentTrajectoryError,
    unknown_feature_error,
    zero_risk_error,
    no_observation_error,
)


class TestBoostmonError:
    """Test the base BoostmonError class."""

    def test_basic_error(self):
        """Test basic error without suggestion."""
        error = BoostmonError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.suggestion is None

    def test_error_with_suggestion(self):
        """Test error with suggestion."""
        error = BoostmonError("Something went wrong", "Try this fix")
        assert str(error) == "Something went wrong\n\nSuggestion: Try this fix"
        assert error.suggestion == "Try this fix"

    def test_empty_suggestion_handling(self):
        """Empty suggestions are kept but not rendered."""
        error = BoostmonError("message", "")
        assert error.suggestion == ""
        assert str(error) == "message"


class TestExceptionHierarchy:
    """Test the exception hierarchy structure."""

    def test_all_errors_inherit_from_boostmon_error(self):
        errors = [
            ConfigurationError("test"),
            UnknownFeatureError("test"),
            RiskComputationError("test"),
            StateError("test"),
            InconsistentTrajectoryError("test"),
        ]
        for error in errors:
            assert isinstance(error, BoostmonError)
            assert isinstance(error, Exception)

    def test_unknown_feature_is_configuration_and_lookup_error(self):
        error = UnknownFeatureError("missing")
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, LookupError)
        assert str(error) == "missing"

    def test_risk_computation_error_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            raise RiskComputationError("division by zero")

    def test_inconsistent_trajectory_is_state_error(self):
        assert isinstance(InconsistentTrajectoryError("x"), StateError)


class TestConvenienceFunctions:
    """Test the convenience functions for creating exceptions."""

    def test_unknown_feature_error_lists_available(self):
        error = unknown_feature_error("x3", ["x2", "x1"])
        assert isinstance(error, UnknownFeatureError)
        assert "Feature 'x3' is not part of the held-out data" in str(error)
        assert "'x1', 'x2'" in str(error)
        assert "same features" in error.suggestion

    def test_unknown_feature_error_without_features(self):
        error = unknown_feature_error("x", [])
        assert "<none>" in str(error)

    def test_zero_risk_error(self):
        error = zero_risk_error("oob_risk")
        assert isinstance(error, RiskComputationError)
        assert "Logger 'oob_risk'" in str(error)
        assert "previous risk is 0" in str(error)

    def test_no_observation_error(self):
        error = no_observation_error("time", "print its status")
        assert isinstance(error, StateError)
        assert str(error).startswith("Logger 'time' has no logged steps; cannot print its status")
