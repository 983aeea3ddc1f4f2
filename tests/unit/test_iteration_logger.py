"""Unit tests for boostmon.loggers.iteration and the shared logger contract."""

import numpy as np
import pytest

from boostmon.exceptions import ConfigurationError, StateError
from boostmon.loggers import BaseLogger, IterationLogger


class TestIterationLogger:
    """Test cases for IterationLogger."""

    def test_init_defaults(self):
        counter = IterationLogger()
        assert counter.is_stopper is False
        assert counter.get_if_logger_is_stopper() is False
        assert counter.max_iterations is None
        assert counter.name == "iterations"
        assert counter.num_observations == 0
        assert isinstance(counter, BaseLogger)

    def test_stopper_requires_max_iterations(self):
        with pytest.raises(ConfigurationError, match="needs max_iterations"):
            IterationLogger(is_stopper=True)

    def test_negative_max_iterations(self):
        with pytest.raises(ConfigurationError, match="non-negative"):
            IterationLogger(max_iterations=-1)

    def test_logs_iterations_in_call_order(self, dummy_step):
        counter = IterationLogger()
        for m in (1, 2, 3):
            counter.log_step(*dummy_step(m))

        data = counter.get_logged_data()
        assert data.dtype == np.float64
        np.testing.assert_array_equal(data, [1.0, 2.0, 3.0])
        assert counter.current_iteration == 3

    def test_stops_at_max_iterations(self, dummy_step):
        counter = IterationLogger(is_stopper=True, max_iterations=5)
        for m in range(1, 5):
            counter.log_step(*dummy_step(m))
        assert counter.reached_stop_criteria() is False

        counter.log_step(*dummy_step(5))
        assert counter.reached_stop_criteria() is True

    def test_non_stopper_never_stops(self, dummy_step):
        counter = IterationLogger(is_stopper=False, max_iterations=1)
        assert counter.reached_stop_criteria() is False
        for m in range(1, 4):
            counter.log_step(*dummy_step(m))
        assert counter.reached_stop_criteria() is False

    def test_stopper_query_before_logging_fails(self):
        counter = IterationLogger(is_stopper=True, max_iterations=3)
        with pytest.raises(StateError, match="no logged steps"):
            counter.reached_stop_criteria()

    def test_clear_resets_trajectory(self, dummy_step):
        counter = IterationLogger(is_stopper=True, max_iterations=2)
        counter.log_step(*dummy_step(1))
        counter.log_step(*dummy_step(2))
        assert counter.reached_stop_criteria()

        counter.clear_logger_data()
        assert counter.get_logged_data().size == 0
        assert counter.num_observations == 0

        counter.log_step(*dummy_step(1))
        assert counter.reached_stop_criteria() is False
        np.testing.assert_array_equal(counter.get_logged_data(), [1.0])

    def test_status_with_maximum(self, dummy_step):
        counter = IterationLogger(is_stopper=True, max_iterations=100)
        counter.log_step(*dummy_step(7))
        status = counter.print_logger_status()
        assert status == "  7/100"
        assert len(status) == counter.status_width

    def test_status_width_is_stable(self, dummy_step):
        counter = IterationLogger(is_stopper=True, max_iterations=250)
        widths = set()
        for m in (1, 10, 250):
            counter.log_step(*dummy_step(m))
            widths.add(len(counter.print_logger_status()))
        assert widths == {7}

    def test_status_without_maximum(self, dummy_step):
        counter = IterationLogger()
        counter.log_step(*dummy_step(12))
        assert counter.print_logger_status() == "       12"

    def test_non_stopper_status_overflows_past_maximum(self, dummy_step):
        counter = IterationLogger(max_iterations=5)
        counter.log_step(*dummy_step(12))
        assert counter.status_width == 3
        assert counter.print_logger_status() == "12/5"
        assert counter.reached_stop_criteria() is False

    def test_status_before_logging_fails(self):
        with pytest.raises(StateError):
            IterationLogger().print_logger_status()

    def test_log_step_does_not_touch_inputs(self, dummy_step):
        args = dummy_step(1, prediction=(1.0, 2.0))
        before = args[2].copy()
        IterationLogger().log_step(*args)
        np.testing.assert_array_equal(args[2], before)

    def test_repr(self, dummy_step):
        counter = IterationLogger(is_stopper=True, max_iterations=3, name="iters")
        counter.log_step(*dummy_step(1))
        assert repr(counter) == "IterationLogger(name='iters', is_stopper=True, observations=1)"
