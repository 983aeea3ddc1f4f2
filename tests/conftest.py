"""Shared fixtures: simple base learners and losses for driving the loggers."""

import numpy as np
import pytest


class LinearLearner:
    """Base learner ``coef * x`` on a single feature."""

    def __init__(self, data_identifier: str, coef: float):
        self._data_identifier = data_identifier
        self.coef = coef
        self.predict_calls = 0

    @property
    def data_identifier(self) -> str:
        return self._data_identifier

    def predict(self, data):
        self.predict_calls += 1
        return self.coef * np.asarray(data, dtype=np.float64)


class ConstantLearner:
    """Base learner predicting the same value for every row."""

    def __init__(self, value: float, data_identifier: str = "x"):
        self.value = value
        self.data_identifier = data_identifier

    def predict(self, data):
        return np.full(len(data), self.value)


def squared_error(response, prediction):
    return (np.asarray(response) - np.asarray(prediction)) ** 2


def prediction_as_loss(response, prediction):
    """Loss that returns the prediction itself, to script risk sequences."""
    return np.asarray(prediction, dtype=np.float64)


@pytest.fixture
def learner_cls():
    return LinearLearner


@pytest.fixture
def constant_learner_cls():
    return ConstantLearner


@pytest.fixture
def squared_loss():
    return squared_error


@pytest.fixture
def identity_loss():
    return prediction_as_loss


@pytest.fixture
def train_data():
    """Small regression problem with two features."""
    x1 = np.array([1.0, 2.0, 3.0, 4.0])
    x2 = np.array([0.5, -1.0, 2.0, 0.0])
    y = np.array([2.0, 4.5, 5.5, 8.5])
    return {"x1": x1, "x2": x2}, y


@pytest.fixture
def held_out():
    """Held-out rows with the same features as ``train_data``."""
    x1 = np.array([1.5, 2.5, 3.5])
    x2 = np.array([1.0, 0.0, -0.5])
    y = np.array([3.0, 5.0, 7.0])
    return {"x1": x1, "x2": x2}, y


@pytest.fixture
def dummy_step():
    """Arguments for a ``log_step`` call where only the iteration matters."""
    learner = ConstantLearner(0.0)

    def make(iteration: int, prediction=(1.0,), offset: float = 0.0, learning_rate: float = 0.1):
        response = np.zeros(len(prediction))
        return (iteration, response, np.asarray(prediction, dtype=np.float64), learner, offset, learning_rate)

    return make
