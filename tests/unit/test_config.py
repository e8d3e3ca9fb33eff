"""Тесты SessionConfig и демонстрационного каталога."""

import logging
from dataclasses import FrozenInstanceError

import pytest

from src.config import (
    ENV_LOG_LEVEL,
    ENV_SAMPLE_X,
    SessionConfig,
    default_disks,
    default_functions,
    new_disks,
)
from src.core.math.functions import Hyperbola, Line, Quadratic


class TestSessionConfig:
    """Тесты SessionConfig"""

    def test_defaults(self) -> None:
        config = SessionConfig()
        assert config.sample_x == 2.0
        assert config.log_level_value == logging.WARNING

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            SessionConfig().sample_x = 3.0

    def test_from_env_empty(self) -> None:
        assert SessionConfig.from_env({}) == SessionConfig()

    def test_from_env_overrides(self) -> None:
        config = SessionConfig.from_env({ENV_SAMPLE_X: "3.5", ENV_LOG_LEVEL: "debug"})

        assert config.sample_x == 3.5
        assert config.log_level_value == logging.DEBUG

    def test_from_env_bad_number(self) -> None:
        with pytest.raises(ValueError, match=ENV_SAMPLE_X):
            SessionConfig.from_env({ENV_SAMPLE_X: "two"})

    def test_from_env_bad_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            SessionConfig.from_env({ENV_LOG_LEVEL: "chatty"})

    def test_non_finite_sample_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            SessionConfig(sample_x=float("nan"))


class TestCatalogue:
    """Тесты демонстрационного каталога"""

    def test_default_functions(self) -> None:
        assert default_functions() == [
            Line(a=2, b=3),
            Quadratic(a=1, b=-4, c=4),
            Hyperbola(a=5),
        ]

    def test_catalogue_returns_fresh_lists(self) -> None:
        assert default_functions() is not default_functions()
        assert default_disks() is not default_disks()

    def test_default_disks(self) -> None:
        assert [d.duration_minutes for d in default_disks()] == [45.0, 38.5, 50.0]

    def test_new_disks(self) -> None:
        assert [d.name for d in new_disks()] == ["New Album 1", "New Album 2"]
