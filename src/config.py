"""Конфигурация консольной сессии и демонстрационный каталог.

Переопределение через окружение:
- FUNCLAB_SAMPLE_X:  точка, в которой описываются функции (default 2)
- FUNCLAB_LOG_LEVEL: уровень логирования (default WARNING)
"""

import logging
import os
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Mapping, Optional

from src.core.domain.music_disk import MusicDisk
from src.core.math.functions import FunctionBase, Hyperbola, Line, Quadratic
from src.core.math.numeric import is_valid_float

ENV_SAMPLE_X = "FUNCLAB_SAMPLE_X"
ENV_LOG_LEVEL = "FUNCLAB_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class SessionConfig:
    """Параметры одного запуска.

    sample_x: точка первого листинга функций;
    log_level: имя уровня стандартного logging.
    """
    sample_x: float = 2.0
    log_level: str = "WARNING"

    def __post_init__(self):
        if not is_valid_float(self.sample_x):
            raise ValueError(f"sample_x must be a finite number, got {self.sample_x}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SessionConfig":
        """Конфигурация по умолчанию с переопределениями из окружения.

        Raises:
            ValueError: невалидное значение переменной окружения
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_sample_x = env.get(ENV_SAMPLE_X)
        if raw_sample_x:
            try:
                sample_x = float(raw_sample_x)
            except ValueError:
                raise ValueError(f"{ENV_SAMPLE_X} must be a number, got {raw_sample_x!r}") from None
            config = replace(config, sample_x=sample_x)

        raw_log_level = env.get(ENV_LOG_LEVEL)
        if raw_log_level:
            config = replace(config, log_level=raw_log_level)

        return config


# =============================================================================
# DEMO CATALOGUE
# =============================================================================


def default_functions() -> list[FunctionBase]:
    return [
        Line(a=2, b=3),
        Quadratic(a=1, b=-4, c=4),
        Hyperbola(a=5),
    ]


def default_disks() -> list[MusicDisk]:
    return [
        MusicDisk(name="Album A", author="Artist X", duration_minutes=45.0, price=Decimal("200")),
        MusicDisk(name="Album B", author="Artist Y", duration_minutes=38.5, price=Decimal("150")),
        MusicDisk(name="Album C", author="Artist Z", duration_minutes=50.0, price=Decimal("220")),
    ]


def new_disks() -> list[MusicDisk]:
    """Два диска, которые вставляются после выбранного индекса."""
    return [
        MusicDisk(name="New Album 1", author="New Artist 1", duration_minutes=42.0, price=Decimal("180")),
        MusicDisk(name="New Album 2", author="New Artist 2", duration_minutes=37.5, price=Decimal("160")),
    ]
