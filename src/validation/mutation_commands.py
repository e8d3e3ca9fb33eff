"""
Mutation Commands: проверенные команды изменения коллекции

Схема pre-check then apply:
1. plan_removal / plan_insertion разбирают сырой ввод и проверяют его
   против текущего состояния коллекции
2. На выходе получается команда (RemoveAt / InsertBlock), которая уже валидна
3. apply() меняет коллекцию и не может завершиться ошибкой

Коллекция не трогается, пока команда не построена полностью, поэтому
любая ошибка оставляет её в последнем корректном состоянии.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.domain.music_collection import MusicCollection
from src.core.domain.music_disk import MusicDisk
from src.core.math.numeric import format_number
from src.validation.errors import NotFoundError, RangeError
from src.validation.input_parsing import parse_duration, parse_index

logger = logging.getLogger(__name__)


# =============================================================================
# COMMANDS
# =============================================================================


@dataclass(frozen=True)
class RemoveAt:
    """Удаление диска на позиции index (найден по длительности duration)."""

    index: int
    duration: float

    def apply(self, collection: MusicCollection) -> MusicDisk:
        return collection.remove_at(self.index)


@dataclass(frozen=True)
class InsertBlock:
    """Вставка блока дисков сразу после позиции index."""

    index: int
    disks: tuple[MusicDisk, ...]

    def apply(self, collection: MusicCollection) -> None:
        collection.insert_after(self.index, self.disks)


# =============================================================================
# PLANNING
# =============================================================================


def plan_removal(collection: MusicCollection, token: Optional[str]) -> RemoveAt:
    """
    Разбор и проверка запроса на удаление по длительности.

    Args:
        collection: Текущая коллекция (не изменяется)
        token: Сырой ввод длительности

    Returns:
        RemoveAt, готовая к применению

    Raises:
        FormatError: Длительность не разбирается
        NotFoundError: Диска с такой длительностью нет
    """
    duration = parse_duration(token)

    index = collection.find_index_by_duration(duration)
    if index is None:
        raise NotFoundError(
            f"No disk with duration {format_number(duration)} min was found"
        )

    command = RemoveAt(index=index, duration=duration)
    logger.debug("Planned %s", command)
    return command


def plan_insertion(
    collection: MusicCollection,
    token: Optional[str],
    disks: Sequence[MusicDisk],
) -> InsertBlock:
    """
    Разбор и проверка запроса на вставку блока после индекса.

    Допустимый диапазон индекса: -1 .. len(collection) - 1.

    Raises:
        FormatError: Индекс не разбирается как целое
        RangeError: Индекс вне допустимого диапазона
    """
    index = parse_index(token)

    upper = len(collection) - 1
    if index < -1 or index > upper:
        raise RangeError(
            f"Invalid insertion index {index}: expected a value from -1 to {upper}"
        )

    command = InsertBlock(index=index, disks=tuple(disks))
    logger.debug("Planned insertion of %d disks after %d", len(command.disks), index)
    return command
