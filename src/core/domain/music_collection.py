"""
MusicCollection: упорядоченная коллекция музыкальных дисков

Коллекция сохраняет порядок вставки и поддерживает две мутации:
- remove_by_duration: удаление первого диска с точно совпадающей длительностью
- insert_after:       вставка блока дисков сразу после позиции index

ИНВАРИАНТЫ:
1. Порядок меняется только явными мутациями
2. Уникальность полей не требуется
3. Операции коллекции тотальны: отсутствующая длительность означает no-op,
   границы индекса проверяет слой валидации (src.validation)
"""

import logging
from typing import Iterable, Iterator, Optional, Sequence

from src.core.domain.music_disk import MusicDisk

logger = logging.getLogger(__name__)


class MusicCollection:
    """Упорядоченная коллекция MusicDisk."""

    def __init__(self, disks: Optional[Iterable[MusicDisk]] = None):
        self._disks: list[MusicDisk] = list(disks) if disks is not None else []

    @classmethod
    def from_disks(cls, disks: Iterable[MusicDisk]) -> "MusicCollection":
        return cls(disks)

    # -------------------------------------------------------------------------
    # Мутации
    # -------------------------------------------------------------------------

    def add(self, disk: MusicDisk) -> None:
        """Добавление диска в конец коллекции."""
        self._disks.append(disk)

    def find_index_by_duration(self, duration: float) -> Optional[int]:
        """
        Позиция первого диска с длительностью duration (точное равенство).

        Returns:
            Индекс или None, если такого диска нет
        """
        for index, disk in enumerate(self._disks):
            if disk.duration_minutes == duration:
                return index
        return None

    def remove_by_duration(self, duration: float) -> Optional[MusicDisk]:
        """
        Удаление первого диска с длительностью duration.

        Если диска нет, коллекция не меняется.

        Returns:
            Удалённый диск или None
        """
        index = self.find_index_by_duration(duration)
        if index is None:
            return None
        return self.remove_at(index)

    def remove_at(self, index: int) -> MusicDisk:
        """Удаление диска по позиции; остальные сдвигаются, порядок сохраняется."""
        disk = self._disks.pop(index)
        logger.info("Removed disk %r at position %d", disk.name, index)
        return disk

    def insert_after(self, index: int, disks: Sequence[MusicDisk]) -> None:
        """
        Вставка блока дисков сразу после позиции index.

        Первый новый диск оказывается на позиции index + 1;
        index = -1 означает вставку в начало. Границы не проверяются.

        Args:
            index: Позиция-якорь, допустимо -1 .. len - 1
            disks: Диски для вставки (порядок сохраняется)
        """
        position = index + 1
        self._disks[position:position] = list(disks)
        logger.info("Inserted %d disks at position %d", len(disks), position)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def snapshot(self) -> tuple[MusicDisk, ...]:
        return tuple(self._disks)

    def durations(self) -> list[float]:
        return [disk.duration_minutes for disk in self._disks]

    def render_listing(self) -> list[str]:
        """Строки листинга в порядке коллекции."""
        return [disk.describe() for disk in self._disks]

    def __iter__(self) -> Iterator[MusicDisk]:
        return iter(self._disks)

    def __len__(self) -> int:
        return len(self._disks)

    def __getitem__(self, index: int) -> MusicDisk:
        return self._disks[index]

    def __repr__(self) -> str:
        return f"MusicCollection({self._disks!r})"
