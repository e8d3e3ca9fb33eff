"""Консольный запуск: листинг функций и работа с коллекцией дисков.

Один прогон без подкоманд:
1. Функции в точке sample_x, затем отсортированные функции в точке 1
2. Листинг дисков
3. Удаление диска по длительности (ввод с консоли)
4. Вставка двух новых дисков после индекса (ввод с консоли) и повторный листинг

Ошибки ввода печатаются одной строкой "Error: ..."; код выхода всегда 0.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, Optional, Sequence

from src.config import (
    LOG_FORMAT,
    SessionConfig,
    default_disks,
    default_functions,
    new_disks,
)
from src.core.domain.music_collection import MusicCollection
from src.core.math.function_ordering import describe_all, sort_functions
from src.core.math.numeric import COMPARISON_POINT
from src.validation import CollectionInputError, plan_insertion, plan_removal

logger = logging.getLogger(__name__)

DURATION_PROMPT = "Enter duration to remove: "
INDEX_PROMPT = "Enter index (0-based) after which to insert two new disks: "

ReadLine = Callable[[str], Optional[str]]
Write = Callable[[str], None]


def print_functions(config: SessionConfig, write: Write) -> None:
    write("=== Functions ===")
    functions = default_functions()

    for line in describe_all(functions, config.sample_x):
        write(line)

    for line in describe_all(sort_functions(functions), COMPARISON_POINT):
        write(line)


def print_listing(collection: MusicCollection, write: Write) -> None:
    for line in collection.render_listing():
        write(line)


def edit_collection(collection: MusicCollection, read_line: ReadLine, write: Write) -> bool:
    """Удаление и вставка по вводу пользователя.

    Returns:
        True если обе мутации применены, False если ввод отклонён
    """
    try:
        removal = plan_removal(collection, read_line(DURATION_PROMPT))
        removal.apply(collection)

        insertion = plan_insertion(collection, read_line(INDEX_PROMPT), new_disks())
        insertion.apply(collection)
    except CollectionInputError as e:
        logger.warning("Input rejected: %s: %s", type(e).__name__, e)
        write(f"Error: {e}")
        return False

    print_listing(collection, write)
    return True


def run_session(config: SessionConfig, read_line: ReadLine, write: Write) -> int:
    """Полный прогон с внедрёнными вводом и выводом."""
    print_functions(config, write)

    collection = MusicCollection.from_disks(default_disks())
    write("")
    write("=== Music disks ===")
    print_listing(collection, write)

    edit_collection(collection, read_line, write)
    return 0


def _console_read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Function catalogue and music disk collection demo"
    )
    parser.add_argument(
        "--sample-x",
        type=float,
        default=None,
        help="Input value for the first function listing (default: 2)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level written to stderr (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.sample_x is not None:
        overrides["sample_x"] = args.sample_x
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    try:
        config = replace(SessionConfig.from_env(), **overrides)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level_value, format=LOG_FORMAT, stream=sys.stderr)
    logger.debug("Starting session with %s", config)

    return run_session(config, _console_read_line, print)


if __name__ == "__main__":
    sys.exit(main())
