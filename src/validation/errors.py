"""Ошибки слоя валидации пользовательского ввода."""


class CollectionInputError(Exception):
    """Базовый класс: ввод отклонён, коллекция не изменена."""

    pass


class FormatError(CollectionInputError, ValueError):
    """Токен не разбирается как число нужного типа."""

    pass


class NotFoundError(CollectionInputError, LookupError):
    """В коллекции нет диска с указанной длительностью."""

    pass


class RangeError(CollectionInputError, IndexError):
    """Индекс вставки вне диапазона [-1, len - 1]."""

    pass
