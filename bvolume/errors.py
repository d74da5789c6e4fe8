"""Исключения библиотеки bvolume."""


class BoundsError(Exception):
    """Базовый класс ошибок bvolume."""


class BoundsContractError(BoundsError):
    """
    Нарушение контракта вызывающей стороной.

    Это ошибка программирования, а не восстанавливаемое состояние:
    вызывающий код должен прервать работу, а не продолжать с испорченными данными.
    """


class EmptyVertexSetError(BoundsError, ValueError):
    """Попытка построить ограничивающий объём по пустому набору вершин."""
