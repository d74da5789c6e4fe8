from enum import Enum


class BoundsCheckResult(Enum):
    """Результат трёхзначной классификации: первый объём относительно второго."""

    COMPLETELY_OUTSIDE = 0
    COMPLETELY_INSIDE = 1
    PARTIALLY_INSIDE = 2
