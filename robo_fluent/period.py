from dataclasses import dataclass
from enum import Enum


class TimeUnit(Enum):
    MILLISECONDS = ("millis", 0.001)
    SECONDS = ("secs", 1.0)
    MINUTES = ("mins", 60.0)

    def __init__(self, label: str, factor: float):
        self.label = label
        self.factor = factor


@dataclass(frozen=True)
class Period:
    """A timeout budget, e.g. ``secs(5)``."""

    amount: int
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"Period amount must be an int, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"Period must not be negative, got {self.amount}")

    def how_long(self) -> int:
        return self.amount

    def time_unit(self) -> TimeUnit:
        return self.unit

    @property
    def seconds(self) -> float:
        return self.amount * self.unit.factor

    def __str__(self) -> str:
        return f"{self.unit.label}({self.amount})"


def millis(amount: int) -> Period:
    return Period(amount, TimeUnit.MILLISECONDS)


def secs(amount: int) -> Period:
    return Period(amount, TimeUnit.SECONDS)


def mins(amount: int) -> Period:
    return Period(amount, TimeUnit.MINUTES)
