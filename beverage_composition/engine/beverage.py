from abc import ABC, abstractmethod
from enum import Enum


class CupSize(Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    def __str__(self) -> str:
        return self.value


def to_cup_size(size) -> CupSize:
    try:
        return CupSize(size)
    except ValueError:
        raise ValueError(f"Unknown cup size {size!r}.") from None


class Beverage(ABC):
    @property
    @abstractmethod
    def size(self) -> CupSize:
        pass

    @size.setter
    @abstractmethod
    def size(self, value: CupSize) -> None:
        pass

    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        pass


class ConcreteBeverage(Beverage):
    """A leaf beverage with a fixed name and a price that ignores the cup size."""

    name: str = ""
    base_cost: float = 0.0

    def __init__(self, size: CupSize = CupSize.SMALL) -> None:
        self._size = to_cup_size(size)

    @property
    def size(self) -> CupSize:
        return self._size

    @size.setter
    def size(self, value: CupSize) -> None:
        self._size = to_cup_size(value)

    def description(self) -> str:
        return f"{self.size} {self.name}"

    def cost(self) -> float:
        return self.base_cost


# Beverage Implementations
class HouseBlend(ConcreteBeverage):
    name = "House Blend"
    base_cost = 3.0


class DarkRoast(ConcreteBeverage):
    name = "Dark Roast"
    base_cost = 2.0
