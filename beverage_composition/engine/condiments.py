from abc import abstractmethod

from beverage_composition.engine.beverage import Beverage, CupSize


class CondimentDecorator(Beverage):
    """Wraps exactly one beverage and forwards size access to it.

    The decorator owns the wrapped beverage; callers should keep a reference
    to the outermost link only.
    """

    def __init__(self, beverage: Beverage) -> None:
        if not isinstance(beverage, Beverage):
            raise TypeError(f"Cannot decorate {type(beverage).__name__}, expected a Beverage.")
        self._beverage = beverage

    @property
    def size(self) -> CupSize:
        return self._beverage.size

    @size.setter
    def size(self, value: CupSize) -> None:
        self._beverage.size = value

    @abstractmethod
    def description(self) -> str:
        pass


class Condiment(CondimentDecorator):
    """A priced condiment whose surcharge depends on the cup size.

    Sizes missing from the surcharge table are charged at the medium rate,
    so every table needs a medium entry.
    """

    name: str = ""
    surcharges: dict[CupSize, float] = {}

    def __init__(self, beverage: Beverage, surcharges: dict[CupSize, float] | None = None) -> None:
        super().__init__(beverage)
        if surcharges is not None:
            self.surcharges = dict(surcharges)
        self._check_surcharges()

    def _check_surcharges(self):
        if not self.name:
            raise ValueError(f"{type(self).__name__} has no condiment name.")
        if CupSize.MEDIUM not in self.surcharges:
            raise ValueError(f"Surcharges for {self.name} need a {CupSize.MEDIUM} rate.")
        for size, rate in self.surcharges.items():
            if rate < 0:
                raise ValueError(f"Surcharge for {size} must be non-negative.")

    def surcharge(self, size: CupSize) -> float:
        if size in self.surcharges:
            return self.surcharges[size]
        return self.surcharges[CupSize.MEDIUM]

    def description(self) -> str:
        return self._beverage.description() + f", {self.name}"

    def cost(self) -> float:
        return self._beverage.cost() + self.surcharge(self.size)


# Condiments
class Milk(Condiment):
    name = "Milk"
    surcharges = {
        CupSize.SMALL: 1.0,
        CupSize.MEDIUM: 1.5,
        CupSize.LARGE: 2.0,
    }


class Soy(Condiment):
    name = "Soy"
    surcharges = {
        CupSize.SMALL: 0.5,
        CupSize.MEDIUM: 1.0,
        CupSize.LARGE: 1.5,
    }
