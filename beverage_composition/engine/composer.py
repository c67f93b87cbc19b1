import logging
from typing import Callable, Iterable

from beverage_composition.engine.beverage import Beverage, CupSize, to_cup_size

DecoratorKind = Callable[[Beverage], Beverage]


def compose(base: Beverage, decorators: Iterable[DecoratorKind] = ()) -> Beverage:
    if not isinstance(base, Beverage):
        raise TypeError(f"Cannot compose {type(base).__name__}, expected a Beverage.")

    chain = base
    for decorator in decorators:
        chain = decorator(chain)
        logging.debug(f"Wrapped beverage in {type(chain).__name__}")
    return chain


def set_size(chain: Beverage, size: CupSize) -> None:
    chain.size = to_cup_size(size)


def cost(chain: Beverage) -> float:
    return chain.cost()


def description(chain: Beverage) -> str:
    return chain.description()


def format_line(chain: Beverage) -> str:
    return f"{chain.description()}: $ {chain.cost()}"
