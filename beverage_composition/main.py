import logging

from beverage_composition.engine.beverage import CupSize, HouseBlend
from beverage_composition.engine.composer import compose, format_line, set_size
from beverage_composition.engine.condiments import Milk, Soy
from beverage_composition.engine.normalizer import DescriptionNormalizer
from beverage_composition.engine.price_sheet import PriceSheet


def main():
    logging.basicConfig(level=logging.INFO)

    beverage = compose(HouseBlend(), [Milk, Soy, Soy])
    for size in CupSize:
        set_size(beverage, size)
        print(format_line(beverage))

    beverage = DescriptionNormalizer(beverage)
    print(format_line(beverage))

    PriceSheet().log_sheet(beverage)


if __name__ == "__main__":
    main()
