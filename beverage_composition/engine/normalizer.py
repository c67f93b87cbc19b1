from beverage_composition.engine.condiments import CondimentDecorator

INVALID_DESCRIPTION = "Invalid product description"


class DescriptionNormalizer(CondimentDecorator):
    """Collapses repeated condiments into counted entries.

    "Small House Blend, Milk, Soy, Soy" becomes "Small House Blend, 1 Milk, 2 Soy".
    Condiments keep the order in which they were first seen. A description
    without any condiment is reported as invalid.
    """

    def description(self) -> str:
        items = self._beverage.description().split(",")
        if len(items) == 1:
            return INVALID_DESCRIPTION

        product_name = items[0].strip()
        counts: dict[str, int] = {}
        for item in items[1:]:
            condiment = item.strip()
            if not condiment:
                continue
            counts[condiment] = counts.get(condiment, 0) + 1

        parts = [product_name]
        for condiment, count in counts.items():
            parts.append(f"{count} {condiment}")
        return ", ".join(parts)

    def cost(self) -> float:
        return self._beverage.cost()
