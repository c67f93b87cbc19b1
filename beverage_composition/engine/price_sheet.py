import logging

import pandas as pd

from beverage_composition.engine.beverage import Beverage, CupSize


schema = ["size", "description", "cost"]

class PriceSheet:
    def build(self, chain: Beverage) -> pd.DataFrame:
        original_size = chain.size
        rows = []
        try:
            for size in CupSize:
                chain.size = size
                rows.append([size.value, chain.description(), chain.cost()])
        finally:
            chain.size = original_size
        return pd.DataFrame(rows, columns=schema)

    def cheapest(self, chain: Beverage) -> str:
        df = self.build(chain)
        return df.loc[df['cost'].idxmin(), 'size']

    def log_sheet(self, chain: Beverage | None):
        if chain is None:
            logging.info("No beverage to price.")
            return
        df = self.build(chain)
        lines = ["Price sheet:"]
        for size, desc, price in df.values.tolist():
            lines.append(f"  - size={size:<6} cost={price:5.2f} -> {desc}")
        logging.info("\n" + "\n".join(lines))
