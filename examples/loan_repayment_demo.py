"""
Loan Repayment Demonstration

Cash sits in a wallet and a loan has to be repaid in another currency. Every
operation (swap, bridge, repay) charges a fee that depends on how much flows
through it, so the cheapest route depends on the amount. This script compares
the three optimizers on that problem.
"""

import logging
from dataclasses import dataclass

from category_paths import (
    Accumulating,
    Category,
    DeductiveLinearCost,
    Morphism,
    MorphismOutput,
    Negatable,
    NegatableInfallible,
    NonNegativeCost,
    NonNegativeSimpleMorphism,
    score,
)


@dataclass(frozen=True)
class Holding:
    id: str
    description: str


@dataclass(frozen=True)
class Swap(NonNegativeCost):
    """Convert at a fixed rate, charging a proportional fee in the source unit."""
    rate: float
    fee: float

    def apply(self, input_size):
        cost = input_size * self.fee
        return MorphismOutput(size=(input_size - cost) * self.rate, cost=cost)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def build_category():
    holdings = [
        Holding("usd", "Cash in the wallet"),
        Holding("usdc", "Stablecoin on exchange"),
        Holding("eur", "Euro account"),
        Holding("loan", "Outstanding loan (EUR)"),
    ]
    morphisms = [
        Morphism("usd", "usdc", NonNegativeSimpleMorphism("deposit", Swap(1.0, 0.001))),
        Morphism("usdc", "eur", NonNegativeSimpleMorphism("exchange", Swap(0.92, 0.002))),
        Morphism("usd", "eur", NonNegativeSimpleMorphism("bank wire", Swap(0.92, 0.01))),
        Morphism("eur", "loan", NonNegativeSimpleMorphism("repay", DeductiveLinearCost(0.0, 5.0))),
        Morphism("usd", "loan", NonNegativeSimpleMorphism("card", DeductiveLinearCost(0.03, 0.0))),
    ]
    return Category.of(holdings, morphisms)


def demonstrate_single_query(category):
    print_section("Cheapest repayment route")
    for amount in (100.0, 10_000.0):
        path = Accumulating().shortest_path(category, "usd", "loan", amount)
        print(f"\nStarting with {amount:,.2f} USD:")
        print(path.to_composite().pretty())


def demonstrate_strategies(category):
    print_section("Strategies compared")
    for optimizer in (Accumulating(), Negatable(), NegatableInfallible()):
        path = optimizer.shortest_path(category, "usd", "loan", 10_000.0)
        print(f"{type(optimizer).__name__:>20}: {path}")


def demonstrate_ranking(category):
    print_section("Ranking by cost per unit of input")
    sources = [("usd", 100.0), ("usd", 10_000.0), ("usdc", 5_000.0)]
    targets = ["loan", "loan", "loan"]
    for path in Accumulating().ranked_paths(category, sources, targets, score.cost_per_input):
        print(f"{path.cost:.4f} per unit from {path.source.size:,.2f} of {path.source.object_id}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s %(message)s")
    category = build_category()
    demonstrate_single_query(category)
    demonstrate_strategies(category)
    demonstrate_ranking(category)
    print("\n✓ Demo complete")


if __name__ == "__main__":
    main()
