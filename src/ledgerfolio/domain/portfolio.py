"""Portfolio of investment holdings."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterator, Optional, Protocol

from loguru import logger

from ledgerfolio.domain.entities import Holding, InvestmentKind

MIN_PRICE = Decimal("0.01")
MAX_MOVE = Decimal("0.05")


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)."""

    def random(self) -> float: ...


class Portfolio:
    """Ordered collection of holdings with valuation analytics.

    Totals are always recomputed from the current holdings; nothing is cached.
    Symbols are not unique. Symbol-keyed operations act on the first match.
    """

    def __init__(self, name: str = "My Portfolio"):
        self.name = name
        self._holdings: list[Holding] = []

    def __iter__(self) -> Iterator[Holding]:
        return iter(self._holdings)

    def __len__(self) -> int:
        return len(self._holdings)

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return tuple(self._holdings)

    def add(self, holding: Holding) -> None:
        self._holdings.append(holding)

    def find_by_symbol(self, symbol: str) -> Optional[Holding]:
        """Return the first holding with ``symbol``, or None."""
        for holding in self._holdings:
            if holding.symbol == symbol:
                return holding
        return None

    def remove(self, symbol: str) -> bool:
        """Remove the first holding with ``symbol``.

        Returns:
            True if a holding was removed
        """
        for index, holding in enumerate(self._holdings):
            if holding.symbol == symbol:
                del self._holdings[index]
                return True
        return False

    def total_value(self) -> Decimal:
        return sum((h.current_value for h in self._holdings), Decimal(0))

    def total_initial_value(self) -> Decimal:
        return sum((h.initial_value for h in self._holdings), Decimal(0))

    def total_gain_loss(self) -> Decimal:
        return sum((h.gain_loss for h in self._holdings), Decimal(0))

    def total_gain_loss_pct(self) -> Decimal:
        """Total gain or loss as a percentage of total initial value.

        Returns 0 when the total initial value is 0.
        """
        initial = self.total_initial_value()
        if initial == 0:
            return Decimal(0)
        return self.total_gain_loss() / initial * 100

    def diversification(self) -> dict[InvestmentKind, Decimal]:
        """Share of total current value held in each investment kind.

        Returns:
            Dict of kind to percentage, ordered by kind. Empty for an empty
            portfolio; every kind maps to 0 when the total value is 0.
        """
        by_kind: dict[InvestmentKind, Decimal] = defaultdict(Decimal)
        for holding in self._holdings:
            by_kind[holding.kind] += holding.current_value

        total = self.total_value()
        if total == 0:
            return {kind: Decimal(0) for kind in sorted(by_kind)}
        return {kind: by_kind[kind] / total * 100 for kind in sorted(by_kind)}

    def simulate_market_move(self, rng: RandomSource) -> None:
        """Move every current price by a random amount in [-5%, +5%).

        One value is drawn from ``rng`` per holding. Prices never drop below
        0.01.
        """
        for holding in self._holdings:
            change = -MAX_MOVE + 2 * MAX_MOVE * Decimal(str(rng.random()))
            new_price = max(MIN_PRICE, holding.current_price * (1 + change))
            logger.debug(
                f"{holding.symbol}: {holding.current_price} -> {new_price} ({change:+.4%})"
            )
            holding.set_current_price(new_price)
