"""Tools that choose the number of pile-up interactions per event."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from eventgen.event import PileUpTool

logger = logging.getLogger(__name__)


class ConstPileUp(PileUpTool):
    """A constant number of pile-up interactions."""

    def __init__(self, num_pile_up_events: int = 0) -> None:
        if num_pile_up_events < 0:
            raise ValueError("number of pile-up events cannot be negative")
        self.num_pile_up_events = int(num_pile_up_events)
        self.print_counters()

    def number_of_pile_up(self) -> int:
        return self.num_pile_up_events

    def mean_pile_up(self) -> float:
        return float(self.num_pile_up_events)

    def print_counters(self) -> str:
        message = f"Current number of pileup events: {self.num_pile_up_events}"
        logger.info(message)
        return message


class PoissonPileUp(PileUpTool):
    """A Poisson-distributed number of pile-up interactions."""

    def __init__(self, mean_pile_up_events: float = 0.0, rng: random.Random | None = None) -> None:
        if mean_pile_up_events < 0:
            raise ValueError("Number of Pileup events cannot be negative!")
        self.mean_pile_up_events = float(mean_pile_up_events)
        self._rng = rng if rng is not None else random.Random()
        self.current = self._draw()
        self.print_counters()

    def _draw(self) -> int:
        # Count arrivals of a unit-rate Poisson process within the mean.
        count = 0
        elapsed = self._rng.expovariate(1.0)
        while elapsed < self.mean_pile_up_events:
            count += 1
            elapsed += self._rng.expovariate(1.0)
        return count

    def number_of_pile_up(self) -> int:
        self.current = self._draw()
        return self.current

    def mean_pile_up(self) -> float:
        return self.mean_pile_up_events

    def print_counters(self) -> str:
        message = f"Current number of pileup events:  {self.current}"
        logger.info(message)
        return message


class RangePileUp(PileUpTool):
    """Cycles through a fixed list of pile-up counts."""

    def __init__(self, pile_up_range: Sequence[int] = (0,)) -> None:
        if not pile_up_range:
            raise ValueError("pile-up range must not be empty")
        if any(n < 0 for n in pile_up_range):
            raise ValueError("number of pile-up events cannot be negative")
        self.pile_up_range = tuple(int(n) for n in pile_up_range)
        self._index = 0
        self.current = 0

    def number_of_pile_up(self) -> int:
        self.current = self.pile_up_range[self._index]
        self._index = (self._index + 1) % len(self.pile_up_range)
        return self.current

    def mean_pile_up(self) -> float:
        return float(self.current)

    def print_counters(self) -> str:
        message = f"Current number of pileup events:  {self.current}"
        logger.info(message)
        return message