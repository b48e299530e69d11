"""Control histograms of generated events."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from eventgen.event import GenEvent

logger = logging.getLogger(__name__)


@dataclass
class Histogram1D:
    """Fixed-width one-dimensional histogram with under- and overflow."""

    name: str
    title: str
    bins: int
    low: float
    high: float
    counts: list[int] = field(init=False)
    underflow: int = field(default=0, init=False)
    overflow: int = field(default=0, init=False)
    entries: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.bins <= 0:
            raise ValueError("number of bins must be positive")
        if not self.low < self.high:
            raise ValueError("lower edge must be below upper edge")
        self.counts = [0] * self.bins

    def find_bin(self, value: float) -> int | None:
        """Index of the bin holding ``value``; None outside the range."""
        if value < self.low or not value < self.high:
            return None
        index = int(self.bins * (value - self.low) / (self.high - self.low))
        return min(index, self.bins - 1)

    def fill(self, value: float) -> int | None:
        """Count ``value`` and return the bin it went into, None for under/overflow."""
        self.entries += 1
        index = self.find_bin(value)
        if index is not None:
            self.counts[index] += 1
        elif value < self.low:
            self.underflow += 1
        else:
            self.overflow += 1
        return index


class HepMCHistograms:
    """Histograms of particle pT and pseudorapidity and of vertex positions."""

    def __init__(self) -> None:
        self.pt = Histogram1D("GenPt", "Generated particles pT", 100, 0.1, 10.0)
        self.eta = Histogram1D("GenEta", "Generated particles Pseudorapidity", 100, -10.0, 10.0)
        self.d0 = Histogram1D("GenD0", "Transversal Impact Parameter", 100, 0.0, 10.0)
        self.z0 = Histogram1D("GenZ0", "Longitudinal Impact Parameter", 100, -30.0, 30.0)

    @property
    def histograms(self) -> dict[str, Histogram1D]:
        """The histograms keyed by their registration path."""
        return {f"/rec/{h.name}": h for h in (self.pt, self.eta, self.d0, self.z0)}

    def fill_event(self, event: GenEvent) -> int:
        """Fill all histograms from ``event``; return its particle count."""
        particles = event.particles()
        logger.info("Processing event with %d particles", len(particles))
        for particle in particles:
            self.eta.fill(particle.momentum.eta())
            self.pt.fill(particle.momentum.perp())
        for vertex in event.vertices:
            self.d0.fill(vertex.position.perp())
            self.z0.fill(vertex.position.z)
        return len(particles)