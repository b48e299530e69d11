"""Event record types, units and the interfaces of the generation tools."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

# Internal unit system: lengths in mm, times in ns, energies in MeV.
MM = 1.0
NS = 1.0
MEV = 1.0
GEV = 1000.0 * MEV
RAD = 1.0
TWOPI = 2.0 * math.pi
C_LIGHT = 299.792458 * MM / NS


@dataclass(frozen=True)
class FourVector:
    """A Lorentz four-vector; (x, y, z, t) doubles as (px, py, pz, e)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0

    @property
    def px(self) -> float:
        return self.x

    @property
    def py(self) -> float:
        return self.y

    @property
    def pz(self) -> float:
        return self.z

    @property
    def e(self) -> float:
        return self.t

    def __add__(self, other: FourVector) -> FourVector:
        if not isinstance(other, FourVector):
            return NotImplemented
        return FourVector(self.x + other.x, self.y + other.y, self.z + other.z, self.t + other.t)

    def __sub__(self, other: FourVector) -> FourVector:
        if not isinstance(other, FourVector):
            return NotImplemented
        return FourVector(self.x - other.x, self.y - other.y, self.z - other.z, self.t - other.t)

    def __mul__(self, factor: float) -> FourVector:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return FourVector(self.x * factor, self.y * factor, self.z * factor, self.t * factor)

    __rmul__ = __mul__

    def perp(self) -> float:
        """Transverse component."""
        return math.hypot(self.x, self.y)

    def p2(self) -> float:
        """Squared length of the spatial part."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def eta(self) -> float:
        """Pseudorapidity; infinite along the beam axis, zero for a null vector."""
        perp = self.perp()
        if perp == 0.0:
            if self.z == 0.0:
                return 0.0
            return math.copysign(math.inf, self.z)
        return math.asinh(self.z / perp)

    def m(self) -> float:
        """Invariant mass; negative for space-like vectors."""
        m2 = self.t * self.t - self.p2()
        return -math.sqrt(-m2) if m2 < 0.0 else math.sqrt(m2)


@dataclass(eq=False)
class GenParticle:
    """A particle of a generator event."""

    momentum: FourVector
    pdg_id: int = 0
    status: int = 0
    spin: tuple[float, float, float] | None = None
    id: int = field(default=0, init=False)
    production_vertex: GenVertex | None = field(default=None, init=False, repr=False)
    end_vertex: GenVertex | None = field(default=None, init=False, repr=False)
    _event: GenEvent | None = field(default=None, init=False, repr=False)


@dataclass(eq=False)
class GenVertex:
    """A vertex joining incoming and outgoing particles."""

    position: FourVector = field(default_factory=FourVector)
    particles_in: list[GenParticle] = field(default_factory=list, init=False, repr=False)
    particles_out: list[GenParticle] = field(default_factory=list, init=False, repr=False)
    id: int = field(default=0, init=False)
    _event: GenEvent | None = field(default=None, init=False, repr=False)

    def add_particle_in(self, particle: GenParticle) -> None:
        """Attach a particle that ends in this vertex."""
        old = particle.end_vertex
        if old is self:
            return
        if old is not None:
            old.particles_in.remove(particle)
        particle.end_vertex = self
        self.particles_in.append(particle)
        if self._event is not None:
            self._event._register(particle)

    def add_particle_out(self, particle: GenParticle) -> None:
        """Attach a particle produced in this vertex."""
        old = particle.production_vertex
        if old is self:
            return
        if old is not None:
            old.particles_out.remove(particle)
        particle.production_vertex = self
        self.particles_out.append(particle)
        if self._event is not None:
            self._event._register(particle)


@dataclass(eq=False)
class GenEvent:
    """A generator event: vertices and the particles attached to them."""

    momentum_unit: str = "GEV"
    length_unit: str = "MM"
    vertices: list[GenVertex] = field(default_factory=list, init=False, repr=False)
    _particles: list[GenParticle] = field(default_factory=list, init=False, repr=False)

    def add_vertex(self, vertex: GenVertex) -> None:
        """Add a vertex and every particle attached to it."""
        if vertex._event is self:
            return
        if vertex._event is not None:
            raise ValueError("vertex already belongs to another event")
        vertex._event = self
        self.vertices.append(vertex)
        vertex.id = -len(self.vertices)
        for particle in (*vertex.particles_in, *vertex.particles_out):
            self._register(particle)

    def _register(self, particle: GenParticle) -> None:
        if particle._event is self:
            return
        if particle._event is not None:
            raise ValueError("particle already belongs to another event")
        particle._event = self
        self._particles.append(particle)
        particle.id = len(self._particles)

    def particles(self) -> list[GenParticle]:
        """The particles of the event, in the order they were added."""
        return list(self._particles)


@dataclass(eq=False)
class MCParticle:
    """A Monte Carlo particle of the flat particle collection."""

    pdg: int = 0
    generator_status: int = 0
    charge: float = 0.0
    momentum: tuple[float, float, float] = (0.0, 0.0, 0.0)
    mass: float = 0.0
    vertex: tuple[float, float, float] = (0.0, 0.0, 0.0)
    time: float = 0.0
    spin: tuple[float, float, float] = (0.0, 0.0, 0.0)
    parents: list[MCParticle] = field(default_factory=list, repr=False)
    daughters: list[MCParticle] = field(default_factory=list, repr=False)

    def energy(self) -> float:
        """Energy from momentum and mass."""
        return math.sqrt(sum(c * c for c in self.momentum) + self.mass * self.mass)


class HepMCProvider(ABC):
    """Something that fills generator events."""

    @abstractmethod
    def get_next_event(self, event: GenEvent) -> None:
        """Fill ``event`` with the next generated event; raise on failure."""


class VertexSmearer(ABC):
    """Shifts the vertices of an interaction."""

    @abstractmethod
    def smear_vertex(self, event: GenEvent) -> FourVector:
        """Shift every vertex of ``event`` and return the applied offset."""


class PileUpTool(ABC):
    """Decides how many pile-up interactions accompany an event."""

    @abstractmethod
    def number_of_pile_up(self) -> int:
        """Number of pile-up interactions for the next event."""

    @abstractmethod
    def mean_pile_up(self) -> float:
        """Mean number of pile-up interactions."""

    @abstractmethod
    def print_counters(self) -> str:
        """Log and return the current counter state."""


class MergeTool(ABC):
    """Merges pile-up events into a signal event."""

    @abstractmethod
    def merge(self, signal_event: GenEvent, events: Sequence[GenEvent]) -> None:
        """Add the content of ``events`` to ``signal_event``."""