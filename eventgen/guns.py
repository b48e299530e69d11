"""Particle guns that shoot one particle per event."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field

from eventgen.event import (
    GEV,
    MEV,
    RAD,
    TWOPI,
    FourVector,
    GenEvent,
    GenParticle,
    GenVertex,
    HepMCProvider,
)

logger = logging.getLogger(__name__)

# Conversion from internal momentum units (MeV) to event record units (GeV).
HEPMC_MOMENTUM_CONVERSION = 0.001

FINAL_STATE_STATUS = 1

# Nominal masses in MeV, keyed by absolute PDG code.
_NOMINAL_MASSES: Mapping[int, float] = {
    11: 0.51099895 * MEV,
    12: 0.0,
    13: 105.6583755 * MEV,
    14: 0.0,
    15: 1776.86 * MEV,
    16: 0.0,
    22: 0.0,
    23: 91187.6 * MEV,
    24: 80377.0 * MEV,
    111: 134.9768 * MEV,
    130: 497.611 * MEV,
    211: 139.57039 * MEV,
    310: 497.611 * MEV,
    321: 493.677 * MEV,
    2112: 939.56542052 * MEV,
    2212: 938.27208816 * MEV,
}


def nominal_mass(pdg_id: int) -> float:
    """Nominal mass in MeV of a particle; zero for codes that are not known."""
    return _NOMINAL_MASSES.get(abs(pdg_id), 0.0)


@dataclass(frozen=True)
class GunShot:
    """One particle produced by a gun."""

    momentum: FourVector
    origin: FourVector = field(default_factory=FourVector)
    pdg_id: int = 0


def _fill_event(event: GenEvent, shot: GunShot) -> None:
    vertex = GenVertex(shot.origin)
    particle = GenParticle(shot.momentum * HEPMC_MOMENTUM_CONVERSION, shot.pdg_id, FINAL_STATE_STATUS)
    vertex.add_particle_out(particle)
    event.add_vertex(vertex)


class _ParticleGun(HepMCProvider):
    """Shared handling of particle species and masses."""

    def __init__(
        self,
        pdg_codes: Sequence[int],
        rng: random.Random | None,
        mass_of: Callable[[int], float] | None,
    ) -> None:
        if not pdg_codes:
            raise ValueError("at least one PDG code is required")
        self.pdg_codes = tuple(int(code) for code in pdg_codes)
        self._rng = rng if rng is not None else random.Random()
        lookup = mass_of if mass_of is not None else nominal_mass
        self.masses = tuple(lookup(code) for code in self.pdg_codes)
        logger.info("Particle type chosen randomly from : %s", " ".join(map(str, self.pdg_codes)))

    def _flat(self) -> float:
        return self._rng.random()

    def _shoot(self, px: float, py: float, pz: float) -> GunShot:
        index = int(len(self.pdg_codes) * self._flat())
        if index >= len(self.pdg_codes):
            index = 0
        mass = self.masses[index]
        energy = math.sqrt(mass * mass + px * px + py * py + pz * pz)
        shot = GunShot(FourVector(px, py, pz, energy), FourVector(), self.pdg_codes[index])
        logger.debug(" -> %d   P   = %s", shot.pdg_id, shot.momentum)
        return shot

    def generate_particle(self) -> GunShot:
        raise NotImplementedError

    def get_next_event(self, event: GenEvent) -> None:
        """Add a vertex at the origin holding one final-state particle."""
        _fill_event(event, self.generate_particle())


class MomentumRangeParticleGun(_ParticleGun):
    """Shoots particles flat in momentum, polar angle and azimuth."""

    def __init__(
        self,
        momentum_min: float = 100.0 * GEV,
        momentum_max: float = 100.0 * GEV,
        theta_min: float = 0.1 * RAD,
        theta_max: float = 0.4 * RAD,
        phi_min: float = 0.0 * RAD,
        phi_max: float = TWOPI * RAD,
        pdg_codes: Sequence[int] = (-211,),
        rng: random.Random | None = None,
        mass_of: Callable[[int], float] | None = None,
    ) -> None:
        if momentum_min > momentum_max or theta_min > theta_max or phi_min > phi_max:
            raise ValueError("Incorrect values for momentum, theta or phi!")
        super().__init__(pdg_codes, rng, mass_of)
        self.momentum_min, self.momentum_max = momentum_min, momentum_max
        self.theta_min, self.theta_max = theta_min, theta_max
        self.phi_min, self.phi_max = phi_min, phi_max
        logger.info("Momentum range: %g GeV <-> %g GeV", momentum_min / GEV, momentum_max / GEV)
        logger.info("Theta range: %g rad <-> %g rad", theta_min / RAD, theta_max / RAD)
        logger.info("Phi range: %g rad <-> %g rad", phi_min / RAD, phi_max / RAD)

    def generate_particle(self) -> GunShot:
        """Draw momentum, theta, phi and species of one particle."""
        p = self.momentum_min + self._flat() * (self.momentum_max - self.momentum_min)
        theta = self.theta_min + self._flat() * (self.theta_max - self.theta_min)
        phi = self.phi_min + self._flat() * (self.phi_max - self.phi_min)
        pt = p * math.sin(theta)
        return self._shoot(pt * math.cos(phi), pt * math.sin(phi), p * math.cos(theta))

    def get_next_event(self, event: GenEvent) -> None:
        super().get_next_event(event)


class ConstPtParticleGun(_ParticleGun):
    """Shoots particles at given transverse momenta and pseudorapidities.

    Values come from ``pt_list`` and ``eta_list`` when given; otherwise they
    are drawn flat between the minimum and maximum.
    """

    def __init__(
        self,
        pt_list: Sequence[float] = (),
        eta_list: Sequence[float] = (),
        pt_min: float = 1.0 * GEV,
        pt_max: float = 100.0 * GEV,
        log_spaced_pt: bool = False,
        eta_min: float = -3.5,
        eta_max: float = 3.5,
        phi_min: float = 0.0 * RAD,
        phi_max: float = TWOPI * RAD,
        pdg_codes: Sequence[int] = (-211,),
        write_branches: bool = True,
        rng: random.Random | None = None,
        mass_of: Callable[[int], float] | None = None,
    ) -> None:
        if eta_min > eta_max or phi_min > phi_max:
            raise ValueError("Incorrect values for eta or phi!")
        if log_spaced_pt and (pt_min <= 0.0 or pt_max <= 0.0):
            raise ValueError("log-spaced transverse momenta need positive limits")
        super().__init__(pdg_codes, rng, mass_of)
        self.pt_list = tuple(pt_list)
        self.eta_list = tuple(eta_list)
        self.pt_min, self.pt_max = pt_min, pt_max
        self.log_spaced_pt = log_spaced_pt
        self.eta_min, self.eta_max = eta_min, eta_max
        self.phi_min, self.phi_max = phi_min, phi_max
        self.write_branches = write_branches
        self.branches: dict[str, float] = {}
        logger.info("Eta range: %g  <-> %g", eta_min, eta_max)
        logger.info("Phi range: %g rad <-> %g rad", phi_min / RAD, phi_max / RAD)

    def _pick(self, values: tuple[float, ...]) -> float:
        return values[min(int(self._flat() * len(values)), len(values) - 1)]

    def generate_particle(self) -> GunShot:
        """Draw phi, eta, pt and species of one particle."""
        phi = self.phi_min + self._flat() * (self.phi_max - self.phi_min)
        eta = self.eta_min + self._flat() * (self.eta_max - self.eta_min)
        pt = self.pt_min + self._flat() * (self.pt_max - self.pt_min)
        if self.log_spaced_pt:
            low, high = math.log10(self.pt_min), math.log10(self.pt_max)
            pt = 10.0 ** (low + (high - low) * self._flat())
        if self.pt_list:
            pt = self._pick(self.pt_list)
        if self.eta_list:
            eta = self._pick(self.eta_list)
        shot = self._shoot(pt * math.cos(phi), pt * math.sin(phi), pt * math.sinh(eta))
        if self.write_branches:
            self.branches = {
                "ParticleGun_Pt": pt * HEPMC_MOMENTUM_CONVERSION,
                "ParticleGun_Eta": eta,
                "ParticleGun_costheta": math.cos(2.0 * math.atan(math.exp(eta))),
                "ParticleGun_Phi": phi,
            }
        return shot

    def get_next_event(self, event: GenEvent) -> None:
        super().get_next_event(event)