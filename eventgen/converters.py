"""Conversion between generator events and flat particle collections."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from eventgen.event import C_LIGHT, FourVector, GenEvent, GenParticle, GenVertex, MCParticle

logger = logging.getLogger(__name__)

FINAL_STATE_STATUS = 1

# Charges in units of e/3.
_QUARK_THREE_CHARGE = {1: -1, 2: 2, 3: -1, 4: 2, 5: -1, 6: 2, 7: -1, 8: 2}
_FUNDAMENTAL_THREE_CHARGE = {
    11: -3, 12: 0, 13: -3, 14: 0, 15: -3, 16: 0, 17: -3, 18: 0,
    21: 0, 22: 0, 23: 0, 24: 3, 25: 0, 37: 3,
}


def _pdg_charge(pdg_id: int) -> float:
    """Electric charge of a particle from its PDG code; zero where unknown."""
    code = abs(pdg_id)
    sign = -1 if pdg_id < 0 else 1
    if code >= 1_000_000_000:
        return float(sign * ((code // 10000) % 1000))
    if code in _QUARK_THREE_CHARGE:
        three = _QUARK_THREE_CHARGE[code]
    elif code in _FUNDAMENTAL_THREE_CHARGE:
        three = _FUNDAMENTAL_THREE_CHARGE[code]
    else:
        q1, q2, q3 = (code // 1000) % 10, (code // 100) % 10, (code // 10) % 10
        if q2 == 0 or q3 == 0:
            three = 0
        elif q1 == 0:
            first = _QUARK_THREE_CHARGE.get(q2, 0)
            second = _QUARK_THREE_CHARGE.get(q3, 0)
            # A down-type heavier quark is the antiquark of the meson.
            three = second - first if q2 % 2 else first - second
        else:
            three = sum(_QUARK_THREE_CHARGE.get(q, 0) for q in (q1, q2, q3))
    return sign * three / 3.0


def convert_particle(
    particle: GenParticle, charge_of: Callable[[int], float] | None = None
) -> MCParticle:
    """Convert one event particle, without its relations."""
    lookup = charge_of if charge_of is not None else _pdg_charge
    momentum = particle.momentum
    result = MCParticle(
        pdg=particle.pdg_id,
        generator_status=particle.status,
        charge=lookup(particle.pdg_id),
        momentum=(momentum.px, momentum.py, momentum.pz),
    )
    if particle.spin is not None:
        result.spin = tuple(particle.spin[:3])
    if particle.production_vertex is not None:
        position = particle.production_vertex.position
        result.vertex = (position.x, position.y, position.z)
    return result


def hepmc_to_edm(
    event: GenEvent, charge_of: Callable[[int], float] | None = None
) -> list[MCParticle]:
    """Convert every particle of ``event``, keeping mother and daughter links."""
    converted: dict[int, MCParticle] = {}

    def get(particle: GenParticle) -> MCParticle:
        result = converted.get(particle.id)
        if result is None:
            result = converted[particle.id] = convert_particle(particle, charge_of)
        return result

    for particle in event.particles():
        logger.debug("Converting particle with PDG id %d and id %d", particle.pdg_id, particle.id)
        current = get(particle)
        if particle.production_vertex is not None:
            for mother in particle.production_vertex.particles_in:
                current.parents.append(get(mother))
        if particle.end_vertex is not None:
            for daughter in particle.end_vertex.particles_out:
                current.daughters.append(get(daughter))
    return list(converted.values())


def edm_to_hepmc(particles: Iterable[MCParticle]) -> GenEvent:
    """Build an event holding the final-state particles, each at its own vertex.

    The fourth momentum component carries the particle mass.
    """
    event = GenEvent(momentum_unit="GEV", length_unit="MM")
    for particle in particles:
        if particle.generator_status != FINAL_STATE_STATUS:
            continue
        px, py, pz = particle.momentum
        gen_particle = GenParticle(
            FourVector(px, py, pz, particle.mass), particle.pdg, particle.generator_status
        )
        x, y, z = particle.vertex
        vertex = GenVertex(FourVector(x, y, z, particle.time / C_LIGHT))
        vertex.add_particle_out(gen_particle)
        event.add_vertex(vertex)
    return event