"""Selection of particles by generator status."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from eventgen.event import MCParticle


def _clone(particle: MCParticle) -> MCParticle:
    return dataclasses.replace(
        particle, parents=list(particle.parents), daughters=list(particle.daughters)
    )


def filter_particles(particles: Iterable[MCParticle], accept: Iterable[int] = (1,)) -> list[MCParticle]:
    """Return copies of the particles whose generator status is accepted."""
    accepted = frozenset(accept)
    return [_clone(p) for p in particles if p.generator_status in accepted]