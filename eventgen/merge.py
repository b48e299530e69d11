"""Tools that merge pile-up events into a signal event."""

from __future__ import annotations

from collections.abc import Sequence

from eventgen.event import GenEvent, GenParticle, GenVertex, MergeTool

FINAL_STATE_STATUS = 1


def _copy_particle(particle: GenParticle) -> GenParticle:
    return GenParticle(particle.momentum, particle.pdg_id, particle.status, particle.spin)


class HepMCSimpleMerge(MergeTool):
    """Adds only the final-state particles of pile-up events to the signal event.

    Each kept particle is attached to a new vertex at the position of its
    original production vertex.
    """

    def merge(self, signal_event: GenEvent, events: Sequence[GenEvent]) -> None:
        for event in events:
            merged: dict[GenVertex, GenVertex] = {}
            for particle in event.particles():
                if particle.end_vertex is not None or particle.status != FINAL_STATE_STATUS:
                    continue
                source = particle.production_vertex
                if source is None:
                    vertex = GenVertex()
                else:
                    vertex = merged.get(source)
                    if vertex is None:
                        vertex = merged[source] = GenVertex(source.position)
                vertex.add_particle_out(_copy_particle(particle))
                signal_event.add_vertex(vertex)


class HepMCFullMerge(MergeTool):
    """Adds every vertex and particle of the pile-up events to the signal event."""

    def merge(self, signal_event: GenEvent, events: Sequence[GenEvent]) -> None:
        for event in events:
            merged: dict[GenVertex, GenVertex] = {}
            for vertex in event.vertices:
                copy = GenVertex(vertex.position)
                merged[vertex] = copy
                signal_event.add_vertex(copy)
            for particle in event.particles():
                copy = _copy_particle(particle)
                if particle.end_vertex is not None:
                    merged[particle.end_vertex].add_particle_in(copy)
                if particle.production_vertex is not None:
                    merged[particle.production_vertex].add_particle_out(copy)