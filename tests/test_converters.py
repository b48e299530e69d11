import pytest

from eventgen.converters import convert_particle, edm_to_hepmc, hepmc_to_edm
from eventgen.event import C_LIGHT, FourVector, GenEvent, GenParticle, GenVertex, MCParticle


def _decay_event():
    event = GenEvent()
    vertex = GenVertex(FourVector(1.0, 2.0, 3.0, 4.0))
    mother = GenParticle(FourVector(0.0, 0.0, 10.0, 91.0), 23, 2)
    first = GenParticle(FourVector(1.0, 2.0, 3.0, 4.0), 13, 1, spin=(0.5, 0.25, 0.125))
    second = GenParticle(FourVector(-1.0, -2.0, 7.0, 8.0), -13, 1)
    vertex.add_particle_in(mother)
    vertex.add_particle_out(first)
    vertex.add_particle_out(second)
    event.add_vertex(vertex)
    return event, mother, first, second


def test_convert_particle_fields():
    _, _, first, _ = _decay_event()
    result = convert_particle(first, lambda pdg: 7.0)
    assert result.pdg == 13
    assert result.generator_status == 1
    assert result.charge == 7.0
    assert result.momentum == (1.0, 2.0, 3.0)
    assert result.vertex == (1.0, 2.0, 3.0)
    assert result.spin == (0.5, 0.25, 0.125)


def test_convert_particle_without_vertex_keeps_origin():
    particle = GenParticle(FourVector(1.0, 1.0, 1.0, 2.0), 22, 1)
    result = convert_particle(particle, None)
    assert result.vertex == (0.0, 0.0, 0.0)
    assert result.spin == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("pdg", [11, 13, 211, 321, 411, 521, 2212, 3122, 24])
def test_default_charge_is_odd_under_antiparticle(pdg):
    particle = GenParticle(FourVector(), pdg, 1)
    anti = GenParticle(FourVector(), -pdg, 1)
    assert convert_particle(anti).charge == -convert_particle(particle).charge


def test_default_charges_of_known_particles():
    charges = {
        pdg: convert_particle(GenParticle(FourVector(), pdg, 1)).charge
        for pdg in (2212, 11, 321, 22, 111)
    }
    assert charges[2212] == pytest.approx(1.0)
    assert charges[11] == pytest.approx(-1.0)
    assert charges[321] == pytest.approx(1.0)
    assert charges[22] == 0.0
    assert charges[111] == 0.0


def test_hepmc_to_edm_links():
    event, _, _, _ = _decay_event()
    particles = hepmc_to_edm(event, lambda pdg: 0.0)
    assert len(particles) == 3
    by_pdg = {p.pdg: p for p in particles}
    mother = by_pdg[23]
    assert {d.pdg for d in mother.daughters} == {13, -13}
    assert by_pdg[13].parents == [mother]
    assert by_pdg[-13].parents == [mother]
    assert mother.parents == []


def test_edm_to_hepmc_keeps_final_state_only():
    particles = [
        MCParticle(pdg=11, generator_status=1, momentum=(1.0, 2.0, 3.0), mass=0.5,
                   vertex=(4.0, 5.0, 6.0), time=3.0 * C_LIGHT),
        MCParticle(pdg=23, generator_status=2),
    ]
    event = edm_to_hepmc(particles)
    assert event.momentum_unit == "GEV"
    assert event.length_unit == "MM"
    (particle,) = event.particles()
    assert particle.pdg_id == 11
    assert particle.momentum == FourVector(1.0, 2.0, 3.0, 0.5)
    (vertex,) = event.vertices
    assert vertex.position.t == pytest.approx(3.0)
    assert (vertex.position.x, vertex.position.y, vertex.position.z) == (4.0, 5.0, 6.0)
    assert particle.production_vertex is vertex


def test_round_trip():
    originals = [
        MCParticle(pdg=211, generator_status=1, momentum=(1.5, -2.5, 3.5), vertex=(0.1, 0.2, 0.3)),
        MCParticle(pdg=-211, generator_status=1, momentum=(-1.0, 0.0, 2.0), vertex=(1.0, 1.0, 1.0)),
    ]
    back = hepmc_to_edm(edm_to_hepmc(originals), lambda pdg: 0.0)
    assert [(p.pdg, p.generator_status, p.momentum, p.vertex) for p in back] == [
        (p.pdg, p.generator_status, p.momentum, p.vertex) for p in originals
    ]


def test_empty_inputs():
    assert hepmc_to_edm(GenEvent()) == []
    assert edm_to_hepmc([]).particles() == []