import math
import random

import pytest

from eventgen.event import GenEvent, HepMCProvider
from eventgen.genalg import GenAlg
from eventgen.guns import MomentumRangeParticleGun
from eventgen.merge import HepMCFullMerge
from eventgen.pileup import ConstPileUp, RangePileUp
from eventgen.smearing import FlatSmearVertex


class _FailingProvider(HepMCProvider):
    def get_next_event(self, event: GenEvent) -> None:
        raise RuntimeError("Reached end of file before finished processing")


def _gun(seed):
    return MomentumRangeParticleGun(rng=random.Random(seed))


def test_default_algorithm_produces_one_particle():
    event = GenAlg().execute()
    particles = event.particles()
    assert len(particles) == 1
    assert particles[0].pdg_id == -211
    assert particles[0].status == 1
    assert (event.momentum_unit, event.length_unit) == ("GEV", "MM")


def test_signal_momentum_in_event_units():
    event = GenAlg(signal_provider=_gun(1)).execute()
    assert math.sqrt(event.particles()[0].momentum.p2()) == pytest.approx(100.0)


def test_pileup_events_are_merged():
    alg = GenAlg(signal_provider=_gun(1), pile_up_provider=_gun(2), pile_up_tool=ConstPileUp(3))
    event = alg.execute()
    assert len(event.particles()) == 4
    assert all(p.status == 1 for p in event.particles())


def test_without_pileup_provider_only_signal():
    alg = GenAlg(signal_provider=_gun(1), pile_up_provider=None, pile_up_tool=ConstPileUp(3))
    assert len(alg.execute().particles()) == 1


def test_without_signal_provider_only_pileup():
    alg = GenAlg(signal_provider=None, pile_up_provider=_gun(2), pile_up_tool=ConstPileUp(2))
    assert len(alg.execute().particles()) == 2


def test_pileup_count_follows_tool_each_event():
    alg = GenAlg(signal_provider=_gun(1), pile_up_provider=_gun(2), pile_up_tool=RangePileUp((1, 2)))
    assert len(alg.execute().particles()) == 2
    assert len(alg.execute().particles()) == 3
    assert len(alg.execute().particles()) == 2


def test_smearing_applies_to_signal_and_pileup():
    smearer = FlatSmearVertex(x_min=1.5, x_max=1.5, beam_direction=0)
    alg = GenAlg(
        signal_provider=_gun(1),
        pile_up_provider=_gun(2),
        pile_up_tool=ConstPileUp(2),
        vertex_smearer=smearer,
    )
    event = alg.execute()
    assert [v.position.x for v in event.vertices] == [1.5] * len(event.vertices)
    assert all(p.production_vertex.position.x == 1.5 for p in event.particles())


def test_custom_merge_tool_is_used():
    alg = GenAlg(
        signal_provider=_gun(1),
        pile_up_provider=_gun(2),
        pile_up_tool=ConstPileUp(2),
        merge_tool=HepMCFullMerge(),
    )
    event = alg.execute()
    assert len(event.vertices) == 3
    assert len(event.particles()) == 3


def test_signal_failure_propagates():
    alg = GenAlg(signal_provider=_FailingProvider(), pile_up_provider=None)
    with pytest.raises(RuntimeError, match="end of file"):
        alg.execute()


def test_pileup_failure_propagates():
    alg = GenAlg(signal_provider=_gun(1), pile_up_provider=_FailingProvider(), pile_up_tool=ConstPileUp(1))
    with pytest.raises(RuntimeError):
        alg.execute()


def test_failing_pileup_not_called_when_no_pileup():
    alg = GenAlg(signal_provider=_gun(1), pile_up_provider=_FailingProvider(), pile_up_tool=ConstPileUp(0))
    assert len(alg.execute().particles()) == 1