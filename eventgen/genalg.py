"""The generation algorithm: signal, pile-up, smearing and merging."""

from __future__ import annotations

from eventgen.event import GenEvent, HepMCProvider, MergeTool, PileUpTool, VertexSmearer
from eventgen.guns import MomentumRangeParticleGun
from eventgen.merge import HepMCSimpleMerge
from eventgen.pileup import ConstPileUp
from eventgen.smearing import FlatSmearVertex

_DEFAULT = object()


class GenAlg:
    """Builds one event from a signal provider and pile-up interactions.

    A provider left at its default is a momentum-range particle gun;
    passing ``None`` switches that provider off.
    """

    def __init__(
        self,
        signal_provider: HepMCProvider | None | object = _DEFAULT,
        pile_up_provider: HepMCProvider | None | object = _DEFAULT,
        pile_up_tool: PileUpTool | None = None,
        vertex_smearer: VertexSmearer | None = None,
        merge_tool: MergeTool | None = None,
    ) -> None:
        self.signal_provider: HepMCProvider | None = (
            MomentumRangeParticleGun() if signal_provider is _DEFAULT else signal_provider
        )
        self.pile_up_provider: HepMCProvider | None = (
            MomentumRangeParticleGun() if pile_up_provider is _DEFAULT else pile_up_provider
        )
        self.pile_up_tool = pile_up_tool if pile_up_tool is not None else ConstPileUp()
        self.vertex_smearer = vertex_smearer if vertex_smearer is not None else FlatSmearVertex()
        self.merge_tool = merge_tool if merge_tool is not None else HepMCSimpleMerge()

    def execute(self) -> GenEvent:
        """Generate and return the merged event of this round."""
        event = GenEvent(momentum_unit="GEV", length_unit="MM")
        num_pile_up = self.pile_up_tool.number_of_pile_up()
        if self.signal_provider is not None:
            self.signal_provider.get_next_event(event)
        self.vertex_smearer.smear_vertex(event)
        pile_up_events: list[GenEvent] = []
        if self.pile_up_provider is not None:
            for _ in range(num_pile_up):
                pile_up = GenEvent()
                self.pile_up_provider.get_next_event(pile_up)
                self.vertex_smearer.smear_vertex(pile_up)
                pile_up_events.append(pile_up)
        self.merge_tool.merge(event, pile_up_events)
        return event