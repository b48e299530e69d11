"""Veto of hard processes whose resonance decays lack requested daughters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcessEntry:
    """One entry of a hard-process record: PDG code and index of the first mother."""

    id: int
    mother1: int = 0


@dataclass
class ResonanceDecayFilter:
    """Vetoes events whose decay products do not match the requested daughters.

    In inclusive mode at least as many of each requested daughter must be
    present; in exclusive mode exactly as many. Particle types that are not
    requested are ignored. If ``mothers`` is empty, every particle of the
    process counts; otherwise only those whose first mother is listed.
    """

    filter_enabled: bool = False
    exclusive: bool = False
    e_mu_as_equivalent: bool = False
    e_mu_tau_as_equivalent: bool = False
    all_nu_as_equivalent: bool = False
    udsc_as_equivalent: bool = False
    udscb_as_equivalent: bool = False
    wz_as_equivalent: bool = False
    mothers: Iterable[int] = field(default_factory=frozenset)
    daughters: Sequence[int] = ()

    def __post_init__(self) -> None:
        self.mothers = frozenset(int(m) for m in self.mothers)
        self.daughters = tuple(int(d) for d in self.daughters)

    def _canonical(self, pdg_id: int) -> int:
        did = abs(pdg_id)
        if did == 13 and (self.e_mu_as_equivalent or self.e_mu_tau_as_equivalent):
            did = 11
        if did == 15 and self.e_mu_tau_as_equivalent:
            did = 11
        if did in (14, 16) and self.all_nu_as_equivalent:
            did = 12
        if did in (2, 3, 4) and self.udsc_as_equivalent:
            did = 1
        if did in (2, 3, 4, 5) and self.udscb_as_equivalent:
            did = 1
        if did in (23, 24) and self.wz_as_equivalent:
            did = 23
        return did

    def requested_daughters(self) -> dict[int, int]:
        """Requested count of each daughter class, ordered by code."""
        counts = Counter(self._canonical(d) for d in self.daughters)
        return dict(sorted(counts.items()))

    def _counts(self, entry: ProcessEntry, process: Sequence[ProcessEntry]) -> bool:
        if not self.mothers:
            return True
        mid = abs(process[entry.mother1].id) if entry.mother1 > 0 else 0
        return mid in self.mothers or -mid in self.mothers

    def check_veto(self, process: Sequence[ProcessEntry]) -> bool:
        """True if the process must be vetoed."""
        if not self.filter_enabled:
            return False
        observed = Counter(
            self._canonical(entry.id) for entry in process if self._counts(entry, process)
        )
        for pdg, requested in self.requested_daughters().items():
            found = observed.get(pdg, 0)
            if found < requested:
                return True
            if self.exclusive and found > requested:
                return True
        return False