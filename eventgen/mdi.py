"""Reader for machine-detector-interface background particle files."""

from __future__ import annotations

import logging
import math
from enum import Enum
from pathlib import Path
from types import TracebackType

from eventgen.event import MCParticle

logger = logging.getLogger(__name__)

ELECTRON_MASS = 5.11e-4
PHOTON_ORIGIN_Z = -2.13  # metres, fixed production plane of photon records
_M_TO_MM = 1e3
_NM_TO_M = 1e-9
_STATUS = 1


class MDIError(Exception):
    """Raised when an MDI file cannot be opened or read."""


class InputType(str, Enum):
    """Layouts of the supported MDI text formats."""

    GUINEAPIG = "guineapig"
    XTRACK = "xtrack"
    PHOTONS = "photons"
    GENERAL = "general"

    @property
    def field_count(self) -> int:
        return _FIELD_COUNTS[self]


_FIELD_COUNTS = {
    InputType.GUINEAPIG: 10,
    InputType.XTRACK: 7,
    InputType.PHOTONS: 7,
    InputType.GENERAL: 8,
}


def _rotate(z: float, x: float, angle: float) -> tuple[float, float]:
    """Rotate (z, x) by ``-angle`` into the detector frame."""
    c, s = math.cos(-angle), math.sin(-angle)
    return z * c + x * s, -z * s + x * c


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


class MDIReader:
    """Reads all particles of an MDI file as one event.

    ``crossing_angle`` is half the beam crossing angle in rad, ``cut_z`` the
    longitudinal cut in um and ``beam_energy`` the beam energy in GeV, used
    by the xtrack layout.
    """

    def __init__(
        self,
        filename: str | Path,
        input_type: str | InputType = InputType.GUINEAPIG,
        crossing_angle: float = 0.0,
        cut_z: float = 0.0,
        beam_energy: float = 0.0,
    ) -> None:
        try:
            self.input_type = InputType(input_type)
        except ValueError as exc:
            raise MDIError(f"Input type flag - wrong definition: {input_type}") from exc
        self.filename = str(filename)
        self.crossing_angle = crossing_angle
        self.cut_z = cut_z
        self.beam_energy = beam_energy
        logger.debug("Reading file: %s", self.filename)
        try:
            self._file = open(self.filename, encoding="ascii")
        except OSError as exc:
            raise MDIError(f"Failed to open input stream:{self.filename}") from exc
        self._eof = False

    def read_event(self) -> list[MCParticle]:
        """Read every complete record of the file; a trailing partial record is ignored."""
        if self._eof:
            raise MDIError("End of file reached")
        tokens = self._file.read().split()
        self._eof = True
        logger.debug("Selected input type : %s", self.input_type.value)
        logger.debug("The crossing angle is %g [rad]", self.crossing_angle)
        records = zip(*[iter(tokens)] * self.input_type.field_count)
        particles = [self._convert(list(record)) for record in records]
        for count, particle in enumerate(particles, start=1):
            logger.debug(
                "Read in particle (%d): PDG %d, charge %g, momentum %s, vertex %s",
                count, particle.pdg, particle.charge, particle.momentum, particle.vertex,
            )
        return particles

    def _convert(self, record: list[str]) -> MCParticle:
        try:
            if self.input_type is InputType.GENERAL:
                values = [float(v) for v in record[:-1]]
                pdg = int(record[-1])
                return self._general(values, pdg)
            values = [float(v) for v in record]
        except ValueError as exc:
            raise MDIError(
                f"End of file reached before reading all the hits: {' '.join(record)}"
            ) from exc
        if self.input_type is InputType.GUINEAPIG:
            return self._guineapig(values)
        if self.input_type is InputType.XTRACK:
            return self._xtrack(values)
        return self._photons(values)

    def _guineapig(self, values: list[float]) -> MCParticle:
        energy, bx, by, bz, _vx, _vy, _vz, _process, _unused, _pair_id = values
        pdg, charge = (-11, 1) if energy < 0 else (11, -1)
        energy = abs(energy)
        tan = math.tan(self.crossing_angle)
        sec = math.sqrt(1.0 + tan * tan)
        px = energy * tan + bx * energy * sec
        # Vertices are placed at the interaction point.
        return MCParticle(
            pdg=pdg,
            generator_status=_STATUS,
            charge=charge,
            momentum=(px, by * energy, bz * energy),
            mass=ELECTRON_MASS,
            vertex=(0.0, 0.0, 0.0),
            time=0.0,
        )

    def _xtrack(self, values: list[float]) -> MCParticle:
        z, x, y, px, py, _ct, delta = values
        z, x = _rotate(z, x, self.crossing_angle)
        energy = (1.0 + delta) * self.beam_energy
        px *= self.beam_energy
        py *= self.beam_energy
        pz = _sqrt(energy * energy - px * px - py * py)
        pz, px = _rotate(pz, px, self.crossing_angle)
        return MCParticle(
            pdg=11,
            generator_status=_STATUS,
            charge=-1,
            momentum=(px, py, pz),
            mass=ELECTRON_MASS,
            vertex=(x * _M_TO_MM, y * _M_TO_MM, z * _M_TO_MM),
            time=0.0,
        )

    def _photons(self, values: list[float]) -> MCParticle:
        x, xp, y, yp, energy, _pz, _unused = values
        z, x = _rotate(PHOTON_ORIGIN_Z, x, self.crossing_angle)
        px = xp * energy
        py = yp * energy
        pz = _sqrt(energy * energy - px * px - py * py)
        pz, px = _rotate(pz, px, self.crossing_angle)
        return MCParticle(
            pdg=22,
            generator_status=_STATUS,
            charge=0,
            momentum=(px, py, pz),
            mass=0.0,
            vertex=(x * _M_TO_MM, y * _M_TO_MM, z * _M_TO_MM),
            time=0.0,
        )

    @staticmethod
    def _general(values: list[float], pdg: int) -> MCParticle:
        x, y, z, px, py, pz, _energy = values
        return MCParticle(
            pdg=pdg,
            generator_status=_STATUS,
            charge=0,
            momentum=(px, py, pz),
            mass=0.0,
            vertex=(x, y, z),
            time=0.0,
        )

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()
        logger.debug("MDIReader finalization")

    def __enter__(self) -> MDIReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()