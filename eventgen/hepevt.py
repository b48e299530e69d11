"""Reader for HepEVT text files."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import TracebackType

from eventgen.event import MCParticle

_FIELDS_PER_PARTICLE = 15


class HepEVTError(Exception):
    """Raised when a HepEVT file cannot be opened or read."""


class HepEVTReader:
    """Reads events from a HepEVT file, one particle collection per event.

    Each event starts with the number of particles, followed for each
    particle by status, PDG code, two mother and two daughter indices,
    px, py, pz, energy, mass, the vertex x, y, z and the production time.
    """

    def __init__(self, filename: str | Path) -> None:
        self.filename = str(filename)
        try:
            self._file = open(self.filename, encoding="ascii")
        except OSError as exc:
            raise HepEVTError(f"Failed to open input stream:{self.filename}") from exc
        self._tokens = (token for line in self._file for token in line.split())
        self._nhep = 0
        self._eof = False
        self._read_count()

    def _next_token(self) -> str | None:
        return next(self._tokens, None)

    def _read_count(self) -> None:
        token = self._next_token()
        if token is None:
            self._nhep = 0
            self._eof = True
            return
        try:
            self._nhep = int(token)
        except ValueError as exc:
            raise HepEVTError(f"Invalid particle count: {token!r}") from exc

    def _read_particle(self) -> MCParticle:
        fields = []
        for _ in range(_FIELDS_PER_PARTICLE):
            token = self._next_token()
            if token is None:
                self._eof = True
                raise HepEVTError("End of file reached before reading all the hits")
            fields.append(token)
        try:
            status, pdg = int(fields[0]), int(fields[1])
            for index in fields[2:6]:
                int(index)
            px, py, pz, _energy, mass, vx, vy, vz, time = (float(v) for v in fields[6:])
        except ValueError as exc:
            raise HepEVTError(f"Malformed particle record: {' '.join(fields)}") from exc
        return MCParticle(
            pdg=pdg,
            generator_status=status,
            momentum=(px, py, pz),
            mass=mass,
            vertex=(vx, vy, vz),
            time=time,
        )

    def read_event(self) -> list[MCParticle]:
        """Read the next event's particles."""
        if self._eof:
            raise HepEVTError("End of file reached")
        particles = [self._read_particle() for _ in range(self._nhep)]
        self._read_count()
        return particles

    def __iter__(self) -> Iterator[list[MCParticle]]:
        while not self._eof:
            yield self.read_event()

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> HepEVTReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()