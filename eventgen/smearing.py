"""Vertex smearing tools with flat and Gaussian distributions."""

from __future__ import annotations

import logging
import random

from eventgen.event import C_LIGHT, MM, FourVector, GenEvent, VertexSmearer

logger = logging.getLogger(__name__)


def _shift_vertices(event: GenEvent, offset: FourVector) -> None:
    for vertex in event.vertices:
        vertex.position = vertex.position + offset


class FlatSmearVertex(VertexSmearer):
    """Shifts all vertices by a uniform offset in x, y and z, with time of flight."""

    def __init__(
        self,
        x_min: float = 0.0,
        x_max: float = 0.0,
        y_min: float = 0.0,
        y_max: float = 0.0,
        z_min: float = 0.0,
        z_max: float = 0.0,
        beam_direction: int = 1,
        rng: random.Random | None = None,
    ) -> None:
        if x_min > x_max:
            raise ValueError("xMin > xMax !")
        if y_min > y_max:
            raise ValueError("yMin > yMax !")
        if z_min > z_max:
            raise ValueError("zMin > zMax !")
        if beam_direction not in (-1, 0, 1):
            raise ValueError("BeamDirection can only be set to -1 or 1, or 0 to switch off TOF")
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        self.z_min, self.z_max = z_min, z_max
        self.beam_direction = beam_direction
        self._rng = rng if rng is not None else random.Random()
        logger.info(
            "Smearing of interaction point with flat distribution in x, y and z "
            "with %g mm <= x <= %g mm, %g mm <= y <= %g mm and %g mm <= z <= %g mm.",
            x_min / MM, x_max / MM, y_min / MM, y_max / MM, z_min / MM, z_max / MM,
        )

    def smear_vertex(self, event: GenEvent) -> FourVector:
        dx = self.x_min + self._rng.random() * (self.x_max - self.x_min)
        dy = self.y_min + self._rng.random() * (self.y_max - self.y_min)
        dz = self.z_min + self._rng.random() * (self.z_max - self.z_min)
        dt = self.beam_direction * dz / C_LIGHT
        offset = FourVector(dx, dy, dz, dt)
        logger.debug("Smearing vertices by %s", offset)
        _shift_vertices(event, offset)
        return offset


class GaussSmearVertex(VertexSmearer):
    """Shifts all vertices by a Gaussian offset in x, y, z and t."""

    def __init__(
        self,
        x_sigma: float = 0.0,
        y_sigma: float = 0.0,
        z_sigma: float = 0.0,
        t_sigma: float = 0.0,
        x_mean: float = 0.0,
        y_mean: float = 0.0,
        z_mean: float = 0.0,
        t_mean: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.x_sigma, self.y_sigma, self.z_sigma, self.t_sigma = x_sigma, y_sigma, z_sigma, t_sigma
        self.x_mean, self.y_mean, self.z_mean, self.t_mean = x_mean, y_mean, z_mean, t_mean
        self._rng = rng if rng is not None else random.Random()
        logger.info(
            "Smearing of interaction point with normal distribution in x, y and z "
            "with %g mm standard deviation in x %g mm in y and %g mm in z.",
            x_sigma / MM, y_sigma / MM, z_sigma / MM,
        )

    def smear_vertex(self, event: GenEvent) -> FourVector:
        dx = self._rng.gauss(0.0, 1.0) * self.x_sigma + self.x_mean
        dy = self._rng.gauss(0.0, 1.0) * self.y_sigma + self.y_mean
        dz = self._rng.gauss(0.0, 1.0) * self.z_sigma + self.z_mean
        dt = self._rng.gauss(0.0, 1.0) * self.t_sigma + self.t_mean
        offset = FourVector(dx, dy, dz, dt)
        logger.debug("Smearing vertices by %s", offset)
        _shift_vertices(event, offset)
        return offset