"""
Samplers for planar rigid body poses. Samples are (x, y, heading) with the heading in
[-pi, pi).
"""

import math
from typing import Optional, Tuple

import numpy as np

from cspace_sampling.samplers.base import SamplerBase
from cspace_sampling.utils import common
from cspace_sampling.utils.structs.types import Array


class SamplerSE2(SamplerBase):
    """Samples planar poses with a position uniform over the rectangle
    [x_min, x_max) x [y_min, y_max).

    Args:
        lower_bound: (x_min, y_min)
        upper_bound: (x_max, y_max)
        seed (int, optional): seed for the engine
    """

    dim = 3

    def __init__(
        self, lower_bound: Array, upper_bound: Array, seed: Optional[int] = None
    ):
        super().__init__(seed=seed)
        self.set_bound(lower_bound, upper_bound)

    @classmethod
    def from_ranges(
        cls,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        seed: Optional[int] = None,
    ):
        return cls([x_min, y_min], [x_max, y_max], seed=seed)

    def set_bound(self, lower_bound: Array, upper_bound: Array):
        lower_bound = common.to_vector(lower_bound, 2)
        upper_bound = common.to_vector(upper_bound, 2)
        common.check_box_bounds(lower_bound, upper_bound)
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def get_bound(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.lower_bound.copy(), self.upper_bound.copy()

    def sample(self) -> np.ndarray:
        q = np.empty(3)
        q[0] = self.rng.uniform_real(self.lower_bound[0], self.upper_bound[0])
        q[1] = self.rng.uniform_real(self.lower_bound[1], self.upper_bound[1])
        q[2] = self.rng.uniform_real(-math.pi, math.pi)
        return q


class SamplerSE2Disk(SamplerBase):
    """Samples planar poses with a position uniform by area over an annulus.

    The annulus of radii [r_min, r_max] is centered on (cx, cy) and positions are
    expressed relative to the reference point (crefx, crefy), i.e. a sample is
    ``disk_point + c - cref``.

    Args:
        cx, cy: center of the annulus
        r_min, r_max: inner and outer radius, 0 <= r_min <= r_max
        crefx, crefy: reference point positions are offset by
        seed (int, optional): seed for the engine
    """

    dim = 3

    def __init__(
        self,
        cx: float,
        cy: float,
        r_min: float,
        r_max: float,
        crefx: float = 0.0,
        crefy: float = 0.0,
        seed: Optional[int] = None,
    ):
        super().__init__(seed=seed)
        self.set_bound(cx, cy, r_min, r_max, crefx, crefy)

    def set_bound(
        self,
        cx: float,
        cy: float,
        r_min: float,
        r_max: float,
        crefx: float = 0.0,
        crefy: float = 0.0,
    ):
        common.check_radii(r_min, r_max)
        self.c = np.array([cx, cy], dtype=np.float64)
        self.cref = np.array([crefx, crefy], dtype=np.float64)
        self.r_min = float(r_min)
        self.r_max = float(r_max)

    def get_bound(self) -> Tuple[float, float, float, float, float, float]:
        """Returns (cx, cy, r_min, r_max, crefx, crefy)"""
        return (
            float(self.c[0]),
            float(self.c[1]),
            self.r_min,
            self.r_max,
            float(self.cref[0]),
            float(self.cref[1]),
        )

    def sample(self) -> np.ndarray:
        q = np.empty(3)
        x, y = self.rng.disk(self.r_min, self.r_max)
        q[0] = x + self.c[0] - self.cref[0]
        q[1] = y + self.c[1] - self.cref[1]
        q[2] = self.rng.uniform_real(-math.pi, math.pi)
        return q
