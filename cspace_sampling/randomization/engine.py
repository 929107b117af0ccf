"""
Seeded random number engine with the distributions and geometric transforms used to
sample configuration spaces.

An engine must not be shared by several threads at once as every draw advances its
generator. Constructing engines is thread safe however, and engines built without an
explicit seed are guaranteed distinct seeds, so any number of them can be used in
parallel.
"""

import math
from typing import Optional, Tuple

import numpy as np

from cspace_sampling.randomization import seeding


class Engine:
    """Random number engine wrapping a 32 bit seeded Mersenne-Twister generator.

    Args:
        seed (int, optional): seed for the generator. If None, a fresh seed is drawn
            from the process-wide seed generator (see
            :func:`cspace_sampling.randomization.seeding.set_seed`).
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = seeding.next_seed()
        assert (
            0 <= seed < seeding.MAX_SEED
        ), f"seed must be a 32 bit unsigned integer, got {seed}"
        self._seed = int(seed)
        self._generator = np.random.RandomState(self._seed)

    @property
    def seed(self) -> int:
        """The seed this engine was constructed with"""
        return self._seed

    def __repr__(self):
        return f"{self.__class__.__name__}(seed={self._seed})"

    set_seed = staticmethod(seeding.set_seed)
    get_seed = staticmethod(seeding.get_seed)

    # -------------------------------------------------------------------------- #
    # Scalar distributions
    # -------------------------------------------------------------------------- #
    def uniform01(self) -> float:
        """Random real in [0, 1)"""
        return float(self._generator.random_sample())

    def uniform_real(self, lower_bound: float, upper_bound: float) -> float:
        """Random real in [lower_bound, upper_bound)"""
        assert (
            lower_bound <= upper_bound
        ), f"lower bound {lower_bound} exceeds upper bound {upper_bound}"
        return lower_bound + (upper_bound - lower_bound) * self.uniform01()

    def uniform_int(self, lower_bound: int, upper_bound: int) -> int:
        """Random integer in [lower_bound, upper_bound], both ends included"""
        r = int(math.floor(self.uniform_real(lower_bound, upper_bound + 1.0)))
        # rounding can push a draw just below 1 onto upper_bound + 1
        return upper_bound if r > upper_bound else r

    def uniform_bool(self) -> bool:
        return bool(self.uniform01() <= 0.5)

    def gaussian01(self) -> float:
        """Random real from the standard normal distribution"""
        return float(self._generator.standard_normal())

    def gaussian(self, mean: float, stddev: float) -> float:
        return self.gaussian01() * stddev + mean

    def half_normal_real(self, r_min: float, r_max: float, focus: float = 3.0) -> float:
        """Random real in [r_min, r_max] biased towards r_max.

        A normal distribution is centered on r_max with standard deviation
        (r_max - r_min) / focus and folded into the interval: draws beyond r_max are
        reflected around r_max and draws below r_min around r_min. The higher
        the focus, the more likely values close to r_max become.
        """
        assert r_min <= r_max, f"r_min {r_min} exceeds r_max {r_max}"
        assert focus > 0, f"focus must be positive, got {focus}"
        span = r_max - r_min
        v = self.gaussian(span, span / focus)
        if v > span:
            v = 2.0 * span - v
        if v < 0.0:
            v = -v
        r = v + r_min
        return min(max(r, r_min), r_max)

    def half_normal_int(self, r_min: int, r_max: int, focus: float = 3.0) -> int:
        """Random integer in [r_min, r_max] biased towards r_max.

        See :meth:`half_normal_real`.
        """
        r = int(math.floor(self.half_normal_real(r_min, r_max + 1.0, focus)))
        return r_max if r > r_max else r

    # -------------------------------------------------------------------------- #
    # Rotations
    # -------------------------------------------------------------------------- #
    def quaternion(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Uniformly distributed random unit quaternion in (x, y, z, w) order.

        Uses the subgroup algorithm of Shoemake (Graphics Gems III), which is uniform
        over the rotation group.
        """
        if out is None:
            out = np.empty(4)
        x0 = self.uniform01()
        r1 = math.sqrt(1.0 - x0)
        r2 = math.sqrt(x0)
        t1 = 2.0 * math.pi * self.uniform01()
        t2 = 2.0 * math.pi * self.uniform01()
        out[0] = math.sin(t1) * r1
        out[1] = math.cos(t1) * r1
        out[2] = math.sin(t2) * r2
        out[3] = math.cos(t2) * r2
        return out

    def euler_rpy(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Random (roll, pitch, yaw) angles, each drawn uniformly from [-pi, pi)"""
        if out is None:
            out = np.empty(3)
        for i in range(3):
            out[i] = self.uniform_real(-math.pi, math.pi)
        return out

    # -------------------------------------------------------------------------- #
    # Regions
    # -------------------------------------------------------------------------- #
    def disk(self, r_min: float, r_max: float) -> Tuple[float, float]:
        """Random point uniform by area over the annulus of radii r_min to r_max"""
        assert (
            0 <= r_min <= r_max
        ), f"expected 0 <= r_min <= r_max, got {r_min}, {r_max}"
        a = self.uniform01()
        b = self.uniform01()
        r = math.sqrt(a * r_max * r_max + (1 - a) * r_min * r_min)
        theta = 2 * math.pi * b
        return r * math.cos(theta), r * math.sin(theta)

    def ball(self, r_min: float, r_max: float) -> Tuple[float, float, float]:
        """Random point uniform by volume over the shell of radii r_min to r_max"""
        assert (
            0 <= r_min <= r_max
        ), f"expected 0 <= r_min <= r_max, got {r_min}, {r_max}"
        a = self.uniform01()
        b = self.uniform01()
        c = self.uniform01()
        r = (a * r_max**3 + (1 - a) * r_min**3) ** (1 / 3.0)
        theta = math.acos(1 - 2 * b)
        phi = 2 * math.pi * c
        sin_theta = math.sin(theta)
        return (
            r * math.cos(theta),
            r * sin_theta * math.cos(phi),
            r * sin_theta * math.sin(phi),
        )
