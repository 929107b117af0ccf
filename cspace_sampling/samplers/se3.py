"""
Samplers for spatial rigid body poses.

Positions are drawn from a box (``SamplerSE3Euler``, ``SamplerSE3Quat``) or uniformly
by volume from a ball centered at the origin (``SamplerSE3EulerBall``,
``SamplerSE3QuatBall``). Orientations are uniform random rotations, returned either as
(roll, pitch, yaw) angles giving 6D samples (x, y, z, roll, pitch, yaw) or as the unit
quaternion giving 7D samples (x, y, z, qx, qy, qz, qw).
"""

from typing import Optional, Tuple

import numpy as np

from cspace_sampling.samplers.base import SamplerBase
from cspace_sampling.utils import common
from cspace_sampling.utils.geometry.rotation import quat_to_euler_rpy
from cspace_sampling.utils.structs.types import Array


class _SE3BoxSampler(SamplerBase):
    def __init__(
        self, lower_bound: Array, upper_bound: Array, seed: Optional[int] = None
    ):
        super().__init__(seed=seed)
        self.set_bound(lower_bound, upper_bound)

    def set_bound(self, lower_bound: Array, upper_bound: Array):
        lower_bound = common.to_vector(lower_bound, 3)
        upper_bound = common.to_vector(upper_bound, 3)
        common.check_box_bounds(lower_bound, upper_bound)
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def get_bound(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.lower_bound.copy(), self.upper_bound.copy()

    def _sample_position(self, q: np.ndarray):
        for i in range(3):
            q[i] = self.rng.uniform_real(self.lower_bound[i], self.upper_bound[i])


class _SE3BallSampler(SamplerBase):
    def __init__(self, r: float, seed: Optional[int] = None):
        super().__init__(seed=seed)
        self.set_bound(r)

    def set_bound(self, r: float):
        common.check_radii(0, r)
        self.r = float(r)

    def get_bound(self) -> float:
        return self.r

    def _sample_position(self, q: np.ndarray):
        q[:3] = self.rng.ball(0, self.r)


class SamplerSE3Euler(_SE3BoxSampler):
    """Samples (x, y, z, roll, pitch, yaw) with the position uniform over a box.

    Args:
        lower_bound: (3,) lower corner of the position box
        upper_bound: (3,) upper corner of the position box
        seed (int, optional): seed for the engine
    """

    dim = 6

    def sample(self) -> np.ndarray:
        q = np.empty(6)
        self._sample_position(q)
        q[3:] = quat_to_euler_rpy(self.rng.quaternion())
        return q


class SamplerSE3Quat(_SE3BoxSampler):
    """Samples (x, y, z, qx, qy, qz, qw) with the position uniform over a box.

    Args:
        lower_bound: (3,) lower corner of the position box
        upper_bound: (3,) upper corner of the position box
        seed (int, optional): seed for the engine
    """

    dim = 7

    def sample(self) -> np.ndarray:
        q = np.empty(7)
        self._sample_position(q)
        self.rng.quaternion(out=q[3:])
        return q


class SamplerSE3EulerBall(_SE3BallSampler):
    """Samples (x, y, z, roll, pitch, yaw) with the position uniform in a ball.

    Args:
        r: radius of the position ball, centered at the origin
        seed (int, optional): seed for the engine
    """

    dim = 6

    def sample(self) -> np.ndarray:
        q = np.empty(6)
        self._sample_position(q)
        q[3:] = quat_to_euler_rpy(self.rng.quaternion())
        return q


class SamplerSE3QuatBall(_SE3BallSampler):
    """Samples (x, y, z, qx, qy, qz, qw) with the position uniform in a ball.

    Args:
        r: radius of the position ball, centered at the origin
        seed (int, optional): seed for the engine
    """

    dim = 7

    def sample(self) -> np.ndarray:
        q = np.empty(7)
        self._sample_position(q)
        self.rng.quaternion(out=q[3:])
        return q
