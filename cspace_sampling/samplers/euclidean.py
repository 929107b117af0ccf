from typing import Optional, Tuple

import numpy as np

from cspace_sampling.samplers.base import SamplerBase
from cspace_sampling.utils import common
from cspace_sampling.utils.structs.types import Array


class SamplerR(SamplerBase):
    """Samples points uniformly from an axis aligned box in N dimensional real space.
    Each coordinate is drawn independently from [lower_bound[i], upper_bound[i]).

    Args:
        lower_bound: (N,) lower corner of the box
        upper_bound: (N,) upper corner of the box, no smaller than ``lower_bound``
        seed (int, optional): seed for the engine
    """

    def __init__(
        self, lower_bound: Array, upper_bound: Array, seed: Optional[int] = None
    ):
        super().__init__(seed=seed)
        self.set_bound(lower_bound, upper_bound)

    def set_bound(self, lower_bound: Array, upper_bound: Array):
        lower_bound = common.to_vector(lower_bound)
        upper_bound = common.to_vector(upper_bound)
        common.check_box_bounds(lower_bound, upper_bound)
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.dim = len(lower_bound)

    def get_bound(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.lower_bound.copy(), self.upper_bound.copy()

    def sample(self) -> np.ndarray:
        q = np.empty(self.dim)
        for i in range(self.dim):
            q[i] = self.rng.uniform_real(self.lower_bound[i], self.upper_bound[i])
        return q
