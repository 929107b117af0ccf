from typing import Optional, Protocol

import numpy as np

from cspace_sampling.randomization.engine import Engine


class Sampler(Protocol):
    """Anything that draws fixed size configuration vectors"""

    dim: int

    def sample(self) -> np.ndarray:
        ...


class SamplerBase:
    """Owns the engine a sampler draws from.

    ``sample()`` on every sampler advances ``self.rng`` even though the sampler's bounds
    stay untouched, so sampling is a mutating operation.
    Two samplers never share an engine.

    Args:
        seed (int, optional): seed for the engine, see
            :class:`~cspace_sampling.randomization.engine.Engine`
    """

    dim: int
    """Number of components of each sample"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = Engine(seed)

    def __repr__(self):
        dim = getattr(self, "dim", None)
        return f"{self.__class__.__name__}(dim={dim}, rng={self.rng})"
