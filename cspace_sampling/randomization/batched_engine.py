"""
A batch of independent engines that can be driven as one. Seeding the batch with a list
of seeds reproduces exactly the streams of engines seeded individually with those
seeds, so batched and one-at-a-time sampling agree.
"""

from typing import List, Sequence, Union

import numpy as np

from cspace_sampling.randomization import seeding
from cspace_sampling.randomization.engine import Engine


class BatchedEngine:
    """Calls an :class:`Engine` method on every engine of the batch and stacks the
    results along a leading batch dimension, e.g.
    ``BatchedEngine.from_seeds([0, 1]).disk(0, 1)`` has shape (2, 2). Methods taking
    ``out`` write the result of engine ``i`` into ``out[i]``.
    """

    def __init__(self, engines: List[Engine]):
        assert len(engines) > 0, "a batched engine needs at least one engine"
        self.engines = engines
        self.batch_size = len(engines)

    # the process-wide seed is shared by every engine so it is not fanned out
    set_seed = staticmethod(seeding.set_seed)
    get_seed = staticmethod(seeding.get_seed)

    @classmethod
    def from_seeds(cls, seeds: Sequence[int]):
        return cls(engines=[Engine(seed) for seed in seeds])

    @classmethod
    def from_engines(cls, engines: Sequence[Engine]):
        return cls(engines=list(engines))

    @property
    def seeds(self) -> List[int]:
        return [engine.seed for engine in self.engines]

    def __len__(self):
        return self.batch_size

    def __getitem__(self, idx: Union[int, Sequence[int], np.ndarray]):
        if np.iterable(idx):
            return BatchedEngine.from_engines([self.engines[i] for i in idx])
        return self.engines[idx]

    def __setitem__(self, idx: Union[int, Sequence[int], np.ndarray], value):
        if np.iterable(idx):
            for i, engine in zip(idx, value):
                self.engines[i] = engine
        else:
            self.engines[idx] = value

    def __getattr__(self, item):
        # only reached for attributes not defined on the batch itself
        if item.startswith("_") or not hasattr(Engine, item):
            raise AttributeError(
                f"'{self.__class__.__name__}' object has no attribute '{item}'"
            )
        if callable(getattr(Engine, item)):

            def method(*args, out=None, **kwargs):
                results = [
                    getattr(engine, item)(*args, **kwargs) for engine in self.engines
                ]
                if out is None:
                    return np.array(results)
                assert (
                    len(out) == self.batch_size
                ), f"out has {len(out)} rows for a batch of {self.batch_size} engines"
                for i, result in enumerate(results):
                    out[i] = result
                return out

            return method
        return np.array([getattr(engine, item) for engine in self.engines])
