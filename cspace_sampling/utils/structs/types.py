from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

Array = Union[np.ndarray, Sequence[float]]


@dataclass
class SamplerConfig:
    """Declarative description of a sampler, built through the sampler registry"""

    uid: str
    """The registered id of the sampler, e.g. "SE3Quat" """
    bounds: Dict[str, Any] = field(default_factory=dict)
    """Keyword arguments forwarded to the sampler constructor, e.g.
    ``dict(lower_bound=[0, 0, 0], upper_bound=[1, 1, 1])``"""
    seed: Optional[int] = None
    """Seed for the sampler's engine. If None the engine draws one from the process-wide
    seed generator"""

    def dict(self):
        return {k: v for k, v in asdict(self).items()}
