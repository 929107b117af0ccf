from .utils.logging_utils import logger

__version__ = "0.1.0"

from .randomization import BatchedEngine, Engine, get_seed, set_seed
from .samplers import (
    Sampler,
    SamplerBase,
    SamplerR,
    SamplerSE2,
    SamplerSE2Disk,
    SamplerSE3Euler,
    SamplerSE3EulerBall,
    SamplerSE3Quat,
    SamplerSE3QuatBall,
)
from .utils.registration import make, make_from_config, register_sampler
