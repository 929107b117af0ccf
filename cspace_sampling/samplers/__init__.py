from cspace_sampling.utils.registration import register_sampler

from .base import Sampler, SamplerBase
from .euclidean import SamplerR
from .se2 import SamplerSE2, SamplerSE2Disk
from .se3 import (
    SamplerSE3Euler,
    SamplerSE3EulerBall,
    SamplerSE3Quat,
    SamplerSE3QuatBall,
)

register_sampler("R")(SamplerR)
register_sampler("SE2")(SamplerSE2)
register_sampler("SE2Disk")(SamplerSE2Disk)
register_sampler("SE3Euler")(SamplerSE3Euler)
register_sampler("SE3Quat")(SamplerSE3Quat)
register_sampler("SE3EulerBall")(SamplerSE3EulerBall)
register_sampler("SE3QuatBall")(SamplerSE3QuatBall)
