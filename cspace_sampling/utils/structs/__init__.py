from .types import Array, SamplerConfig
