from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type, Union

import dacite

from cspace_sampling.utils.logging_utils import logger
from cspace_sampling.utils.structs.types import SamplerConfig

if TYPE_CHECKING:
    from cspace_sampling.samplers.base import SamplerBase


class SamplerSpec:
    def __init__(self, uid: str, cls: Type[SamplerBase], default_kwargs: dict = None):
        """A specification for a registered sampler."""
        self.uid = uid
        self.cls = cls
        self.default_kwargs = {} if default_kwargs is None else default_kwargs

    def make(self, **kwargs):
        _kwargs = self.default_kwargs.copy()
        _kwargs.update(kwargs)
        return self.cls(**_kwargs)


REGISTERED_SAMPLERS: Dict[str, SamplerSpec] = {}


def register(name: str, cls: Type[SamplerBase], default_kwargs: dict = None):
    """Register a sampler class under ``name``."""
    # avoids a circular import as the samplers register themselves with this module
    from cspace_sampling.samplers.base import SamplerBase

    if not issubclass(cls, SamplerBase):
        raise TypeError(f"Sampler {name} must inherit from SamplerBase")
    REGISTERED_SAMPLERS[name] = SamplerSpec(name, cls, default_kwargs=default_kwargs)


def register_sampler(uid: str, override=False, **kwargs):
    """A decorator to register samplers.

    Args:
        uid (str): unique id of the sampler.
        override (bool): whether to replace a sampler already registered under ``uid``.
        **kwargs: default keyword arguments passed to the sampler constructor.
    """

    def _register_sampler(cls):
        if uid in REGISTERED_SAMPLERS:
            if override:
                logger.warning(f"Overriding registered sampler {uid}")
            else:
                logger.warning(
                    f"Sampler {uid} is already registered. Skip registration."
                )
                return cls
        register(uid, cls, default_kwargs=kwargs)
        return cls

    return _register_sampler


def make(sampler_id: str, **kwargs):
    """Instantiate a registered sampler.

    Args:
        sampler_id (str): sampler ID.
        **kwargs: keyword arguments passed to the sampler, e.g. its bounds and seed.
    """
    if sampler_id not in REGISTERED_SAMPLERS:
        raise KeyError("Sampler {} not found in registry".format(sampler_id))
    return REGISTERED_SAMPLERS[sampler_id].make(**kwargs)


def parse_sampler_config(data: dict) -> SamplerConfig:
    """Parses a dict holding the fields of :class:`SamplerConfig`, unknown keys raise"""
    return dacite.from_dict(
        data_class=SamplerConfig, data=data, config=dacite.Config(strict=True)
    )


def make_from_config(config: Union[dict, SamplerConfig]):
    """Instantiate a sampler from a :class:`SamplerConfig` or a dict with the same
    fields, e.g.
    ``dict(uid="R", bounds=dict(lower_bound=[0, 0], upper_bound=[1, 1]), seed=0)``
    """
    if isinstance(config, dict):
        config = parse_sampler_config(config)
    return make(config.uid, seed=config.seed, **config.bounds)
