import json
from pathlib import Path
from typing import Union

import yaml

from cspace_sampling.utils.structs.types import SamplerConfig


def load_json(filename: Union[str, Path]):
    with open(filename, "rt") as f:
        return json.load(f)


def load_yaml(filename: Union[str, Path]):
    with open(filename, "rt") as f:
        return yaml.safe_load(f)


def load_sampler_config(filename: Union[str, Path]) -> dict:
    """Loads the raw dict of a :class:`SamplerConfig` from a .json or .yaml file"""
    filename = str(filename)
    if filename.endswith(".json"):
        data = load_json(filename)
    elif filename.endswith((".yaml", ".yml")):
        data = load_yaml(filename)
    else:
        raise RuntimeError(f"Unsupported extension: {filename}")
    if not isinstance(data, dict):
        raise RuntimeError(
            f"{filename} must hold a mapping with the fields of "
            f"{SamplerConfig.__name__}"
        )
    return data
