"""
Common utilities for converting and checking the vectors that bound samplers.
"""

from typing import Optional

import numpy as np

from cspace_sampling.utils.structs.types import Array


def to_numpy(array: Array, dtype=np.float64) -> np.ndarray:
    """Returns a copy of ``array`` as a flat numpy array of the given dtype"""
    return np.array(array, dtype=dtype).reshape(-1)


def to_vector(array: Array, dim: Optional[int] = None) -> np.ndarray:
    """Converts ``array`` to a float64 vector with ``dim`` components if given"""
    vec = to_numpy(array)
    if dim is not None:
        assert vec.shape == (
            dim,
        ), f"expected a vector of {dim} components, got shape {vec.shape}"
    return vec


def check_box_bounds(lower_bound: np.ndarray, upper_bound: np.ndarray):
    assert (
        lower_bound.shape == upper_bound.shape
    ), f"bound shapes differ: {lower_bound.shape} vs {upper_bound.shape}"
    assert np.all(
        lower_bound <= upper_bound
    ), f"lower bound {lower_bound} exceeds upper bound {upper_bound}"


def check_radii(r_min: float, r_max: float):
    assert (
        0 <= r_min <= r_max
    ), f"expected 0 <= r_min <= r_max, got {r_min}, {r_max}"
