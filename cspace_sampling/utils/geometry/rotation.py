"""
Quaternion conversions used by the pose samplers. Quaternions are produced by the engine
in (x, y, z, w) order while transforms3d works in (w, x, y, z) order, so the helpers
here convert between the two.
"""

import numpy as np
from transforms3d.euler import euler2quat, quat2euler

from cspace_sampling.utils.structs.types import Array

# intrinsic rotations about x, the new y, then the new z: R = Rx(r) @ Ry(p) @ Rz(y)
EULER_AXES = "rxyz"


def xyzw_to_wxyz(q: Array) -> np.ndarray:
    q = np.asarray(q, dtype=np.float64)
    return np.array([q[3], q[0], q[1], q[2]])


def wxyz_to_xyzw(q: Array) -> np.ndarray:
    q = np.asarray(q, dtype=np.float64)
    return np.array([q[1], q[2], q[3], q[0]])


def quat_to_euler_rpy(q: Array) -> np.ndarray:
    """Converts a unit quaternion in (x, y, z, w) order to (roll, pitch, yaw) radians"""
    return np.array(quat2euler(xyzw_to_wxyz(q), axes=EULER_AXES))


def euler_rpy_to_quat(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Inverse of :func:`quat_to_euler_rpy`, the quaternion is in (x, y, z, w) order"""
    return wxyz_to_xyzw(euler2quat(roll, pitch, yaw, axes=EULER_AXES))
