from dataclasses import dataclass
from typing import Annotated, Optional

import numpy as np
import tyro

from cspace_sampling import logger
from cspace_sampling.randomization import seeding
from cspace_sampling.utils import registration
from cspace_sampling.utils.io_utils import load_sampler_config
from cspace_sampling.utils.structs.types import SamplerConfig

DEFAULT_BOUNDS = {
    "R": dict(lower_bound=[0, 0, 0], upper_bound=[1, 1, 1]),
    "SE2": dict(lower_bound=[0, 0], upper_bound=[1, 1]),
    "SE2Disk": dict(cx=0, cy=0, r_min=0.5, r_max=1),
    "SE3Euler": dict(lower_bound=[0, 0, 0], upper_bound=[1, 1, 1]),
    "SE3Quat": dict(lower_bound=[0, 0, 0], upper_bound=[1, 1, 1]),
    "SE3EulerBall": dict(r=1),
    "SE3QuatBall": dict(r=1),
}


@dataclass
class Args:
    sampler_id: Annotated[str, tyro.conf.arg(aliases=["-s"])] = "SE3Quat"
    """The registered id of the sampler to draw from. Ignored if a config is given"""

    config: Annotated[Optional[str], tyro.conf.arg(aliases=["-c"])] = None
    """Path to a .json/.yaml sampler config with fields uid, bounds and maybe seed"""

    seed: Optional[int] = None
    """Process-wide seed. Pass the seed logged by an earlier run to replay it"""

    num_samples: Annotated[int, tyro.conf.arg(aliases=["-n"])] = 5
    """Number of samples to draw"""

    quiet: bool = False
    """Disable verbose output."""


def main(args: Args):
    np.set_printoptions(suppress=True, precision=3)
    if args.seed is not None:
        seeding.set_seed(args.seed)
    if not args.quiet:
        logger.info(f"Sampling with seed {seeding.get_seed()}")

    if args.config is not None:
        config = registration.parse_sampler_config(load_sampler_config(args.config))
    else:
        config = SamplerConfig(
            uid=args.sampler_id, bounds=DEFAULT_BOUNDS.get(args.sampler_id, {})
        )
    sampler = registration.make_from_config(config)
    if not args.quiet:
        logger.info(f"Sampler config: {config.dict()}")
        logger.info(f"Drawing {args.num_samples} samples from {sampler}")
    for _ in range(args.num_samples):
        print(sampler.sample())


if __name__ == "__main__":
    main(tyro.cli(Args))
