from .batched_engine import BatchedEngine
from .engine import Engine
from .seeding import get_seed, set_seed
