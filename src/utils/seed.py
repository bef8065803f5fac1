"""Random generator construction."""

from typing import List, Optional

import numpy as np


def spawn_rngs(seed: Optional[int], count: int) -> List[np.random.Generator]:
    """Independent generators derived from one master seed.

    Each consumer (player, dealer, ...) gets its own stream so that
    changing how much one of them draws does not shift the others.
    """
    return [np.random.default_rng(s) for s in np.random.SeedSequence(seed).spawn(count)]
