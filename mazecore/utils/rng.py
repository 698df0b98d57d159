"""Random source shared by the cells of a maze grid."""

import random
from typing import Optional


class SeededRNG:
    """
    One seeded generator per grid.

    Cells never own a generator of their own; every random pick made on a
    grid draws from the grid's ``SeededRNG``, so a whole generation run
    replays exactly under the same seed.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def choice(self, seq):
        """Pick one element of a non-empty sequence uniformly."""
        return self._rng.choice(seq)

    def shuffle(self, seq) -> None:
        """Shuffle in place, e.g. a list of candidate edges."""
        self._rng.shuffle(seq)

    def sample(self, population, k: int):
        return self._rng.sample(population, k)


# Unseeded source for grids built without one
default_rng = SeededRNG()
