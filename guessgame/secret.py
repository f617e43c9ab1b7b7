import random

from .config import DEFAULT_MAXIMUM, DEFAULT_MINIMUM


class SecretGenerator:
    """Produce the secret number of each round.

    The random source is created on the first call to ``generate`` and
    reused afterwards.

    Attributes:
        seed: Seed of the random source, or None to seed it from system
            entropy.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = None

    @property
    def rng(self):
        if self._rng is None:
            self._rng = random.Random(self.seed)
        return self._rng

    def generate(self, minimum=DEFAULT_MINIMUM, maximum=DEFAULT_MAXIMUM):
        """Return an integer drawn uniformly from [minimum, maximum)."""
        return self.rng.randrange(minimum, maximum)
