"""Random variate streams for client models."""

import numpy as np
from typing import Dict, Optional

from ..utils.logger import setup_logger


class RandomStreams:
    """Seeded source of the integer-valued draws client models use.

    Supports:
    - Uniform integers on a half-open interval
    - Uniform floats on [0, 1)
    - Negative-exponential delays
    - Poisson counts
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize random streams.

        Args:
            seed: Seed for reproducible runs, None for fresh entropy
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.logger = setup_logger(self.__class__.__name__)

    def irandom(self, low: int, high: int) -> int:
        """Uniform integer in [low, high).

        Reversed bounds are swapped; equal bounds return ``low``.
        """
        if low > high:
            low, high = high, low
        if low == high:
            return int(low)
        return int(self.rng.integers(low, high))

    def frandom(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self.rng.random())

    def neg_exp(self, mean: float) -> int:
        """Exponentially distributed delay with the given mean, rounded."""
        if mean < 0:
            raise ValueError(f"Exponential mean cannot be negative: {mean}")
        return int(round(self.rng.exponential(mean))) if mean > 0 else 0

    def poisson(self, mean: float) -> int:
        """Poisson distributed count with the given mean."""
        if mean < 0:
            raise ValueError(f"Poisson mean cannot be negative: {mean}")
        return int(self.rng.poisson(mean))

    def sample(self, spec: Dict) -> int:
        """Draw a value described by a config section.

        Args:
            spec: Mapping with a ``distribution`` key and its parameters:
                constant (mean), uniform (low, high), exponential (mean),
                poisson (mean)

        Returns:
            Drawn integer value
        """
        distribution = spec.get('distribution', 'constant')

        if distribution == 'constant':
            return int(spec['mean'])
        elif distribution == 'uniform':
            return self.irandom(spec['low'], spec['high'])
        elif distribution == 'exponential':
            return self.neg_exp(spec['mean'])
        elif distribution == 'poisson':
            return self.poisson(spec['mean'])
        else:
            raise ValueError(f"Unknown distribution: {distribution}")
