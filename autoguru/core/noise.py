"""Injectable noise sources for the AutoGuru simulation core.

Anything with a ``random()`` method returning a float in ``[0, 1)`` is a
noise source, so a ``numpy.random.Generator`` can be passed directly.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np
from numpy.random import Generator


class NoiseSource(Protocol):
    """Producer of uniform reals in ``[0, 1)``."""

    def random(self) -> float: ...


class QuietNoise:
    """Noise source pinned to the midpoint of ``[0, 1)``.

    Every consumer centres its draw on 0.5, so this source adds no
    perturbation at all.
    """

    __slots__ = ()

    def random(self) -> float:
        return 0.5

    def __repr__(self) -> str:
        return "QuietNoise()"


def make_noise(seed: int | None = None) -> Generator:
    """Return a fresh seeded generator; no global random state is touched."""
    return np.random.default_rng(seed)
