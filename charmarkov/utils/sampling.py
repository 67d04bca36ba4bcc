"""Random sources and Monte Carlo sampling over follow-lists."""

import logging
from typing import Optional, Protocol, Sequence

import torch

from charmarkov.models.markov import CharData


logger = logging.getLogger(__name__)

DEFAULT_SEED = 20


class RandomSource(Protocol):
    """Anything that yields successive uniform draws from [0, 1)."""

    def random(self) -> float:
        ...


class TorchRandomSource:
    """Uniform draws backed by a private ``torch.Generator``."""

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: Fixed seed for reproducible draws. When omitted the
                generator is seeded from process entropy.
        """
        self.generator = torch.Generator()
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.seed = seed
            self.generator.manual_seed(seed)

    def random(self) -> float:
        return torch.rand(1, generator=self.generator, dtype=torch.float64).item()


def make_random_source(random_generation: bool, seed: int = DEFAULT_SEED) -> TorchRandomSource:
    """Pick an entropy-seeded source or a fixed-seed one."""
    if random_generation:
        source = TorchRandomSource()
    else:
        source = TorchRandomSource(seed)
    logger.debug(f"Random source seeded with {source.seed}")
    return source


def get_random_char(probs: Sequence[CharData], random_source: RandomSource) -> str:
    """
    Sample a character by Monte Carlo inversion.

    Returns the first entry whose cumulative probability exceeds a uniform
    draw. If rounding leaves the draw above every cumulative value, the last
    entry is returned.
    """
    if not probs:
        raise ValueError("Cannot sample from an empty follow-list")
    r = random_source.random()
    for cd in probs:
        if cd.cp > r:
            return cd.chr
    return probs[-1].chr
