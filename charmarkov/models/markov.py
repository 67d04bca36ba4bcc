"""Model structures for charmarkov."""

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Sequence, Tuple

import torch


@dataclass
class MarkovConfig:
    """Configuration for the character-level Markov model."""
    window_length: int

    def __post_init__(self):
        if isinstance(self.window_length, bool) or not isinstance(self.window_length, int):
            raise ValueError(f"window_length must be an integer, got {self.window_length!r}")
        if self.window_length <= 0:
            raise ValueError(f"window_length must be positive, got {self.window_length}")


@dataclass(frozen=True)
class CharData:
    """Statistics for one character following a window."""
    chr: str
    count: int
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.chr} {self.count} {self.p} {self.cp})"


def calculate_probabilities(counts: Sequence[int]) -> List[Tuple[float, float]]:
    """
    Convert raw follow counts into (probability, cumulative probability) pairs.

    The cumulative value is the running sum of probabilities in the given
    order, so the last one is 1.0 up to rounding. ``counts`` is not modified.
    """
    if len(counts) == 0:
        raise ValueError("Cannot normalize an empty count list")
    counts_t = torch.tensor(list(counts), dtype=torch.float64)
    total = counts_t.sum()
    if total <= 0:
        raise ValueError("Cannot normalize counts with a zero total")
    probs = counts_t / total
    cumulative = torch.cumsum(probs, dim=0)
    return list(zip(probs.tolist(), cumulative.tolist()))


class FollowList:
    """Characters seen after one window, in order of first occurrence."""

    def __init__(self):
        self._counts: Counter = Counter()

    def update(self, char: str) -> None:
        """Count one more occurrence of ``char``, appending it if new."""
        self._counts[char] += 1

    def chars(self) -> List[str]:
        return list(self._counts)

    def freeze(self) -> Tuple[CharData, ...]:
        """Normalize the counts and return the immutable follow-list."""
        chars = self.chars()
        counts = [self._counts[c] for c in chars]
        return tuple(
            CharData(chr=c, count=n, p=p, cp=cp)
            for c, n, (p, cp) in zip(chars, counts, calculate_probabilities(counts))
        )


class LanguageModel(Mapping[str, Tuple[CharData, ...]]):
    """
    Trained, read-only mapping from window to its follow-list.

    Instances are produced by ``Trainer.train`` and never change afterwards,
    so one model can back any number of generators.
    """

    def __init__(
        self,
        window_length: int,
        table: Mapping[str, Tuple[CharData, ...]],
    ):
        """
        Args:
            window_length: Length of every window key
            table: Finalized follow-lists keyed by window
        """
        self.window_length = MarkovConfig(window_length).window_length
        for window in table:
            if len(window) != self.window_length:
                raise ValueError(
                    f"Window {window!r} does not have length {self.window_length}"
                )
        self._table = MappingProxyType(dict(table))

    def __getitem__(self, window: str) -> Tuple[CharData, ...]:
        return self._table[window]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"LanguageModel(window_length={self.window_length}, windows={len(self)})"

    def __str__(self) -> str:
        lines = []
        for window, probs in self._table.items():
            lines.append(f"{window} : ({' '.join(str(cd) for cd in probs)})")
        return "\n".join(lines) + ("\n" if lines else "")
