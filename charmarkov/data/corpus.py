"""Corpus reading utilities."""

from pathlib import Path
from typing import Iterator, Union

CHUNK_SIZE = 64 * 1024


def read_chars(
    path: Union[str, Path],
    encoding: str = 'utf-8',
    chunk_size: int = CHUNK_SIZE,
) -> Iterator[str]:
    """Yield the characters of a text file one at a time, front to back."""
    with open(path, 'r', encoding=encoding, newline='') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield from chunk
