import pytest


class SequenceRandom:
    """Random source that replays a fixed list of draws, then repeats the last."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        value = self.draws[min(self.calls, len(self.draws) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def zeros():
    return SequenceRandom([0.0])


@pytest.fixture
def corpus_text():
    return (
        "the quick brown fox jumps over the lazy dog. "
        "the dog sleeps while the fox runs over the hill.\n"
        "then the fox returns, and the dog wakes up.\r\n"
    )


@pytest.fixture
def corpus_file(tmp_path, corpus_text):
    path = tmp_path / "corpus.txt"
    path.write_bytes(corpus_text.encode("utf-8"))
    return path


@pytest.fixture
def draws():
    return SequenceRandom
