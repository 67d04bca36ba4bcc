"""Utilities for training and generation."""

import logging
from typing import Dict, Iterable, Union

from charmarkov.models.markov import FollowList, LanguageModel, MarkovConfig
from charmarkov.utils.sampling import RandomSource, get_random_char


logger = logging.getLogger(__name__)


class Trainer:
    """Builds a LanguageModel from a character stream in one pass."""

    def __init__(self, config: Union[MarkovConfig, int]):
        """
        Args:
            config: Model configuration, or just the window length
        """
        if not isinstance(config, MarkovConfig):
            config = MarkovConfig(window_length=config)
        self.config = config

    @property
    def window_length(self) -> int:
        return self.config.window_length

    def train(self, chars: Iterable[str]) -> LanguageModel:
        """Count followers for every window and normalize them."""
        stream = iter(chars)

        # Form the first window
        window = ""
        for c in stream:
            window += c
            if len(window) == self.window_length:
                break
        if len(window) < self.window_length:
            logger.info(
                f"Corpus has {len(window)} characters, fewer than window length "
                f"{self.window_length}; nothing to train"
            )
            return LanguageModel(self.window_length, {})

        follow_lists: Dict[str, FollowList] = {}
        consumed = len(window)
        for c in stream:
            probs = follow_lists.get(window)
            if probs is None:
                probs = FollowList()
                follow_lists[window] = probs
            probs.update(c)
            window = window[1:] + c
            consumed += 1

        model = LanguageModel(
            self.window_length,
            {w: probs.freeze() for w, probs in follow_lists.items()},
        )
        logger.info(f"Trained {len(model)} windows from {consumed} characters")
        return model


class Generator:
    """Text generation helper for trained LanguageModels."""

    def __init__(self, model: LanguageModel, random_source: RandomSource):
        """
        Args:
            model: Trained language model
            random_source: Source of uniform draws, owned by this generator
        """
        self.model = model
        self.random_source = random_source

    def generate(self, initial_text: str, text_length: int) -> str:
        """Extend ``initial_text`` until it is ``text_length`` characters long."""
        window_length = self.model.window_length
        if len(initial_text) < window_length:
            return initial_text

        generated = list(initial_text)
        window = initial_text[-window_length:]
        while len(generated) < text_length:
            probs = self.model.get(window)
            if probs is None:
                logger.debug(f"Window {window!r} never seen in training; stopping at {len(generated)} characters")
                break
            generated.append(get_random_char(probs, self.random_source))
            window = "".join(generated[-window_length:])

        return "".join(generated)
