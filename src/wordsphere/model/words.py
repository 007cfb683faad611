"""
Word Frequency Store (Data Model)
=================================
This module holds the words submitted to the sphere and how often each was
submitted.

Why is this file needed?
------------------------
1. State Management: It is the single owner of word -> frequency data and of
   the order in which words first appeared.
2. Decoupling: The layout and projection code only read from it; the session
   controller is the only writer.

Classes:
    Word: One distinct word with its frequency, hue and sphere position.
    OccurrenceResult: Outcome of recording one submission.
    FrequencyStore: The container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Iterator, List, Optional

from wordsphere.config import (
    HUE_PALETTE, MIN_FONT_SIZE, MAX_FONT_SIZE, FONT_SIZE_INCREMENT
)
from wordsphere.model.vector import Vector3, ORIGIN

logger = logging.getLogger(__name__)


def hue_for_index(insertion_index: int) -> int:
    """Base hue of a word, picked from the palette by insertion order."""
    return HUE_PALETTE[insertion_index % len(HUE_PALETTE)]


def font_size_for_frequency(frequency: int) -> int:
    """12px for a single submission, +3px per repeat, capped at 40px."""
    return min(MIN_FONT_SIZE + (frequency - 1) * FONT_SIZE_INCREMENT, MAX_FONT_SIZE)


@dataclass
class Word:
    text: str
    insertion_index: int
    frequency: int = 1
    base_hue: int = field(init=False)

    # Reassigned for every word whenever the distinct count changes
    position: Vector3 = ORIGIN

    def __post_init__(self) -> None:
        self.base_hue = hue_for_index(self.insertion_index)

    @property
    def font_size(self) -> int:
        return font_size_for_frequency(self.frequency)


@dataclass(frozen=True)
class OccurrenceResult:
    is_new: bool
    frequency: int


class FrequencyStore:
    """Insertion-ordered word -> Word mapping. Words are never removed."""

    def __init__(self) -> None:
        self._words: Dict[str, Word] = {}

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, text: object) -> bool:
        return text in self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words.values())

    def words(self) -> List[Word]:
        """All words, ordered by insertion index."""
        return list(self._words.values())

    def total_distinct_count(self) -> int:
        return len(self._words)

    def get(self, text: str) -> Optional[Word]:
        return self._words.get(text)

    def frequency_of(self, text: str) -> int:
        word = self._words.get(text)
        return word.frequency if word is not None else 0

    def record_occurrence(self, text: str) -> Optional[OccurrenceResult]:
        """
        Count one submission of `text`.

        Returns:
            The occurrence result, or None when `text` is empty or
            whitespace-only (nothing is recorded in that case).
        """
        key = text.strip()
        if not key:
            logger.debug("Ignoring empty word submission.")
            return None

        word = self._words.get(key)
        if word is not None:
            word.frequency += 1
            logger.debug(f"Word '{key}' seen again (frequency {word.frequency}).")
            return OccurrenceResult(is_new=False, frequency=word.frequency)

        word = Word(text=key, insertion_index=len(self._words))
        self._words[key] = word
        logger.info(f"New word '{key}' added (#{word.insertion_index}).")
        return OccurrenceResult(is_new=True, frequency=word.frequency)
