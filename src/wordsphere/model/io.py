"""
Input Manager (JSON)
Loads the seed word list shown on start-up.
"""
import json
import logging
import os
from typing import List, Tuple

logger = logging.getLogger(__name__)


def load_sample_words(filepath: str) -> List[Tuple[str, int]]:
    """
    Read the sample words and their preset frequencies.

    The file holds ``{"words": [{"text": "...", "frequency": n}, ...]}``.
    Entries without usable text are skipped and frequencies below 1 are
    raised to 1. A missing or malformed file is not fatal: it is logged and
    an empty list is returned.

    Args:
        filepath: Path to the JSON file.

    Returns:
        (text, frequency) pairs in file order.
    """
    if not os.path.exists(filepath):
        logger.warning(f"Sample words file not found: {filepath}")
        return []

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read sample words from '{filepath}': {e}")
        return []

    entries = data.get("words", []) if isinstance(data, dict) else []
    samples: List[Tuple[str, int]] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        text = str(entry.get("text", "")).strip()
        if not text:
            continue
        try:
            frequency = max(1, int(entry.get("frequency", 1)))
        except (TypeError, ValueError):
            frequency = 1
        samples.append((text, frequency))

    logger.info(f"Loaded {len(samples)} sample words from {filepath}")
    return samples
