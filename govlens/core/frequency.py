# govlens/core/frequency.py

from collections import Counter
from typing import Iterable, List

from .models import EntityCount


def count_frequency(items: Iterable[str], min_length: int) -> List[EntityCount]:
    """
    Deduplicate and count mentions, most frequent first.

    Items are trimmed before counting and compared by exact string, so case
    or internal spacing differences produce distinct entries. Items whose
    trimmed length is ``min_length`` or shorter are dropped as noise.

    Args:
        items: Raw mentions or tokens
        min_length: Noise threshold; only items strictly longer are kept

    Returns:
        EntityCount list sorted by count descending, ties in first-seen order
    """
    counts: Counter = Counter()
    for item in items:
        clean = item.strip()
        if len(clean) > min_length:
            counts[clean] += 1

    # sorted() is stable and Counter keeps insertion order, so ties stay first-seen
    ranked = sorted(counts.items(), key=lambda pair: pair[1], reverse=True)
    return [EntityCount(name=name, count=count) for name, count in ranked]
