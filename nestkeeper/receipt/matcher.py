"""Fuzzy matching of free text against existing inventory names.

Two entry points:
- match()/match_items(): compare a short query (a typed or scanned product
  name) against each inventory name as a whole.
- match_against_inventory(): look for inventory names anywhere inside a whole
  OCR text blob, comparing each name with same-length windows of the text.

Scores are in [0, 1]. Containment scores 0.5 plus half the length ratio of
the contained string to the containing one; otherwise the score is one minus
the edit distance normalized by string length. The first candidate with the
highest score wins, and it must score strictly above the threshold.
"""

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from rapidfuzz.distance import Levenshtein

from nestkeeper.domain.inventory import InventoryItem, MatchMethod, MatchResult
from nestkeeper.runtime import get_logger

logger = get_logger(__name__)

ItemT = TypeVar("ItemT")

SUBSTRING_BASE_SCORE = 0.5
MIN_CONFIDENCE_SCORE = 0.5  # A match must score strictly above this
MAX_DISTANCE_FOR_MATCH = 6  # Max window edit distance in match_against_inventory()

Scored = tuple[float, MatchMethod]


def normalize_text(text: str) -> str:
    """Lower-case, turn punctuation into spaces and collapse whitespace."""
    text = re.sub(r"[^a-z0-9\s]", " ", (text or "").lower())
    return re.sub(r"\s+", " ", text).strip()


def containment_score(contained_length: int, container_length: int) -> float:
    """Score for one string appearing inside another; grows with their length ratio."""
    return SUBSTRING_BASE_SCORE + (1 - SUBSTRING_BASE_SCORE) * (contained_length / container_length)


def name_similarity(query: str, name: str) -> Scored | None:
    """Similarity of a query and a candidate name, compared as whole strings."""
    q = query.strip().lower()
    n = name.strip().lower()
    if not q or not n:
        return None

    if n in q or q in n:
        return containment_score(min(len(q), len(n)), max(len(q), len(n))), "substring"

    distance = Levenshtein.distance(q, n)
    return 1 - distance / max(len(q), len(n)), "levenshtein"


def window_similarity(text: str, name: str, max_distance: int = MAX_DISTANCE_FOR_MATCH) -> Scored | None:
    """
    Similarity of a name to the closest same-length slice of a longer text.

    Both arguments must already be normalized. Returns None when even the
    closest slice is more than max_distance edits away.
    """
    if not text or not name:
        return None

    # Containment is one-way: the name inside the text
    if name in text:
        return containment_score(len(name), len(text)), "substring"

    window = len(name)
    best_distance = window
    for start in range(max(1, len(text) - window + 1)):
        distance = Levenshtein.distance(name, text[start : start + window])
        if distance < best_distance:
            best_distance = distance
            if best_distance == 0:
                break

    if best_distance > max_distance:
        return None
    return 1 - best_distance / window, "levenshtein"


def _best_match(
    items: Sequence[ItemT],
    name_of: Callable[[ItemT], str],
    score: Callable[[str], Scored | None],
    threshold: float,
) -> MatchResult[ItemT] | None:
    best: MatchResult[ItemT] | None = None
    for item in items:
        scored = score(name_of(item))
        if scored is None:
            continue
        value, method = scored
        # Strict comparison keeps the first of equally scored candidates
        if best is None or value > best.score:
            best = MatchResult(item=item, score=value, method=method)

    if best is None or best.score <= threshold:
        return None
    logger.debug("Best match %r scored %.3f via %s", name_of(best.item), best.score, best.method)
    return best


def match(
    query: str,
    candidate_names: Sequence[str],
    threshold: float = MIN_CONFIDENCE_SCORE,
) -> MatchResult[str] | None:
    """Return the best-matching name for a query, or None."""
    if not query or not query.strip():
        return None
    return _best_match(candidate_names, lambda name: name, lambda name: name_similarity(query, name), threshold)


def match_items(
    query: str,
    items: Sequence[InventoryItem],
    threshold: float = MIN_CONFIDENCE_SCORE,
) -> MatchResult[InventoryItem] | None:
    """Return the best-matching inventory item for a query, or None."""
    if not query or not query.strip():
        return None
    return _best_match(items, lambda item: item.name, lambda name: name_similarity(query, name), threshold)


def match_against_inventory(
    items: Sequence[InventoryItem],
    ocr_text: str,
    threshold: float = MIN_CONFIDENCE_SCORE,
) -> MatchResult[InventoryItem] | None:
    """Return the inventory item best represented anywhere in an OCR text blob."""
    text = normalize_text(ocr_text)
    if not text:
        return None
    return _best_match(
        items,
        lambda item: item.name,
        lambda name: window_similarity(text, normalize_text(name)),
        threshold,
    )
