"""Vector comparison helpers."""

from __future__ import annotations

from collections.abc import Sequence
from math import sqrt


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors.

    Vectors of different length are incomparable and score 0.0. A zero-norm
    vector (including two empty vectors) also scores 0.0 instead of dividing
    by zero, so rankings never contain NaN.
    """
    if len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = sqrt(sum(x * x for x in a))
    norm_b = sqrt(sum(y * y for y in b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)
