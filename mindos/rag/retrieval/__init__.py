"""Retrieval package."""

from mindos.rag.retrieval.context import ContextAssembler
from mindos.rag.retrieval.ranker import RankedNote, Ranker, embedded_candidates

__all__ = ["ContextAssembler", "RankedNote", "Ranker", "embedded_candidates"]
