"""Lazy pipeline: the Sequence wrapper and its combinator library."""

from .combinators import Stage, indexed
from .sequence import Sequence, seq

__all__ = ['Sequence', 'Stage', 'indexed', 'seq']
