"""
seqpipe: Lazy, Chainable Sequence Pipelines
===========================================

Wrap any iterable in a ``Sequence`` and compose transformations on it.
No element is computed until a terminal operation asks for one, so
pipelines over infinite or single-use sources are fine as long as
something (``take``, ``find``, ``first``...) stops the pull.

Core Components:
    - pipeline.combinators: generator-based map/filter/slice/... building blocks
    - pipeline.sequence: the immutable Sequence wrapper and its terminals
    - config: process-wide settings (logging, materialization warnings)

Usage:
    >>> from seqpipe import Sequence
    >>> Sequence(["hello", "world", "!"]).filter(lambda s: "o" in s).map(str.upper).collect()
    ['HELLO', 'WORLD']
"""

__version__ = "1.0.0"

from seqpipe.config import PipelineSettings, configure, settings
from seqpipe.errors import InvalidArgument, SequenceError
from seqpipe.pipeline.sequence import Sequence, seq

__all__ = [
    'InvalidArgument',
    'PipelineSettings',
    'Sequence',
    'SequenceError',
    'configure',
    'seq',
    'settings',
]
