"""Exceptions raised by seqpipe itself.

User callbacks are never wrapped: whatever a map/filter/comparator
function raises reaches the terminal call unchanged.
"""


class SequenceError(Exception):
    """Base class for errors raised by seqpipe."""


class InvalidArgument(SequenceError, ValueError):
    """An argument was outside the range a combinator accepts."""
