"""
Defines the abstract capabilities the query pipeline depends on.

The pipeline never works against a concrete collection type. It reads data
through a `SequenceSource` and hands results out through a
`SequenceProducer`, so any storage that can expose an ordered, indexable
sequence can back a query.
"""

from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

type Predicate[T] = Callable[[T], bool]
type Projection[T, U] = Callable[[T], U]


class QueryState(StrEnum):
  """Lifecycle of a single query execution."""

  BUILT = "built"
  EXECUTING = "executing"
  EXHAUSTED = "exhausted"


class SequenceSource[T](ABC):
  """
  Abstract base class for anything a query can read from.

  A source hands out its ordered sequence on demand. Queries keep a reference
  to the source and only call `open` when an execution pulls its first
  element.
  """

  @abstractmethod
  def open(self) -> Sequence[T]:
    """
    Returns the ordered sequence backing this source.

    Raises:
        SourceUnavailableError: If the sequence can no longer be read.
    """
    raise NotImplementedError

  def describe(self) -> str:
    """A short label for log output. Must not read the underlying data."""
    return type(self).__name__


class SequenceProducer[T](ABC):
  """
  Abstract base class for pull-based producers of values.

  The only required capability is `try_next`. The explicit pull helpers
  `has_next` and `next`, and the iterator protocol, are built on top of it.
  """

  _peeked: tuple[bool, Any] | None = None

  @abstractmethod
  def try_next(self) -> tuple[bool, T | None]:
    """
    Attempts to produce the next value.

    Returns:
        `(True, value)` when a value was produced, or `(False, None)` once the
        producer is exhausted. Exhaustion is reported the same way on every
        later call.
    """
    raise NotImplementedError

  def has_next(self) -> bool:
    """Pulls ahead by one value, if needed, and reports whether one exists."""
    if self._peeked is None:
      self._peeked = self.try_next()
    return self._peeked[0]

  def next(self) -> T:
    """
    Returns the next value.

    Raises:
        StopIteration: If the producer is exhausted.
    """
    if self._peeked is not None:
      found, value = self._peeked
      self._peeked = None
    else:
      found, value = self.try_next()
    if not found:
      raise StopIteration
    return value  # type: ignore

  def __iter__(self) -> Iterator[T]:
    return self

  def __next__(self) -> T:
    return self.next()
