"""Deferred query construction and lazy execution."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from lazyq.errors import ConfigurationError
from lazyq.errors import SourceUnavailableError
from lazyq.source import StaticSource
from lazyq.types import Predicate
from lazyq.types import Projection
from lazyq.types import QueryState
from lazyq.types import SequenceProducer
from lazyq.types import SequenceSource

logger = structlog.get_logger(__name__)


def is_even(value: int) -> bool:
  """Return True when `value` is divisible by two."""
  return value % 2 == 0


def identity[T](value: T) -> T:
  return value


@dataclass(frozen=True, eq=False)
class Query[T, U]:
  """A recipe for a filtered, projected view over a sequence source.

  A Query holds a reference to its source, never a copy, and no iteration
  position. Every call to `execute` (or every `for` loop over the query)
  starts a fresh walk of the source.

  Example:
      >>> query = build_even_query([0, 1, 2, 3, 4, 5, 6])
      >>> list(query)
      [0, 2, 4, 6]
  """

  source: SequenceSource[T]
  predicate: Predicate[T]
  projection: Projection[T, U] = identity
  name: str = "query"

  def execute(self) -> "ExecutionCursor[T, U]":
    """Create a new cursor over this query. Reads nothing until pulled."""
    return ExecutionCursor(self)

  def __iter__(self) -> "ExecutionCursor[T, U]":
    return self.execute()


class ExecutionCursor[T, U](SequenceProducer[U]):
  """Transient state of one execution of a query.

  The cursor opens the query's source on the first pull, then walks it by
  index. Each element is visited once and tested once. When the walk ends
  the cursor drops its reference to the sequence and stays exhausted.
  """

  def __init__(self, query: Query[T, U]) -> None:
    self._query = query
    self._sequence: Sequence[T] | None = None
    self._length = 0
    self._position = 0
    self._state = QueryState.BUILT

  @property
  def query(self) -> Query[T, U]:
    return self._query

  @property
  def state(self) -> QueryState:
    return self._state

  @property
  def position(self) -> int:
    """Index of the next element to visit in the source sequence."""
    return self._position

  def _start(self) -> None:
    try:
      sequence = self._query.source.open()
    except SourceUnavailableError:
      self._state = QueryState.EXHAUSTED
      logger.warning("execution_failed", query=self._query.name, source=self._query.source.describe())
      raise
    self._sequence = sequence
    self._length = len(sequence)
    self._state = QueryState.EXECUTING
    logger.debug("execution_started", query=self._query.name, length=self._length)

  def _finish(self) -> None:
    self._sequence = None
    self._state = QueryState.EXHAUSTED
    logger.debug("execution_exhausted", query=self._query.name, visited=self._position)

  def try_next(self) -> tuple[bool, U | None]:
    if self._state is QueryState.EXHAUSTED:
      return False, None
    if self._state is QueryState.BUILT:
      self._start()

    sequence: Sequence[T] = self._sequence  # type: ignore
    predicate = self._query.predicate
    while self._position < self._length:
      value = sequence[self._position]
      self._position += 1
      if predicate(value):
        return True, self._query.projection(value)

    self._finish()
    return False, None

  def __repr__(self) -> str:
    return f"<ExecutionCursor query={self._query.name!r} state={self._state} position={self._position}>"


def _as_source(source: Any) -> SequenceSource:
  """Resolve what a caller passed as a data source without reading it."""
  match source:
    case None:
      raise ConfigurationError("No data source was provided to build the query.")
    case SequenceSource():
      return source
    case str() | bytes() | bytearray():
      raise ConfigurationError(f"A {type(source).__name__} is not a valid data source for a query.")
    case Sequence():
      return StaticSource(source)
    case _:
      raise ConfigurationError(f"Data source must be an ordered sequence, not {type(source).__name__}.")


def build_query[T, U](
  source: SequenceSource[T] | Sequence[T] | None,
  predicate: Predicate[T],
  projection: Projection[T, U] = identity,
  *,
  name: str = "query",
) -> Query[T, U]:
  """Build a deferred filter+select query over a source.

  No element of the source is read here. The source is only checked for
  being present and of a usable kind.

  Args:
      source: A `SequenceSource` or any ordered `Sequence`.
      predicate: Test deciding which elements are kept.
      projection: Mapping applied to kept elements. Identity by default.
      name: Label used in log output.

  Returns:
      A Query that can be executed any number of times.

  Raises:
      ConfigurationError: If the source is absent or not a sequence, or if
          the predicate or projection is not callable.
  """
  try:
    resolved = _as_source(source)
    if not callable(predicate):
      raise ConfigurationError(f"Predicate must be callable, not {type(predicate).__name__}.")
    if not callable(projection):
      raise ConfigurationError(f"Projection must be callable, not {type(projection).__name__}.")
  except ConfigurationError as e:
    logger.warning("query_rejected", query=name, reason=str(e))
    raise

  query = Query(source=resolved, predicate=predicate, projection=projection, name=name)
  logger.debug("query_built", query=name, source=resolved.describe())
  return query


def build_even_query(source_sequence: SequenceSource[int] | Sequence[int] | None) -> Query[int, int]:
  """Build a deferred query selecting the even numbers of a sequence.

  Args:
      source_sequence: The sequence, or sequence source, to query.

  Returns:
      A Query yielding the even elements in source order.

  Raises:
      ConfigurationError: If no usable data source was given.
  """
  return build_query(source_sequence, is_even, name="even")


def execute[T, U](query: Query[T, U]) -> ExecutionCursor[T, U]:
  """Start a new, independent execution of a built query.

  The returned cursor is lazy: the source is opened on the first pull, and a
  `SourceUnavailableError` surfaces from that pull rather than from here.

  Raises:
      TypeError: If `query` is not a Query.
  """
  if not isinstance(query, Query):
    raise TypeError(f"execute() expects a Query, not {type(query).__name__}")
  return query.execute()
