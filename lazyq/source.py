"""Sequence sources a query can be built over."""

from collections.abc import Sequence

import structlog

from lazyq.errors import SourceUnavailableError
from lazyq.types import SequenceSource

logger = structlog.get_logger(__name__)

DEFAULT_NUMBERS: tuple[int, ...] = (0, 1, 2, 3, 4, 5, 6)


class SourceProvider(SequenceSource[int]):
  """Owns the fixed, ordered sequence of integers that queries run over.

  The sequence is created once and never mutated. Closing the provider
  releases it, after which every read fails with `SourceUnavailableError`.

  Example:
      >>> provider = SourceProvider()
      >>> provider.get_sequence()
      (0, 1, 2, 3, 4, 5, 6)
  """

  def __init__(self, numbers: Sequence[int] = DEFAULT_NUMBERS) -> None:
    """Initialize the provider.

    Args:
        numbers: The values to expose. Copied into a tuple once, here.
    """
    self._numbers: tuple[int, ...] | None = tuple(numbers)

  @property
  def closed(self) -> bool:
    return self._numbers is None

  def get_sequence(self) -> tuple[int, ...]:
    """Return the immutable sequence. Same object on every call.

    Raises:
        SourceUnavailableError: If the provider has been closed.
    """
    if self._numbers is None:
      logger.warning("source_unavailable", source=self.describe())
      raise SourceUnavailableError("The source provider has been closed.")
    return self._numbers

  def open(self) -> tuple[int, ...]:
    return self.get_sequence()

  def close(self) -> None:
    """Release the sequence. Safe to call more than once."""
    if self._numbers is not None:
      self._numbers = None
      logger.debug("source_closed", source=self.describe())


class StaticSource[T](SequenceSource[T]):
  """Wraps a caller supplied sequence by reference.

  The sequence is neither copied nor inspected when the source is created.
  """

  def __init__(self, sequence: Sequence[T]) -> None:
    self._sequence = sequence

  def open(self) -> Sequence[T]:
    return self._sequence

  def describe(self) -> str:
    return f"{type(self).__name__}[{type(self._sequence).__name__}]"
