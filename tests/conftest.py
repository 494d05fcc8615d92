"""Shared fixtures for the lazyq test suite."""

from collections.abc import Iterator
from collections.abc import Sequence
import logging

import pytest
import structlog

from lazyq.config import configure_logging


class RecordingSequence(Sequence[int]):
  """An immutable sequence that records every access made to it."""

  def __init__(self, values):
    self._values = tuple(values)
    self.accesses: list[tuple] = []

  def __getitem__(self, index):
    self.accesses.append(("getitem", index))
    return self._values[index]

  def __len__(self):
    self.accesses.append(("len",))
    return len(self._values)

  @property
  def visited_indexes(self) -> list[int]:
    return [access[1] for access in self.accesses if access[0] == "getitem"]


@pytest.fixture
def recording_sequence() -> RecordingSequence:
  return RecordingSequence([0, 1, 2, 3, 4, 5, 6])


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
  """Keep structlog on stderr at WARNING and restore logging state afterwards."""
  root = logging.getLogger()
  original_handlers = root.handlers[:]
  original_level = root.level
  lazyq_level = logging.getLogger("lazyq").level
  configure_logging(verbose=False, log_json=False)
  yield
  root.handlers = original_handlers
  root.setLevel(original_level)
  logging.getLogger("lazyq").setLevel(lazyq_level)
  structlog.reset_defaults()
