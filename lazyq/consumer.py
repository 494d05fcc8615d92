"""Consumers that drive a query's execution and act on each result."""

from collections.abc import Callable
from typing import Any

from lazyq.query import Query
from lazyq.query import execute


def format_value(value: int) -> str:
  """Render one result: the value right-aligned to width one, then a space."""
  return f"{value:>1} "


def consume[U](query: Query[Any, U], sink: Callable[[U], object]) -> int:
  """Execute a query and pass every result to `sink`, in order, once each.

  Args:
      query: The query to execute. A fresh cursor is created for this call.
      sink: Called with each yielded element.

  Returns:
      The number of elements delivered.

  Raises:
      SourceUnavailableError: If the query's source cannot be read. Nothing
          has been delivered to `sink` in that case.
  """
  cursor = execute(query)
  count = 0
  while cursor.has_next():
    sink(cursor.next())
    count += 1
  return count


def print_query(query: Query[Any, int], echo: Callable[[str], object] = print) -> int:
  """Print each result of a query on its own line.

  Args:
      query: The query to execute.
      echo: Line writer, `print` by default.

  Returns:
      The number of lines written.
  """
  return consume(query, lambda value: echo(format_value(value)))
