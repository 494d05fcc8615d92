"""lazyq - deferred, pull-based queries over in-memory sequences.

Building a query only captures a source and a predicate. Nothing is read
until the query is executed and its cursor is pulled.
"""

from lazyq.consumer import consume
from lazyq.consumer import format_value
from lazyq.consumer import print_query
from lazyq.errors import ConfigurationError
from lazyq.errors import LazyQueryError
from lazyq.errors import SourceUnavailableError
from lazyq.query import ExecutionCursor
from lazyq.query import Query
from lazyq.query import build_even_query
from lazyq.query import build_query
from lazyq.query import execute
from lazyq.query import is_even
from lazyq.source import DEFAULT_NUMBERS
from lazyq.source import SourceProvider
from lazyq.source import StaticSource
from lazyq.types import QueryState
from lazyq.types import SequenceProducer
from lazyq.types import SequenceSource

__all__ = [
  "SourceProvider",
  "StaticSource",
  "DEFAULT_NUMBERS",
  "Query",
  "ExecutionCursor",
  "build_query",
  "build_even_query",
  "execute",
  "is_even",
  "consume",
  "print_query",
  "format_value",
  "QueryState",
  "SequenceProducer",
  "SequenceSource",
  "LazyQueryError",
  "ConfigurationError",
  "SourceUnavailableError",
]
