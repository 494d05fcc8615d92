"""Exception types raised by lazyq."""


class LazyQueryError(Exception):
  """Base class for all errors raised by lazyq."""


class ConfigurationError(LazyQueryError, ValueError):
  """A query was built from an absent or invalid configuration.

  Raised by the build step, so no Query object is ever returned for an
  invalid source, predicate or projection.
  """


class SourceUnavailableError(LazyQueryError, LookupError):
  """The sequence behind a built query could not be read.

  Raised from the first pull of an execution, never at build time.
  """
