"""Demo entry point: print the even numbers of the default source.

Run with ``python -m lazyq``.
"""

import structlog

from lazyq.config import LazyQuerySettings
from lazyq.config import configure_logging
from lazyq.consumer import print_query
from lazyq.query import build_even_query
from lazyq.source import SourceProvider

logger = structlog.get_logger("lazyq.main")


def main() -> int:
  settings = LazyQuerySettings()
  configure_logging(verbose=settings.verbose, log_json=settings.log_json)

  provider = SourceProvider()
  query = build_even_query(provider)
  count = print_query(query)
  logger.debug("demo_finished", printed=count)
  return 0


if __name__ == "__main__":
  raise SystemExit(main())
