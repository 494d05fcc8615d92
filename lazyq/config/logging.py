"""structlog configuration for lazyq.

Two output modes, both on stderr so query output on stdout stays clean:
- Console (default): human readable, colored when attached to a terminal
- JSON: one structured JSON object per line
"""

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
  """Configure structlog processors and route them through stdlib logging.

  Args:
      verbose: Enable DEBUG-level output for lazyq. When False, only WARNING+.
      log_json: Use the JSON renderer instead of the console renderer.
  """
  level = logging.DEBUG if verbose else logging.WARNING

  shared_processors: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
  ]

  if log_json:
    renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
  else:
    renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

  structlog.configure(
    processors=[
      structlog.stdlib.filter_by_level,
      *shared_processors,
      structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
  )

  formatter = structlog.stdlib.ProcessorFormatter(
    foreign_pre_chain=shared_processors,
    processors=[
      structlog.stdlib.ProcessorFormatter.remove_processors_meta,
      renderer,
    ],
  )

  handler = logging.StreamHandler(sys.stderr)
  handler.setFormatter(formatter)

  root_logger = logging.getLogger()
  root_logger.handlers.clear()
  root_logger.addHandler(handler)
  root_logger.setLevel(logging.WARNING)

  logging.getLogger("lazyq").setLevel(level)
