"""
lazyq configuration package.

Settings are read from ``LAZYQ_*`` environment variables and only steer
diagnostic logging.
"""

from .logging import configure_logging
from .settings import LazyQuerySettings

__all__ = [
  "LazyQuerySettings",
  "configure_logging",
]
