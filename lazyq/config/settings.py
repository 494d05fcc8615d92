"""Runtime settings for lazyq, read from ``LAZYQ_*`` environment variables."""

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class LazyQuerySettings(BaseSettings):
  """Diagnostic settings.

  None of these change which values a query yields or what the demo prints.

  Attributes:
      verbose: Emit DEBUG events (query built, execution started, ...).
      log_json: Render log events as JSON lines instead of console text.
  """

  model_config = SettingsConfigDict(frozen=True, env_prefix="LAZYQ_")

  verbose: bool = False
  log_json: bool = False
