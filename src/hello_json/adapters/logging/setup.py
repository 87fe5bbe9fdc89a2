"""Logging initialization for the console script and ``python -m`` entry.

Contents:
    * :func:`init_logging` – idempotent lib_log_rich initialization from layered config.
    * :func:`log_scope` – bind job context to records when the runtime is active.
    * :func:`flush_logging` – drain queued records before stdout is written.

System Role:
    Log records go to stderr only; stdout carries nothing but the greeting
    line, so callers flush pending records before printing it.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_json import __init__conf__
from hello_json.domain.errors import ConfigurationError


class LoggingConfigModel(BaseModel):
    """Pydantic model for [lib_log_rich] config section validation.

    Extra fields pass through unchanged to lib_log_rich.RuntimeConfig.

    Example:
        >>> model = LoggingConfigModel(service="hello", console_level="DEBUG")
        >>> model.service
        'hello'
        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name when unset.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich runtime with the provided configuration.

    The first call enables ``.env`` loading (so ``LOG_*`` variables apply),
    initializes the runtime from the ``[lib_log_rich]`` section, and bridges
    stdlib ``logging`` into it. Later calls return immediately.

    Args:
        config: Already-loaded layered configuration object.

    Raises:
        ConfigurationError: If the ``[lib_log_rich]`` section holds a value
            the runtime rejects, such as an unknown ``console_level``.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    try:
        # pydantic ValidationError is a ValueError subclass
        lib_log_rich.runtime.init(_build_runtime_config(config))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid [lib_log_rich] configuration: {exc}") from exc
    lib_log_rich.runtime.attach_std_logging()


@contextlib.contextmanager
def log_scope(job_id: str, **extra: object) -> Iterator[None]:
    """Bind *job_id* and *extra* to log records emitted inside the block.

    Falls through without binding while the runtime is not initialised, as
    under the in-memory test adapters.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra)):
        yield


def flush_logging() -> None:
    """Flush queued log records when the runtime is active; no-op otherwise."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


__all__ = [
    "LoggingConfigModel",
    "flush_logging",
    "init_logging",
    "log_scope",
]
