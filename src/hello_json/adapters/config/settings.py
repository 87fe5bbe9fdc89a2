"""Typed access to the ``[cli]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from hello_json.domain.errors import ConfigurationError


class CliConfigModel(BaseModel):
    """Pydantic model for [cli] config section validation.

    Example:
        >>> CliConfigModel().traceback
        False
        >>> CliConfigModel.model_validate({"traceback": "true"}).traceback
        True
    """

    traceback: bool = False

    model_config = ConfigDict(extra="ignore")


def load_cli_settings(config: Config) -> CliConfigModel:
    """Parse the ``[cli]`` section of *config*.

    A missing section yields the model defaults.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Validated CLI settings.

    Raises:
        ConfigurationError: If a value in the section has the wrong type.

    Example:
        >>> load_cli_settings(Config({"cli": {"traceback": True}}, {})).traceback
        True
        >>> load_cli_settings(Config({}, {})).traceback
        False
    """
    raw: object = config.get("cli", default={})
    try:
        return CliConfigModel.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [cli] configuration: {exc}") from exc


__all__ = [
    "CliConfigModel",
    "load_cli_settings",
]
