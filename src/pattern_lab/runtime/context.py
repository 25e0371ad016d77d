"""Process-wide configuration for the examples and the bookstore.

The configuration is read once from ``config.yaml`` (or the file named by
``PATTERN_LAB_CONFIG``) and kept in a context variable. Tests and the CLI
narrow it for a block with :func:`with_context`:

    override = ConfigData()
    override.database.url = "sqlite://"
    with with_context(override):
        DbSessionService()  # in-memory bookstore
"""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from pydantic import BaseModel

from src.pattern_lab.runtime.config.config_data import ConfigData
from src.pattern_lab.runtime.config.config_template import load_templated_yaml

CONFIG_ENV_VAR = "PATTERN_LAB_CONFIG"


def config_path() -> Path:
    """Location of the configuration file, relative to the working directory by default."""
    return Path(os.getenv(CONFIG_ENV_VAR, "config.yaml"))


@dataclass
class AppContext:
    """Application-wide state shared by the CLI, the examples and the bookstore."""

    config: ConfigData


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_templated_yaml(config_path()))
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Make ``context`` current; the returned token restores the previous one."""
    return _app_context.set(context)


def _explicit_fields(model: BaseModel) -> dict:
    """Collect the fields of ``model`` that were set explicitly, section by section.

    A nested section contributes only its own explicitly set fields, so an
    override touching ``logging.format`` leaves ``logging.file`` alone.
    """
    explicit = {}
    for field_name in type(model).model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                explicit[field_name] = nested
        elif field_name in model.model_fields_set:
            explicit[field_name] = value
    return explicit


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Return ``base`` with every explicitly set field of ``override`` applied."""
    return ConfigData.model_validate(
        _deep_merge(base.model_dump(), _explicit_fields(override))
    )


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Apply ``config_override`` on top of the current configuration for a block.

    Only explicitly set fields take effect; everything else is inherited from
    the enclosing context. ``None`` leaves the configuration unchanged.

    Raises:
        ValueError: If ``config_override`` is neither ConfigData nor None.
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    token = set_context(replace(current, config=merge_config(current.config, config_override)))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration with ``config``."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    return get_context().config
