"""Typed configuration schema and loader for the pagewords package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class TokenizerSettings(BaseModel):
    """Options controlling word extraction."""

    remove_punctuation: bool
    page_tag: constr(strip_whitespace=True, min_length=1)
    remove_punctuation_env: str

    model_config = ConfigDict(extra="forbid")


class InputSettings(BaseModel):
    """Which files are picked up when a directory is processed."""

    extensions: list[str]

    model_config = ConfigDict(extra="forbid")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                raise ValueError("extensions must not contain empty entries")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized


class OutputSettings(BaseModel):
    """Output file naming and JSON formatting."""

    suffix: str
    indent: conint(ge=0)
    encoding: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    tokenizer: TokenizerSettings
    input: InputSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def parse_bool(value: str) -> bool:
    """Interpret an environment flag value such as ``"yes"`` or ``"0"``."""

    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean flag value: {value!r}")


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``tokenizer.remove_punctuation_env``.
    """

    with (
        importlib_resources.files("pagewords.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    flag_env = cfg.tokenizer.remove_punctuation_env
    if flag_env in environ:
        cfg.tokenizer.remove_punctuation = parse_bool(environ[flag_env])

    return cfg


__all__ = [
    "ConfigModel",
    "TokenizerSettings",
    "InputSettings",
    "OutputSettings",
    "deep_merge_dicts",
    "parse_bool",
    "load_config",
]
