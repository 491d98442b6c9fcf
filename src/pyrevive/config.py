# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve user settings into a normalised engine configuration."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from .errors import ConfigDecodingError, ConfigEncodingError
from .lint_config import ResolvedConfig
from .mapper import RawTree, create_config_map
from .normalize import default_config, normalize_config
from .settings import ReviveSettings

LOGGER = logging.getLogger(__name__)


def get_revive_config(settings: ReviveSettings) -> ResolvedConfig:
    """Return the engine configuration equivalent to ``settings``.

    Settings without overrides resolve to the default rule set. Otherwise the
    settings are mapped to the engine's raw tree, serialised, and decoded back
    through the engine schema so that defaults and value types match what the
    engine would produce from its own configuration file.

    Args:
        settings: User settings.

    Returns:
        ResolvedConfig: Normalised configuration.

    Raises:
        InvalidArgumentKind: If rule arguments cannot be mapped.
        ConfigEncodingError: If the raw tree cannot be serialised.
        ConfigDecodingError: If the serialised tree does not match the schema.
    """

    if not settings.has_overrides():
        config = default_config()
    else:
        payload = encode_config(create_config_map(settings))
        config = decode_config(payload)
        normalize_config(config)

    LOGGER.debug("revive configuration: %r", config)
    return config


def encode_config(raw_root: RawTree) -> str:
    """Serialise ``raw_root`` into the engine's configuration document."""
    try:
        return json.dumps(raw_root, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ConfigEncodingError(f"failed to encode configuration: {exc}") from exc


def decode_config(payload: str) -> ResolvedConfig:
    """Parse an engine configuration document."""
    try:
        return ResolvedConfig.model_validate_json(payload)
    except ValidationError as exc:
        raise ConfigDecodingError(f"failed to decode configuration: {exc}") from exc


__all__ = ["decode_config", "encode_config", "get_revive_config"]
