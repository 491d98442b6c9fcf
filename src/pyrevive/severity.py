# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels understood by the rule engine."""

    WARNING = "warning"
    ERROR = "error"


DEFAULT_SEVERITY: Final[Severity] = Severity.WARNING


def coerce_severity(value: Severity | str | None) -> Severity | None:
    """Return ``value`` as a :class:`Severity`, treating blank input as unset.

    Args:
        value: Raw severity label, enum member, or ``None``.

    Returns:
        Severity | None: Parsed severity, or ``None`` when ``value`` is empty.

    Raises:
        ValueError: If ``value`` is not a recognised severity label.
    """

    if value is None:
        return None
    if isinstance(value, Severity):
        return value
    label = value.strip().lower()
    if not label:
        return None
    return Severity(label)
