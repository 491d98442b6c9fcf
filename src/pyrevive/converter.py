# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Conversion of formatted engine failures into host issues."""

from __future__ import annotations

from typing import Final

from .models import FormattedFailure, Issue, LineRange, Position
from .rules import EXPORTED_RULE

LINTER_NAME: Final[str] = "revive"


def failure_to_issue(failure: FormattedFailure) -> Issue:
    """Return the host issue describing ``failure``.

    Failures of the ``exported`` rule span the whole declaration they
    document; their range is collapsed to the first line.

    Args:
        failure: Failure decoded from the formatter output.

    Returns:
        Issue: Issue anchored at the failure's start position.
    """

    start = failure.position.start
    line_range_to = failure.position.end.line
    if failure.rule_name == EXPORTED_RULE:
        line_range_to = start.line

    return Issue(
        severity=failure.severity.value,
        text=f"{failure.rule_name}: {failure.failure}",
        pos=Position(
            filename=start.filename,
            line=start.line,
            offset=start.offset,
            column=start.column,
        ),
        line_range=LineRange(from_line=start.line, to_line=line_range_to),
        from_linter=LINTER_NAME,
    )


__all__ = ["LINTER_NAME", "failure_to_issue"]
