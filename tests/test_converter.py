# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering conversion of formatted failures into issues."""

from __future__ import annotations

from pyrevive.converter import LINTER_NAME, failure_to_issue
from pyrevive.models import FormattedFailure, LineRange, Position
from pyrevive.severity import Severity
from tests.helpers.rules import make_failure


def _formatted(rule_name: str, severity: Severity = Severity.WARNING) -> FormattedFailure:
    failure = make_failure(rule_name, start_line=10, end_line=14)
    return FormattedFailure(**failure.model_dump(), severity=severity)


def test_exported_rule_collapses_line_range() -> None:
    issue = failure_to_issue(_formatted("exported"))

    assert issue.line_range == LineRange(from_line=10, to_line=10)


def test_other_rules_keep_full_line_range() -> None:
    issue = failure_to_issue(_formatted("var-naming"))

    assert issue.line_range == LineRange(from_line=10, to_line=14)


def test_issue_fields_copied_from_start_position() -> None:
    issue = failure_to_issue(_formatted("var-naming", Severity.ERROR))

    assert issue.severity == "error"
    assert issue.text == "var-naming: bad name"
    assert issue.pos == Position(filename="pkg/mod.py", line=10, column=5, offset=120)
    assert issue.from_linter == LINTER_NAME == "revive"
