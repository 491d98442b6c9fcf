# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Failure and issue models exchanged between the engine and the host."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity


class Position(BaseModel):
    """Source location expressed as file, byte offset, line and column."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filename: str = Field(default="", alias="Filename")
    offset: int = Field(default=0, alias="Offset")
    line: int = Field(default=0, alias="Line")
    column: int = Field(default=0, alias="Column")


class FailurePosition(BaseModel):
    """Start and end positions covered by a failure."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start: Position = Field(default_factory=Position, alias="Start")
    end: Position = Field(default_factory=Position, alias="End")


class Failure(BaseModel):
    """Raw finding emitted by a rule while linting a file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    failure: str = Field(alias="Failure")
    rule_name: str = Field(alias="RuleName")
    category: str = Field(default="", alias="Category")
    position: FailurePosition = Field(default_factory=FailurePosition, alias="Position")
    confidence: float = Field(default=1.0, alias="Confidence")
    replacement_line: str = Field(default="", alias="ReplacementLine")


class FormattedFailure(Failure):
    """Failure decorated with the severity resolved by the formatter."""

    severity: Severity = Field(default=Severity.WARNING, alias="Severity")


class LineRange(BaseModel):
    """Inclusive range of lines an issue spans."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_line: int = Field(alias="from")
    to_line: int = Field(alias="to")


class Issue(BaseModel):
    """Uniform finding handed back to the host."""

    model_config = ConfigDict(frozen=True)

    severity: str
    text: str
    pos: Position
    line_range: LineRange
    from_linter: str


@dataclass(frozen=True, slots=True)
class SourceFile:
    """File handed to each rule: its name and decoded content."""

    name: str
    content: str

    def lines(self) -> list[str]:
        """Return the file content split into lines without terminators."""
        return self.content.splitlines()


__all__ = ["Failure", "FailurePosition", "FormattedFailure", "Issue", "LineRange", "Position", "SourceFile"]
