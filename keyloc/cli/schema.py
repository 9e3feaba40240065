"""JSON output models for the keyloc CLI."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from keyloc.aggregator import LanguageReport


class LanguagesResult(BaseModel):
    """Output of ``keyloc list``."""

    languages: List[str] = Field(description="Sorted input language codes")


class CheckResult(BaseModel):
    """Output of ``keyloc check``."""

    code: str = Field(description="Language code as given")
    normalized: str = Field(description="Primary language subtag compared")
    supported: bool


class SourceResult(BaseModel):
    name: str
    available: bool
    identifiers: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class ReportResult(BaseModel):
    """Output of ``keyloc report``."""

    platform: str
    languages: List[str]
    sources: List[SourceResult]

    @classmethod
    def from_report(cls, report: LanguageReport) -> "ReportResult":
        return cls.model_validate(report.to_dict())
