from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    # config file (or entry name) the issue was found in
    source: Optional[str] = None

    def describe(self) -> str:
        where = f" [{self.source}]" if self.source else ""
        return f"{self.code}{where}: {self.message}"


class ValidationError(Exception):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(i.describe() for i in issues))

    @property
    def codes(self) -> list[str]:
        return [i.code for i in self.issues]
