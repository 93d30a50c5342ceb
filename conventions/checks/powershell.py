"""
* [x] PowerShell scripts must open with strict mode and stop on the first error.
"""

from typing import List
from pathlib import Path

from conventions.checks.base import FileCheck, Issue, IssueType

STRICT_MODE = "Set-StrictMode -Version latest"
STOP_ON_ERROR = "$ErrorActionPreference = 'Stop'"

E_MISSING_SET_STRICT_MODE = IssueType(
    "8f1d2a7e-4b6c-49d3-a05e-c3e7b92f1d68",
    f"Missing [{STRICT_MODE}] in first line of {{path}}",
    f"[{STRICT_MODE}] is present in first line of {{path}}")

E_MISSING_STOP_ON_ERROR = IssueType(
    "a36b9e04-d1f8-4c72-9b5a-7e2d48c0f1b3",
    f"Missing [{STOP_ON_ERROR}] in second line of {{path}}",
    f"[{STOP_ON_ERROR}] is present in second line of {{path}}")


class PowerShellPreambleCheck(FileCheck):
    """
    The first two lines of a PowerShell script are fixed. Each line is its own
    requirement, so a script can fail once or twice.
    """
    name = "powershell_preamble"
    pattern = "*.ps1"
    issue_types = [E_MISSING_SET_STRICT_MODE, E_MISSING_STOP_ON_ERROR]

    def check(self, path: Path, content: str) -> List[Issue]:
        lines = content.split("\n")
        issues = []
        preamble = [
            (1, STRICT_MODE, E_MISSING_SET_STRICT_MODE),
            (2, STOP_ON_ERROR, E_MISSING_STOP_ON_ERROR),
        ]
        for line_nr, expected, issue_type in preamble:
            if len(lines) < line_nr or lines[line_nr - 1] != expected:
                issues.append(issue_type.at(path))
        return issues
