from __future__ import annotations
from typing import List, Dict
from pathlib import Path
import logging

from conventions.checks.base import FileCheck, Issue, IssueType
from conventions.io import find_files, read_text_file
from conventions.messages import error, success, separator, red, green


def all_checks() -> Dict[str, FileCheck]:
    """
    Every convention check, in the order they run.
    """
    from conventions.checks.file_headers import LicenseHeaderCheck, ShebangCheck
    from conventions.checks.shell_scripts import StrictModeCheck, FunctionNamingCheck
    from conventions.checks.powershell import PowerShellPreambleCheck

    checks: List[FileCheck] = [
        LicenseHeaderCheck(),
        ShebangCheck(),
        StrictModeCheck(),
        FunctionNamingCheck(),
        PowerShellPreambleCheck(),
    ]
    return {check.name: check for check in checks}


def report(path: Path, issue_type: IssueType, issue: Issue | None) -> None:
    if issue is None:
        success(issue_type.ok_message.format(path=green(path.as_posix())))
        return

    error(issue_type.message.format(path=red(path.as_posix())))
    for suggestion in issue.suggestions:
        line = f" (line {suggestion.line})" if suggestion.line is not None else ""
        print(f"    {red(suggestion.found)}{line} must be renamed to {suggestion.expected}")


def run_check(check: FileCheck, root: Path) -> int:
    """
    Runs one check over all its files and returns the number of violations.
    """
    failures = 0
    file_count = 0
    for path in find_files(root / check.root, check.pattern):
        file_count += 1
        issues = check.check(path, read_text_file(path))
        by_type = {issue.issue_type: issue for issue in issues}
        for issue_type in check.issue_types:
            report(path, issue_type, by_type.get(issue_type))
        failures += len(issues)
    logging.debug(f"{check.name}: {file_count} file(s) checked, {failures} violation(s)")
    return failures


def check_main(root: str = ".", enabled_checks: List[str] | None = None) -> int:
    """
    Runs the enabled checks (all of them by default) against the repository at `root`
    and returns the total number of violations.
    """
    checks = all_checks()
    for check_name in enabled_checks or []:
        if check_name not in checks:
            raise ValueError(f"Unknown check: {check_name}")
    check_set = set(enabled_checks) if enabled_checks else set(checks.keys())

    root_path = Path(root)
    if not root_path.is_dir():
        raise ValueError(f"Path is not a directory: {root_path}")

    failures = 0
    for name, check in checks.items():
        if name not in check_set:
            continue
        separator()
        failures += run_check(check, root_path)

    if failures:
        logging.info(f"{failures} convention violation(s) found")
    else:
        logging.info("All conventions are respected")
    return failures


def exit_status(failures: int) -> int:
    return 1 if failures > 0 else 0
