"""
* [x] Shell scripts must fail fast: the first statement has to be `set -Eeuo pipefail`.
* [x] Shell function names use snake_case, never kebab-case.
"""

from typing import List, Iterator, Tuple
from pathlib import Path
import re

from conventions.checks.base import FileCheck, Issue, IssueType

STRICT_MODE = "set -Eeuo pipefail"

# "function name() {", "function name {"
FUNCTION_DECLARATION = re.compile(r"^function\s+\S")

E_MISSING_STRICT_MODE = IssueType(
    "2c9e6d18-7a43-4f0b-8e25-d61b3f7a90c4",
    f"Missing [{STRICT_MODE}] in {{path}}",
    f"[{STRICT_MODE}] is present in {{path}}")

E_KEBAB_CASE_FUNCTION = IssueType(
    "e4a8c2b1-93d6-4f57-a0e8-5b7c16d3f942",
    "Kebab case is not allowed for function naming, use snake case instead in {path}",
    "Function names are in snake case in {path}")


def is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def is_blank(line: str) -> bool:
    return not line.strip()


def first_statement(content: str) -> Tuple[int, str] | None:
    """
    Returns the (1-based line number, line) of the first line that is neither blank nor a comment.
    """
    for i, line in enumerate(content.split("\n")):
        if is_blank(line) or is_comment(line):
            continue
        return i + 1, line
    return None


def function_name(declaration: str) -> str:
    """
    `function do-thing() {` -> `do-thing`
    """
    return declaration.split()[1].split("(")[0]


def snake_case(name: str) -> str:
    return name.replace("-", "_")


def kebab_case_functions(content: str) -> Iterator[Tuple[int, str]]:
    """
    Yields (line number, name) for each function declaration line containing a '-'.
    The dash may be anywhere on the line, not only in the name.
    """
    for i, line in enumerate(content.split("\n")):
        if is_comment(line):
            continue
        if FUNCTION_DECLARATION.match(line) and "-" in line:
            yield i + 1, function_name(line)


class StrictModeCheck(FileCheck):
    """Checks that the first statement of a shell script enables strict error handling."""
    name = "strict_mode"
    pattern = "*.sh"
    issue_types = [E_MISSING_STRICT_MODE]

    def check(self, path: Path, content: str) -> List[Issue]:
        statement = first_statement(content)
        if statement is None:
            return [E_MISSING_STRICT_MODE.at(path)]
        _, line = statement
        if line != STRICT_MODE:
            return [E_MISSING_STRICT_MODE.at(path)]
        return []


class FunctionNamingCheck(FileCheck):
    """
    Reports kebab-case shell function names along with their snake_case replacement.
    A file counts once no matter how many functions are misnamed.
    """
    name = "function_naming"
    pattern = "*.sh"
    issue_types = [E_KEBAB_CASE_FUNCTION]

    def check(self, path: Path, content: str) -> List[Issue]:
        issue = None
        for line_nr, name in kebab_case_functions(content):
            if issue is None:
                issue = E_KEBAB_CASE_FUNCTION.at(path)
            issue.suggest(name, snake_case(name), line=line_nr)
        return [issue] if issue is not None else []
