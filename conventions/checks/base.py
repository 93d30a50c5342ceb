import abc
from typing import List, ClassVar
from dataclasses import dataclass, field
from pathlib import Path
import uuid


@dataclass(frozen=True)
class FileLocation:
    path: Path


@dataclass(frozen=True)
class IssueType:
    """
    A single requirement a file has to satisfy.

    `message` is shown when the requirement is violated, `ok_message` when it holds.
    Both are formatted with `path`.
    """
    id: str
    message: str
    ok_message: str

    def __post_init__(self):
        # Verify that the ID is a valid UUID
        if not isinstance(self.id, str):
            raise ValueError(f"Invalid ID: {self.id}")
        try:
            uuid.UUID(self.id)
        except ValueError:
            raise ValueError(f"Invalid UUID: {self.id}")

    def at(self, path: Path) -> 'Issue':
        """
        Returns an Issue with the specified path.
        """
        return Issue(self).at(path)


@dataclass(frozen=True)
class Suggestion:
    """
    A remediation hint: `found` has to become `expected`.
    """
    found: str
    expected: str
    line: int | None = None


@dataclass
class Issue:
    """
    Represents a requirement violated by a file.
    """
    issue_type: IssueType
    location: FileLocation | None = None
    suggestions: List[Suggestion] = field(default_factory=list)

    def at(self, path: Path) -> 'Issue':
        """
        Returns an Issue with the specified path.
        """
        if self.location is not None and self.location.path != path:
            raise ValueError("Cannot change the path of an existing issue.")
        self.location = FileLocation(path)
        return self

    def suggest(self, found: str, expected: str, line: int | None = None) -> 'Issue':
        self.suggestions.append(Suggestion(found, expected, line))
        return self


class FileCheck(abc.ABC):
    """
    A convention evaluated against every file named `pattern` below `root`.

    `issue_types` lists every requirement the check evaluates, in reporting order.
    `check` returns the violated ones; the others passed.
    """
    name: ClassVar[str]
    root: ClassVar[Path] = Path('.')
    pattern: ClassVar[str]
    issue_types: ClassVar[List[IssueType]]

    @abc.abstractmethod
    def check(self, path: Path, content: str) -> List[Issue]:
        raise NotImplementedError()
