from typing import List, Iterator

import os
from pathlib import Path
import pathspec


##################################################################################################
# File Reading
##################################################################################################

def read_text_file(path: Path) -> str:
    """
    Reads a whole file as text. A leading UTF-8 BOM is dropped and undecodable bytes
    are replaced, the checks only look at ASCII literals.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    with open(path, 'rt', encoding='utf-8-sig', errors='replace') as f:
        return f.read()


##################################################################################################
# File Enumeration
##################################################################################################

class FileSet:
    """
    Matches file names against gitignore-style patterns. A pattern prefixed with '!' excludes.
    """
    def __init__(self, patterns: List[str]):
        self.patterns = patterns
        self.path_spec = pathspec.PathSpec.from_lines('gitignore', patterns)

    def __call__(self, path: Path) -> bool:
        return self.path_spec.match_file(path.name)


def walk_files(path: Path) -> Iterator[Path]:
    """
    Yields the regular files below `path`, in directory listing order.
    Symbolic links are skipped, never followed.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    for name in os.listdir(path):
        child = path / name
        if child.is_symlink():
            continue
        if child.is_dir():
            yield from walk_files(child)
        elif child.is_file():
            yield child


def find_files(root: Path, pattern: str) -> Iterator[Path]:
    """
    Lazily yields the regular files under `root` whose name matches `pattern` (e.g. "*.sh").
    A missing root yields nothing.
    """
    if not root.is_dir():
        return

    matches = FileSet([pattern])
    for path in walk_files(root):
        if matches(path):
            yield path
