"""
* [x] Check for missing copyright headers: every Rust source file under packages/ must carry
      the Orange copyright notice.
* [x] Enforce standard script shebangs: all shell scripts must start with #!/bin/bash.
"""

from typing import List
from pathlib import Path

from conventions.checks.base import FileCheck, Issue, IssueType

COPYRIGHT_NOTICE = "Copyright (C) 2023 Orange"
BASH_SHEBANG = "#!/bin/bash"

E_MISSING_COPYRIGHT = IssueType(
    "5e0b3a6c-2f7d-4e61-9a0e-8c4b1d2f6a37",
    f"Missing [{COPYRIGHT_NOTICE}] in {{path}}",
    f"[{COPYRIGHT_NOTICE}] is present in {{path}}")

E_MISSING_SHEBANG = IssueType(
    "b7d41f90-6c2e-4a8b-b5f3-1e9a07c4d285",
    f"Missing [{BASH_SHEBANG}] shebang in {{path}}",
    f"[{BASH_SHEBANG}] shebang is present in {{path}}")


class LicenseHeaderCheck(FileCheck):
    """Checks that Rust sources under packages/ mention the copyright notice somewhere."""
    name = "license_header"
    root = Path("packages")
    pattern = "*.rs"
    issue_types = [E_MISSING_COPYRIGHT]

    def check(self, path: Path, content: str) -> List[Issue]:
        if COPYRIGHT_NOTICE in content:
            return []
        return [E_MISSING_COPYRIGHT.at(path)]


class ShebangCheck(FileCheck):
    """
    Checks the first line of shell scripts for the bash shebang.

    The shebang only has to appear somewhere in the first line, so
    `#!/bin/bash -x` passes too.
    """
    name = "shebang"
    pattern = "*.sh"
    issue_types = [E_MISSING_SHEBANG]

    def check(self, path: Path, content: str) -> List[Issue]:
        first_line = content.split("\n", 1)[0]
        if BASH_SHEBANG in first_line:
            return []
        return [E_MISSING_SHEBANG.at(path)]
