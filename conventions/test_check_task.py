from pathlib import Path

import pytest

from conventions.cli import main
from conventions.messages import SEPARATOR
from conventions.tasks.check import all_checks, check_main, exit_status


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


GOOD_SCRIPT = "#!/bin/bash\nset -Eeuo pipefail\n\nfunction do_thing() {\n  echo ok\n}\n"
GOOD_PS1 = "Set-StrictMode -Version latest\n$ErrorActionPreference = 'Stop'\n"


@pytest.fixture
def repo(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_checks_run_in_fixed_order():
    assert list(all_checks()) == [
        "license_header",
        "shebang",
        "strict_mode",
        "function_naming",
        "powershell_preamble",
    ]


def test_exit_status():
    assert exit_status(0) == 0
    assert exit_status(1) == 1
    assert exit_status(7) == 1


def test_empty_repository(repo, capsys):
    assert check_main() == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [SEPARATOR] * 5
    assert main([]) == 0


def test_wrong_shebang(repo, capsys):
    write(repo / "run.sh", "#!/bin/sh\nset -Eeuo pipefail\n")
    assert check_main() == 1
    out = capsys.readouterr().out
    assert "Missing [#!/bin/bash] shebang in " in out
    assert "run.sh" in out
    assert "[set -Eeuo pipefail] is present in " in out
    assert main([]) == 1


def test_license_present(repo, capsys):
    write(repo / "packages" / "core" / "src" / "lib.rs",
          "/*\n * Hurl\n * Copyright (C) 2023 Orange\n */\nfn main() {}\n")
    assert check_main() == 0
    out = capsys.readouterr().out
    assert "[Copyright (C) 2023 Orange] is present in " in out
    assert "packages/core/src/lib.rs" in out


def test_license_missing(repo, capsys):
    write(repo / "packages" / "core" / "lib.rs", "// Copyright (C) 2024 Orange\n")
    assert check_main() == 1
    assert "Missing [Copyright (C) 2023 Orange] in " in capsys.readouterr().out


def test_rust_outside_packages_is_ignored(repo, capsys):
    write(repo / "tools" / "gen.rs", "fn main() {}\n")
    assert check_main() == 0
    assert "gen.rs" not in capsys.readouterr().out


def test_kebab_case_function(repo, capsys):
    write(repo / "bin" / "build.sh", "#!/bin/bash\nset -Eeuo pipefail\n\nfunction do-thing() {\n  :\n}\n")
    assert check_main() == 1
    out = capsys.readouterr().out
    assert "Kebab case is not allowed for function naming, use snake case instead in " in out
    hints = [line for line in out.splitlines() if "must be renamed to" in line]
    assert len(hints) == 1
    assert "do-thing" in hints[0]
    assert "(line 4)" in hints[0]
    assert hints[0].endswith("must be renamed to do_thing")


def test_report_colors_paths(repo, capsys, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("ANSI_COLORS_DISABLED", "1")
    write(repo / "good.sh", GOOD_SCRIPT)
    write(repo / "bad.sh", "#!/bin/sh\n")
    assert check_main(enabled_checks=["shebang"]) == 1
    out = capsys.readouterr().out
    assert "shebang is present in \x1b[32mgood.sh\x1b[0m" in out
    assert "shebang in \x1b[31mbad.sh\x1b[0m" in out
    for line in out.splitlines():
        if line != SEPARATOR:
            assert line.endswith("\x1b[0m")


def test_cli_colors_when_not_a_terminal(repo, capsys):
    write(repo / "run.sh", "#!/bin/sh\n")
    assert main([]) == 1
    assert "\x1b[31m" in capsys.readouterr().out


def test_several_kebab_case_functions_count_once(repo):
    write(repo / "lib.sh", "#!/bin/bash\nset -Eeuo pipefail\nfunction a-b() {\n}\nfunction c-d() {\n}\n")
    assert check_main() == 1


def test_powershell_failures_count_per_line(repo, capsys):
    write(repo / "ok.ps1", GOOD_PS1)
    write(repo / "half.ps1", "Set-StrictMode -Version latest\nWrite-Host 'x'\n")
    write(repo / "bad.ps1", "Write-Host 'x'\n")
    assert check_main() == 3
    out = capsys.readouterr().out
    assert "Missing [$ErrorActionPreference = 'Stop'] in second line of " in out
    assert "[Set-StrictMode -Version latest] is present in first line of " in out


def test_failures_accumulate_across_categories(repo):
    write(repo / "packages" / "a.rs", "fn main() {}\n")
    write(repo / "x.sh", "echo hi\nfunction x-y() {\n}\n")
    # license, shebang, strict mode, naming
    assert check_main() == 4


def test_clean_repository(repo, capsys):
    write(repo / "packages" / "lib.rs", "// Copyright (C) 2023 Orange\n")
    write(repo / "bin" / "build.sh", GOOD_SCRIPT)
    write(repo / "bin" / "install.ps1", GOOD_PS1)
    assert check_main() == 0
    out = capsys.readouterr().out
    assert "Missing" not in out
    assert "Function names are in snake case in " in out


def test_one_line_per_file_per_requirement(repo, capsys):
    write(repo / "a.sh", GOOD_SCRIPT)
    write(repo / "b.sh", GOOD_SCRIPT)
    write(repo / "c.ps1", GOOD_PS1)
    check_main()
    lines = [line for line in capsys.readouterr().out.splitlines() if line != SEPARATOR]
    # 2 scripts x 3 shell checks + 1 PowerShell script x 2 lines
    assert len(lines) == 8


def test_run_is_idempotent(repo, capsys):
    write(repo / "packages" / "lib.rs", "fn main() {}\n")
    write(repo / "a.sh", "#!/bin/sh\n")
    write(repo / "sub" / "b.sh", GOOD_SCRIPT)
    first = check_main()
    first_out = capsys.readouterr().out
    second = check_main()
    assert first == second
    assert capsys.readouterr().out == first_out


def test_selected_checks(repo, capsys):
    write(repo / "a.sh", "#!/bin/sh\nset -Eeuo pipefail\n")
    assert check_main(enabled_checks=["strict_mode"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == SEPARATOR
    assert "shebang" not in out
    assert main(["--checks", "shebang"]) == 1


def test_unknown_check(repo):
    with pytest.raises(ValueError, match="Unknown check"):
        check_main(enabled_checks=["spelling"])


def test_root_must_be_a_directory(repo):
    with pytest.raises(ValueError):
        check_main(str(repo / "missing"))


def test_explicit_root(tmp_path, capsys):
    write(tmp_path / "repo" / "run.sh", "#!/bin/sh\n")
    assert main([str(tmp_path / "repo")]) == 1
    assert "run.sh" in capsys.readouterr().out


def test_list_checks(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.split() == list(all_checks())
