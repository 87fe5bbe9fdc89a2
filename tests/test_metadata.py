"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    """Return ``[tool.hatch.build.targets.wheel]`` or an empty dict."""
    pyproject = _load_pyproject()
    tool_table = cast(dict[str, Any], pyproject.get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    build_table = cast(dict[str, Any], hatch_table.get("build", {}))
    targets_table = cast(dict[str, Any], build_table.get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory based on pyproject.toml configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str):
            candidate = PROJECT_ROOT / package_entry
            if candidate.is_dir():
                return candidate

    fallback = PROJECT_ROOT / "src" / _load_pyproject()["project"]["name"].replace("-", "_")
    if fallback.is_dir():
        return fallback

    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify print_info outputs package metadata."""
    from hello_json import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "hello_json" in captured
    assert "version" in captured
    assert "hello-json" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    """Verify static metadata constants are properly set."""
    from hello_json import __init__conf__

    assert __init__conf__.name == "hello_json"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "hello-json"


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The shell command is wired to the production entry point."""
    from hello_json import __init__conf__

    scripts = _load_pyproject()["project"]["scripts"]
    assert scripts[__init__conf__.shell_command] == "hello_json.entry:main"


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """Verify PEP 561 py.typed marker exists in the package source."""
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_wheel_includes_py_typed_and_default_config() -> None:
    """Verify py.typed and the bundled defaults are listed in wheel build includes."""
    includes = cast(list[str], _wheel_table().get("include", []))
    assert any("py.typed" in entry for entry in includes), "py.typed must be in wheel build includes"
    assert any("defaultconfig.toml" in entry for entry in includes), "defaultconfig.toml must be in wheel build includes"
