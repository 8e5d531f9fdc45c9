"""Consistency checks between the packaging metadata and the nox sessions."""

import re
import tomllib
from pathlib import Path

import noxfile

ROOT = Path(__file__).resolve().parent.parent


def _declared_distributions():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
    return {re.split(r"[\[<>=!~ ]", requirement, maxsplit=1)[0].lower() for requirement in project["dependencies"]}


def test_reinstalled_c_extensions_are_declared_dependencies():
    declared = _declared_distributions()

    for package in noxfile._C_EXT_PACKAGES:
        assert package in declared


def test_protean_is_pinned_to_one_minor_series():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
    protean = next(req for req in project["dependencies"] if req.startswith("protean"))

    assert ">=0.15" in protean
    assert "<0.16" in protean
