import re

import pytest


def _read_outputs(fp):
    text = fp.read_text(encoding="utf-8") if fp.exists() else ""
    pattern = re.compile(r"^(\w+)<<(\S+)\n(.*?)\n\2\n", re.S | re.M)
    return {m.group(1): m.group(3) for m in pattern.finditer(text)}


@pytest.fixture
def github_output(tmp_path, monkeypatch):
    fp = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(fp))
    return fp


@pytest.fixture
def read_outputs():
    """Parse a GITHUB_OUTPUT file written with the delimiter syntax."""
    return _read_outputs
