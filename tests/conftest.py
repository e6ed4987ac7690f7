import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Run every test in an empty directory with no BYTEPIPE_* variables."""

    for name in ("BYTEPIPE_LOG_LEVEL", "BYTEPIPE_CREATE_OUTPUT_DIRS", "BYTEPIPE_TRACE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
