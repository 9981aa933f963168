import pytest

from loadingbar.utils import progress_bar


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list:
    """Replace time.sleep in the renderer and record the requested intervals."""
    recorded = []
    monkeypatch.setattr(progress_bar.time, "sleep", recorded.append)
    return recorded


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOADINGBAR_CONFIG", raising=False)
