"""Shared test fixtures."""

from pathlib import Path

import httpx
import pytest

from ytt.core.config import YTTSettings
from ytt.fetcher.transport import FetchParams

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeFetch:
    """Fetcher double returning a canned response and recording each call."""

    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.calls: list[FetchParams] = []

    def __call__(self, params: FetchParams) -> httpx.Response:
        self.calls.append(params)
        return httpx.Response(self.status_code, text=self.text)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def watch_page(fixtures_dir: Path) -> str:
    return (fixtures_dir / "watch_page.html").read_text()


@pytest.fixture
def player_json(fixtures_dir: Path) -> str:
    return (fixtures_dir / "player.json").read_text()


@pytest.fixture
def captions_xml(fixtures_dir: Path) -> str:
    return (fixtures_dir / "captions.xml").read_text()


@pytest.fixture
def settings() -> YTTSettings:
    """Settings isolated from the environment and config files."""
    return YTTSettings.model_construct(
        user_agent="ytt-tests/1.0",
        disable_https=False,
        timeout=5.0,
        cache_ttl=None,
        verbose=False,
    )
