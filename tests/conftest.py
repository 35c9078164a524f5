from pathlib import Path
from typing import Callable, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from simple_crawler.config import CrawlConfig


@pytest.fixture()
def output_dirs(tmp_path) -> Tuple[Path, Path]:
    """
    Create the html/ and text/ output directories the crawler writes into.
    """
    html_dir = tmp_path / "html"
    text_dir = tmp_path / "text"
    html_dir.mkdir()
    text_dir.mkdir()
    return html_dir, text_dir


@pytest.fixture()
def make_config(output_dirs) -> Callable[..., CrawlConfig]:
    """
    Return a factory building a valid CrawlConfig.

    Keyword overrides use field names (``save_html=True``) and are turned
    into the hyphenated keys of the config document.
    """
    html_dir, text_dir = output_dirs

    def _make(seed_url: str, url_regex: str = ".*", **overrides) -> CrawlConfig:
        data = {
            "seed-url": seed_url,
            "url-regex": url_regex,
            "sleep-time": 0,
            "save-text": True,
            "html-dir": str(html_dir),
            "text-dir": str(text_dir),
            "timeout": 5.0,
        }
        data.update({key.replace("_", "-"): value for key, value in overrides.items()})
        return CrawlConfig.model_validate(data)

    return _make


@pytest_asyncio.fixture
async def serve(unused_tcp_port: int):
    """
    Start an aiohttp application on a free local port; yields a function
    taking the app and returning its base URL. Everything is cleaned up
    after the test.
    """
    runners = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", unused_tcp_port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{unused_tcp_port}"

    yield _serve

    for runner in runners:
        await runner.cleanup()
