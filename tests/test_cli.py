"""Tests for the command line interface, using click.testing.CliRunner.

The crawl itself is replaced by a stub engine so nothing touches the network.
"""
import json

import pytest
import simple_crawler.cli as cli_module
from click.testing import CliRunner
from simple_crawler.cli import cli, main
from simple_crawler.crawler.models import CrawlSummary, PageOutcome, PageReport
from simple_crawler.exceptions import SeedURLError
from simple_crawler.logger import configure


class StubEngine:
    """Records that a crawl was requested and returns a canned summary."""

    calls = []

    def __init__(self, config):
        self.config = config

    def run(self):
        StubEngine.calls.append(self.config)
        return CrawlSummary(
            seed_url=self.config.seed_url,
            pages=[PageReport(self.config.seed_url, 200, PageOutcome.HTML, new_links=0, frontier_size=0)],
            robots_rules=0,
            elapsed=0.01,
        )


@pytest.fixture(autouse=True)
def patch_engine(monkeypatch):
    StubEngine.calls = []
    monkeypatch.setattr(cli_module, "Engine", StubEngine)
    yield StubEngine
    # the CLI points the log handler at the runner's stream
    configure()


def write_config(tmp_path, **overrides) -> str:
    data = {
        "seed-url": "http://example.com/a",
        "url-regex": "^http://example\\.com/",
        "sleep-time": 0,
        "save-text": True,
    }
    data.update(overrides)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "simple-crawler" in result.output


def test_successful_run(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [write_config(tmp_path)])
    assert result.exit_code == 0
    assert "Crawled 1 urls from http://example.com/a" in result.output
    assert len(StubEngine.calls) == 1


def test_report_file(tmp_path):
    out = tmp_path / "reports" / "crawl.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["--report", str(out), write_config(tmp_path)])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["seed_url"] == "http://example.com/a"
    assert data["counts"]["html"] == 1
    assert data["pages"][0]["status"] == 200


def test_no_output_toggle_exits_1_without_crawling(tmp_path):
    runner = CliRunner()
    cfg = write_config(tmp_path, **{"save-text": False, "save-html": False})
    result = runner.invoke(cli, [cfg])
    assert result.exit_code == 1
    assert "no saving settings" in result.output
    assert StubEngine.calls == []


def test_invalid_regex_exits_1(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [write_config(tmp_path, **{"url-regex": "(unclosed"})])
    assert result.exit_code == 1
    assert StubEngine.calls == []


def test_missing_config_file_exits_1(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [str(tmp_path / "absent.toml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_bad_seed_url_exits_0(tmp_path, monkeypatch):
    class SeedlessEngine(StubEngine):
        def run(self):
            raise SeedURLError(self.config.seed_url, "protocol")

    monkeypatch.setattr(cli_module, "Engine", SeedlessEngine)
    runner = CliRunner()
    result = runner.invoke(cli, [write_config(tmp_path, **{"seed-url": "example.com/a"})])
    assert result.exit_code == 0
    assert "Couldn't figure out protocol" in result.output


def test_main_usage_error_exits_1(capsys):
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "Missing argument" in capsys.readouterr().err


def test_main_normal_run_exits_0(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([write_config(tmp_path)])
    assert info.value.code == 0
