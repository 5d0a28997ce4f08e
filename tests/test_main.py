"""Tests for the command-line entry point."""

import json

import pytest

from conftest import make_metadata
from repocard import main as cli
from repocard.errors import FetchFailure
from repocard.models import ExportResult


class FakeFetcher:
    instances = []

    def __init__(self, token=None):
        self.token = token
        self.calls = []
        FakeFetcher.instances.append(self)

    def fetch_repo_meta(self, ref):
        self.calls.append(("meta", ref))
        return make_metadata()

    def fetch_commits(self, ref, count=20):
        self.calls.append(("commits", ref, count))
        return []


@pytest.fixture
def captured(monkeypatch):
    FakeFetcher.instances = []
    seen = {}

    def _export(meta, commits, options):
        seen["options"] = options
        seen["commits"] = commits
        return ExportResult.ok(f"{options.output_dir}/share-kit", ["repo-card.svg"])

    monkeypatch.setattr(cli, "GitHubFetcher", FakeFetcher)
    monkeypatch.setattr(cli, "export_share_kit", _export)
    return seen


def test_success(captured, tmp_path, capsys):
    code = cli.main(["owner/test-repo", "-o", str(tmp_path), "--template", "gradient",
                     "--primary-color", "#000", "--version-label", "v1.0.0", "--commits", "7"])
    assert code == 0

    options = captured["options"]
    assert options.output_dir == str(tmp_path)
    assert options.template_id == "gradient"
    assert options.primary_color == "#000"
    assert options.version == "v1.0.0"
    assert options.include_attribution is True
    assert FakeFetcher.instances[0].calls[1] == ("commits", "owner/test-repo", 7)
    assert "Share kit written to" in capsys.readouterr().out


def test_no_attribution_and_token(captured, tmp_path):
    cli.main(["owner/test-repo", "-o", str(tmp_path), "--no-attribution", "--token", "abc"])
    assert captured["options"].include_attribution is False
    assert FakeFetcher.instances[0].token == "abc"


def test_json_output(captured, tmp_path, capsys):
    cli.main(["owner/test-repo", "-o", str(tmp_path), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["success"] is True
    assert data["files"] == ["repo-card.svg"]


def test_unknown_template_rejected_by_parser(captured):
    with pytest.raises(SystemExit):
        cli.main(["owner/test-repo", "--template", "fancy"])


def test_fetch_failure_exits_1(monkeypatch, capsys):
    class Failing(FakeFetcher):
        def fetch_repo_meta(self, ref):
            raise FetchFailure("Failed to fetch repository metadata for a/b: 404")

    monkeypatch.setattr(cli, "GitHubFetcher", Failing)
    assert cli.main(["a/b", "-o", "/tmp"]) == 1
    assert "404" in capsys.readouterr().out


def test_failed_export_exits_1(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(cli, "GitHubFetcher", FakeFetcher)
    monkeypatch.setattr(
        cli, "export_share_kit",
        lambda meta, commits, options: ExportResult.failed("x", [], "Failed to write README-snippet.md: denied"),
    )
    assert cli.main(["owner/test-repo", "-o", str(tmp_path)]) == 1
    assert "denied" in capsys.readouterr().out
