"""Tests for the GitHub metadata collaborator."""

from unittest.mock import MagicMock

import pytest
from github.GithubException import GithubException

from repocard.errors import FetchFailure, InvalidRepositoryReference
from repocard.fetcher import GitHubFetcher, parse_repo_url


class TestParseRepoUrl:
    @pytest.mark.parametrize(
        "ref, expected",
        [
            ("https://github.com/microsoft/vscode", ("microsoft", "vscode")),
            ("http://github.com/microsoft/vscode", ("microsoft", "vscode")),
            ("https://github.com/microsoft/vscode/", ("microsoft", "vscode")),
            ("https://github.com/microsoft/vscode/tree/main/src", ("microsoft", "vscode")),
            ("facebook/react", ("facebook", "react")),
            ("  facebook/react  ", ("facebook", "react")),
        ],
    )
    def test_valid_references(self, ref, expected):
        assert parse_repo_url(ref) == expected

    @pytest.mark.parametrize(
        "ref",
        ["invalid-url", "a/b/c", "https://gitlab.com/a/b", "https://github.com/onlyowner", "/repo", ""],
    )
    def test_invalid_references(self, ref):
        with pytest.raises(InvalidRepositoryReference):
            parse_repo_url(ref)

    def test_invalid_reference_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid GitHub URL or repo format"):
            parse_repo_url("nope")


@pytest.fixture
def client():
    return MagicMock()


def _commit(payload):
    commit = MagicMock()
    commit.raw_data = payload
    return commit


class TestFetchRepoMeta:
    def test_maps_repository(self, client, repo_payload):
        client.get_repo.return_value.raw_data = repo_payload
        meta = GitHubFetcher(client=client).fetch_repo_meta("https://github.com/acme/widget")

        client.get_repo.assert_called_once_with("acme/widget")
        assert meta.full_name == "acme/widget"
        assert meta.stargazers_count == 2500
        assert meta.topics == ("cli", "svg")
        assert meta.license.spdx_id == "Apache-2.0"
        assert meta.owner.login == "acme"
        assert meta.default_branch == "develop"

    def test_api_error_becomes_fetch_failure(self, client):
        client.get_repo.side_effect = GithubException(404, {"message": "Not Found"}, None)
        with pytest.raises(FetchFailure, match="acme/missing"):
            GitHubFetcher(client=client).fetch_repo_meta("acme/missing")

    def test_bad_reference_never_calls_api(self, client):
        with pytest.raises(InvalidRepositoryReference):
            GitHubFetcher(client=client).fetch_repo_meta("not a repo")
        client.get_repo.assert_not_called()


class TestFetchCommits:
    def test_maps_commits(self, client, commit_payload):
        client.get_repo.return_value.get_commits.return_value = [_commit(commit_payload)]
        commits = GitHubFetcher(client=client).fetch_commits("acme/widget")

        assert len(commits) == 1
        assert commits[0].sha == "0123456"
        assert commits[0].message == "feat: add gradient card"
        assert commits[0].author_email == "ada@example.com"

    def test_respects_count(self, client, commit_payload):
        client.get_repo.return_value.get_commits.return_value = [_commit(commit_payload)] * 30
        assert len(GitHubFetcher(client=client).fetch_commits("acme/widget", count=5)) == 5

    def test_count_capped_at_one_hundred(self, client, commit_payload):
        client.get_repo.return_value.get_commits.return_value = [_commit(commit_payload)] * 150
        assert len(GitHubFetcher(client=client).fetch_commits("acme/widget", count=500)) == 100

    def test_count_at_least_one(self, client, commit_payload):
        client.get_repo.return_value.get_commits.return_value = [_commit(commit_payload)] * 3
        assert len(GitHubFetcher(client=client).fetch_commits("acme/widget", count=0)) == 1

    def test_api_error_becomes_fetch_failure(self, client):
        client.get_repo.return_value.get_commits.side_effect = GithubException(403, {"message": "rate limited"}, None)
        with pytest.raises(FetchFailure, match="Failed to fetch commits for acme/widget"):
            GitHubFetcher(client=client).fetch_commits("acme/widget")
