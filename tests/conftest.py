"""Shared test fixtures for RepoCard."""

import datetime

import pytest

from repocard.models import CommitRecord, LicenseInfo, OwnerInfo, RepositoryMetadata

RELEASE_DATE = datetime.date(2024, 6, 15)


def require_cairo():
    """Skip unless cairosvg imports; it raises OSError when libcairo is missing."""
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")


def make_metadata(**overrides) -> RepositoryMetadata:
    fields = dict(
        name="test-repo",
        full_name="owner/test-repo",
        description="A test repository",
        html_url="https://github.com/owner/test-repo",
        stargazers_count=1234,
        forks_count=56,
        watchers_count=100,
        open_issues_count=10,
        language="Rust",
        topics=("testing", "rust"),
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-06-01T00:00:00Z",
        pushed_at="2024-06-01T00:00:00Z",
        default_branch="main",
        license=LicenseInfo(key="mit", name="MIT License", spdx_id="MIT"),
        owner=OwnerInfo(
            login="owner",
            avatar_url="https://github.com/owner.png",
            html_url="https://github.com/owner",
        ),
    )
    fields.update(overrides)
    return RepositoryMetadata(**fields)


def make_commit(message: str, sha: str = "abc1234") -> CommitRecord:
    return CommitRecord(
        sha=sha,
        message=message,
        author_name="Test",
        author_email="test@example.com",
        date="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def sample_metadata():
    return make_metadata()


@pytest.fixture
def sample_commits():
    return [
        make_commit("feat: add card export", sha="a1b2c3d"),
        make_commit("fix: escape owner login", sha="b2c3d4e"),
        make_commit("refactor: split templates", sha="c3d4e5f"),
    ]


@pytest.fixture
def repo_payload():
    """Trimmed ``GET /repos/{owner}/{repo}`` response body."""
    return {
        "name": "widget",
        "full_name": "acme/widget",
        "description": "Widgets & gadgets",
        "html_url": "https://github.com/acme/widget",
        "stargazers_count": 2500,
        "forks_count": 12,
        "watchers_count": 2500,
        "open_issues_count": 3,
        "language": "Python",
        "topics": ["cli", "svg"],
        "created_at": "2023-02-01T10:00:00Z",
        "updated_at": "2024-05-20T08:30:00Z",
        "pushed_at": "2024-05-19T22:00:00Z",
        "default_branch": "develop",
        "license": {"key": "apache-2.0", "name": "Apache License 2.0", "spdx_id": "Apache-2.0"},
        "owner": {
            "login": "acme",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
            "html_url": "https://github.com/acme",
        },
    }


@pytest.fixture
def commit_payload():
    """One item of ``GET /repos/{owner}/{repo}/commits``."""
    return {
        "sha": "0123456789abcdef0123456789abcdef01234567",
        "commit": {
            "message": "feat: add gradient card\n\nLonger body text.",
            "author": {
                "name": "Ada",
                "email": "ada@example.com",
                "date": "2024-05-19T22:00:00Z",
            },
        },
    }
