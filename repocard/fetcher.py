"""
GitHub data fetching module.

This module handles the GitHub API interactions that provide repository
metadata and recent commit history, using PyGithub.
"""

import logging
from itertools import islice
from typing import List, Optional, Tuple

from github import Auth, Github
from github.GithubException import GithubException

from .errors import FetchFailure, InvalidRepositoryReference
from .models import CommitRecord, RepositoryMetadata

logger = logging.getLogger("repocard.fetcher")

MAX_COMMITS = 100
DEFAULT_COMMITS = 20

_URL_PREFIXES = ("https://github.com/", "http://github.com/")


def parse_repo_url(url: str) -> Tuple[str, str]:
    """
    Split a repository reference into owner and name.

    Accepts ``https://github.com/owner/repo`` (extra path segments are
    ignored), the ``http://`` form, and the short ``owner/repo`` form.

    Raises:
        InvalidRepositoryReference: If the reference matches none of them
    """
    ref = url.strip()
    for prefix in _URL_PREFIXES:
        if ref.startswith(prefix):
            parts = ref[len(prefix):].strip("/").split("/")
            if len(parts) >= 2 and parts[0] and parts[1]:
                return parts[0], parts[1]

    if "/" in ref and "://" not in ref:
        parts = ref.split("/")
        if len(parts) == 2 and parts[0] and parts[1]:
            return parts[0], parts[1]

    raise InvalidRepositoryReference(f"Invalid GitHub URL or repo format: {url}")


class GitHubFetcher:
    """
    Fetch repository metadata and commits from GitHub using PyGithub.

    Args:
        token: Personal access token (or None for unauthenticated, but rate-limited).
        client: Preconfigured ``Github`` instance; built from ``token`` when omitted.
    """

    def __init__(self, token: Optional[str] = None, client: Optional[Github] = None) -> None:
        if client is not None:
            self._g = client
        else:
            self._g = Github(auth=Auth.Token(token)) if token else Github()
        logger.debug("GitHub client initialized (authenticated=%s)", bool(token))

    def fetch_repo_meta(self, repo_ref: str) -> RepositoryMetadata:
        """
        Fetch repository metadata from GitHub.

        Args:
            repo_ref: Repository URL or ``owner/repo``

        Returns:
            RepositoryMetadata for the repository

        Raises:
            InvalidRepositoryReference: If ``repo_ref`` cannot be parsed
            FetchFailure: If the repository cannot be accessed or found
        """
        owner, name = parse_repo_url(repo_ref)
        try:
            repo = self._g.get_repo(f"{owner}/{name}")
            meta = RepositoryMetadata.from_api(repo.raw_data)
        except (GithubException, KeyError) as e:
            error_msg = f"Failed to fetch repository metadata for {owner}/{name}: {e}"
            logger.error(error_msg)
            raise FetchFailure(error_msg) from e

        logger.info("Fetched metadata for %s", meta.full_name)
        return meta

    def fetch_commits(self, repo_ref: str, count: int = DEFAULT_COMMITS) -> List[CommitRecord]:
        """
        Fetch recent commits, newest first.

        Args:
            repo_ref: Repository URL or ``owner/repo``
            count: Number of commits wanted, clamped to 1..100

        Returns:
            List of CommitRecord objects

        Raises:
            InvalidRepositoryReference: If ``repo_ref`` cannot be parsed
            FetchFailure: If commits cannot be fetched
        """
        owner, name = parse_repo_url(repo_ref)
        count = max(1, min(count, MAX_COMMITS))
        logger.info("Fetching up to %d commits from %s/%s", count, owner, name)

        try:
            repo = self._g.get_repo(f"{owner}/{name}")
            result = [
                CommitRecord.from_api(commit.raw_data)
                for commit in islice(repo.get_commits(), count)
            ]
        except (GithubException, KeyError) as e:
            error_msg = f"Failed to fetch commits for {owner}/{name}: {e}"
            logger.error(error_msg)
            raise FetchFailure(error_msg) from e

        logger.info("Fetched %d commits from %s/%s", len(result), owner, name)
        return result
