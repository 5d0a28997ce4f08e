"""
Data models for the share kit pipeline.

This module contains the shared data structures used across all modules.
Records are frozen so a render or export cannot alter the metadata it was
handed.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class LicenseInfo:
    """License attached to a repository."""
    key: str
    name: str
    spdx_id: Optional[str] = None


@dataclass(frozen=True)
class OwnerInfo:
    """Account that owns a repository."""
    login: str
    avatar_url: str
    html_url: str


@dataclass(frozen=True)
class RepositoryMetadata:
    """Repository metadata as returned by the GitHub REST API."""
    name: str
    full_name: str
    description: Optional[str]
    html_url: str
    stargazers_count: int
    forks_count: int
    watchers_count: int
    open_issues_count: int
    language: Optional[str]
    topics: Tuple[str, ...]
    created_at: str
    updated_at: str
    pushed_at: str
    default_branch: str
    owner: OwnerInfo
    license: Optional[LicenseInfo] = None

    @property
    def updated_date(self) -> str:
        """The YYYY-MM-DD part of the last update timestamp."""
        return self.updated_at[:10]

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "RepositoryMetadata":
        """
        Build metadata from a raw ``GET /repos/{owner}/{repo}`` payload.

        Args:
            payload: Decoded JSON body of the repository endpoint

        Returns:
            RepositoryMetadata with optional fields normalized
        """
        lic = payload.get("license")
        owner = payload["owner"]
        return cls(
            name=payload["name"],
            full_name=payload["full_name"],
            description=payload.get("description"),
            html_url=payload["html_url"],
            stargazers_count=int(payload.get("stargazers_count") or 0),
            forks_count=int(payload.get("forks_count") or 0),
            watchers_count=int(payload.get("watchers_count") or 0),
            open_issues_count=int(payload.get("open_issues_count") or 0),
            language=payload.get("language"),
            topics=tuple(payload.get("topics") or ()),
            created_at=payload.get("created_at") or "",
            updated_at=payload.get("updated_at") or "",
            pushed_at=payload.get("pushed_at") or "",
            default_branch=payload.get("default_branch") or "main",
            owner=OwnerInfo(
                login=owner["login"],
                avatar_url=owner.get("avatar_url", ""),
                html_url=owner.get("html_url", ""),
            ),
            license=LicenseInfo(
                key=lic["key"],
                name=lic["name"],
                spdx_id=lic.get("spdx_id"),
            ) if lic else None,
        )


@dataclass(frozen=True)
class CommitRecord:
    """A single history entry: short hash plus the first message line."""
    sha: str
    message: str
    author_name: str
    author_email: str
    date: str

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "CommitRecord":
        """Build a record from one item of ``GET /repos/{owner}/{repo}/commits``."""
        details = payload.get("commit") or {}
        author = details.get("author") or {}
        lines = (details.get("message") or "").splitlines()
        return cls(
            sha=payload["sha"][:7],
            message=lines[0] if lines else "",
            author_name=author.get("name", ""),
            author_email=author.get("email", ""),
            date=author.get("date", ""),
        )


@dataclass(frozen=True)
class ExportOptions:
    """Caller choices for one share kit export."""
    output_dir: str
    include_attribution: bool = True
    template_id: str = "modern"
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    version: Optional[str] = None
    png_width: int = 1200


@dataclass(frozen=True)
class ExportResult:
    """Outcome of an export: the files written so far and the first error, if any."""
    success: bool
    output_path: str
    files: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @classmethod
    def ok(cls, output_path: str, files) -> "ExportResult":
        return cls(success=True, output_path=output_path, files=tuple(files))

    @classmethod
    def failed(cls, output_path: str, files, error: str) -> "ExportResult":
        return cls(success=False, output_path=output_path, files=tuple(files), error=error)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["files"] = list(self.files)
        return data
