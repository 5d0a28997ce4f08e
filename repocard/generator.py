"""
Markdown Generation Module

This module contains the generators for the text artifacts of a share kit:
a README snippet, a release-notes draft built from commit history, and a
press-kit overview. Each generator is a pure function of its inputs and
never touches the filesystem or network.
"""

import datetime
from typing import List, Optional, Sequence

from .formatting import ATTRIBUTION_TEXT, README_SIGNATURE, format_count
from .models import CommitRecord, RepositoryMetadata
from .parser import CommitCategorizer

DEFAULT_VERSION = "v0.0.0"
NOT_SPECIFIED = "Not specified"

SHIELDS_URL = "https://img.shields.io"


def _attribution_footer() -> List[str]:
    return ["---", "", f"<sub>{ATTRIBUTION_TEXT}</sub>"]


def _license_name(meta: RepositoryMetadata) -> str:
    return meta.license.name if meta.license else NOT_SPECIFIED


class ReadmeSnippetGenerator:
    """
    Compose a README section advertising a repository.

    The snippet always opens with the signature comment, followed by the
    title, description, shields.io badges, a stats table, links and a
    quick-start clone block.
    """

    def __init__(self, include_attribution: bool = True) -> None:
        """
        Initialize the README snippet generator.

        Args:
            include_attribution: Whether to append the attribution footer
        """
        self.include_attribution = include_attribution

    def generate_markdown(self, meta: RepositoryMetadata) -> str:
        """
        Build the README snippet.

        Args:
            meta: Repository metadata

        Returns:
            Markdown content as a string
        """
        lines: List[str] = [README_SIGNATURE]

        # Title & description
        lines.append(f"# {meta.name}\n")
        lines.append(f"{meta.description or 'A GitHub repository'}\n")

        # Badges
        lines.append(
            f"[![Stars]({SHIELDS_URL}/github/stars/{meta.full_name}?style=social)]"
            f"(https://github.com/{meta.full_name})"
        )
        lines.append(
            f"[![Forks]({SHIELDS_URL}/github/forks/{meta.full_name}?style=social)]"
            f"(https://github.com/{meta.full_name}/fork)"
        )
        if meta.license:
            badge_id = meta.license.spdx_id or meta.license.key
            lines.append(f"![License]({SHIELDS_URL}/badge/license-{badge_id}-blue.svg)")
        lines.append("")

        # Stats
        lines.append("## 📊 Stats\n")
        lines.append("| Metric | Count |")
        lines.append("|--------|-------|")
        lines.append(f"| ⭐ Stars | {format_count(meta.stargazers_count)} |")
        lines.append(f"| 🍴 Forks | {format_count(meta.forks_count)} |")
        lines.append(f"| 🔓 Issues | {format_count(meta.open_issues_count)} |")
        lines.append("")

        # Links
        lines.append("## 🔗 Links\n")
        lines.append(f"- **Repository**: [{meta.full_name}]({meta.html_url})")
        lines.append(f"- **Language**: {meta.language or NOT_SPECIFIED}")
        lines.append(f"- **License**: {_license_name(meta)}")
        lines.append("")

        # Quick start
        lines.append("## 🚀 Quick Start\n")
        lines.append("```bash")
        lines.append(f"git clone {meta.html_url}.git")
        lines.append(f"cd {meta.name}")
        lines.append("```")

        if self.include_attribution:
            lines.append("")
            lines.extend(_attribution_footer())

        return "\n".join(lines) + "\n"


class ReleaseNotesGenerator:
    """
    Draft release notes from commit history.

    Commits are grouped by :class:`CommitCategorizer`; empty sections are
    left out entirely.
    """

    def __init__(
        self,
        include_attribution: bool = True,
        categorizer: Optional[CommitCategorizer] = None,
    ) -> None:
        self.include_attribution = include_attribution
        self.categorizer = categorizer or CommitCategorizer()

    def generate_markdown(
        self,
        meta: RepositoryMetadata,
        commits: Sequence[CommitRecord],
        version: Optional[str] = None,
        release_date: Optional[datetime.date] = None,
    ) -> str:
        """
        Build a release-notes draft.

        Args:
            meta: Repository metadata
            commits: Commit history, newest first
            version: Version label; defaults to ``v0.0.0``
            release_date: Date printed in the header; defaults to today (UTC)

        Returns:
            Markdown content as a string
        """
        version = version or DEFAULT_VERSION
        if release_date is None:
            release_date = datetime.datetime.now(datetime.timezone.utc).date()

        lines: List[str] = [f"# {meta.name} {version}\n"]
        lines.append(f"**Release Date**: {release_date.strftime('%Y-%m-%d')}\n")
        lines.append("## What's Changed\n")

        for category, items in self.categorizer.categorize(commits).items():
            if not items:
                continue
            lines.append(f"### {category.title}\n")
            lines.extend(self._format_entry(commit) for commit in items)
            lines.append("")

        lines.append("## 📦 Installation\n")
        lines.append("```bash")
        lines.append(f"git clone {meta.html_url}.git")
        lines.append(f"cd {meta.name}")
        lines.append(f"git checkout {version}")
        lines.append("```")
        lines.append("")

        lines.append("## 🔗 Links\n")
        lines.append(f"- **Full Changelog**: {meta.html_url}/commits/{meta.default_branch}")
        lines.append(f"- **Repository**: {meta.html_url}")

        if self.include_attribution:
            lines.append("")
            lines.extend(_attribution_footer())

        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_entry(commit: CommitRecord) -> str:
        return f"- {commit.message} (`{commit.sha}`)"


class PressKitGenerator:
    """Compose the press-kit overview document."""

    ASSETS = (
        ("repo-card.svg", "Vector social card (editable)"),
        ("repo-card.png", "Raster social card (1200×630)"),
        ("README-snippet.md", "Ready-to-use README section"),
        ("release-notes-draft.md", "Auto-generated release notes template"),
    )

    def __init__(self, include_attribution: bool = True) -> None:
        self.include_attribution = include_attribution

    def generate_markdown(self, meta: RepositoryMetadata) -> str:
        description = meta.description or "A software project"
        language = meta.language or NOT_SPECIFIED
        license_name = _license_name(meta)

        lines: List[str] = [f"# {meta.name} — Press Kit\n"]

        lines.append("## Overview\n")
        lines.append(f"**{meta.name}** is {description}\n")

        lines.append("## Quick Facts\n")
        lines.append("| | |")
        lines.append("|---|---|")
        lines.append(f"| **Name** | {meta.name} |")
        lines.append(f"| **Author** | [{meta.owner.login}]({meta.owner.html_url}) |")
        lines.append(f"| **Repository** | [{meta.full_name}]({meta.html_url}) |")
        lines.append(f"| **Language** | {language} |")
        lines.append(f"| **License** | {license_name} |")
        lines.append(f"| **Stars** | {format_count(meta.stargazers_count)} |")
        lines.append(f"| **Forks** | {format_count(meta.forks_count)} |")
        lines.append("")

        lines.append("## Description\n")
        lines.append(f"{description}\n")

        lines.append("## Key Features\n")
        lines.append(f"- Primary language: **{language}**")
        lines.append(f"- Active development with **{format_count(meta.open_issues_count)}** open issues")
        lines.append(f"- Last updated: **{meta.updated_date}**")
        lines.append("")

        lines.append("## Topics / Tags\n")
        lines.append(self._format_topics(meta.topics) + "\n")

        lines.append("## Assets\n")
        lines.append("The following assets are included in this press kit:\n")
        lines.extend(f"- `{name}` — {label}" for name, label in self.ASSETS)
        lines.append("")

        lines.append("## Screenshots\n")
        lines.append("Place screenshots in the `screenshots/` folder.\n")

        lines.append("## Contact\n")
        lines.append(f"- **Repository**: {meta.html_url}")
        lines.append(f"- **Owner**: {meta.owner.html_url}")
        lines.append("")

        lines.append("## License\n")
        lines.append(f"This project is licensed under **{license_name}**.")

        if self.include_attribution:
            lines.append("")
            lines.extend(_attribution_footer())

        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_topics(topics: Sequence[str]) -> str:
        if not topics:
            return "No topics specified"
        return ", ".join(f"`{topic}`" for topic in topics)


def generate_readme_snippet(meta: RepositoryMetadata, include_attribution: bool = True) -> str:
    return ReadmeSnippetGenerator(include_attribution).generate_markdown(meta)


def generate_release_notes(
    meta: RepositoryMetadata,
    commits: Sequence[CommitRecord],
    version: Optional[str] = None,
    include_attribution: bool = True,
    release_date: Optional[datetime.date] = None,
) -> str:
    return ReleaseNotesGenerator(include_attribution).generate_markdown(
        meta, commits, version=version, release_date=release_date
    )


def generate_press_kit(meta: RepositoryMetadata, include_attribution: bool = True) -> str:
    return PressKitGenerator(include_attribution).generate_markdown(meta)
