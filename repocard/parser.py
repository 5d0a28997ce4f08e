"""
Commit categorization module.

This module sorts commit history into the sections of a release-notes
draft using Conventional Commits style prefixes on the first message line.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .models import CommitRecord


@dataclass(frozen=True)
class ReleaseCategory:
    """A release-notes section and the message prefixes that select it."""
    key: str
    title: str
    prefixes: Tuple[str, ...]


FEATURES = ReleaseCategory("features", "✨ Features", ("feat", "feature"))
FIXES = ReleaseCategory("fixes", "🐛 Bug Fixes", ("fix", "bug"))
DOCUMENTATION = ReleaseCategory("docs", "📚 Documentation", ("doc",))
MAINTENANCE = ReleaseCategory("maintenance", "🔧 Maintenance", ("chore", "ci", "build"))
OTHER = ReleaseCategory("other", "📝 Other Changes", ())

# Evaluated in order; the first match wins and OTHER catches the rest.
CATEGORIES: Tuple[ReleaseCategory, ...] = (FEATURES, FIXES, DOCUMENTATION, MAINTENANCE, OTHER)


class CommitCategorizer:
    """
    Categorize commits for release notes.

    Matching is a case-insensitive prefix test on the message, so
    ``Feat: x``, ``feature/x`` and ``featuring x`` all land in Features.
    Every commit ends up in exactly one category.
    """

    def __init__(self, categories: Sequence[ReleaseCategory] = CATEGORIES) -> None:
        self.categories = tuple(categories)

    def category_for(self, message: str) -> ReleaseCategory:
        """
        Pick the category for one commit message.

        Args:
            message: Commit message; only its start is inspected

        Returns:
            The first category whose prefix matches, else the last category
        """
        lowered = message.lower()
        for category in self.categories:
            if category.prefixes and lowered.startswith(category.prefixes):
                return category
        return self.categories[-1]

    def categorize(self, commits: Sequence[CommitRecord]) -> Dict[ReleaseCategory, List[CommitRecord]]:
        """
        Group commits by release category.

        Args:
            commits: Commit history in caller order

        Returns:
            Mapping of every category (in section order) to its commits,
            preserving input order within each list
        """
        groups: Dict[ReleaseCategory, List[CommitRecord]] = {
            category: [] for category in self.categories
        }
        for commit in commits:
            groups[self.category_for(commit.message)].append(commit)
        return groups
