"""
Share kit export module.

Renders every artifact for a repository and writes them under a fixed
folder layout::

    <output_dir>/share-kit/
        repo-card.svg
        repo-card.png
        README-snippet.md
        release-notes-draft.md
        press-kit/overview.md
        press-kit/screenshots/.placeholder

Writes happen one at a time in that order. The first failure stops the
export; files already written are left in place.
"""

import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from . import rasterizer, templates
from .errors import FilesystemFailure, RepoCardError
from .formatting import encodable
from .generator import PressKitGenerator, ReadmeSnippetGenerator, ReleaseNotesGenerator
from .models import CommitRecord, ExportOptions, ExportResult, RepositoryMetadata

logger = logging.getLogger("repocard.exporter")

SHARE_KIT_DIR = "share-kit"
PRESS_KIT_DIR = "press-kit"
SCREENSHOTS_DIR = "screenshots"

CARD_SVG = "repo-card.svg"
CARD_PNG = "repo-card.png"
README_SNIPPET = "README-snippet.md"
RELEASE_NOTES = "release-notes-draft.md"
PRESS_KIT_OVERVIEW = f"{PRESS_KIT_DIR}/overview.md"
SCREENSHOTS_PLACEHOLDER = f"{PRESS_KIT_DIR}/{SCREENSHOTS_DIR}/.placeholder"

# Relative paths in write order.
ARTIFACTS = (
    CARD_SVG,
    CARD_PNG,
    README_SNIPPET,
    RELEASE_NOTES,
    PRESS_KIT_OVERVIEW,
    SCREENSHOTS_PLACEHOLDER,
)


class ShareKitExporter:
    """
    Write a complete share kit for one repository.

    Args:
        metadata: Repository metadata
        commits: Commit history for the release notes
        options: Output folder, template and attribution choices
    """

    def __init__(
        self,
        metadata: RepositoryMetadata,
        commits: Sequence[CommitRecord],
        options: ExportOptions,
    ) -> None:
        self.metadata = metadata
        self.commits = tuple(commits)
        self.options = options
        self.root = Path(options.output_dir) / SHARE_KIT_DIR
        self.written: List[str] = []

    def run(self) -> ExportResult:
        """
        Render and write every artifact.

        Returns:
            ExportResult listing the relative paths written; on failure it
            carries the first error and the files written before it
        """
        try:
            self._export()
        except RepoCardError as e:
            logger.error("Share kit export for %s failed: %s", self.metadata.full_name, e)
            return ExportResult.failed(str(self.root), self.written, str(e))

        logger.info("Exported %d files to %s", len(self.written), self.root)
        return ExportResult.ok(str(self.root), self.written)

    def _export(self) -> None:
        opts = self.options
        include_attribution = opts.include_attribution
        variant = templates.TemplateVariant.parse(opts.template_id)

        self._make_dirs()

        card = encodable(templates.render(
            self.metadata,
            variant,
            include_attribution,
            opts.primary_color,
            opts.secondary_color,
        ))
        self._write(CARD_SVG, card)

        # The bitmap is always drawn from the card just written.
        bitmap = rasterizer.rasterize(card, opts.png_width)
        self._write(CARD_PNG, bitmap.data)

        self._write(
            README_SNIPPET,
            ReadmeSnippetGenerator(include_attribution).generate_markdown(self.metadata),
        )
        self._write(
            RELEASE_NOTES,
            ReleaseNotesGenerator(include_attribution).generate_markdown(
                self.metadata, self.commits, version=opts.version
            ),
        )
        self._write(
            PRESS_KIT_OVERVIEW,
            PressKitGenerator(include_attribution).generate_markdown(self.metadata),
        )
        self._write(SCREENSHOTS_PLACEHOLDER, "")

    def _make_dirs(self) -> None:
        screenshots = self.root / PRESS_KIT_DIR / SCREENSHOTS_DIR
        try:
            screenshots.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemFailure(f"Failed to create directories: {e}") from e

    def _write(self, relative: str, content: Union[str, bytes]) -> None:
        path = self.root / relative
        try:
            if isinstance(content, bytes):
                with open(path, "wb") as f:
                    f.write(content)
            else:
                with open(path, "w", encoding="utf-8", newline="\n") as f:
                    f.write(encodable(content))
        except (OSError, UnicodeError) as e:
            raise FilesystemFailure(f"Failed to write {relative}: {e}") from e
        self.written.append(relative)
        logger.debug("Wrote %s", path)


def export_share_kit(
    metadata: RepositoryMetadata,
    commits: Sequence[CommitRecord],
    options: ExportOptions,
) -> ExportResult:
    """Export the full share kit; see :class:`ShareKitExporter`."""
    return ShareKitExporter(metadata, commits, options).run()


def default_export_dir() -> str:
    """
    Pick a sensible default output folder.

    Returns:
        The user's Downloads folder, else Documents, else the home directory
    """
    home = Path(os.path.expanduser("~"))
    for name in ("Downloads", "Documents"):
        candidate = home / name
        if candidate.is_dir():
            return str(candidate)
    return str(home)
