"""
RepoCard - turn GitHub repository metadata into a shareable kit: an SVG/PNG
social card, a README snippet, a release-notes draft and a press kit.
"""

from .errors import (
    FetchFailure,
    FilesystemFailure,
    InvalidRepositoryReference,
    RasterizeEncodeFailure,
    RasterizeParseFailure,
    RepoCardError,
    UnknownTemplateVariant,
)
from .exporter import ShareKitExporter, default_export_dir, export_share_kit
from .fetcher import GitHubFetcher, parse_repo_url
from .formatting import escape_markup, format_count, language_color, truncate
from .generator import (
    PressKitGenerator,
    ReadmeSnippetGenerator,
    ReleaseNotesGenerator,
    generate_press_kit,
    generate_readme_snippet,
    generate_release_notes,
)
from .models import (
    CommitRecord,
    ExportOptions,
    ExportResult,
    LicenseInfo,
    OwnerInfo,
    RepositoryMetadata,
)
from .parser import CommitCategorizer
from .rasterizer import Bitmap, rasterize
from .templates import TemplateVariant, render

__all__ = [
    'Bitmap',
    'CommitCategorizer',
    'CommitRecord',
    'ExportOptions',
    'ExportResult',
    'FetchFailure',
    'FilesystemFailure',
    'GitHubFetcher',
    'InvalidRepositoryReference',
    'LicenseInfo',
    'OwnerInfo',
    'PressKitGenerator',
    'RasterizeEncodeFailure',
    'RasterizeParseFailure',
    'ReadmeSnippetGenerator',
    'ReleaseNotesGenerator',
    'RepoCardError',
    'RepositoryMetadata',
    'ShareKitExporter',
    'TemplateVariant',
    'UnknownTemplateVariant',
    'default_export_dir',
    'escape_markup',
    'export_share_kit',
    'format_count',
    'generate_press_kit',
    'generate_readme_snippet',
    'generate_release_notes',
    'language_color',
    'parse_repo_url',
    'rasterize',
    'render',
    'truncate',
]
