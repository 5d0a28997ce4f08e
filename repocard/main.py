#!/usr/bin/env python3
"""
Command-line entry point for the share kit generator.

Fetches a repository's metadata and recent commits from GitHub, then writes
the card, README snippet, release notes and press kit.

Usage (example):
    python -m repocard.main octocat/Hello-World --template gradient --output ./out
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from .errors import RepoCardError
from .exporter import default_export_dir, export_share_kit
from .fetcher import DEFAULT_COMMITS, MAX_COMMITS, GitHubFetcher
from .models import ExportOptions
from .rasterizer import DEFAULT_WIDTH
from .templates import TemplateVariant

logger = logging.getLogger("repocard")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a shareable kit for a GitHub repository.")
    parser.add_argument("repo", help="Repository URL or owner/repo")
    parser.add_argument("--token", "-t", default=os.environ.get("GITHUB_TOKEN"),
                        help="GitHub token (defaults to $GITHUB_TOKEN)")
    parser.add_argument("--output", "-o", default=None, help="Output directory (defaults to Downloads)")
    parser.add_argument("--template", choices=TemplateVariant.ids(), default=TemplateVariant.MODERN.value,
                        help="Card template")
    parser.add_argument("--primary-color", default=None, help="Card background color override")
    parser.add_argument("--secondary-color", default=None, help="Card accent color override")
    parser.add_argument("--no-attribution", action="store_true", help="Leave out the attribution line")
    parser.add_argument("--version-label", default=None, help="Version for the release notes draft")
    parser.add_argument("--commits", type=int, default=DEFAULT_COMMITS,
                        help=f"Number of recent commits to fetch (max {MAX_COMMITS})")
    parser.add_argument("--png-width", type=int, default=DEFAULT_WIDTH, help="Width of the PNG card")
    parser.add_argument("--json", action="store_true", help="Print the export result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the share kit generator.

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        fetcher = GitHubFetcher(token=args.token)

        logger.info("Fetching repository metadata...")
        meta = fetcher.fetch_repo_meta(args.repo)

        logger.info("Fetching commit history (max: %d commits)...", args.commits)
        commits = fetcher.fetch_commits(args.repo, count=args.commits)
        if not commits:
            logger.warning("No commits found for repository %s", meta.full_name)

        options = ExportOptions(
            output_dir=args.output or default_export_dir(),
            include_attribution=not args.no_attribution,
            template_id=args.template,
            primary_color=args.primary_color,
            secondary_color=args.secondary_color,
            version=args.version_label,
            png_width=args.png_width,
        )
        result = export_share_kit(meta, commits, options)

    except KeyboardInterrupt:
        logger.info("Share kit generation interrupted by user")
        print("\nOperation cancelled by user")
        return 1
    except RepoCardError as e:
        logger.error("Share kit generation failed: %s", e)
        print(f"Error: share kit generation failed - {e}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.success:
        print(f"✓ Share kit written to {result.output_path}")
        for path in result.files:
            print(f"  {path}")
    else:
        print(f"Error: {result.error}")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
