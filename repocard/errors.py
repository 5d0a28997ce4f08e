"""
Error types raised by the share kit pipeline.

Rendering and document generation never fail on well-typed input; only
variant lookup, rasterization, filesystem writes and the GitHub
collaborator raise.
"""


class RepoCardError(RuntimeError):
    """Base class for every error the pipeline reports."""


class UnknownTemplateVariant(RepoCardError, ValueError):
    """The requested card template id is not one of the known variants."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Unknown template: {template_id}")
        self.template_id = template_id


class RasterizeParseFailure(RepoCardError):
    """The vector document could not be parsed for rasterization."""


class RasterizeEncodeFailure(RepoCardError):
    """The bitmap could not be drawn or encoded."""


class FilesystemFailure(RepoCardError):
    """Creating a directory or writing an artifact failed."""


class FetchFailure(RepoCardError):
    """The GitHub API could not provide repository metadata or commits."""


class InvalidRepositoryReference(RepoCardError, ValueError):
    """A repository URL or ``owner/repo`` string could not be parsed."""
