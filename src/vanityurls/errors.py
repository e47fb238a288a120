"""vanityurls exception hierarchy.

Shared across the compiler, fetchers, lifecycle manager and request
pipeline so every module raises and catches the same types.
"""

from dataclasses import dataclass


class VanityError(Exception):
    """Base for all vanityurls-specific errors."""


class ConfigurationError(VanityError):
    """Raised when process configuration is invalid or no snapshot is loaded."""


class FetchError(VanityError):
    """The configuration source could not supply a raw configuration."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"fetching configuration from {source}: {reason}")
        self.source = source
        self.reason = reason


@dataclass(frozen=True, slots=True)
class CompileError(VanityError):
    """A configuration failed validation.

    Tagged with the failure ``kind``, the offending ``path`` (empty for
    document-level failures) and the offending ``value`` so callers can
    log actionable detail without parsing messages.
    """

    kind: str
    path: str = ""
    value: str = ""

    def __str__(self) -> str:
        if self.path:
            return f"configuration for {self.path}: {self.kind}"
        return self.kind


class NegativeCacheAge(CompileError):  # noqa: N818
    """``cache_max_age`` is below zero."""

    def __init__(self, value: int) -> None:
        super().__init__(kind="cache_max_age is negative", value=str(value))


class UnknownVCS(CompileError):  # noqa: N818
    """An explicit ``vcs`` is not one of bzr, git, hg, svn."""

    def __init__(self, path: str, vcs: str) -> None:
        super().__init__(kind=f"unknown VCS {vcs}", path=path, value=vcs)


class CannotInferVCS(CompileError):  # noqa: N818
    """No ``vcs`` was given and the repository host does not imply one."""

    def __init__(self, path: str, repo: str) -> None:
        super().__init__(kind=f"cannot infer VCS from {repo}", path=path, value=repo)


class EmptyPath(CompileError):  # noqa: N818
    """A path key is empty once its trailing slash is stripped."""

    def __init__(self, path: str) -> None:
        super().__init__(kind="path is empty", path=path, value=path)


class DuplicatePath(CompileError):  # noqa: N818
    """Two path keys normalize to the same path."""

    def __init__(self, path: str) -> None:
        super().__init__(kind="path is configured more than once", path=path, value=path)


class RenderError(VanityError):
    """A response document could not be rendered."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"rendering {template}: {reason}")
        self.template = template
        self.reason = reason


@dataclass(frozen=True, slots=True)
class HTTPError(VanityError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher; the ASGI handler catches these and turns
    them into plain-text responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no configured path matches the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
