"""Kida environment setup and page rendering.

The environment is created once per App and shared by every request;
templates are compiled on first use and cached by kida.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from kida import DictLoader, Environment

from vanityurls.errors import RenderError
from vanityurls.model import PathEntry
from vanityurls.templating.templates import TEMPLATES


def create_environment(templates: Mapping[str, str] | None = None) -> Environment:
    """Create a kida Environment serving the built-in pages.

    ``templates`` overrides or adds templates by name, e.g. to brand the
    index page.
    """
    sources = dict(TEMPLATES)
    if templates:
        sources.update(templates)
    return Environment(loader=DictLoader(sources), autoescape=True)


class PageRenderer:
    """Renders the index and vanity documents.

    Any failure inside kida is reported as ``RenderError`` so the request
    pipeline can answer 500 without leaking template internals.
    """

    __slots__ = ("env",)

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env if env is not None else create_environment()

    def render(self, name: str, context: dict[str, Any]) -> str:
        try:
            template = self.env.get_template(name)
            return template.render(context)
        except Exception as exc:
            raise RenderError(name, str(exc) or type(exc).__name__) from exc

    def index(self, host: str, paths: Sequence[str]) -> str:
        """The listing served at ``/``: one godoc link per configured path."""
        return self.render(
            "index.html",
            {"host": host, "handlers": [host + path for path in paths]},
        )

    def vanity(self, import_path: str, entry: PathEntry, subpath: str) -> str:
        """The ``go-import``/``go-source`` document for a matched entry."""
        return self.render(
            "vanity.html",
            {
                "import_path": import_path,
                "subpath": subpath,
                "repo": entry.repo,
                "display": entry.display,
                "vcs": str(entry.vcs),
            },
        )
