"""Tests for the kida page renderer."""

import pytest

from vanityurls.errors import RenderError
from vanityurls.model import VCS, PathEntry
from vanityurls.templating.integration import PageRenderer, create_environment

ENTRY = PathEntry(
    path="/pkg",
    repo="https://github.com/acme/pkg",
    display="https://github.com/acme/pkg https://github.com/acme/pkg/tree/master{/dir} "
    "https://github.com/acme/pkg/blob/master{/dir}/{file}#L{line}",
    vcs=VCS.GIT,
)


class TestVanityPage:
    def test_meta_tags(self) -> None:
        html = PageRenderer().vanity("example.org/pkg", ENTRY, "")

        assert '<meta name="go-import" content="example.org/pkg git https://github.com/acme/pkg">' in html
        assert f'<meta name="go-source" content="example.org/pkg {ENTRY.display}">' in html
        assert 'content="0; url=https://godoc.org/example.org/pkg/"' in html

    def test_subpath_in_links(self) -> None:
        html = PageRenderer().vanity("example.org/pkg", ENTRY, "sub/dir")
        assert "https://godoc.org/example.org/pkg/sub/dir" in html

    def test_escapes_values(self) -> None:
        entry = PathEntry(path="/x", repo='https://e.com/"x"', display="", vcs=VCS.GIT)
        html = PageRenderer().vanity("example.org/x", entry, "")
        assert '"x"' not in html


class TestIndexPage:
    def test_lists_paths(self) -> None:
        html = PageRenderer().index("example.org", ["/a", "/b"])

        assert "<h1>example.org</h1>" in html
        assert '<a href="https://godoc.org/example.org/a">example.org/a</a>' in html
        assert '<a href="https://godoc.org/example.org/b">example.org/b</a>' in html

    def test_empty(self) -> None:
        html = PageRenderer().index("example.org", [])
        assert "<li>" not in html


class TestOverrides:
    def test_custom_index(self) -> None:
        env = create_environment(
            {"index.html": "<p>{{ host }}</p>{% for h in handlers %}<i>{{ h }}</i>{% end %}"}
        )
        html = PageRenderer(env).index("example.org", ["/a", "/b"])
        assert html == "<p>example.org</p><i>example.org/a</i><i>example.org/b</i>"

    def test_broken_template_raises_render_error(self) -> None:
        env = create_environment({"vanity.html": "{% for x in %}"})
        with pytest.raises(RenderError) as exc_info:
            PageRenderer(env).vanity("example.org/pkg", ENTRY, "")
        assert exc_info.value.template == "vanity.html"

    def test_unknown_template(self) -> None:
        with pytest.raises(RenderError):
            PageRenderer().render("missing.html", {})
