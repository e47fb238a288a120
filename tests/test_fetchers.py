"""Tests for configuration fetchers."""

import httpx
import pytest

from vanityurls.errors import FetchError
from vanityurls.fetchers import FileFetcher, StaticFetcher, URLFetcher, parse_document
from vanityurls.model import RawConfig, RawPathConfig

DOCUMENT = """\
host: example.org
cache_max_age: 600
paths:
  /pkg:
    repo: https://github.com/acme/pkg
  /tools:
    repo: https://hg.example.org/tools
    vcs: hg
"""


class TestParseDocument:
    def test_yaml(self) -> None:
        raw = parse_document(DOCUMENT, source="test")
        assert raw.host == "example.org"
        assert raw.cache_max_age == 600
        assert raw.paths["/tools"] == RawPathConfig(repo="https://hg.example.org/tools", vcs="hg")

    def test_json_is_yaml(self) -> None:
        raw = parse_document('{"paths": {"/x": {"repo": "https://github.com/a/x"}}}', source="t")
        assert list(raw.paths) == ["/x"]

    def test_empty_document(self) -> None:
        assert parse_document("", source="t") == RawConfig()

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FetchError, match="invalid YAML") as exc_info:
            parse_document("paths: [unclosed", source="broken.yaml")
        assert exc_info.value.source == "broken.yaml"

    def test_wrong_shape(self) -> None:
        with pytest.raises(FetchError):
            parse_document("- just\n- a list\n", source="t")


class TestFileFetcher:
    def test_reads_file(self, tmp_path) -> None:
        path = tmp_path / "vanity.yaml"
        path.write_text(DOCUMENT)
        raw = FileFetcher(path).fetch()
        assert set(raw.paths) == {"/pkg", "/tools"}

    def test_rereads_on_each_fetch(self, tmp_path) -> None:
        path = tmp_path / "vanity.yaml"
        path.write_text(DOCUMENT)
        fetcher = FileFetcher(path)
        fetcher.fetch()
        path.write_text("paths: {}\n")
        assert fetcher.fetch().paths == {}

    def test_missing_file(self, tmp_path) -> None:
        path = tmp_path / "missing.yaml"
        with pytest.raises(FetchError) as exc_info:
            FileFetcher(path).fetch()
        assert exc_info.value.source == str(path)

    def test_repr(self) -> None:
        assert repr(FileFetcher("conf.yaml")) == "FileFetcher('conf.yaml')"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestURLFetcher:
    URL = "https://config.example.org/vanity.yaml"

    def test_downloads_document(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text=DOCUMENT)

        with _client(handler) as client:
            raw = URLFetcher(self.URL, client=client).fetch()

        assert seen == [self.URL]
        assert raw.host == "example.org"

    def test_http_status_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        with _client(handler) as client, pytest.raises(FetchError, match="HTTP 404"):
            URLFetcher(self.URL, client=client).fetch()

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client, pytest.raises(FetchError) as exc_info:
            URLFetcher(self.URL, client=client).fetch()
        assert exc_info.value.source == self.URL
        assert "connection refused" in str(exc_info.value)

    def test_invalid_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="paths: [")

        with _client(handler) as client, pytest.raises(FetchError, match="invalid YAML"):
            URLFetcher(self.URL, client=client).fetch()


class TestStaticFetcher:
    def test_mapping(self) -> None:
        fetcher = StaticFetcher({"host": "example.org"})
        assert fetcher.fetch().host == "example.org"

    def test_raw_config_passthrough(self) -> None:
        raw = RawConfig(host="example.org")
        assert StaticFetcher(raw).fetch() is raw

    def test_update(self) -> None:
        fetcher = StaticFetcher()
        assert fetcher.fetch() == RawConfig()
        fetcher.update({"host": "new.example.org"})
        assert fetcher.fetch().host == "new.example.org"
