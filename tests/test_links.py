from pathlib import Path

import pytest

from screenerx.errors import LinkFileNotFound, LinkFileUnreadable
from screenerx.links import get_links, normalize_url, read_link_file
from screenerx.models import EffectiveTaskSettings


def make_settings(**kwargs) -> EffectiveTaskSettings:
    values = dict(
        name="t",
        browser="chrome",
        width=1920,
        height=1080,
        full_page=False,
        base_url="",
        link_file="links.txt",
        output_dir=Path("out"),
    )
    values.update(kwargs)
    return EffectiveTaskSettings(**values)


def test_relative_link_is_joined_to_base_url():
    assert (
        normalize_url("foo/bar?x=1", "https://example.com/")
        == "https://example.com/foo/bar?x=1"
    )


@pytest.mark.parametrize(
    "link", ["https://other.com/a", "http://other.com/a", "file:///tmp/a.html"]
)
def test_absolute_link_ignores_base_url(link):
    assert normalize_url(link, "https://example.com/") == link


def test_missing_base_url_leaves_link_alone():
    assert normalize_url("example.com/page", None) == "example.com/page"
    assert normalize_url("example.com/page") == "example.com/page"


def test_read_link_file_skips_blank_lines(tmp_path: Path):
    path = tmp_path / "links.txt"
    path.write_text("https://a.com\n\n/about\r\n  \n/contact", encoding="utf-8")
    assert read_link_file(path) == ["https://a.com", "/about", "/contact"]


def test_read_link_file_missing(tmp_path: Path):
    with pytest.raises(LinkFileNotFound) as excinfo:
        read_link_file(tmp_path / "missing.txt")
    assert excinfo.value.path.endswith("missing.txt")


def test_url_override_ignores_link_file(tmp_path: Path):
    settings = make_settings(
        url="https://example.com", link_file=str(tmp_path / "missing.txt")
    )
    assert get_links(settings) == ["https://example.com"]


def test_links_come_from_link_file(tmp_path: Path):
    path = tmp_path / "links.txt"
    path.write_text("/a\n/b\n", encoding="utf-8")
    assert get_links(make_settings(link_file=str(path))) == ["/a", "/b"]


def test_read_link_file_invalid_utf8(tmp_path: Path):
    path = tmp_path / "links.txt"
    path.write_bytes(b"\xff\xfe/a\n")
    with pytest.raises(LinkFileUnreadable):
        read_link_file(path)


def test_read_link_file_directory(tmp_path: Path):
    with pytest.raises(LinkFileUnreadable):
        read_link_file(tmp_path)
