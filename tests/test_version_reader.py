"""Tests for the version document reader"""

import pytest

from pasteup_deploy.api.exceptions import ParseError, VersionFileError
from pasteup_deploy.core.version_reader import VersionReader


def test_current_version_is_last_entry(tmp_path):
    path = tmp_path / "versions"
    path.write_text('{"versions":["1.0","1.1","2.0"]}')

    assert VersionReader(path).current_version() == "2.0"


def test_versions_keeps_order(tmp_path):
    path = tmp_path / "versions"
    path.write_text('{"versions":["0.9","1.0"]}')

    assert VersionReader(path).versions() == ["0.9", "1.0"]


def test_rereads_file_on_every_call(tmp_path):
    path = tmp_path / "versions"
    path.write_text('{"versions":["1.0"]}')
    reader = VersionReader(path)
    assert reader.current_version() == "1.0"

    path.write_text('{"versions":["1.0","1.1"]}')
    assert reader.current_version() == "1.1"


def test_missing_file_raises_version_file_error(tmp_path):
    with pytest.raises(VersionFileError) as exc_info:
        VersionReader(tmp_path / "nope").current_version()
    assert exc_info.value.error_code == "DT002"


@pytest.mark.parametrize("content", [
    "{not json",
    "[]",
    '{"version": ["1.0"]}',
    '{"versions": "1.0"}',
    '{"versions": []}',
    '{"versions": [null]}',
    '{"versions": [{"a": 1}]}',
    '{"versions": [""]}',
    '{"versions": ["1.0", 2.0]}',
])
def test_malformed_document_raises_parse_error(tmp_path, content):
    path = tmp_path / "versions"
    path.write_text(content)

    with pytest.raises(ParseError):
        VersionReader(path).current_version()


def test_invalid_utf8_raises_parse_error(tmp_path):
    path = tmp_path / "versions"
    path.write_bytes(b'{"versions": ["\xff\xfe"]}')

    with pytest.raises(ParseError):
        VersionReader(path).current_version()
