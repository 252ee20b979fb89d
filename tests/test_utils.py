import logging

import pytest

from mf_ftp.utils.dsn import ensure_fully_qualified, is_fully_qualified, remove_quotes, strip_quotes
from mf_ftp.utils.encoding import decode_text, resolve_codec
from mf_ftp.utils.file_utils import load_manifest, read_report, read_text, save_manifest
from mf_ftp.utils.log import configure_logging


class TestDatasetNames:
    @pytest.mark.parametrize("name,expected", [
        ("USER.CNTL", "'USER.CNTL'"),
        ("'USER.CNTL'", "'USER.CNTL'"),
        ("/u/user1", "/u/user1"),
        ("USER.PDS(*)", "'USER.PDS(*)'"),
    ])
    def test_ensure_fully_qualified(self, name, expected):
        assert ensure_fully_qualified(name) == expected

    def test_quote_helpers(self):
        assert is_fully_qualified("'A.B'")
        assert not is_fully_qualified("'")
        assert strip_quotes("'A.B'") == "A.B"
        assert strip_quotes("'A.B") == "'A.B"
        assert remove_quotes("'A.B") == "A.B"
        assert remove_quotes("A.B'") == "A.B"


class TestEncoding:
    def test_resolve_codec(self):
        assert resolve_codec("37") == "cp037"
        assert resolve_codec("1047") == "cp1047"
        assert resolve_codec("cp500") == "cp500"
        assert resolve_codec("99999") == "99999"

    def test_decode_text(self):
        assert decode_text(b"\xc8\x85\x93\x93\x96", "37") == "Hello"
        assert decode_text("already text") == "already text"
        assert decode_text(None) == ""
        assert decode_text(b"caf\xe9", "819") == "café"


class TestFiles:
    def test_read_report(self, tmp_path):
        path = tmp_path / "report.txt"
        path.write_bytes(b"line one\r\nline two\r\n\r\n")

        assert read_report(str(path)) == ["line one", "line two"]

    def test_read_text_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Report not found"):
            read_text(str(tmp_path / "missing.txt"))

    def test_manifest_round_trip(self, tmp_path):
        path = str(tmp_path / "manifest.json")
        save_manifest(path, {"exports": [{"name": "datasets", "record_count": 3}]})

        assert load_manifest(path)["exports"][0]["record_count"] == 3


@pytest.fixture
def package_logger():
    logger = logging.getLogger("mf_ftp")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_configure_logging_replaces_handler(package_logger):
    configure_logging("DEBUG")
    logger = configure_logging("ERROR")

    assert logger is package_logger
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1
