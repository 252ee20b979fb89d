import logging

from mf_ftp.config.settings import ParserConfig


def test_defaults_are_valid():
    config = ParserConfig()

    assert config.default_owner == "*"
    assert config.validate() == (True, [])


def test_save_and_load(tmp_path):
    path = str(tmp_path / "mf_ftp.json")
    ParserConfig(keep_raw_fields=True, current_year=2019, default_owner="USER1").save(path)

    config = ParserConfig.from_file(path)

    assert config.keep_raw_fields is True
    assert config.current_year == 2019
    assert config.default_owner == "USER1"
    assert config.output_format == "json"


def test_from_dict_fills_missing_keys():
    config = ParserConfig.from_dict({"log_encoding": "1047", "default_owner": None})

    assert config.log_encoding == "1047"
    assert config.default_owner == "*"
    assert config.spark_master == "local[*]"


def test_validate_reports_every_problem():
    config = ParserConfig(
        output_format="xml",
        log_encoding="no-such-codec",
        log_level="LOUD",
        current_year=20,
        default_owner="",
    )

    is_valid, errors = config.validate()

    assert not is_valid
    assert len(errors) == 5
    assert "Invalid output format: xml" in errors


def test_ccsid_encoding_is_valid():
    assert ParserConfig(log_encoding="37").validate()[0]


def test_log_level_number():
    assert ParserConfig(log_level="debug").log_level_number == logging.DEBUG
    assert ParserConfig(log_level="LOUD").log_level_number == logging.INFO
