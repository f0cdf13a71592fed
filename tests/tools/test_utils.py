import io

import pytest
from loguru import logger

from exord.tools.utils import configure_logger, parse_values, read_values


class TestParseValues:
    @pytest.mark.parametrize("text,separator,expected", [
        ("low,medium,high", ",", ["low", "medium", "high"]),
        (" low , medium ,high ", ",", ["low", "medium", "high"]),
        ("low,,high,", ",", ["low", "high"]),
        ("low|medium", "|", ["low", "medium"]),
        ("", ",", []),
    ])
    def test_it_splits_separated_values(self, text, separator, expected):
        assert parse_values(text, separator=separator) == expected

    def test_it_requires_a_separator(self):
        with pytest.raises(AssertionError):
            parse_values("a,b", separator="")


class TestReadValues:
    def test_it_reads_one_value_per_line_and_skips_blank_lines(self):
        stream = io.StringIO("high\n\n  low \nmedium\n\n")
        assert read_values(stream) == ["high", "low", "medium"]


class TestConfigureLogger:
    def test_it_writes_warnings_to_the_log_file(self, tmp_path):
        configure_logger(log_dir=str(tmp_path))
        logger.debug("hidden message")
        logger.warning("visible message")
        logger.remove()

        content = (tmp_path / "out.log").read_text()
        assert "visible message" in content
        assert "hidden message" not in content

    def test_it_writes_debug_messages_when_verbose(self, tmp_path):
        configure_logger(log_dir=str(tmp_path), verbose=True)
        logger.debug("debug message")
        logger.remove()

        assert "debug message" in (tmp_path / "out.log").read_text()
