"""Tests for `uritpl.config`."""

from uritpl.config import PARSER_CONFIG, ParserConfig


def test_default_bound_is_signed_64_bit() -> None:
    assert PARSER_CONFIG.max_prefix_length == 2**63 - 1
    assert PARSER_CONFIG.accepts_prefix_length(2**63 - 1) is True
    assert PARSER_CONFIG.accepts_prefix_length(2**63) is False


def test_non_positive_lengths_rejected() -> None:
    config = ParserConfig()
    assert config.accepts_prefix_length(0) is False
    assert config.accepts_prefix_length(-5) is False
    assert config.accepts_prefix_length(1) is True


def test_custom_bound() -> None:
    config = ParserConfig(max_prefix_length=9999)
    assert config.accepts_prefix_length(9999) is True
    assert config.accepts_prefix_length(10000) is False
