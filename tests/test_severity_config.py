"""Tests for severity enums and configuration loading."""

import pytest

from auditlens.core.config import Config, load_config
from auditlens.core.severity import FILTER_LEVELS, SEVERITY_ORDER, Severity, SeverityFilter


def test_severity_order():
    """Verify priority order and canonical casing."""
    assert [s.value for s in SEVERITY_ORDER] == ["Critical", "High", "Medium", "Low"]
    assert [level.value for level in FILTER_LEVELS] == ["All", "Critical", "High", "Medium", "Low"]


@pytest.mark.parametrize("name", ["critical", "CRITICAL", " Critical "])
def test_severity_parse_case_insensitive(name):
    """Verify severity names parse regardless of case and padding."""
    assert Severity.parse(name) is Severity.CRITICAL


def test_severity_parse_unknown():
    """Verify unknown severities raise ValueError."""
    with pytest.raises(ValueError):
        Severity.parse("informational")


def test_filter_parse():
    """Verify filters parse from names and severities."""
    assert SeverityFilter.parse("all") is SeverityFilter.ALL
    assert SeverityFilter.parse(Severity.MEDIUM) is SeverityFilter.MEDIUM
    assert SeverityFilter.MEDIUM.severity is Severity.MEDIUM
    assert SeverityFilter.ALL.severity is None
    with pytest.raises(ValueError):
        SeverityFilter.parse("none")


def test_config_defaults(monkeypatch):
    """Verify defaults when no environment overrides are set."""
    for name in ("AUDITLENS_WHOLE_WORD", "AUDITLENS_CACHE_SIZE", "AUDITLENS_CHAIN",
                 "AUDITLENS_FILE", "AUDITLENS_LINE"):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.whole_word is True
    assert config.cache_size == 32
    assert config.chain == "Ethereum/All EVM chains"
    assert config.file == "Contract.sol"
    assert config.line == "Multiple lines"


def test_config_from_environment(monkeypatch):
    """Verify environment variables override defaults."""
    monkeypatch.setenv("AUDITLENS_WHOLE_WORD", "false")
    monkeypatch.setenv("AUDITLENS_CACHE_SIZE", "4")
    monkeypatch.setenv("AUDITLENS_FILE", "Vault.sol")

    config = Config()

    assert config.whole_word is False
    assert config.cache_size == 4
    assert config.file == "Vault.sol"


def test_config_invalid_cache_size(monkeypatch):
    """Verify a malformed cache size falls back to the default."""
    monkeypatch.setenv("AUDITLENS_CACHE_SIZE", "lots")

    assert Config().cache_size == 32
