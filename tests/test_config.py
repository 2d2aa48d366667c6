import pytest
from pydantic import ValidationError

from seqparse.config import GenBankLayout, _build_config
from seqparse.exceptions import ConfigError


def test_defaults(monkeypatch):
    for name in ("SEQPARSE_FEATURE_INDENT", "SEQPARSE_QUALIFIER_INDENT", "SEQPARSE_ENCODING", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    cfg = _build_config()
    assert cfg.genbank.feature_indent == 5
    assert cfg.genbank.qualifier_indent == 21
    assert cfg.reader.encoding == "utf-8"
    assert cfg.debug is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEQPARSE_FEATURE_INDENT", "3")
    monkeypatch.setenv("SEQPARSE_QUALIFIER_INDENT", "12")
    monkeypatch.setenv("SEQPARSE_ENCODING", "latin-1")
    monkeypatch.setenv("DEBUG", "true")
    cfg = _build_config()
    assert cfg.genbank == GenBankLayout(feature_indent=3, qualifier_indent=12)
    assert cfg.reader.encoding == "latin-1"
    assert cfg.debug is True


def test_non_integer_indent(monkeypatch):
    monkeypatch.setenv("SEQPARSE_FEATURE_INDENT", "five")
    with pytest.raises(ConfigError, match="SEQPARSE_FEATURE_INDENT"):
        _build_config()


def test_qualifier_indent_must_exceed_feature_indent(monkeypatch):
    monkeypatch.setenv("SEQPARSE_FEATURE_INDENT", "21")
    monkeypatch.setenv("SEQPARSE_QUALIFIER_INDENT", "5")
    with pytest.raises(ConfigError, match="Invalid GenBank layout"):
        _build_config()


def test_layout_validation():
    with pytest.raises(ValidationError):
        GenBankLayout(feature_indent=-1)
