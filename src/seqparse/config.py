"""Parser configuration -- built once from environment variables."""

import os

from pydantic import BaseModel, ValidationError, model_validator

from seqparse.exceptions import ConfigError


class GenBankLayout(BaseModel):
    """Column layout of a GenBank FEATURES table."""

    model_config = {"frozen": True}

    feature_indent: int = 5      # spaces before a feature key
    qualifier_indent: int = 21   # spaces before a /qualifier or continuation

    @model_validator(mode="after")
    def _check_order(self) -> "GenBankLayout":
        if self.feature_indent < 0:
            raise ValueError("feature_indent must be >= 0")
        if self.qualifier_indent <= self.feature_indent:
            raise ValueError("qualifier_indent must be greater than feature_indent")
        return self


class ReaderConfig(BaseModel):
    encoding: str = "utf-8"


class AppConfig(BaseModel):
    genbank: GenBankLayout = GenBankLayout()
    reader: ReaderConfig = ReaderConfig()
    debug: bool = False


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    try:
        genbank = GenBankLayout(
            feature_indent=_env_int("SEQPARSE_FEATURE_INDENT", 5),
            qualifier_indent=_env_int("SEQPARSE_QUALIFIER_INDENT", 21),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid GenBank layout: {exc}") from exc

    return AppConfig(
        genbank=genbank,
        reader=ReaderConfig(
            encoding=os.environ.get("SEQPARSE_ENCODING", "utf-8"),
        ),
        debug=os.environ.get("DEBUG", "").lower() in ("1", "true", "yes"),
    )


config = _build_config()
