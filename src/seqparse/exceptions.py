"""seqparse exceptions."""


class SeqParseError(Exception):
    """Base exception for seqparse."""


class ReadError(SeqParseError):
    """Raised when a sequence file cannot be read or decoded."""


class ParseError(SeqParseError):
    """Raised when a successful parse outcome was required but not produced."""


class ConfigError(SeqParseError):
    """Raised when configuration from the environment is invalid."""
