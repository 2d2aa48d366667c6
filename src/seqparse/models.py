"""Structured records produced by the FASTA and GenBank parsers."""

from __future__ import annotations

import abc
import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field, field_validator

from seqparse.exceptions import ParseError


class SequenceFormat(enum.StrEnum):
    FASTA = "fasta"
    GENBANK = "genbank"
    UNKNOWN = "unknown"


class FastaRecord(BaseModel):
    """One header/sequence pair from a FASTA file."""

    model_config = {"frozen": True}

    header: str
    sequence: str = ""

    @field_validator("sequence")
    @classmethod
    def _drop_whitespace(cls, value: str) -> str:
        return "".join(value.split())

    @computed_field
    @property
    def length(self) -> int:
        return len(self.sequence)


# --- Qualifier values ---------------------------------------------------


def _append_text(prev: str, text: str) -> str:
    return f"{prev} {text}".strip()


class _QualifierBase(BaseModel):
    model_config = {"frozen": True}

    @abc.abstractmethod
    def items(self) -> list[str]:
        """Occurrences held by this value, oldest first."""

    def add(self, other: QualifierValue) -> Multi:
        """Record a repeated occurrence of the same qualifier key."""
        return Multi(values=[*self.items(), *other.items()])


class Flag(_QualifierBase):
    """Presence-only qualifier such as ``/pseudo``."""

    kind: Literal["flag"] = "flag"

    def items(self) -> list[str]:
        # A flag occurrence inside a Multi is kept as an empty entry.
        return [""]

    def extend(self, text: str) -> Scalar:
        return Scalar(value=text)

    def display(self) -> str:
        return "true"

    def as_python(self) -> bool:
        return True


class Scalar(_QualifierBase):
    kind: Literal["scalar"] = "scalar"
    value: str

    def items(self) -> list[str]:
        return [self.value]

    def extend(self, text: str) -> Scalar:
        return Scalar(value=_append_text(self.value, text))

    def display(self) -> str:
        return self.value

    def as_python(self) -> str:
        return self.value


class Multi(_QualifierBase):
    """Qualifier key seen more than once on the same feature."""

    kind: Literal["multi"] = "multi"
    values: list[str] = Field(default_factory=list)

    def items(self) -> list[str]:
        return list(self.values)

    def extend(self, text: str) -> Multi:
        """Continuation text only ever lands on the newest value."""
        if not self.values:
            return Multi(values=[text])
        return Multi(values=[*self.values[:-1], _append_text(self.values[-1], text)])

    def display(self) -> str:
        return "; ".join(self.values)

    def as_python(self) -> list[str]:
        return list(self.values)


QualifierValue = Annotated[Union[Flag, Scalar, Multi], Field(discriminator="kind")]


# --- GenBank ------------------------------------------------------------


class Feature(BaseModel):
    """One entry of a GenBank FEATURES table."""

    model_config = {"frozen": True}

    key: str
    location: str
    qualifiers: dict[str, QualifierValue] = Field(default_factory=dict)

    def get(self, name: str) -> bool | str | list[str] | None:
        value = self.qualifiers.get(name)
        return value.as_python() if value is not None else None


class GenBankDocument(BaseModel):
    model_config = {"frozen": True}

    locus: str | None = None
    features: list[Feature] = Field(default_factory=list)


# --- Parse outcomes -----------------------------------------------------


class FastaParsed(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["fasta"] = "fasta"
    records: list[FastaRecord] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> list[FastaRecord]:
        return self.records


class GenBankParsed(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["genbank"] = "genbank"
    document: GenBankDocument

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> GenBankDocument:
        return self.document


class DetectionFailed(BaseModel):
    """Input matched neither FASTA nor GenBank."""

    model_config = {"frozen": True}

    kind: Literal["detection_failed"] = "detection_failed"
    message: str = "Unknown or unsupported file format"

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ParseError(self.message)


class ParseFailed(BaseModel):
    """A parser raised unexpectedly; ``reason`` is meant for display."""

    model_config = {"frozen": True}

    kind: Literal["parse_failed"] = "parse_failed"
    reason: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ParseError(self.reason)


ParseOutcome = Annotated[
    Union[FastaParsed, GenBankParsed, DetectionFailed, ParseFailed],
    Field(discriminator="kind"),
]
