"""GenBank feature-table parser -- pure function, no I/O.

Reads the LOCUS line and the FEATURES table of a GenBank flat file. Everything
else (DEFINITION, REFERENCE, the ORIGIN sequence block, ...) is ignored.

The table is scanned line by line with a cursor that is either ``None`` (no
feature open yet) or the feature being assembled, which also remembers the
qualifier key inserted last so continuation lines land on the right value.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

from seqparse.config import GenBankLayout, config
from seqparse.ingestion.text import is_locus_line, split_lines
from seqparse.models import Feature, Flag, GenBankDocument, QualifierValue, Scalar

logger = logging.getLogger(__name__)

_QUALIFIER_KEY = r"[A-Za-z0-9_\-]+"


class _LinePatterns(NamedTuple):
    feature: re.Pattern[str]
    qualifier: re.Pattern[str]
    continuation: re.Pattern[str]


@functools.lru_cache(maxsize=8)
def _line_patterns(feature_indent: int, qualifier_indent: int) -> _LinePatterns:
    feature_pad = " " * feature_indent
    qualifier_pad = " " * qualifier_indent
    return _LinePatterns(
        feature=re.compile(rf"{feature_pad}(\S+)\s+(.+)"),
        qualifier=re.compile(rf'{qualifier_pad}/({_QUALIFIER_KEY})(?:=(?:"([^"]*)"|(\S+)))?'),
        continuation=re.compile(rf"{qualifier_pad}(.*\S.*)"),
    )


@dataclass
class _OpenFeature:
    key: str
    location: str
    qualifiers: dict[str, QualifierValue] = field(default_factory=dict)
    last_key: str | None = None

    def add_qualifier(self, name: str, value: QualifierValue) -> None:
        existing = self.qualifiers.get(name)
        self.qualifiers[name] = value if existing is None else existing.add(value)
        self.last_key = name

    def continue_value(self, text: str) -> None:
        if self.last_key is None:
            logger.debug("Dropping continuation before any qualifier: %r", text)
            return
        self.qualifiers[self.last_key] = self.qualifiers[self.last_key].extend(text)

    def close(self) -> Feature:
        return Feature(key=self.key, location=self.location, qualifiers=dict(self.qualifiers))


def _qualifier_value(quoted: str | None, bare: str | None) -> QualifierValue:
    if quoted is not None:
        return Scalar(value=quoted)
    if bare is not None:
        return Scalar(value=bare)
    return Flag()


def _step(
    cursor: _OpenFeature | None,
    line: str,
    patterns: _LinePatterns,
    commit: Callable[[Feature], None],
) -> _OpenFeature | None:
    """Consume one feature-table line and return the new cursor."""
    match = patterns.feature.match(line)
    if match:
        if cursor is not None:
            commit(cursor.close())
        return _OpenFeature(key=match.group(1), location=match.group(2).strip())

    if cursor is None:
        return None

    match = patterns.qualifier.match(line)
    if match:
        name, quoted, bare = match.groups()
        cursor.add_qualifier(name, _qualifier_value(quoted, bare))
        return cursor

    match = patterns.continuation.match(line)
    if match:
        cursor.continue_value(match.group(1).strip())
    return cursor


def _index_after(lines: list[str], start: int, predicate: Callable[[str], bool]) -> int | None:
    for i in range(start + 1, len(lines)):
        if predicate(lines[i]):
            return i
    return None


def _feature_table(lines: list[str]) -> list[str] | None:
    """Lines after the FEATURES header up to (not including) ORIGIN or ``//``."""
    start = next((i for i, line in enumerate(lines) if line.startswith("FEATURES")), None)
    if start is None:
        return None

    end = _index_after(lines, start, lambda line: line.startswith("ORIGIN"))
    if end is None:
        end = _index_after(lines, start, lambda line: line.rstrip() == "//")
    return lines[start + 1:end]


def parse_feature_table(lines: list[str], layout: GenBankLayout | None = None) -> list[Feature]:
    """Parse FEATURES-table lines into features, in input order."""
    layout = layout or config.genbank
    patterns = _line_patterns(layout.feature_indent, layout.qualifier_indent)

    features: list[Feature] = []
    cursor: _OpenFeature | None = None
    for line in lines:
        cursor = _step(cursor, line, patterns, features.append)
    if cursor is not None:
        features.append(cursor.close())
    return features


def parse_genbank(text: str, layout: GenBankLayout | None = None) -> GenBankDocument:
    """Parse GenBank text into its LOCUS line and feature table.

    Missing sections are not errors: no LOCUS line gives ``locus=None`` and
    no FEATURES line gives an empty feature list.
    """
    lines = split_lines(text)

    locus = next((line.strip() for line in lines if is_locus_line(line)), None)

    table = _feature_table(lines)
    if table is None:
        logger.debug("No FEATURES section found (locus=%s)", locus)
        return GenBankDocument(locus=locus)

    features = parse_feature_table(table, layout)
    logger.debug("Parsed %d feature(s) for %s", len(features), locus)
    return GenBankDocument(locus=locus, features=features)
