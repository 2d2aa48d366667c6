"""Parse service -- dispatches raw text to the right parser.

``parse`` is the only entry point the rest of the package needs: it never
raises, and every failure comes back as a typed outcome. File reading lives
here too but stays outside ``parse``; read errors surface as ``ReadError``.
"""

import logging
from pathlib import Path

from seqparse.config import GenBankLayout, config
from seqparse.exceptions import ReadError
from seqparse.ingestion.detect import detect_format
from seqparse.ingestion.fasta import parse_fasta
from seqparse.ingestion.genbank import parse_genbank
from seqparse.models import (
    DetectionFailed,
    FastaParsed,
    GenBankParsed,
    ParseFailed,
    ParseOutcome,
    SequenceFormat,
)

logger = logging.getLogger(__name__)


def parse(text: str, layout: GenBankLayout | None = None) -> ParseOutcome:
    """Detect the format of ``text`` and parse it."""
    fmt = detect_format(text)

    if fmt == SequenceFormat.FASTA:
        try:
            return FastaParsed(records=parse_fasta(text))
        except Exception as exc:
            logger.exception("FASTA parser failed")
            return ParseFailed(reason=f"Failed to parse FASTA: {exc}")

    if fmt == SequenceFormat.GENBANK:
        try:
            return GenBankParsed(document=parse_genbank(text, layout))
        except Exception as exc:
            logger.exception("GenBank parser failed")
            return ParseFailed(reason=f"Failed to parse GenBank: {exc}")

    return DetectionFailed()


def read_sequence_file(path: Path | str, encoding: str | None = None) -> str:
    """Read a sequence file into memory as text."""
    path = Path(path)
    encoding = encoding or config.reader.encoding
    if not path.is_file():
        raise ReadError(f"Failed to read file: {path} does not exist or is not a file")

    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ReadError(f"Failed to read file: {path} is not valid {encoding} text") from exc
    except LookupError as exc:
        raise ReadError(f"Failed to read file: unknown encoding {encoding!r}") from exc
    except OSError as exc:
        raise ReadError(f"Failed to read file: {exc}") from exc


def parse_file(path: Path | str, layout: GenBankLayout | None = None) -> ParseOutcome:
    """Read ``path`` and parse its contents. Raises ``ReadError`` on I/O failure."""
    text = read_sequence_file(path)
    logger.info("Read %d characters from %s", len(text), path)
    return parse(text, layout)
