"""Format detection -- pure function, never raises."""

import logging

from seqparse.ingestion.text import is_locus_line, split_lines
from seqparse.models import SequenceFormat

logger = logging.getLogger(__name__)


def detect_format(text: str) -> SequenceFormat:
    """Classify raw text as GenBank, FASTA or unknown.

    A ``LOCUS`` line anywhere wins over ``>`` headers, so GenBank files that
    embed FASTA-looking lines are still read as GenBank.
    """
    if any(is_locus_line(line) for line in split_lines(text)):
        fmt = SequenceFormat.GENBANK
    elif any(line.startswith(">") for line in split_lines(text.strip())):
        fmt = SequenceFormat.FASTA
    else:
        fmt = SequenceFormat.UNKNOWN

    logger.debug("Detected format: %s", fmt)
    return fmt
