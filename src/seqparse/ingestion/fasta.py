"""FASTA parser -- pure function, no I/O."""

import io
import logging

from Bio.SeqIO.FastaIO import SimpleFastaParser

from seqparse.models import FastaRecord

logger = logging.getLogger(__name__)


def parse_fasta(text: str) -> list[FastaRecord]:
    """Split FASTA text into records, in input order.

    Every ``>`` line opens a record; the lines up to the next ``>`` line are
    joined with all whitespace removed. A header with no sequence lines
    still yields a record of length 0.
    """
    text = text.strip()
    if text and not text.startswith(">"):
        preamble = text.split("\n>", 1)[0]
        logger.warning(
            "Ignoring %d line(s) before the first FASTA header", preamble.count("\n") + 1
        )

    records = []
    # StringIO splits on "\n" only, so form feeds and the like stay inside a line.
    for title, sequence in SimpleFastaParser(io.StringIO(text)):
        header = title.strip()
        sequence = "".join(sequence.split())
        # Doubled ">" delimiters leave chunks with nothing in them.
        if not header and not sequence:
            continue
        records.append(FastaRecord(header=header, sequence=sequence))

    logger.debug("Parsed %d FASTA record(s)", len(records))
    return records
