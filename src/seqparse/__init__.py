"""seqparse: FASTA and GenBank feature-table parsing."""

from seqparse.ingestion.detect import detect_format
from seqparse.ingestion.fasta import parse_fasta
from seqparse.ingestion.genbank import parse_genbank
from seqparse.models import (
    DetectionFailed,
    FastaParsed,
    FastaRecord,
    Feature,
    Flag,
    GenBankDocument,
    GenBankParsed,
    Multi,
    ParseFailed,
    ParseOutcome,
    Scalar,
    SequenceFormat,
)
from seqparse.services.parse_service import parse, parse_file, read_sequence_file

__all__ = [
    "DetectionFailed",
    "FastaParsed",
    "FastaRecord",
    "Feature",
    "Flag",
    "GenBankDocument",
    "GenBankParsed",
    "Multi",
    "ParseFailed",
    "ParseOutcome",
    "Scalar",
    "SequenceFormat",
    "detect_format",
    "parse",
    "parse_fasta",
    "parse_file",
    "parse_genbank",
    "read_sequence_file",
]
