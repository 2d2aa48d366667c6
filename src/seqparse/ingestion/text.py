"""Line handling shared by the detector and the parsers."""

import re

# Only \n and \r\n end a line; str.splitlines() would also break on \x0c, \x85, ...
_LINE_BREAK = re.compile(r"\r?\n")

# LOCUS as a whole token at the start of a line.
_LOCUS_LINE = re.compile(r"LOCUS(?=\s|$)")


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK.split(text)


def is_locus_line(line: str) -> bool:
    return _LOCUS_LINE.match(line) is not None
