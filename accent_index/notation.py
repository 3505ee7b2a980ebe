# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import collections
import re

from .basic_types import AccentGroup, AccentNotationError, LineParseError, ParsedLine
from .consts import NO_POS_KEY, SEP_NOTATION_POS, SEP_NOTATION_SEGMENTS

RE_LINE = re.compile(r"^([^\t]+)\t([^\t]*)\t([^\t]+)$")
RE_POS_TAG = re.compile(r"\(([^)]+)\)")
RE_ACCENT_NUM = re.compile(r"\+?[0-9]+")


def parse_accent_number(segment: str) -> int:
    accent_part = re.sub(RE_POS_TAG, "", segment)
    if not re.fullmatch(RE_ACCENT_NUM, accent_part):
        raise AccentNotationError(notation=segment, explanation="accent position is not an integer")
    return int(accent_part)


def parse_accent_notation(notation: str) -> tuple[AccentGroup, ...]:
    """
    Notation is a comma-separated list of integers optionally prefixed by parts of speech in parens.
    A tag applies to its own number and to all following untagged numbers.

    "0,2" => (;0,2)
    "(名)2,(代)0,2" => (名;2), (代;0,2)
    "(名;代)2,(副)1,2" => (名,代;2), (副;1,2)
    """
    pos_to_accents: dict[str, list[int]] = collections.defaultdict(list)
    current_pos_key = NO_POS_KEY
    for segment in notation.split(SEP_NOTATION_SEGMENTS):
        if m := re.search(RE_POS_TAG, segment):
            current_pos_key = m.group(1)
        pos_to_accents[current_pos_key].append(parse_accent_number(segment))
    return tuple(
        AccentGroup(
            parts_of_speech=tuple(pos_key.split(SEP_NOTATION_POS)),
            accents=tuple(accents),
        )
        for pos_key, accents in pos_to_accents.items()
    )


def parse_line(line: str) -> ParsedLine:
    """
    Parse one line of the accents file.

    Example lines:
    日本語\tにほんご\t0
    だい\t\t(名)2,(代)0,2
    """
    line = line.rstrip("\r\n")
    if not (m := re.fullmatch(RE_LINE, line)):
        raise LineParseError(line=line, explanation="failed to parse line")
    vocab, reading, notation = m.groups()
    # kana-only words have no separate reading.
    reading = reading or vocab
    try:
        accent_groups = parse_accent_notation(notation)
    except AccentNotationError as ex:
        raise LineParseError(line=line, explanation=str(ex)) from ex
    return ParsedLine(vocab=vocab, reading=reading, accent_groups=accent_groups)
