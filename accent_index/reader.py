# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pathlib
import sys
import typing
from collections.abc import Iterable

from .basic_types import BatchParseError, ErrorMode, LineParseError
from .index import AccentIndex
from .notation import parse_line


def iter_accent_lines(file_path: pathlib.Path) -> Iterable[tuple[int, str]]:
    """
    Read the accents file one line at a time.
    Invalid UTF-8 bytes are replaced with U+FFFD.

    Example line as it appears in the file:
    だい\t\t(名)2,(代)0,2
    """
    with open(file_path, encoding="utf-8", errors="replace") as f:
        yield from enumerate(f, start=1)


def build_index(lines: Iterable[tuple[int, str]], error_mode: ErrorMode = ErrorMode.fail_fast) -> AccentIndex:
    """
    Parse numbered lines into a new index.
    Either every line parses, or an error is raised and no index is returned.
    """
    idx = AccentIndex()
    errors: list[LineParseError] = []
    for line_num, line in lines:
        try:
            parsed = parse_line(line)
        except LineParseError as ex:
            if error_mode == ErrorMode.fail_fast:
                raise ex.with_line_num(line_num) from ex
            errors.append(ex.with_line_num(line_num))
        else:
            idx.add_parsed(parsed)
    if errors:
        raise BatchParseError(errors=errors)
    return idx


def load_index(file_path: pathlib.Path, error_mode: ErrorMode = ErrorMode.fail_fast) -> AccentIndex:
    print(f"Reading pitch accents file: {file_path}", file=sys.stderr)
    idx = build_index(iter_accent_lines(file_path), error_mode)
    print(f"Total pitch accent entries: {len(idx)} words, {idx.reading_count()} readings.", file=sys.stderr)
    return idx


def report_errors(errors: typing.Sequence[LineParseError], max_reported: int) -> None:
    for error in errors[:max_reported]:
        print(error, file=sys.stderr)
    if len(errors) > max_reported:
        print(f"... and {len(errors) - max_reported} more.", file=sys.stderr)
