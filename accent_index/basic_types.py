# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import dataclasses
import enum
from collections.abc import Sequence
from typing import NamedTuple, Optional

from .consts import (
    SEP_ACCENT_GROUPS,
    SEP_ACCENT_LIST,
    SEP_POS_ACCENTS,
    SEP_POS_LIST,
    SEP_READING_GROUPS,
)


class AccentGroup(NamedTuple):
    """
    Pitch accent positions that apply to the same parts of speech.
    A single empty part of speech means the accents apply to any part of speech.
    """

    parts_of_speech: tuple[str, ...]
    accents: tuple[int, ...]

    def describe(self) -> str:
        """
        名,代;0,2
        """
        return (
            SEP_POS_LIST.join(self.parts_of_speech)
            + SEP_POS_ACCENTS
            + SEP_ACCENT_LIST.join(str(accent) for accent in self.accents)
        )


class ReadingEntry(NamedTuple):
    reading: str
    accent_groups: tuple[AccentGroup, ...]

    def describe(self) -> str:
        """
        reading:group1|group2
        だい:名;2|代;0,2
        """
        return (
            self.reading
            + SEP_READING_GROUPS
            + SEP_ACCENT_GROUPS.join(group.describe() for group in self.accent_groups)
        )


class ParsedLine(NamedTuple):
    vocab: str
    reading: str
    accent_groups: tuple[AccentGroup, ...]


@enum.unique
class ErrorMode(enum.Enum):
    fail_fast = enum.auto()
    collect = enum.auto()


@dataclasses.dataclass
class AccentNotationError(ValueError):
    notation: str
    explanation: str

    def __str__(self) -> str:
        return f"{self.explanation}: {self.notation!r}"


@dataclasses.dataclass
class LineParseError(ValueError):
    line: str
    explanation: str
    line_num: Optional[int] = None

    def with_line_num(self, line_num: int) -> "LineParseError":
        return dataclasses.replace(self, line_num=line_num)

    def __str__(self) -> str:
        if self.line_num is None:
            return f"{self.explanation}: {self.line!r}"
        return f"line {self.line_num}: {self.explanation}: {self.line!r}"


@dataclasses.dataclass
class BatchParseError(ValueError):
    errors: Sequence[LineParseError]

    def describe_short(self) -> str:
        return f"{len(self.errors)} malformed line(s)"

    def __str__(self) -> str:
        return self.describe_short()

