# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import collections
import json
from collections.abc import Sequence

from .basic_types import AccentGroup, ParsedLine, ReadingEntry


class AccentIndex:
    """
    Maps vocabulary to its readings and their accents.
    Readings are kept in the order they were added. The same reading may repeat.
    """

    def __init__(self) -> None:
        self._vocab_to_readings: dict[str, list[ReadingEntry]] = collections.defaultdict(list)

    def __contains__(self, vocab: str) -> bool:
        return self._vocab_to_readings.__contains__(vocab)

    def __getitem__(self, vocab: str) -> Sequence[ReadingEntry]:
        return tuple(self._vocab_to_readings[vocab]) if vocab in self else ()

    def __len__(self) -> int:
        return len(self._vocab_to_readings)

    def reading_count(self) -> int:
        return sum(len(readings) for readings in self._vocab_to_readings.values())

    def add(self, vocab: str, reading: str, accent_groups: Sequence[AccentGroup]) -> None:
        self._vocab_to_readings[vocab].append(ReadingEntry(reading=reading, accent_groups=tuple(accent_groups)))

    def add_parsed(self, parsed: ParsedLine) -> None:
        self.add(parsed.vocab, parsed.reading, parsed.accent_groups)

    def serialize(self) -> dict[str, list[str]]:
        return {vocab: [entry.describe() for entry in readings] for vocab, readings in self._vocab_to_readings.items()}

    def to_json(self) -> str:
        return json.dumps(self.serialize(), ensure_ascii=False, separators=(",", ":"))
