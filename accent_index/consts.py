# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import pathlib
from typing import Final

PACKAGE_DIR_PATH: Final[pathlib.Path] = pathlib.Path(__file__).parent
CONFIG_JSON_NAME: Final[str] = "config.json"

# Input file: vocab<TAB>reading<TAB>notation
SEP_FIELDS: Final[str] = "\t"
SEP_NOTATION_SEGMENTS: Final[str] = ","
SEP_NOTATION_POS: Final[str] = ";"
NO_POS_KEY: Final[str] = ""

# Output strings: reading:pos,pos;acc,acc|pos;acc
SEP_READING_GROUPS: Final[str] = ":"
SEP_ACCENT_GROUPS: Final[str] = "|"
SEP_POS_ACCENTS: Final[str] = ";"
SEP_POS_LIST: Final[str] = ","
SEP_ACCENT_LIST: Final[str] = ","
