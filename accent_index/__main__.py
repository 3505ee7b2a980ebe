# Copyright: Ajatt-Tools and contributors; https://github.com/Ajatt-Tools
# License: GNU AGPL, version 3 or later; http://www.gnu.org/licenses/agpl.html

import sys
from typing import Optional

from .basic_types import BatchParseError, LineParseError
from .config_view import AccentIndexConfig
from .reader import load_index, report_errors


def main(config: Optional[AccentIndexConfig] = None) -> int:
    """
    Convert the accents file to a JSON index and print it to stdout.
    Returns the exit status.
    """
    config = config or AccentIndexConfig()
    try:
        idx = load_index(config.accents_file, config.error_mode)
    except OSError as ex:
        print(f"Can't read pitch accents file: {ex}", file=sys.stderr)
        return 1
    except LineParseError as ex:
        print(ex, file=sys.stderr)
        return 1
    except BatchParseError as ex:
        print(f"Failed to parse pitch accents file: {ex.describe_short()}.", file=sys.stderr)
        report_errors(ex.errors, config.max_reported_errors)
        return 1
    print(idx.to_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
