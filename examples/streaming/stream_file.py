"""Stream a G-code file line by line, reporting errors without stopping.

Usage:
    python examples/streaming/stream_file.py part.nc [--strict]
"""

import sys

from fresa import ParseConfig, ParseError, Parser, parse_config_context


def main(path: str, *, strict: bool = False) -> int:
    errors = 0
    with open(path, encoding="utf-8") as f, parse_config_context(ParseConfig(strict=strict)):
        for result in Parser.from_source(f, source_file=path).results():
            if isinstance(result, ParseError):
                errors += 1
                print(f"error: {result}", file=sys.stderr)
            else:
                print(result)
    return 1 if errors else 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    sys.exit(main(sys.argv[1], strict="--strict" in sys.argv[2:]))
