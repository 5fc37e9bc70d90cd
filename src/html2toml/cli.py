"""Command-line driver (``html2toml`` / ``python -m html2toml.cli``).

Converts ``./res/index.html`` to TOML, prints it, and saves it as
``out.toml`` in the working directory.
"""

from __future__ import annotations

import sys
from pathlib import Path

from .document import html_to_toml
from .errors import Html2TomlError
from .writer import write_output

INPUT_PATH = Path("res") / "index.html"
OUTPUT_PATH = Path("out.toml")


def main() -> None:
    # A failed conversion is reported but still exits with status 0;
    # only a failed write of the output file is fatal.
    try:
        toml_output = html_to_toml(INPUT_PATH)
    except Html2TomlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return

    print(toml_output)

    try:
        write_output(OUTPUT_PATH, toml_output)
    except Html2TomlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
