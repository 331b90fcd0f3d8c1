"""Feeding a file through ``cat`` into ``grep`` and saving the matches."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

PATTERN = "esta"
_OUTPUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTPUT_MODE = 0o777


def run(infile: PathLike, outfile: PathLike) -> int:
    """Run ``cat < infile | grep esta > outfile`` and return grep's status.

    The output file is created or truncated before the input is opened;
    a missing input file raises ``FileNotFoundError``.
    """
    out_fd = os.open(outfile, _OUTPUT_FLAGS, _OUTPUT_MODE)
    try:
        with open(infile, "rb") as source:
            cat = subprocess.Popen(["cat"], stdin=source, stdout=subprocess.PIPE)
            try:
                grep = subprocess.Popen(["grep", PATTERN], stdin=cat.stdout, stdout=out_fd)
            finally:
                cat.stdout.close()
            status = grep.wait()
            cat.wait()
    finally:
        os.close(out_fd)
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Take an input and an output file name and run the pipeline."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return 1
    try:
        return run(args[0], args[1])
    except OSError as exc:
        print(f"pipeline failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())