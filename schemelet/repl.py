"""Line-oriented front end: one expression per input line, one result per output line.

Language errors are reported on stderr and the session continues. Anything
else, ZeroDivisionError included, ends the process.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from schemelet.config import get_log_level
from schemelet.errors import SchemeError
from schemelet.interpreter import Interpreter

logger = logging.getLogger(__name__)


def serve(interp: Interpreter, lines: TextIO, out: TextIO, err: TextIO) -> None:
    for line in lines:
        if not line.strip():
            continue
        try:
            result = interp.run(line)
        except SchemeError as exc:
            logger.info("rejected %r: %s", line, exc)
            print(f"{type(exc).__name__}: {exc}", file=err)
            continue
        print(result, file=out)


def main() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    serve(Interpreter(), sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    main()
