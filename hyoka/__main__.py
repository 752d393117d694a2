"""CLI: python -m hyoka [source-file ...]

With no arguments, starts the REPL. With files, evaluates every form in each
file against one shared environment and prints the results.
"""

import logging
import sys
from pathlib import Path

from hyoka.config import get_log_level
from hyoka.errors import HyokaError
from hyoka.interpreter import Interpreter
from hyoka.repl import Repl


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    level = logging.getLevelName(get_log_level())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args and args[0] in ("-h", "--help"):
        print(__doc__.strip())
        return 0

    interp = Interpreter()
    if not args:
        Repl(interp).run()
        return 0

    repl = Repl(interp)
    for path in args:
        try:
            source = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            return 1
        try:
            for result in interp.eval_iter(source):
                if result is not None:
                    print(repl.render(result), flush=True)
        except HyokaError as e:
            print(f"{path}: {type(e).__name__}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
