import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from . import ArgumentFlags, Arguments, OptionException, OptionFlags

logger = logging.getLogger(__name__)

USAGE = """usage: {prog} [options] --port <P>
    -h,--help             Display this help message.
    --debug               Turn on debug checks.
    --directory DIR       Work in DIR.
    -p,--port PORT        Listen on PORT for connections.
    -v,--verbose LEVEL    Be verbose up to LEVEL.
    -W LEVEL              Set warning level to LEVEL.
    -z                    Do something.
"""

OPTIONS = [
    "debug",
    ("directory", ArgumentFlags.REQUIRED),
    ("p,port", ArgumentFlags.REQUIRED, OptionFlags.REQUIRED),
    ("v,verbose", ArgumentFlags.OPTIONAL),
    ("W", ArgumentFlags.OPTIONAL),
    "z",
]


class UsageError(Exception):
    pass


@dataclass
class Params:
    debug: bool
    directory: str
    port: int
    verbose: int
    warning: int
    zed: bool
    files: List[str]


def _to_int(name: str, text: str, minimum: Optional[int] = None) -> int:
    try:
        value = int(text)
    except ValueError:
        raise UsageError(f"{name} must be an integer") from None
    if minimum is not None and value < minimum:
        raise UsageError(f"{name} must be positive")
    return value


def to_params(args: Arguments) -> Params:
    verbose = 0
    if args.exists("verbose"):
        verbose = _to_int("verbose", args["verbose"], 0) if args["verbose"] else 1
    warning = -1
    if args.exists("W"):
        warning = _to_int("W", args["W"]) if args["W"] else 0
    return Params(
        debug=args.exists("debug"),
        directory=args.get("directory") or ".",
        port=_to_int("port", args["port"], 0),
        verbose=verbose,
        warning=warning,
        zed=args.exists("z"),
        files=list(args.positional),
    )


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "pygetopt"
    try:
        args = Arguments.parse(argv, OPTIONS)
        if args.help:
            sys.stdout.write(USAGE.format(prog=prog))
            return 0
        if args.exists("debug"):
            logging.basicConfig(level=logging.DEBUG)
            # again, so the parser's own records are shown
            args = Arguments.parse(argv, OPTIONS)
            logger.debug("parsed %r", args)
        params = to_params(args)
    except (OptionException, UsageError) as e:
        print(f"{prog}: {e}", file=sys.stderr)
        return 1

    print(f"debug: {str(params.debug).lower()}")
    print(f"directory: {params.directory}")
    print(f"port: {params.port}")
    print(f"verbose: {params.verbose}")
    print(f"warning: {params.warning}")
    print(f"zed: {str(params.zed).lower()}")
    if params.files:
        print(f"files: {' '.join(params.files)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
