"""Walk-through of the Result API against real files.

Usage:
    python -m fallible [--existing PATH] [--missing PATH] [--panic {none,unwrap,expect}]
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .config import get_settings
from .files import open_file
from .logging import configure_from_settings, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fallible", description="Demonstrate success and failure Results.")
    parser.add_argument("--existing", default="file.txt", help="file expected to exist (default: %(default)s)")
    parser.add_argument("--missing", default="unknown.txt", help="file expected to be absent (default: %(default)s)")
    parser.add_argument(
        "--panic",
        choices=("none", "unwrap", "expect"),
        default="none",
        help="finish by unwrapping the failed result, which raises",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_from_settings(get_settings())
    log = get_logger("fallible.demo")

    # 1. Existing file: success branch
    res = open_file(args.existing)
    if res.is_success():
        print("OK: file exists")
    # Raises UnwrapError if the file is not there after all.
    with res.unwrap() as fh:
        print("Opened:", fh.name)

    # 2. Missing file: failure branch
    res = open_file(args.missing)
    if res.is_failure():
        print("ERROR:", res.error_value(), file=sys.stderr)

    _, err = res.unwrap_or_err(RuntimeError(f"fatal: cannot read {args.missing}"))
    if err is not None:
        print("unwrap_or_err:", err, file=sys.stderr)

    # 3. Dangerous branch: both raise UnwrapError on a failure
    match args.panic:
        case "unwrap":
            log.info("unwrapping failed result", path=args.missing)
            res.unwrap()
        case "expect":
            log.info("expecting on failed result", path=args.missing)
            res.expect("file does not exist")
    return 0


if __name__ == "__main__":
    sys.exit(main())
