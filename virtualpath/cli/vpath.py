from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Tuple

from virtualpath import (
    canonize,
    classify,
    combine,
    get_directory,
    get_extension,
    get_file_name,
    make_relative,
    normalize,
    to_absolute,
    to_app_relative,
)
from virtualpath.app_root import AppRoot
from virtualpath.cli.envelope import ErrorInfo, OperationResult
from virtualpath.errors import VirtualPathError
from virtualpath.logging import StructuredLogger, create_logger

EXIT_OK = 0
EXIT_PATH_ERROR = 2

Handler = Callable[[argparse.Namespace, Optional[AppRoot]], Optional[str]]

# op name -> (positional args, handler)
_OPERATIONS: Dict[str, Tuple[Tuple[str, ...], Handler]] = {
    "normalize": (("path",), lambda a, r: normalize(a.path, r)),
    "canonize": (("path",), lambda a, r: canonize(a.path)),
    "classify": (("path",), lambda a, r: classify(a.path).value),
    "to-absolute": (("path",), lambda a, r: to_absolute(a.path, r)),
    "to-app-relative": (
        ("path",),
        lambda a, r: to_app_relative(
            a.path, r, null_if_not_in_app=a.null_if_not_in_app, ignore_case=a.ignore_case
        ),
    ),
    "combine": (("base", "relative"), lambda a, r: combine(a.base, a.relative, r)),
    "make-relative": (("from_path", "to_path"), lambda a, r: make_relative(a.from_path, a.to_path, r)),
    "directory": (("path",), lambda a, r: get_directory(a.path, r)),
    "filename": (("path",), lambda a, r: get_file_name(a.path, r)),
    "extension": (("path",), lambda a, r: get_extension(a.path)),
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="vpath", description="Normalize, convert and compose virtual paths."
    )
    ap.add_argument("--app-root", default=None, help="Application root (default: VP_APP_ROOT or /)")
    ap.add_argument("--log-json", action="store_true", help="Emit structured logs on stderr")
    sub = ap.add_subparsers(dest="op", required=True)
    for name, (positionals, _handler) in _OPERATIONS.items():
        sp = sub.add_parser(name)
        for arg in positionals:
            sp.add_argument(arg)
        if name == "to-app-relative":
            sp.add_argument("--null-if-not-in-app", action="store_true")
            sp.add_argument("--ignore-case", action=argparse.BooleanOptionalAction, default=None)
    return ap


def run(args: argparse.Namespace, log: StructuredLogger) -> Tuple[int, OperationResult]:
    positionals, handler = _OPERATIONS[args.op]
    inputs = {name: getattr(args, name) for name in positionals}
    if args.app_root is not None:
        inputs["app_root"] = args.app_root

    try:
        root = AppRoot.from_string(args.app_root) if args.app_root is not None else None
        value = handler(args, root)
    except VirtualPathError as exc:
        log.warning("operation rejected", op=args.op, error=type(exc).__name__, **inputs)
        return EXIT_PATH_ERROR, OperationResult(
            op=args.op,
            args=inputs,
            ok=False,
            error=ErrorInfo(type=type(exc).__name__, message=str(exc)),
        )

    log.info("operation completed", op=args.op, result=value, **inputs)
    return EXIT_OK, OperationResult(op=args.op, args=inputs, result=value)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = create_logger("cli", enable_console=args.log_json)
    try:
        code, outcome = run(args, log)
    finally:
        log.close()
    print(outcome.model_dump_json())
    return code


if __name__ == "__main__":
    sys.exit(main())
