import argparse
import json
import logging
import sys
from pathlib import Path

from .builder import builder_file_for_value_type
from .model import CodeFile
from .render import render_header, render_implementation
from .types import mk_value_type

logger = logging.getLogger(__name__)


def _load_builder_file(path: str) -> CodeFile:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    value_type = mk_value_type(data)
    logger.debug("Loaded value type %s from %s", value_type.type_name, path)
    return builder_file_for_value_type(value_type)


def describe(file: CodeFile) -> dict[str, object]:
    cls = file.classes[0]
    return {
        "name": file.name,
        "imports": [
            {"file": imp.file, "library": imp.library, "public": imp.is_public} for imp in file.imports
        ],
        "forwardDeclarations": [decl.to_code() for decl in file.forward_declarations],
        "classMethods": [m.selector for m in cls.class_methods],
        "instanceMethods": [m.selector for m in cls.instance_methods],
    }


def cmd_header(args: argparse.Namespace) -> None:
    print(render_header(_load_builder_file(args.spec)), end="")


def cmd_implementation(args: argparse.Namespace) -> None:
    print(render_implementation(_load_builder_file(args.spec)), end="")


def cmd_describe(args: argparse.Namespace) -> None:
    print(json.dumps(describe(_load_builder_file(args.spec)), indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("mkbuilder")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("header", help="Print the builder's header preview")
    s.add_argument("spec", help="Value type description (JSON)")
    s.set_defaults(func=cmd_header)

    s = sub.add_parser("implementation", help="Print the builder's implementation preview")
    s.add_argument("spec", help="Value type description (JSON)")
    s.set_defaults(func=cmd_implementation)

    s = sub.add_parser("describe", help="Summarize the builder descriptor as JSON")
    s.add_argument("spec", help="Value type description (JSON)")
    s.set_defaults(func=cmd_describe)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"mkbuilder: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
