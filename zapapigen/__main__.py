"""Entry point: python -m zapapigen

Reads spec/zap_api.json, generates one module per component into the
zap-api-python checkout next to this one.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .codegen import OutputDirectoryNotFoundError, check_output_dir, generate_all
from .loader import REGISTRY_PATH, get_components, load_registry

# Default output directory in the zap-api-python project
DEFAULT_OUTPUT_DIR = Path("../zap-api-python/src/zapv2/")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zapapigen",
        description="Generate the ZAP Python API client modules",
    )
    parser.add_argument(
        "--registry",
        "-r",
        type=Path,
        default=REGISTRY_PATH,
        help="API registry JSON file (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Existing output directory (default: %(default)s)",
        dest="output_dir",
    )
    parser.add_argument(
        "--optional",
        action="store_true",
        help="Mark the generated components as optional add-ons",
    )
    parser.add_argument(
        "--component",
        "-c",
        action="append",
        help="Only generate this component prefix (repeatable)",
        dest="components",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    # Never create the output directory, a missing one means a bad checkout
    try:
        check_output_dir(args.output_dir)
    except OutputDirectoryNotFoundError as e:
        print(e, file=sys.stderr)
        return 1

    registry = load_registry(args.registry)
    known = {component["prefix"] for component in get_components(registry)}
    unknown = [prefix for prefix in args.components or [] if prefix not in known]
    if unknown:
        print(f"Unknown component: {', '.join(unknown)}", file=sys.stderr)
        return 1

    paths = generate_all(registry, args.output_dir, args.optional, args.components)
    print(f"Generated {len(paths)} files in {args.output_dir.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
