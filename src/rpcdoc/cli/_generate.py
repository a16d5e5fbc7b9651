"""``rpcdoc generate`` — write an OpenAPI document for a procedure tree.

Resolves an import string to a tree, builds the document, and writes
JSON to a file or stdout. Exits with code 1 on any failure.
"""

import argparse
import logging
import sys
from pathlib import Path

from rpcdoc.cli._resolve import resolve_tree
from rpcdoc.config import DocumentConfig
from rpcdoc.document import generate_from_config, render_json
from rpcdoc.errors import RpcDocError

logger = logging.getLogger("rpcdoc.cli")


def run_generate(args: argparse.Namespace) -> None:
    """Generate the document described by ``args``.

    Import failures, invalid options and unsupported types are printed
    as ``Error: ...`` on stderr and raise ``SystemExit(1)``.
    """
    try:
        tree = resolve_tree(args.tree)
        config = DocumentConfig(
            api_title=args.title,
            api_version=args.version,
            base_path=args.base_path,
            indent=args.indent,
            sort_keys=args.sort_keys,
        )
        document = generate_from_config(config, tree)
    except (ModuleNotFoundError, AttributeError, TypeError, RpcDocError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    text = render_json(document, indent=config.indent, sort_keys=config.sort_keys)

    if args.output is None:
        sys.stdout.write(text)
        return

    output = Path(args.output)
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot write {output}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    logger.info("Wrote %d paths to %s", len(document["paths"]), output)
