"""``rpcdoc routes`` — list the routes a tree documents.

Resolves an import string to a procedure tree and prints METHOD, PATH,
and OPERATION for every route in the same route map ``rpcdoc generate``
builds, so colliding leaves show up once, as the winner. Subscriptions
follow with ``-`` as their method since they are left out of generated
documents.
"""

import argparse
import sys
from typing import Any

from rpcdoc.cli._resolve import resolve_tree
from rpcdoc.errors import RpcDocError
from rpcdoc.procedure import iter_procedures
from rpcdoc.walker import walk


def _no_schema(type_description: Any) -> dict[str, Any]:
    # Listing routes never needs the schemas
    return {}


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of routes for the tree named by ``args.tree``."""
    try:
        tree = resolve_tree(args.tree)
        paths = walk(args.base_path, tree, to_schema=_no_schema)
    except (ModuleNotFoundError, AttributeError, TypeError, RpcDocError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    # Build rows: (method, path, operation)
    rows: list[tuple[str, str, str]] = []
    for path, operations in paths.items():
        for method, operation in operations.items():
            rows.append((method.upper(), path, operation["operationId"]))
    for name, procedure in iter_procedures(tree):
        if procedure.kind == "subscription":
            rows.append(("-", f"{args.base_path}/{name}", str(name)))

    if not rows:
        print("No procedures registered.")
        return

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "OPERATION"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, operation in rows:
        print(fmt.format(method, path, operation))
