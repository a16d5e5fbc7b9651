"""Recursive procedure tree traversal.

Flattens an arbitrarily nested tree of procedures into a single route
map. Nested groups do not contribute a path segment: every leaf is
routed as ``base_path + "/" + leaf_name`` however deep it sits, and a
later leaf replaces an earlier one with the same route.
"""

import logging

from rpcdoc._types import ProcedureTree, RouteMap, SchemaConverter
from rpcdoc.procedure import is_procedure
from rpcdoc.schema import type_to_schema
from rpcdoc.translator import translate

logger = logging.getLogger("rpcdoc.walker")


def walk(
    base_path: str,
    tree: ProcedureTree,
    *,
    to_schema: SchemaConverter = type_to_schema,
) -> RouteMap:
    """Walk ``tree`` depth-first in insertion order and collect its routes."""
    paths: RouteMap = {}

    for name, entry in tree.items():
        if is_procedure(entry):
            paths.update(translate(base_path, str(name), entry, to_schema=to_schema))
        else:
            logger.debug("Descending into group %r", name)
            paths.update(walk(base_path, entry, to_schema=to_schema))

    return paths
