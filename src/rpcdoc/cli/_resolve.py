"""Tree import resolution — resolves ``"module:attribute"`` strings to procedure trees.

Shared utility used by ``rpcdoc generate`` and ``rpcdoc routes`` to
locate a router from a user-supplied import string.
"""

import importlib
import os
import sys
from collections.abc import Mapping
from typing import Any


def resolve_tree(import_string: str) -> Mapping[str, Any]:
    """Resolve an import string to a procedure tree.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp"`` resolves to
    ``myapp.router``).

    Supports factory functions: if the resolved object is callable and
    not already a mapping, it is called with no arguments.

    The current directory is put on ``sys.path`` first, so
    ``rpcdoc generate app:router`` finds an ``app.py`` next to the caller.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:router"``, ``"myapp.api:create_router"``).

    Returns:
        The resolved tree (a ``ProcedureRouter`` or any mapping).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a mapping or a factory for one.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    cwd = os.getcwd()
    if cwd not in sys.path and "" not in sys.path:
        sys.path.insert(0, cwd)

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Mapping):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Mapping):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a procedure tree"
        raise TypeError(msg)

    return obj
