"""OpenAPI document assembly and rendering.

Usage::

    from rpcdoc import generate_openapi, render_json

    document = generate_openapi(
        api_title="My API",
        api_version="1.0.0",
        base_path="/trpc",
        tree=router,
    )
    Path("openapi.json").write_text(render_json(document))
"""

import json
from typing import Any

from rpcdoc._types import ProcedureTree
from rpcdoc.config import DocumentConfig
from rpcdoc.walker import walk

OPENAPI_VERSION = "3.1.0"


def generate_openapi(
    *,
    api_title: str,
    api_version: str,
    base_path: str,
    tree: ProcedureTree,
) -> dict[str, Any]:
    """Build an OpenAPI 3.1 document for a procedure tree.

    Args:
        api_title: ``info.title`` of the document.
        api_version: ``info.version`` of the document.
        base_path: Prefix for every route, used verbatim (``"/trpc"``,
            ``"api"`` and ``""`` are all valid).
        tree: Procedures and nested groups, e.g. a ``ProcedureRouter``.

    Returns:
        A JSON-serialisable dict. ``components`` is always empty; every
        schema is embedded inline in its operation.
    """
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": api_title, "version": api_version},
        "paths": walk(base_path, tree),
        "components": {},
    }


def generate_from_config(config: DocumentConfig, tree: ProcedureTree) -> dict[str, Any]:
    """Build a document using the title, version and base path of ``config``.

    ``indent`` and ``sort_keys`` only affect rendering; see
    ``render_from_config``.
    """
    return generate_openapi(
        api_title=config.api_title,
        api_version=config.api_version,
        base_path=config.base_path,
        tree=tree,
    )


def render_json(
    document: dict[str, Any],
    *,
    indent: int | None = 2,
    sort_keys: bool = False,
) -> str:
    """Serialise a document to JSON text with a trailing newline."""
    return json.dumps(document, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n"


def render_from_config(config: DocumentConfig, tree: ProcedureTree) -> str:
    """Build and render a document with every setting of ``config``.

    Unlike ``generate_from_config``, this honours ``indent`` and
    ``sort_keys`` as well.
    """
    return render_json(
        generate_from_config(config, tree),
        indent=config.indent,
        sort_keys=config.sort_keys,
    )
