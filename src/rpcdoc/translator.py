"""Procedure → OpenAPI path item translation.

One procedure becomes at most one route with one operation. Requests
and responses follow the RPC calling convention being documented:

- query input travels as a single JSON-valued ``input`` query parameter
- mutation input is the JSON request body
- successful responses are wrapped as ``{"result": {"data": <output>}}``

Both rules are fixed; they describe the wire format, not a preference.
"""

import logging

from rpcdoc._types import Operation, RouteMap, Schema, SchemaConverter
from rpcdoc.procedure import Procedure
from rpcdoc.schema import type_to_schema

logger = logging.getLogger("rpcdoc.translator")

# Procedure kind → HTTP method (None: not documented)
HTTP_METHODS: dict[str, str | None] = {
    "query": "get",
    "mutation": "post",
    "subscription": None,
}

JSON_MEDIA_TYPE = "application/json"
SUCCESS_DESCRIPTION = "Successful response"


def translate(
    base_path: str,
    name: str,
    procedure: Procedure,
    *,
    to_schema: SchemaConverter = type_to_schema,
) -> RouteMap:
    """Translate one procedure into a route map with zero or one entries.

    The route is ``base_path + "/" + name`` verbatim. Subscriptions
    produce an empty map.
    """
    method = HTTP_METHODS[procedure.kind]
    if method is None:
        logger.debug("Skipping %s procedure %r", procedure.kind, name)
        return {}

    operation: Operation = {"operationId": name}

    if procedure.input is not None:
        content = {JSON_MEDIA_TYPE: {"schema": to_schema(procedure.input)}}
        if method == "get":
            operation["parameters"] = [{"name": "input", "in": "query", "content": content}]
        else:
            operation["requestBody"] = {"required": True, "content": content}

    if procedure.output is not None:
        operation["responses"] = {
            "200": {
                "description": SUCCESS_DESCRIPTION,
                "content": {
                    JSON_MEDIA_TYPE: {"schema": wrap_result(to_schema(procedure.output))},
                },
            }
        }
    else:
        operation["responses"] = {"200": {"description": SUCCESS_DESCRIPTION}}

    route = f"{base_path}/{name}"
    logger.debug("%s %s -> %s", method.upper(), route, name)
    return {route: {method: operation}}


def wrap_result(data_schema: Schema) -> Schema:
    """Wrap an output schema in the ``{"result": {"data": ...}}`` envelope."""
    return {
        "type": "object",
        "properties": {
            "result": {
                "type": "object",
                "properties": {"data": data_schema},
                "required": ["data"],
            },
        },
        "required": ["result"],
    }
