"""Shared type aliases used across rpcdoc modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Anything the schema converter accepts (a class, a typing construct, a dict schema, ...)
TypeDescription: TypeAlias = Any

# JSON Schema fragment produced by the converter
Schema: TypeAlias = dict[str, Any]

# Converter injected into the walker and translator
SchemaConverter: TypeAlias = Callable[[TypeDescription], Schema]

# OpenAPI operation object, keyed the way the document serialises it
Operation: TypeAlias = dict[str, Any]

# Route -> lowercase method -> operation
RouteMap: TypeAlias = dict[str, dict[str, Operation]]

# Name -> Procedure or nested tree
ProcedureTree: TypeAlias = Mapping[str, Any]
