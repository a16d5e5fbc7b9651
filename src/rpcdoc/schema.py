"""Type description to JSON Schema conversion.

Turns the ``input``/``output`` declared on a procedure into an inline
JSON Schema fragment (draft 2020-12, the dialect OpenAPI 3.1 embeds).
Nothing is hoisted into ``components``: nested dataclasses are expanded
in place, so recursive types cannot be expressed and are rejected.

Supports: ``str``, ``int``, ``float``, ``bool``, ``None``, ``bytes``,
``datetime``/``date``/``time``, ``UUID``, ``Decimal``, ``Any``,
``list[X]``, ``set[X]``, ``tuple[...]``, ``dict[str, X]``, ``X | Y``,
``Literal[...]``, ``Enum``, ``Annotated[X, {...}]``, dataclasses,
``TypedDict``, pydantic models and ``TypeAdapter`` instances, and plain
dicts (taken as ready-made schemas).
"""

import collections.abc
import copy
import dataclasses
import datetime
import decimal
import enum
import logging
import types
import uuid
from collections.abc import Mapping
from typing import (
    Annotated,
    Any,
    Literal,
    NotRequired,
    Required,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    is_typeddict,
)

from rpcdoc._types import Schema, TypeDescription
from rpcdoc.errors import SchemaConversionError

logger = logging.getLogger("rpcdoc.schema")

# Python type → JSON Schema type
_TYPE_MAP: dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
}

# Types serialised as strings with a well-known format
_FORMAT_MAP: dict[type, str] = {
    datetime.datetime: "date-time",
    datetime.date: "date",
    datetime.time: "time",
    uuid.UUID: "uuid",
    bytes: "binary",
}

_ARRAY_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Iterable,
        collections.abc.Collection,
    }
)
_SET_ORIGINS: frozenset[Any] = frozenset(
    {set, frozenset, collections.abc.Set, collections.abc.MutableSet}
)
_MAPPING_ORIGINS: frozenset[Any] = frozenset(
    {dict, collections.abc.Mapping, collections.abc.MutableMapping}
)
_DEFS_PREFIX = "#/$defs/"


def type_to_schema(type_description: TypeDescription) -> Schema:
    """Convert a type description to a JSON Schema fragment.

    Always returns a fresh dict; callers may mutate it freely.
    Raises ``SchemaConversionError`` for types with no JSON Schema form.
    """
    return _convert(type_description, ())


def _convert(annotation: Any, stack: tuple[type, ...]) -> Schema:
    # Ready-made schema
    if isinstance(annotation, dict):
        return copy.deepcopy(annotation)

    if annotation is None or annotation is types.NoneType:
        return {"type": "null"}

    if annotation is Any or annotation is object:
        return {}

    origin = get_origin(annotation)
    if origin is not None:
        return _convert_generic(annotation, origin, stack)

    # pydantic BaseModel subclasses and TypeAdapter instances
    model_json_schema = getattr(annotation, "model_json_schema", None)
    if callable(model_json_schema):
        logger.debug("Using model_json_schema() for %r", annotation)
        return _inline_defs(model_json_schema(), annotation)
    json_schema = getattr(annotation, "json_schema", None)
    if callable(json_schema) and not isinstance(annotation, type):
        logger.debug("Using json_schema() for %r", annotation)
        return _inline_defs(json_schema(), annotation)

    if isinstance(annotation, type):
        return _convert_class(annotation, stack)

    raise SchemaConversionError(annotation, "not a type")


def _convert_generic(annotation: Any, origin: Any, stack: tuple[type, ...]) -> Schema:
    """Convert a parameterised typing construct (``list[int]``, ``X | None``, ...)."""
    args = get_args(annotation)

    if origin is Annotated:
        schema = _convert(args[0], stack)
        for extra in annotation.__metadata__:
            if isinstance(extra, Mapping):
                schema.update(copy.deepcopy(dict(extra)))
        return schema

    if origin is Literal:
        return _enum_schema([_literal_value(arg) for arg in args])

    if origin is Union or origin is types.UnionType:
        non_none = [a for a in args if a is not types.NoneType]
        schemas = [_convert(a, stack) for a in non_none]
        if len(non_none) < len(args):
            schemas.append({"type": "null"})
        if len(schemas) == 1:
            return schemas[0]
        return {"anyOf": schemas}

    if origin in _ARRAY_ORIGINS:
        schema: Schema = {"type": "array"}
        if args:
            schema["items"] = _convert(args[0], stack)
        return schema

    if origin in _SET_ORIGINS:
        schema = {"type": "array", "uniqueItems": True}
        if args:
            schema["items"] = _convert(args[0], stack)
        return schema

    if origin is tuple:
        return _tuple_schema(args, stack)

    if origin in _MAPPING_ORIGINS:
        schema = {"type": "object"}
        if len(args) == 2:
            value_schema = _convert(args[1], stack)
            if value_schema:
                schema["additionalProperties"] = value_schema
        return schema

    raise SchemaConversionError(annotation, f"unsupported generic {origin!r}")


def _convert_class(cls: type, stack: tuple[type, ...]) -> Schema:
    """Convert a plain class: scalars, enums, dataclasses, TypedDicts."""
    if issubclass(cls, enum.Enum):
        return _enum_schema([member.value for member in cls])

    if cls in _TYPE_MAP:
        return {"type": _TYPE_MAP[cls]}

    if cls in _FORMAT_MAP:
        return {"type": "string", "format": _FORMAT_MAP[cls]}

    if cls is decimal.Decimal:
        return {"type": "number"}

    if is_typeddict(cls):
        return _typeddict_schema(cls, stack)

    if dataclasses.is_dataclass(cls):
        return _dataclass_schema(cls, stack)

    # Unparameterised containers
    if cls in (list, tuple):
        return {"type": "array"}
    if cls in (set, frozenset):
        return {"type": "array", "uniqueItems": True}
    if cls is dict:
        return {"type": "object"}

    # Subclasses of scalars (e.g. ``class Email(str)``); bool before int
    for base in (bool, int, float, str):
        if issubclass(cls, base):
            return {"type": _TYPE_MAP[base]}

    raise SchemaConversionError(cls, "unsupported type")


def _dataclass_schema(cls: type, stack: tuple[type, ...]) -> Schema:
    """Generate an object schema from dataclass fields.

    Fields are required unless they have a default or default factory.
    """
    if cls in stack:
        raise SchemaConversionError(cls, "recursive types are not supported")

    hints = _resolve_hints(cls)
    properties: dict[str, Any] = {}
    required: list[str] = []

    for field in dataclasses.fields(cls):
        properties[field.name] = _convert(hints.get(field.name, field.type), (*stack, cls))
        if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
            required.append(field.name)

    return _object_schema(properties, required)


def _typeddict_schema(cls: type, stack: tuple[type, ...]) -> Schema:
    if cls in stack:
        raise SchemaConversionError(cls, "recursive types are not supported")

    hints = _resolve_hints(cls)
    required_keys: frozenset[str] = getattr(cls, "__required_keys__", frozenset())
    properties: dict[str, Any] = {}
    required: list[str] = []

    for name, hint in hints.items():
        # get_type_hints(include_extras=True) keeps Required[]/NotRequired[]
        if get_origin(hint) in (Required, NotRequired):
            hint = get_args(hint)[0]
        properties[name] = _convert(hint, (*stack, cls))
        if name in required_keys:
            required.append(name)

    return _object_schema(properties, required)


def _object_schema(properties: dict[str, Any], required: list[str]) -> Schema:
    schema: Schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    schema["additionalProperties"] = False
    return schema


def _inline_defs(schema: Schema, owner: Any) -> Schema:
    """Replace local ``#/$defs/...`` references with the definitions they name.

    pydantic hoists nested models into ``$defs``; once the fragment is
    embedded in a document those references would resolve against the
    document root, where nothing is defined.
    """
    defs: dict[str, Any] = schema.pop("$defs", {})

    def resolve(node: Any, seen: tuple[str, ...]) -> Any:
        if isinstance(node, list):
            return [resolve(item, seen) for item in node]
        if not isinstance(node, dict):
            return node
        ref = node.get("$ref")
        if not (isinstance(ref, str) and ref.startswith(_DEFS_PREFIX)):
            return {key: resolve(value, seen) for key, value in node.items()}
        name = ref.removeprefix(_DEFS_PREFIX)
        if name in seen:
            raise SchemaConversionError(owner, "recursive types are not supported")
        if name not in defs:
            raise SchemaConversionError(owner, f"unresolved reference {ref!r}")
        inlined = resolve(defs[name], (*seen, name))
        # Keywords next to $ref (e.g. description) win over the definition
        for key, value in node.items():
            if key != "$ref":
                inlined[key] = resolve(value, seen)
        return inlined

    return resolve(schema, ())


def _resolve_hints(cls: type) -> dict[str, Any]:
    """Resolve (possibly string) annotations, keeping ``Annotated`` metadata."""
    try:
        return get_type_hints(cls, include_extras=True)
    except NameError as exc:
        raise SchemaConversionError(cls, f"unresolved annotation ({exc})") from exc


def _tuple_schema(args: tuple[Any, ...], stack: tuple[type, ...]) -> Schema:
    # tuple[X, ...]: homogeneous, any length
    if len(args) == 2 and args[1] is Ellipsis:
        return {"type": "array", "items": _convert(args[0], stack)}
    if not args:
        return {"type": "array", "maxItems": 0}
    return {
        "type": "array",
        "prefixItems": [_convert(arg, stack) for arg in args],
        "minItems": len(args),
        "maxItems": len(args),
    }


def _literal_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


def _enum_schema(values: list[Any]) -> Schema:
    """Build an ``enum`` schema, adding ``type`` when all values share one."""
    json_types = {_json_type(value) for value in values}
    schema: Schema = {}
    if len(json_types) == 1 and None not in json_types:
        schema["type"] = json_types.pop()
    schema["enum"] = list(values)
    return schema


def _json_type(value: Any) -> str | None:
    """Return the JSON type name of a literal value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return None
