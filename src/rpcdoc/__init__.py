"""rpcdoc — OpenAPI 3.1 documents for RPC procedure trees.

Declares queries, mutations and subscriptions with typed inputs and
outputs, then describes them as a static REST document without touching
how the procedures are called.

Basic usage::

    from dataclasses import dataclass

    from rpcdoc import ProcedureRouter, generate_openapi

    @dataclass(frozen=True, slots=True)
    class Greeting:
        message: str

    router = ProcedureRouter()

    @router.query(output=Greeting)
    def hello() -> Greeting:
        return Greeting("hi")

    document = generate_openapi(
        api_title="My API", api_version="1.0.0", base_path="/trpc", tree=router
    )

Command line::

    rpcdoc generate myapp:router --title "My API" -o openapi.json
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DocumentConfig",
    "Procedure",
    "ProcedureRouter",
    "RpcDocError",
    "SchemaConversionError",
    "generate_from_config",
    "generate_openapi",
    "render_from_config",
    "render_json",
    "translate",
    "type_to_schema",
    "walk",
]

# Public name → defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "rpcdoc.errors",
    "DocumentConfig": "rpcdoc.config",
    "Procedure": "rpcdoc.procedure",
    "ProcedureRouter": "rpcdoc.procedure",
    "RpcDocError": "rpcdoc.errors",
    "SchemaConversionError": "rpcdoc.errors",
    "generate_from_config": "rpcdoc.document",
    "generate_openapi": "rpcdoc.document",
    "render_from_config": "rpcdoc.document",
    "render_json": "rpcdoc.document",
    "translate": "rpcdoc.translator",
    "type_to_schema": "rpcdoc.schema",
    "walk": "rpcdoc.walker",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import rpcdoc`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
