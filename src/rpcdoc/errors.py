"""rpcdoc exception hierarchy.

Shared across the declaration layer, the schema converter, and the CLI
so every module raises and catches the same types.
"""


class RpcDocError(Exception):
    """Base for all rpcdoc-specific errors."""


class ConfigurationError(RpcDocError):
    """Raised when a procedure declaration or document config is invalid.

    Typically raised while a ``ProcedureRouter`` is being declared, so
    mistakes surface at import time rather than during generation.
    """


class SchemaConversionError(RpcDocError, TypeError):
    """Raised when a type description cannot be expressed as JSON Schema.

    Carries the offending type description for diagnostics.
    """

    def __init__(self, type_description: object, reason: str = "") -> None:
        self.type_description = type_description
        label = getattr(type_description, "__name__", None) or repr(type_description)
        message = f"Cannot convert {label} to JSON Schema"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
