"""Document configuration.

DocumentConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from rpcdoc.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """Settings for one generated document. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DocumentConfig(api_title="Users", api_version="2.0.0", base_path="/api")
    """

    # info
    api_title: str = "API"
    api_version: str = "0.1.0"

    # Prefix for every route; used verbatim (no slash normalisation)
    base_path: str = "/trpc"

    # JSON rendering
    indent: int | None = 2
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if not self.api_title:
            msg = "api_title must not be empty"
            raise ConfigurationError(msg)
        if not self.api_version:
            msg = "api_version must not be empty"
            raise ConfigurationError(msg)
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ConfigurationError(msg)
