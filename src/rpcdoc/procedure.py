"""Procedure declarations — the tree the document is generated from.

``Procedure`` is the frozen leaf definition and ``ProcedureRouter`` an
ordered, read-only mapping of names to procedures and nested routers.
Decorators register a function and hand it back unchanged,
so declaring a procedure for documentation never changes how it is
called.

Usage::

    router = ProcedureRouter()

    @router.query(input=GetUser, output=User)
    def get_user(input: GetUser) -> User:
        ...

    router.mount("admin", admin_router)
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Literal, get_args

from rpcdoc._types import TypeDescription
from rpcdoc.errors import ConfigurationError

ProcedureKind = Literal["query", "mutation", "subscription"]

_KINDS: frozenset[str] = frozenset(get_args(ProcedureKind))


@dataclass(frozen=True, slots=True)
class Procedure:
    """A frozen procedure definition.

    ``input`` and ``output`` are optional type descriptions; ``None``
    means the procedure declares none. ``handler`` is kept for callers
    that dispatch through the tree and is never invoked by rpcdoc.
    """

    # Discriminant: tree entries with ``procedure = True`` are leaves,
    # everything else is a nested group.
    procedure: ClassVar[bool] = True

    kind: ProcedureKind
    input: TypeDescription = None
    output: TypeDescription = None
    handler: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            msg = f"Unknown procedure kind {self.kind!r}; expected one of {sorted(_KINDS)}"
            raise ConfigurationError(msg)


def is_procedure(entry: object) -> bool:
    """Return True if a tree entry is a procedure rather than a nested group."""
    return getattr(entry, "procedure", False) is True


class ProcedureRouter(Mapping[str, Any]):
    """Ordered collection of procedures and nested routers.

    Implements ``Mapping`` so a router is directly usable as a
    procedure tree (and as a sub-tree of another router).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._entries: dict[str, Any] = {}
        if entries:
            for name, entry in entries.items():
                if is_procedure(entry):
                    self.add(name, entry)
                else:
                    self.mount(name, entry)

    # -- Registration --

    def add(self, name: str, procedure: Procedure) -> Procedure:
        """Register a prebuilt procedure under ``name``."""
        self._check_name(name)
        self._entries[name] = procedure
        return procedure

    def mount(self, name: str, tree: Mapping[str, Any]) -> None:
        """Nest a group of procedures under ``name``.

        Plain mappings are accepted as well as routers. The group name
        labels the entry only; routes are built from leaf names.
        """
        self._check_name(name)
        if not isinstance(tree, Mapping):
            msg = f"Cannot mount {type(tree).__name__} as {name!r}; expected a mapping"
            raise ConfigurationError(msg)
        self._entries[name] = tree

    def query(
        self,
        name: str | None = None,
        *,
        input: TypeDescription = None,
        output: TypeDescription = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a read procedure (documented as GET) via decorator."""
        return self._register("query", name, input, output)

    def mutation(
        self,
        name: str | None = None,
        *,
        input: TypeDescription = None,
        output: TypeDescription = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a write procedure (documented as POST) via decorator."""
        return self._register("mutation", name, input, output)

    def subscription(
        self,
        name: str | None = None,
        *,
        input: TypeDescription = None,
        output: TypeDescription = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a stream procedure via decorator. Left out of documents."""
        return self._register("subscription", name, input, output)

    def _register(
        self,
        kind: ProcedureKind,
        name: str | None,
        input: TypeDescription,
        output: TypeDescription,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add(
                name or func.__name__,
                Procedure(kind=kind, input=input, output=output, handler=func),
            )
            return func

        return decorator

    def _check_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            msg = f"Procedure names must be non-empty strings, got {name!r}"
            raise ConfigurationError(msg)
        if name in self._entries:
            msg = f"Duplicate procedure name: {name!r}"
            raise ConfigurationError(msg)

    # -- Introspection --

    def flatten(self) -> Iterator[tuple[str, Procedure]]:
        """Yield ``(name, procedure)`` for every leaf, depth-first."""
        yield from iter_procedures(self)

    # -- Mapping protocol --

    def __getitem__(self, name: str) -> Any:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ProcedureRouter({list(self._entries)!r})"


def iter_procedures(tree: Mapping[str, Any]) -> Iterator[tuple[str, Procedure]]:
    """Yield ``(name, procedure)`` for every leaf of any tree, depth-first."""
    for name, entry in tree.items():
        if is_procedure(entry):
            yield name, entry
        else:
            yield from iter_procedures(entry)
