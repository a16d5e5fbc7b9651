"""Shared pytest fixtures for rpcdoc tests."""

import sys
import types
from dataclasses import dataclass

import pytest

from rpcdoc.procedure import Procedure, ProcedureRouter


@dataclass(frozen=True, slots=True)
class _Item:
    id: int
    title: str


class _Opaque:
    pass


def _build_router() -> ProcedureRouter:
    router = ProcedureRouter()

    @router.query(output=list[_Item])
    def listItems() -> list[_Item]:  # noqa: N802
        return []

    @router.mutation(input=_Item, output=_Item)
    def addItem(input: _Item) -> _Item:  # noqa: N802
        return input

    @router.subscription()
    def onItem() -> None:  # noqa: N802
        pass

    return router


@pytest.fixture
def _fake_tree_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module exposing procedure trees on sys.modules."""
    mod = types.ModuleType("_fake_rpcdoc_app")
    mod.router = _build_router()  # type: ignore[attr-defined]
    mod.plain = {"ping": Procedure(kind="query")}  # type: ignore[attr-defined]
    mod.create_router = _build_router  # type: ignore[attr-defined]
    mod.empty = ProcedureRouter()  # type: ignore[attr-defined]
    mod.broken = {"bad": Procedure(kind="query", input=_Opaque)}  # type: ignore[attr-defined]
    mod.not_a_tree = "just a string"  # type: ignore[attr-defined]
    # Same leaf name in two groups: the mutation registered last wins
    mod.colliding = {  # type: ignore[attr-defined]
        "status": Procedure(kind="query"),
        "g": {"status": Procedure(kind="mutation")},
    }
    mod.unnamed = {"": Procedure(kind="query")}  # type: ignore[attr-defined]

    def failing_factory() -> ProcedureRouter:
        msg = "boom"
        raise RuntimeError(msg)

    mod.failing_factory = failing_factory  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_rpcdoc_app", mod)
