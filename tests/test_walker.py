"""Tests for rpcdoc.walker — recursive tree flattening."""

from typing import Any

from rpcdoc.procedure import Procedure, ProcedureRouter
from rpcdoc.walker import walk


def _stub_schema(type_description: Any) -> dict[str, Any]:
    return {"x-stub": type_description}


class TestWalk:
    def test_empty_tree(self) -> None:
        assert walk("/trpc", {}) == {}

    def test_flat_tree(self) -> None:
        tree = {
            "getUser": Procedure(kind="query"),
            "createUser": Procedure(kind="mutation"),
        }
        paths = walk("/api", tree)
        assert set(paths) == {"/api/getUser", "/api/createUser"}
        assert "get" in paths["/api/getUser"]
        assert "post" in paths["/api/createUser"]

    def test_subscriptions_are_skipped(self) -> None:
        tree = {
            "ping": Procedure(kind="query"),
            "onMessage": Procedure(kind="subscription"),
        }
        assert list(walk("/trpc", tree)) == ["/trpc/ping"]

    def test_nested_groups_do_not_extend_base_path(self) -> None:
        tree = {
            "users": {
                "list": Procedure(kind="query"),
                "admin": {"purge": Procedure(kind="mutation")},
            },
        }
        assert set(walk("/trpc", tree)) == {"/trpc/list", "/trpc/purge"}

    def test_depth_does_not_change_output(self) -> None:
        flat = {
            "a": Procedure(kind="query", input="A"),
            "b": Procedure(kind="mutation", output="B"),
            "c": Procedure(kind="query"),
        }
        nested = {
            "a": Procedure(kind="query", input="A"),
            "g1": {"g2": {"g3": {"b": Procedure(kind="mutation", output="B")}}},
            "g4": {"c": Procedure(kind="query")},
        }
        assert walk("/x", nested, to_schema=_stub_schema) == walk("/x", flat, to_schema=_stub_schema)

    def test_collision_last_write_wins(self) -> None:
        tree = {
            "status": Procedure(kind="query"),
            "group": {"status": Procedure(kind="query", output="Later")},
        }
        paths = walk("/trpc", tree, to_schema=_stub_schema)
        assert len(paths) == 1
        response = paths["/trpc/status"]["get"]["responses"]["200"]
        assert response["content"]["application/json"]["schema"]["properties"]["result"][
            "properties"
        ]["data"] == {"x-stub": "Later"}

    def test_router_as_tree(self) -> None:
        admin = ProcedureRouter()

        @admin.mutation()
        def reset() -> None:
            pass

        router = ProcedureRouter()

        @router.query()
        def health() -> str:
            return "ok"

        router.mount("admin", admin)

        paths = walk("", router)
        assert set(paths) == {"/health", "/reset"}
        assert paths["/reset"]["post"]["operationId"] == "reset"

    def test_does_not_mutate_tree(self) -> None:
        proc = Procedure(kind="query", input={"type": "string"})
        tree = {"echo": proc}
        walk("/trpc", tree)
        assert tree == {"echo": proc}
        assert proc.input == {"type": "string"}
