"""Tests for pydantic models and TypeAdapters as type descriptions."""

import json

import pytest

pydantic = pytest.importorskip("pydantic")

from rpcdoc.document import generate_openapi, render_json  # noqa: E402
from rpcdoc.errors import SchemaConversionError  # noqa: E402
from rpcdoc.procedure import ProcedureRouter  # noqa: E402
from rpcdoc.schema import type_to_schema  # noqa: E402


class CreateUser(pydantic.BaseModel):
    name: str
    email: str
    nickname: str | None = None


class Address(pydantic.BaseModel):
    street: str
    city: str


class Person(pydantic.BaseModel):
    name: str
    address: Address
    previous: list[Address] = []


class TreeNode(pydantic.BaseModel):
    value: int
    children: list["TreeNode"] = []


class TestPydanticModels:
    def test_model_uses_model_json_schema(self) -> None:
        assert type_to_schema(CreateUser) == CreateUser.model_json_schema()

    def test_type_adapter(self) -> None:
        adapter = pydantic.TypeAdapter(list[int])
        assert type_to_schema(adapter) == {"type": "array", "items": {"type": "integer"}}

    def test_model_in_document(self) -> None:
        router = ProcedureRouter()

        @router.mutation(input=CreateUser, output=CreateUser)
        def createUser(input: CreateUser) -> CreateUser:  # noqa: N802
            return input

        spec = generate_openapi(api_title="T", api_version="1", base_path="/trpc", tree=router)
        operation = spec["paths"]["/trpc/createUser"]["post"]
        body = operation["requestBody"]["content"]["application/json"]["schema"]
        assert body["required"] == ["name", "email"]
        assert set(body["properties"]) == {"name", "email", "nickname"}


# =============================================================================
# Nested models ($defs inlining)
# =============================================================================


class TestNestedModels:
    def test_nested_model_is_inlined(self) -> None:
        schema = type_to_schema(Person)
        assert "$defs" not in schema
        address = schema["properties"]["address"]
        assert "$ref" not in address
        assert address["type"] == "object"
        assert set(address["properties"]) == {"street", "city"}
        assert address["required"] == ["street", "city"]

    def test_repeated_reference_is_inlined_everywhere(self) -> None:
        schema = type_to_schema(Person)
        items = schema["properties"]["previous"]["items"]
        assert items == schema["properties"]["address"]
        assert items is not schema["properties"]["address"]

    def test_type_adapter_of_nested_model(self) -> None:
        schema = type_to_schema(pydantic.TypeAdapter(list[Address]))
        assert "$defs" not in schema
        assert set(schema["items"]["properties"]) == {"street", "city"}

    def test_document_has_no_dangling_refs(self) -> None:
        router = ProcedureRouter()

        @router.query(output=Person)
        def me() -> Person:
            return Person(name="n", address=Address(street="s", city="c"))

        spec = generate_openapi(api_title="T", api_version="1", base_path="/trpc", tree=router)
        text = render_json(spec)
        assert "$ref" not in text
        assert "$defs" not in text
        assert json.loads(text)["components"] == {}

    def test_recursive_model_rejected(self) -> None:
        with pytest.raises(SchemaConversionError, match="recursive"):
            type_to_schema(TreeNode)
