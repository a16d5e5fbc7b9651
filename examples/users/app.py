"""Users — a typical CRUD procedure tree.

Queries, mutations and a subscription over a small in-memory user
store, with an ``admin`` group mounted underneath. The handlers are
plain functions; rpcdoc only reads their declarations.

Generate the document:
    cd examples/users && rpcdoc generate app:router --title "User Management API"
"""

import enum
import threading
from dataclasses import dataclass
from typing import Annotated

from rpcdoc import ProcedureRouter

Email = Annotated[str, {"format": "email"}]


class Role(enum.Enum):
    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Profile:
    bio: str | None = None
    avatar: str | None = None


@dataclass(frozen=True, slots=True)
class User:
    id: str
    name: str
    email: Email
    role: Role


@dataclass(frozen=True, slots=True)
class GetUserInput:
    id: str


@dataclass(frozen=True, slots=True)
class CreateUserInput:
    name: Annotated[str, {"minLength": 1}]
    email: Email
    profile: Profile | None = None


@dataclass(frozen=True, slots=True)
class Created:
    id: str
    createdAt: str  # noqa: N815


# ---------------------------------------------------------------------------
# In-memory storage (thread-safe for free-threading)
# ---------------------------------------------------------------------------


_users: dict[str, User] = {}
_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Procedures
# ---------------------------------------------------------------------------


router = ProcedureRouter()
admin = ProcedureRouter()


@router.query("getUser", input=GetUserInput, output=User)
def get_user(input: GetUserInput) -> User:
    with _lock:
        return _users[input.id]


@router.query("listUsers", output=list[User])
def list_users() -> list[User]:
    with _lock:
        return list(_users.values())


@router.mutation("createUser", input=CreateUserInput, output=Created)
def create_user(input: CreateUserInput) -> Created:
    with _lock:
        user_id = str(len(_users) + 1)
        _users[user_id] = User(id=user_id, name=input.name, email=input.email, role=Role.USER)
    return Created(id=user_id, createdAt="1970-01-01T00:00:00Z")


@router.subscription("onUserCreated", output=User)
def on_user_created() -> None:
    pass


@admin.mutation("purgeUsers")
def purge_users() -> None:
    with _lock:
        _users.clear()


router.mount("admin", admin)
