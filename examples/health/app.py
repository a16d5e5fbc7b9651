"""Health — procedures without declared types, served from a plain dict tree.

Shows that a tree does not have to be a ``ProcedureRouter``: any mapping
of names to ``Procedure`` objects (or nested mappings) works.

Generate the document:
    cd examples/health && rpcdoc generate app:router --base-path ""
"""

from rpcdoc import Procedure


def health() -> str:
    return "ok"


def ping() -> str:
    return "pong"


router = {
    "health": Procedure(kind="query", handler=health),
    "diagnostics": {
        "ping": Procedure(kind="query", handler=ping),
        "heartbeat": Procedure(kind="subscription"),
    },
}
