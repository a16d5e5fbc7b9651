"""Fixtures for the example apps.

``example_router`` runs the ``app.py`` beside the requesting test and
returns its ``router``; ``example_document`` builds an OpenAPI document
from it with per-test title, version and base path.
"""

import runpy
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

from rpcdoc.config import DocumentConfig
from rpcdoc.document import generate_from_config


@pytest.fixture
def example_router(request: pytest.FixtureRequest) -> Mapping[str, Any]:
    """The tree declared by the example, re-run for each test."""
    app_dir = Path(request.path).parent
    namespace = runpy.run_path(str(app_dir / "app.py"), run_name=f"example_{app_dir.name}")
    return namespace["router"]


@pytest.fixture
def example_document(example_router: Mapping[str, Any]) -> Callable[..., dict[str, Any]]:
    def build(**settings: Any) -> dict[str, Any]:
        return generate_from_config(DocumentConfig(**settings), example_router)

    return build
