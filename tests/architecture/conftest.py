"""Shared fixtures for architecture tests."""

import os

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    """Import graph of every module under src/shapeguard."""
    src_dir = os.path.abspath(
        os.path.join(os.path.dirname(__file__), "..", "..", "src")
    )
    project_path = os.path.join(src_dir, "shapeguard")
    return get_evaluable_architecture(src_dir, project_path)


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Two layers: domain (options, results, kinds, ports) and guards
    (factory, union, containers, leaves).

    PyTestArch resolves module names relative to the source root,
    so modules appear as 'src.shapeguard.domain', etc.
    """
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.shapeguard.domain"])
        .layer("guards")
        .containing_modules(["src.shapeguard.guards"])
    )
