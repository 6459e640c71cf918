from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()

from numintegral.functions import Integrands  # noqa: E402


@pytest.fixture
def stub_integrands():
    """Integrands that record which member was called."""
    calls = []

    def make(tag, fn):
        def f(x, intensity):
            calls.append(tag)
            return fn(x)

        return f

    bundle = Integrands(
        make("f1", lambda x: 1.0),
        make("f2", lambda x: x),
        make("f3", lambda x: x * x),
        make("f4", lambda x: 3.0),
    )
    return bundle, calls
