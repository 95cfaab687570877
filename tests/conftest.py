from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _no_py_trace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOX_DEBUG_PY_TRACE", raising=False)
