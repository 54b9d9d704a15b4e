"""Job posting wizard package.

``run_wizard`` lives in :mod:`wizard.flow`, which pulls in Streamlit and the
persistence layer; it is loaded on first attribute access so that pure logic
modules such as :mod:`wizard.validation` import without side effects.
"""

from __future__ import annotations

import importlib
from typing import Any

__all__ = ["run_wizard"]


def __getattr__(name: str) -> Any:
    """Load attributes from ``wizard.flow`` lazily while mirroring module semantics."""

    if name.startswith("__"):
        raise AttributeError(name)
    flow = importlib.import_module(f"{__name__}.flow")
    try:
        value: Any = getattr(flow, name)
    except AttributeError as exc:
        raise AttributeError(f"module {__name__} has no attribute {name}") from exc
    globals()[name] = value
    return value
