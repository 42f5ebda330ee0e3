# relaxed_witness/__init__.py
from __future__ import annotations

"""
relaxed_witness: relaxed (weak) witness complexes for topological data analysis.

Recommended usage:
    import relaxed_witness as rw

    table = rw.nearest_landmark_table(witnesses, landmarks)
    result = rw.build_witness_complex(table, alpha=0.1, max_dimension=2)
    result.simplex_tree      # gudhi.SimplexTree
    result.summarize()

Public API:
    - Curated user-facing symbols are re-exported from :mod:`relaxed_witness.api`.
    - Subpackages are available as namespaces (``rw.complex``, ``rw.construction``,
      ``rw.summaries``) and are imported lazily.
"""

import importlib
from typing import Any

from ._version import __version__

from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all

_SUBPACKAGES = ("complex", "construction", "summaries")

__all__ = ["__version__", *_api_all, *_SUBPACKAGES]


def __getattr__(name: str) -> Any:
    if name in _SUBPACKAGES:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    names = set(globals().keys())
    names.update(_SUBPACKAGES)
    return sorted(names)
