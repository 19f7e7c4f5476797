"""Centralized configuration for dotgraph."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotgraph.search import Vertex

DEFAULT_COST = 10e9
DEFAULT_HEURISTIC = 0.0


@dataclass
class SearchConfig:
    """How a graph exposes numeric costs and heuristics to search code.

    A function takes precedence over an attribute key; with neither set the
    defaults are used.
    """

    cost_key: str | None = None
    heuristic_key: str | None = None
    cost_func: Callable[[Vertex, Vertex], float] | None = None
    heuristic_func: Callable[[Vertex], float] | None = None
    default_cost: float = DEFAULT_COST
    default_heuristic: float = DEFAULT_HEURISTIC
