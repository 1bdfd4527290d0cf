"""Family graph construction and generational layout."""

from famgraph.builder import build_context, build_family_graph
from famgraph.config import BuildSettings
from famgraph.errors import FamGraphError, MissingRequiredData
from famgraph.layout import LayoutSettings
from famgraph.models import BuildResult, CoupleEdge, HierarchyEdge, Node

__all__ = [
    "BuildResult",
    "BuildSettings",
    "CoupleEdge",
    "FamGraphError",
    "HierarchyEdge",
    "LayoutSettings",
    "MissingRequiredData",
    "Node",
    "build_context",
    "build_family_graph",
]
