"""Content layer — the CMS content graph as immutable nodes.

Handles decoding the fetch result into ordered node lists and the
post-to-collection assignment records produced during planning.
"""

from routeplan.content.graph import graph_from_result, load_graph
from routeplan.content.nodes import AssignedPost, ContentGraph, ContentNode

__all__ = [
    "AssignedPost",
    "ContentGraph",
    "ContentNode",
    "graph_from_result",
    "load_graph",
]
