"""Generated-file dependency graph: store, ordering, paths and assembly."""

from dartweave.graph.assembler import Assembler, header_length, split_header
from dartweave.graph.dependency_graph import DependencyGraph, create_dependency_graph
from dartweave.graph.ordering import get_generation_order
from dartweave.graph.paths import relative_path
from dartweave.graph.presets import FLUTTER_DEPENDENCIES, dependencies_for
from dartweave.graph.store import GraphStore

__all__ = [
    "Assembler",
    "DependencyGraph",
    "FLUTTER_DEPENDENCIES",
    "GraphStore",
    "create_dependency_graph",
    "dependencies_for",
    "get_generation_order",
    "header_length",
    "relative_path",
    "split_header",
]
