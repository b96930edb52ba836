from .attributes import UNSET, AttributeList
from .dot import to_dot
from .errors import (
    DuplicatePortError,
    EdgeNotFoundError,
    ElementNotFoundError,
    GraphError,
    HTMLLabelError,
    LabelError,
    RecordLabelError,
    SubgraphMembershipError,
    SubgraphNotFoundError,
    VertexNotFoundError,
)
from .graph import Edge, Graph, Vertex
from .html_record import HTMLRecord, br, font, td, tr
from .record import Port, Record, RecordSubset, Text, column, row
from .subgraph import Subgraph
from .writer import compile, show, write

__all__ = [
    "AttributeList",
    "DuplicatePortError",
    "Edge",
    "EdgeNotFoundError",
    "ElementNotFoundError",
    "Graph",
    "GraphError",
    "HTMLLabelError",
    "HTMLRecord",
    "LabelError",
    "Port",
    "Record",
    "RecordLabelError",
    "RecordSubset",
    "Subgraph",
    "SubgraphMembershipError",
    "SubgraphNotFoundError",
    "Text",
    "UNSET",
    "Vertex",
    "VertexNotFoundError",
    "br",
    "column",
    "compile",
    "font",
    "row",
    "show",
    "td",
    "to_dot",
    "tr",
    "write",
]
