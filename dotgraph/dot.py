"""
Conversion of a graph into DOT text.

The document is built from sections in a fixed order: graph attributes,
global ``node``/``edge`` defaults, subgraphs, then the vertices and edges
that no subgraph contains. Sections are separated by a blank line and
empty sections are left out entirely, so an empty graph is just::

    digraph G {

    }

Vertices and edges are always written in ascending id order.
"""
import functools
import re
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from .graph import Edge, Graph, Vertex
    from .subgraph import Subgraph

INDENT = "  "
HTML_LABEL_PREFIX = "<table"

FINAL_ODD_BACKSLASHES = re.compile(r"(?<!\\)(?:\\{2})*\\$")

QUOTE_WITH_OPTIONAL_BACKSLASHES = re.compile(
    r"""
    (?P<escaped_backslashes>(?:\\{2})*)
    \\?  # \" is the same quote as "
    (?P<literal_quote>")
    """,
    flags=re.VERBOSE,
)

ESCAPE_UNESCAPED_QUOTES = functools.partial(
    QUOTE_WITH_OPTIONAL_BACKSLASHES.sub,
    r"\g<escaped_backslashes>\\\g<literal_quote>",
)


def indent(text: str, depth: int = 1) -> str:
    """Indent every line of ``text`` by ``depth`` levels."""
    prefix = INDENT * depth
    return "\n".join(prefix + line for line in text.split("\n"))


def compact(items: Iterable[Optional[str]]) -> List[str]:
    return [i for i in items if i is not None]


def join_or_none(items: List[str], joiner: str = "\n") -> Optional[str]:
    if not items:
        return None
    return joiner.join(items)


def escape_quotes(value: str) -> str:
    r"""Escape the quotes of ``value`` for use inside a quoted DOT string.

    An already escaped ``\"`` counts as one quote, and a trailing odd run of
    backslashes is completed so that it cannot escape the closing quote.
    Other backslash sequences such as ``\n`` or ``\l`` are left alone.

    >>> print(escape_quotes('say "hi"'))
    say \"hi\"
    >>> print(escape_quotes('C:\\'))
    C:\\
    """
    value = ESCAPE_UNESCAPED_QUOTES(value)
    if FINAL_ODD_BACKSLASHES.search(value):
        value += "\\"
    return value


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def attribute_to_dot(key: str, value: Any) -> str:
    """Format a single ``key="value"`` pair.

    HTML table labels are delimited by angle brackets instead of quotes.
    """
    value = format_value(value)
    if key == "label" and value.startswith(HTML_LABEL_PREFIX):
        return f"label=<{value}>"
    return f'{key}="{escape_quotes(value)}"'


def attributes_to_dot(attrs: Mapping[str, Any]) -> Optional[str]:
    if not attrs:
        return None
    return "[" + ",".join(attribute_to_dot(k, v) for k, v in attrs.items()) + "]"


def global_properties_to_dot(node_attrs: Mapping[str, Any], edge_attrs: Mapping[str, Any]) -> Optional[str]:
    lines = []
    for kind, attrs in (("node", node_attrs), ("edge", edge_attrs)):
        if attrs:
            lines.append(indent(f"{kind} {attributes_to_dot(attrs)}"))
    return join_or_none(lines)


def vertex_to_dot(vertex: "Vertex") -> str:
    return indent(" ".join(compact([f"v{vertex.id}", attributes_to_dot(vertex.attrs)])))


def edge_endpoint(vertex_id: int, port: Optional[str]) -> str:
    if port is None:
        return f"v{vertex_id}"
    return f"v{vertex_id}:{port}"


def edge_to_dot(edge: "Edge") -> str:
    tail = edge_endpoint(edge.tail, edge.tail_port)
    head = edge_endpoint(edge.head, edge.head_port)
    return indent(" ".join(compact([f"{tail} -> {head}", attributes_to_dot(edge.attrs)])))


def vertices_to_dot(vertices: Iterable["Vertex"]) -> Optional[str]:
    return join_or_none([vertex_to_dot(v) for v in sorted(vertices, key=lambda v: v.id)])


def edges_to_dot(edges: Iterable["Edge"]) -> Optional[str]:
    return join_or_none([edge_to_dot(e) for e in sorted(edges, key=lambda e: e.id)])


def subgraph_to_dot(subgraph: "Subgraph", graph: "Graph") -> str:
    members = set(subgraph.vertex_ids)
    vertices = [v for v in graph.vertices if v.id in members]
    edges = [e for e in graph.edges if e.tail in members and e.head in members]
    properties = None
    if subgraph.is_cluster:
        properties = join_or_none([indent(attribute_to_dot(k, v)) for k, v in subgraph.subgraph_properties.items()])
    sections = compact(
        [
            f"subgraph {subgraph.id} {{",
            global_properties_to_dot(subgraph.node_attrs, subgraph.edge_attrs),
            properties,
            vertices_to_dot(vertices),
            edges_to_dot(edges),
            "}",
        ]
    )
    return "\n\n".join(indent(s) for s in sections)


def partition(graph: "Graph") -> Tuple[List["Vertex"], List["Edge"]]:
    """Return the vertices and edges not contained by any subgraph."""
    member_sets = [set(s.vertex_ids) for s in graph.subgraphs]
    contained = set().union(*member_sets)
    vertices = [v for v in graph.vertices if v.id not in contained]
    edges = [e for e in graph.edges if not any(e.tail in m and e.head in m for m in member_sets)]
    return vertices, edges


def to_dot(graph: "Graph") -> str:
    """Return the DOT representation of ``graph``."""
    graph_properties = join_or_none([indent(attribute_to_dot(k, v)) for k, v in graph.graph_attr.items()])
    subgraphs = join_or_none([subgraph_to_dot(s, graph) for s in graph.subgraphs], "\n\n")
    vertices, edges = partition(graph)
    sections = compact(
        [
            "digraph G {",
            graph_properties,
            global_properties_to_dot(graph.node_attr, graph.edge_attr),
            subgraphs,
            vertices_to_dot(vertices),
            edges_to_dot(edges),
            "}",
        ]
    )
    return "\n\n".join(sections)
