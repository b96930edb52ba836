import itertools
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .attributes import AttributeList, is_unset
from .dot import to_dot
from .errors import (
    EdgeNotFoundError,
    SubgraphMembershipError,
    SubgraphNotFoundError,
    VertexNotFoundError,
)
from .html_record import HTMLRecord
from .record import Record
from .subgraph import Subgraph

log = logging.getLogger(__name__)

# A vertex id, or a (vertex id, port name) pair for record and HTML vertices.
Endpoint = Union[int, Tuple[int, str]]


class Vertex:
    def __init__(self, vid: int, attrs: AttributeList):
        self.id = vid
        self.attrs = attrs

    def __repr__(self) -> str:
        return f"<Vertex v{self.id} {dict(self.attrs)!r}>"

    @property
    def label(self) -> Optional[str]:
        return self.attrs.get("label")


class Edge:
    """Edge connects a tail vertex to a head vertex.

    Ports are kept apart from the attributes: they are written as part of
    the edge endpoints (``v0:f1 -> v1``), never inside the attribute list.
    """

    def __init__(
        self,
        eid: int,
        tail: int,
        head: int,
        attrs: AttributeList,
        tail_port: Optional[str] = None,
        head_port: Optional[str] = None,
    ):
        self.id = eid
        self.tail = tail
        self.head = head
        self.tail_port = tail_port
        self.head_port = head_port
        self.attrs = attrs

    def __repr__(self) -> str:
        return f"<Edge e{self.id} v{self.tail} -> v{self.head}>"

    def update(self, attrs: Mapping[str, Any]) -> None:
        attrs = dict(attrs)
        if "outport" in attrs:
            self.tail_port = attrs.pop("outport") or None
        if "inport" in attrs:
            self.head_port = attrs.pop("inport") or None
        self.attrs.update(attrs)


class Graph:
    """Graph is a directed graph that can be written in DOT notation.

    Vertices, edges and subgraphs each get ids from their own counter,
    starting at 0, in creation order. Ids are never reused.
    """

    _kinds: Tuple[str, ...] = ("node", "edge")

    def __init__(
        self,
        graph_attr: Optional[Mapping[str, Any]] = None,
        node_attr: Optional[Mapping[str, Any]] = None,
        edge_attr: Optional[Mapping[str, Any]] = None,
    ):
        """
        :param graph_attr: Graph-wide attributes, e.g. ``size`` or ``rankdir``.
        :param node_attr: Default attributes for every vertex.
        :param edge_attr: Default attributes for every edge.
        """
        self.graph_attr = AttributeList(graph_attr)
        self.node_attr = AttributeList(node_attr)
        self.edge_attr = AttributeList(edge_attr)
        self.subgraphs: List[Subgraph] = []

        self._vertices: Dict[int, Vertex] = {}
        self._edges: Dict[int, Edge] = {}
        self._vertex_ids = itertools.count()
        self._edge_ids = itertools.count()
        self._subgraph_ids = itertools.count()

    def __str__(self) -> str:
        return self.to_dot()

    def __repr__(self) -> str:
        return f"<Graph vertices={len(self._vertices)} edges={len(self._edges)} subgraphs={len(self.subgraphs)}>"

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    def to_dot(self) -> str:
        return to_dot(self)

    def add_vertex(self, label: str, **attrs: Any) -> int:
        """Add a vertex and return its id.

        ``label`` is always the first attribute of the vertex.
        """
        if is_unset(label):
            raise ValueError("vertex label is required")
        attributes = AttributeList(attrs)
        attributes.prepend("label", label)
        vid = next(self._vertex_ids)
        self._vertices[vid] = Vertex(vid, attributes)
        return vid

    def add_record(self, record: Record) -> int:
        """Add a vertex drawn with the ``record`` shape."""
        return self.add_vertex(record.to_label(), **record.vertex_attrs())

    def add_html_record(self, record: HTMLRecord, **attrs: Any) -> int:
        """Add a vertex whose label is an HTML-like table."""
        return self.add_vertex(record.to_label(), **{"shape": "plaintext", **attrs})

    def add_edge(self, tail: Endpoint, head: Endpoint, **attrs: Any) -> int:
        """Connect two vertices and return the edge id.

        :param tail: Vertex id, or ``(vertex_id, port)`` to leave from a port.
        :param head: Vertex id, or ``(vertex_id, port)`` to arrive at a port.
        :param attrs: Edge attributes. ``outport`` and ``inport`` are
            accepted as an alternative way to give the ports.
        """
        tail_id, tail_port = self._endpoint(tail)
        head_id, head_port = self._endpoint(head)
        outport = attrs.pop("outport", None)
        inport = attrs.pop("inport", None)
        eid = next(self._edge_ids)
        self._edges[eid] = Edge(
            eid,
            tail_id,
            head_id,
            AttributeList(attrs),
            tail_port=tail_port if tail_port is not None else outport,
            head_port=head_port if head_port is not None else inport,
        )
        return eid

    def chain(self, endpoints: Iterable[Endpoint], **attrs: Any) -> List[int]:
        """Connect each vertex to the next one, returning the new edge ids."""
        endpoints = list(endpoints)
        return [self.add_edge(tail, head, **attrs) for tail, head in zip(endpoints, endpoints[1:])]

    def fan_out(self, tail: Endpoint, heads: Iterable[Endpoint], **attrs: Any) -> List[int]:
        """Connect ``tail`` to every vertex in ``heads``, returning the new edge ids.

        Every endpoint is checked before any edge is added.
        """
        heads = list(heads)
        for endpoint in [tail, *heads]:
            self._endpoint(endpoint)
        return [self.add_edge(tail, head, **attrs) for head in heads]

    def add_subgraph(self, vertex_ids: Iterable[int], **properties: Any) -> str:
        """Group vertices into a subgraph and return its id.

        ``node`` and ``edge`` mappings in ``properties`` style the member
        vertices and the edges between two members.
        """
        return self._add_subgraph(vertex_ids, properties, is_cluster=False)

    def add_cluster(self, vertex_ids: Iterable[int], **properties: Any) -> str:
        """Group vertices into a cluster and return its id.

        Besides ``node`` and ``edge`` mappings, ``properties`` can hold
        attributes for the cluster itself, such as ``color`` or ``label``.
        """
        return self._add_subgraph(vertex_ids, properties, is_cluster=True)

    def set_graph_property(self, key: str, value: Any) -> None:
        self.graph_attr[key] = value

    def set_global_properties(self, kind: str, **attrs: Any) -> None:
        """Set default attributes for every ``node`` or every ``edge``."""
        if kind not in self._kinds:
            raise ValueError(f'"{kind}" is not a valid element kind')
        layer = self.node_attr if kind == "node" else self.edge_attr
        layer.update(attrs)

    def find_vertex(self, vid: int) -> Optional[Vertex]:
        return self._vertices.get(vid)

    def find_edge(self, eid: int) -> Optional[Edge]:
        return self._edges.get(eid)

    def find_subgraph(self, sid: str) -> Optional[Subgraph]:
        for subgraph in self.subgraphs:
            if subgraph.id == sid:
                return subgraph
        return None

    def update_vertex(self, vid: int, **attrs: Any) -> None:
        """Merge attributes into a vertex. ``UNSET`` or ``None`` removes a key."""
        self._vertex(vid).attrs.update(attrs)

    def update_edge(self, eid: int, **attrs: Any) -> None:
        self._edge(eid).update(attrs)

    def update_subgraph(self, sid: str, **properties: Any) -> None:
        self._subgraph(sid).update(properties)

    def add_to_subgraph(self, sid: str, vertex_ids: Iterable[int]) -> None:
        subgraph = self._subgraph(sid)
        vertex_ids = list(vertex_ids)
        self._check_members(vertex_ids, owner=subgraph)
        subgraph.add(vertex_ids)

    def remove_from_subgraph(self, sid: str, vertex_ids: Iterable[int]) -> None:
        self._subgraph(sid).remove(vertex_ids)

    def remove_vertex(self, vid: int) -> None:
        """Remove a vertex along with its edges and subgraph memberships."""
        self._vertex(vid)
        attached = [e.id for e in self._edges.values() if vid in (e.tail, e.head)]
        for eid in attached:
            del self._edges[eid]
        for subgraph in self.subgraphs:
            subgraph.remove([vid])
        del self._vertices[vid]
        log.debug("removed vertex %d and %d attached edges", vid, len(attached))

    def remove_edge(self, eid: int) -> None:
        self._edge(eid)
        del self._edges[eid]

    def remove_subgraph(self, sid: str) -> None:
        """Remove a subgraph. Its vertices stay in the graph."""
        subgraph = self._subgraph(sid)
        self.subgraphs.remove(subgraph)
        log.debug("removed %s", sid)

    def _add_subgraph(self, vertex_ids: Iterable[int], properties: Mapping[str, Any], is_cluster: bool) -> str:
        vertex_ids = list(vertex_ids)
        self._check_members(vertex_ids)
        subgraph = Subgraph(next(self._subgraph_ids), vertex_ids, is_cluster, properties)
        self.subgraphs.append(subgraph)
        log.debug("added %s with vertices %r", subgraph.id, subgraph.vertex_ids)
        return subgraph.id

    def _check_members(self, vertex_ids: List[int], owner: Optional[Subgraph] = None) -> None:
        for vid in vertex_ids:
            self._vertex(vid)
            for subgraph in self.subgraphs:
                if subgraph is not owner and vid in subgraph:
                    raise SubgraphMembershipError(f"vertex {vid} already belongs to {subgraph.id}")

    def _endpoint(self, endpoint: Endpoint) -> Tuple[int, Optional[str]]:
        if isinstance(endpoint, tuple):
            vid, port = endpoint
        else:
            vid, port = endpoint, None
        self._vertex(vid)
        return vid, port

    def _vertex(self, vid: int) -> Vertex:
        vertex = self._vertices.get(vid)
        if vertex is None:
            raise VertexNotFoundError(vid)
        return vertex

    def _edge(self, eid: int) -> Edge:
        edge = self._edges.get(eid)
        if edge is None:
            raise EdgeNotFoundError(eid)
        return edge

    def _subgraph(self, sid: str) -> Subgraph:
        subgraph = self.find_subgraph(sid)
        if subgraph is None:
            raise SubgraphNotFoundError(sid)
        return subgraph

