from typing import Any, Iterable, List, Mapping, Optional

from .attributes import AttributeList, is_unset


class Subgraph:
    """Subgraph groups vertices of a graph under shared default styling.

    A cluster is a subgraph whose id starts with ``cluster``; Graphviz draws
    it with a visible boundary, and only clusters render the styling
    attributes (``color``, ``label``, ``bgcolor``, ...) given at creation.

    :param sid: Value of the graph's subgraph counter.
    :param vertex_ids: Ids of the member vertices.
    :param is_cluster: Whether the subgraph is a cluster.
    :param properties: ``node`` and ``edge`` mappings for local defaults,
        any other key is cluster styling.
    """

    def __init__(
        self,
        sid: int,
        vertex_ids: Iterable[int],
        is_cluster: bool = False,
        properties: Optional[Mapping[str, Any]] = None,
    ):
        prefix = "cluster" if is_cluster else "subgraph"
        self.id: str = f"{prefix}{sid}"
        self.is_cluster = is_cluster
        self.vertex_ids: List[int] = []
        self.node_attrs = AttributeList()
        self.edge_attrs = AttributeList()
        self.subgraph_properties = AttributeList()
        self.add(vertex_ids)
        self.update(properties or {})

    def __repr__(self) -> str:
        return f"<Subgraph {self.id} {self.vertex_ids!r}>"

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.vertex_ids

    def add(self, vertex_ids: Iterable[int]) -> None:
        for vid in vertex_ids:
            if vid not in self.vertex_ids:
                self.vertex_ids.append(vid)

    def remove(self, vertex_ids: Iterable[int]) -> None:
        drop = set(vertex_ids)
        self.vertex_ids = [vid for vid in self.vertex_ids if vid not in drop]

    def update(self, properties: Mapping[str, Any]) -> None:
        for key, value in properties.items():
            if key in ("node", "edge"):
                layer = self.node_attrs if key == "node" else self.edge_attrs
                # UNSET or None clears the whole layer
                if is_unset(value):
                    layer.clear()
                elif isinstance(value, Mapping):
                    layer.update(value)
                else:
                    raise ValueError(f'"{key}" must be a mapping of attributes, got {value!r}')
            else:
                self.subgraph_properties[key] = value
