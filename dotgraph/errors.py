class GraphError(Exception):
    """Base class for errors raised while building a graph."""


class ElementNotFoundError(GraphError, KeyError):
    """No element with the given id exists in the graph."""

    kind = "element"

    def __init__(self, element_id: object):
        super().__init__(element_id)
        self.element_id = element_id

    def __str__(self) -> str:
        return f"{self.kind} {self.element_id!r} not found"


class VertexNotFoundError(ElementNotFoundError):
    kind = "vertex"


class EdgeNotFoundError(ElementNotFoundError):
    kind = "edge"


class SubgraphNotFoundError(ElementNotFoundError):
    kind = "subgraph"


class SubgraphMembershipError(GraphError, ValueError):
    """A vertex can belong to at most one subgraph."""


class LabelError(GraphError, ValueError):
    """A record or HTML label tree is malformed."""


class RecordLabelError(LabelError):
    pass


class HTMLLabelError(LabelError):
    pass


class DuplicatePortError(LabelError):
    def __init__(self, port: str):
        super().__init__(f'port "{port}" is defined more than once')
        self.port = port
