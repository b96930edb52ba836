"""
Record labels for vertices drawn with the Graphviz ``record`` shape.

A record label is either a plain string, or a row of cells in which each
cell is text, text with a port, or a nested row or column. Graphviz flips
the orientation at every level of ``{ ... }`` nesting, so any group
embedded in another is wrapped in braces, and only the outermost row is
written bare::

    >>> Record(["a", column(["b", "c"]), Port("p", "d")]).to_label()
    'a | { b | c } | <p> d'
"""
from typing import Any, Dict, Iterable, List, Set, Union

from .errors import DuplicatePortError, RecordLabelError


class Text:
    """A plain text cell."""

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Text) and other.text == self.text

    def __repr__(self) -> str:
        return f"Text({self.text!r})"

    def to_label(self) -> str:
        return self.text


class Port:
    """A text cell with a named port that edges can attach to."""

    def __init__(self, name: str, text: str):
        self.name = name
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Port) and (other.name, other.text) == (self.name, self.text)

    def __repr__(self) -> str:
        return f"Port({self.name!r}, {self.text!r})"

    def to_label(self) -> str:
        return f"<{self.name}> {self.text}"


class RecordSubset:
    """A row or a column of record cells."""

    def __init__(self, cells: Iterable[Any], is_column: bool = False):
        if isinstance(cells, (str, bytes)) or not isinstance(cells, (list, tuple)):
            raise RecordLabelError(f"record cells must be a list, got {cells!r}")
        self.cells: List[Cell] = [_to_cell(c) for c in cells]
        self.is_column = is_column

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, RecordSubset)
            and other.is_column == self.is_column
            and other.cells == self.cells
        )

    def __repr__(self) -> str:
        kind = "column" if self.is_column else "row"
        return f"{kind}({self.cells!r})"

    def to_label(self, top_level: bool = False) -> str:
        joined = " | ".join(_cell_to_label(c) for c in self.cells)
        if top_level and not self.is_column:
            return joined
        return "{ " + joined + " }"

    def ports(self) -> List[str]:
        names = []
        for cell in self.cells:
            if isinstance(cell, Port):
                names.append(cell.name)
            elif isinstance(cell, RecordSubset):
                names.extend(cell.ports())
        return names


Cell = Union[Text, Port, RecordSubset]


def row(cells: Iterable[Any]) -> RecordSubset:
    return RecordSubset(cells, is_column=False)


def column(cells: Iterable[Any]) -> RecordSubset:
    return RecordSubset(cells, is_column=True)


def _to_cell(cell: Any) -> Cell:
    if isinstance(cell, (Text, Port, RecordSubset)):
        return cell
    if isinstance(cell, str):
        return Text(cell)
    # (port_name, text) pairs
    if isinstance(cell, tuple) and len(cell) == 2 and all(isinstance(c, str) for c in cell):
        return Port(cell[0], cell[1])
    raise RecordLabelError(f"{cell!r} is not a valid record cell")


def _cell_to_label(cell: Cell) -> str:
    if isinstance(cell, RecordSubset):
        return cell.to_label(top_level=False)
    return cell.to_label()


class Record:
    """Record models a vertex drawn with the ``record`` shape.

    :param body: A string, a list of cells (taken as a row), or a
        ``RecordSubset`` built with ``row`` or ``column``.
    :param properties: Other vertex attributes, e.g. ``color``.
    """

    def __init__(self, body: Union[str, Iterable[Any], RecordSubset], **properties: Any):
        if isinstance(body, (str, RecordSubset)):
            self.body: Union[str, RecordSubset] = body
        elif isinstance(body, (list, tuple)):
            self.body = RecordSubset(body)
        else:
            raise RecordLabelError(f"{body!r} is not a valid record body")
        self.properties: Dict[str, Any] = dict(properties)
        self._check_ports()

    def __repr__(self) -> str:
        return f"Record({self.body!r})"

    def _check_ports(self) -> None:
        if isinstance(self.body, str):
            return
        seen: Set[str] = set()
        for name in self.body.ports():
            if name in seen:
                raise DuplicatePortError(name)
            seen.add(name)

    def to_label(self) -> str:
        if isinstance(self.body, str):
            return self.body
        return self.body.to_label(top_level=True)

    def vertex_attrs(self) -> Dict[str, Any]:
        """Attributes for the vertex, ``shape`` first and ``label`` excluded."""
        attrs: Dict[str, Any] = {"shape": "record"}
        for k, v in self.properties.items():
            if k not in ("shape", "label"):
                attrs[k] = v
        return attrs
