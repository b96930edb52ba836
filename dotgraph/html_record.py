"""
HTML-like table labels.

An ``HTMLRecord`` is a table made of rows (``tr``) of cells (``td``). Cell
content can be text, a line break (``br``), a ``font`` span, another
table, or a list mixing any of these::

    HTMLRecord([
        tr([td("left", port="f0"), td(["hello", br(), "world"])]),
        tr([td(font("small", point_size=8), colspan=2)]),
    ], border=0, cellborder=1)

Attribute keys are written with underscores replaced by hyphens, so
``point_size`` becomes ``point-size``.
"""
from typing import Any, Dict, Iterable, List, Mapping, Set, Union

from .dot import format_value, indent
from .errors import DuplicatePortError, HTMLLabelError


class Break:
    """A ``<br/>`` line break inside cell content."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Break)

    def __repr__(self) -> str:
        return "br()"


class Font:
    """A ``<font>`` span wrapping cell content."""

    def __init__(self, content: Any, **attributes: Any):
        self.content = _check_content(content)
        self.attributes: Dict[str, Any] = dict(attributes)

    def __repr__(self) -> str:
        return f"font({self.content!r}, **{self.attributes!r})"


class Cell:
    def __init__(self, content: Any, **attributes: Any):
        self.content = _check_content(content)
        self.attributes: Dict[str, Any] = dict(attributes)

    def __repr__(self) -> str:
        return f"td({self.content!r}, **{self.attributes!r})"


class Row:
    def __init__(self, cells: Iterable[Cell]):
        if not isinstance(cells, (list, tuple)):
            raise HTMLLabelError(f"row cells must be a list, got {cells!r}")
        for cell in cells:
            if not isinstance(cell, Cell):
                raise HTMLLabelError(f"{cell!r} is not a table cell, build cells with td()")
        self.cells: List[Cell] = list(cells)

    def __repr__(self) -> str:
        return f"tr({self.cells!r})"


class HTMLRecord:
    """HTMLRecord models a vertex whose label is an HTML-like table.

    :param rows: Table rows, each built with ``tr``.
    :param attributes: Table attributes such as ``border``,
        ``cellborder``, ``cellspacing`` or ``bgcolor``.
    """

    def __init__(self, rows: Iterable[Row], **attributes: Any):
        if not isinstance(rows, (list, tuple)):
            raise HTMLLabelError(f"table rows must be a list, got {rows!r}")
        for r in rows:
            if not isinstance(r, Row):
                raise HTMLLabelError(f"{r!r} is not a table row, build rows with tr()")
        self.rows: List[Row] = list(rows)
        self.attributes: Dict[str, Any] = dict(attributes)
        self._check_ports()

    def __repr__(self) -> str:
        return f"HTMLRecord({self.rows!r})"

    def _check_ports(self) -> None:
        seen: Set[str] = set()
        for name in self.ports():
            if name in seen:
                raise DuplicatePortError(name)
            seen.add(name)

    def ports(self) -> List[str]:
        """Port names of the table, its cells and any nested tables."""
        names = []
        if "port" in self.attributes:
            names.append(str(self.attributes["port"]))
        for r in self.rows:
            for cell in r.cells:
                if "port" in cell.attributes:
                    names.append(str(cell.attributes["port"]))
                names.extend(_content_ports(cell.content))
        return names

    def to_label(self) -> str:
        lines = [f"<table{attributes_for_label(self.attributes)}>"]
        lines.extend(indent(_row_to_label(r)) for r in self.rows)
        lines.append("</table>")
        return "\n".join(lines)


Content = Union[str, Break, Font, HTMLRecord, List[Any]]


def tr(cells: Iterable[Cell]) -> Row:
    return Row(cells)


def td(content: Any, **attributes: Any) -> Cell:
    return Cell(content, **attributes)


def br() -> Break:
    return Break()


def font(content: Any, **attributes: Any) -> Font:
    return Font(content, **attributes)


def attributes_for_label(attributes: Mapping[str, Any]) -> str:
    if not attributes:
        return ""
    pairs = [f'{k.replace("_", "-")}="{format_value(v)}"' for k, v in attributes.items()]
    return " " + " ".join(pairs)


def content_to_label(content: Content) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(content_to_label(c) for c in content)
    if isinstance(content, Break):
        return "<br/>"
    if isinstance(content, Font):
        return f"<font{attributes_for_label(content.attributes)}>{content_to_label(content.content)}</font>"
    if isinstance(content, HTMLRecord):
        return content.to_label()
    raise HTMLLabelError(f"{content!r} is not valid cell content")


def _row_to_label(r: Row) -> str:
    lines = ["<tr>"]
    lines.extend(indent(_cell_to_label(c)) for c in r.cells)
    lines.append("</tr>")
    return "\n".join(lines)


def _cell_to_label(cell: Cell) -> str:
    return f"<td{attributes_for_label(cell.attributes)}>{content_to_label(cell.content)}</td>"


def _check_content(content: Any) -> Any:
    if isinstance(content, (str, Break, Font, HTMLRecord)):
        return content
    if isinstance(content, (int, float)) and not isinstance(content, bool):
        return str(content)
    if isinstance(content, (list, tuple)):
        return [_check_content(c) for c in content]
    raise HTMLLabelError(f"{content!r} is not valid cell content")


def _content_ports(content: Content) -> List[str]:
    if isinstance(content, HTMLRecord):
        return content.ports()
    if isinstance(content, Font):
        return _content_ports(content.content)
    if isinstance(content, list):
        return [name for c in content for name in _content_ports(c)]
    return []
