"""
Writing graphs to disk and compiling them with Graphviz.

``write`` only needs the file system. ``compile`` and ``show`` hand the
written ``.dot`` file to the ``dot`` executable through the ``graphviz``
package, so Graphviz must be installed for them to work.
"""
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Union

import graphviz  # type: ignore[import]

if TYPE_CHECKING:
    from .graph import Graph

log = logging.getLogger(__name__)

ENGINE = "dot"
DEFAULT_FORMAT = "png"
SOURCE_FORMAT = "dot"

PathLike = Union[str, "os.PathLike[str]"]


def _with_suffix(filename: PathLike, ext: str) -> Path:
    return Path(f"{os.fspath(filename)}.{ext}")


def _validate_format(format: str) -> str:
    if format.lower() not in graphviz.FORMATS:
        raise ValueError(f'"{format}" is not a valid output format')
    # <filename>.dot is the source file already
    if format.lower() == SOURCE_FORMAT:
        raise ValueError(f'"{format}" output would overwrite the source file')
    return format.lower()


def write(graph: "Graph", filename: PathLike) -> Path:
    """Write ``graph`` to ``<filename>.dot``.

    A filename starting with a path separator is absolute, anything else is
    relative to the current working directory.

    :return: Path of the written file.
    """
    path = _with_suffix(filename, SOURCE_FORMAT)
    path.write_text(graph.to_dot(), encoding="utf-8")
    log.debug("wrote %s", path)
    return path


def compile(graph: "Graph", filename: PathLike, format: str = DEFAULT_FORMAT) -> Path:
    """Write ``graph`` to ``<filename>.dot`` and compile it to ``<filename>.<format>``.

    The ``.dot`` file is kept even when compilation fails.

    :raises ValueError: If ``format`` is not a Graphviz output format, or is
        ``dot``, whose output file would be the source file itself.
    :raises graphviz.ExecutableNotFound: If the ``dot`` executable is missing.
    :raises graphviz.CalledProcessError: If ``dot`` exits with a non-zero status.
    :return: Path of the compiled file.
    """
    format = _validate_format(format)
    source = write(graph, filename)
    outfile = _with_suffix(filename, format)
    log.debug("compiling %s to %s", source, outfile)
    graphviz.render(ENGINE, format=format, filepath=source, outfile=outfile, quiet=True)
    return outfile


def show(graph: "Graph", filename: PathLike, format: str = DEFAULT_FORMAT) -> Path:
    """Compile ``graph`` and open the result in the system's default viewer."""
    outfile = compile(graph, filename, format)
    graphviz.view(outfile, quiet=True)
    return outfile
