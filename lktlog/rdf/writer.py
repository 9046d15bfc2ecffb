from __future__ import annotations

import logging
from pathlib import Path

from rdflib import Graph

"""RDF output formats, output path resolution, graph writing and RDF -> RDF
conversion.

Format names are the upper case keys users pass on the command line; values
are the rdflib serializer plugin names.
"""

__all__ = [
    "RDF_FORMATS",
    "RDF_FORMAT_EXTENSIONS",
    "DEFAULT_OUTPUT_FORMAT",
    "UnsupportedFormatError",
    "RdfConversionError",
    "normalize_format",
    "resolve_output_path",
    "write_graph",
    "read_graph",
    "convert_rdf_file",
]

logger = logging.getLogger(__name__)

RDF_FORMATS: dict[str, str] = {
    "TTL": "turtle",
    "NT": "nt",
    "RDF/XML": "xml",
    "JSON-LD": "json-ld",
}

RDF_FORMAT_EXTENSIONS: dict[str, str] = {
    "TTL": "ttl",
    "NT": "nt",
    "RDF/XML": "rdf",
    "JSON-LD": "jsonld",
}

DEFAULT_OUTPUT_FORMAT = "TTL"


class UnsupportedFormatError(ValueError):
    """Raised when an output format name is not in RDF_FORMATS."""


class RdfConversionError(Exception):
    """Raised when an RDF input file cannot be parsed."""


def normalize_format(name: str | None) -> str:
    """Return the canonical (upper case) format key for ``name``."""
    key = (name or DEFAULT_OUTPUT_FORMAT).strip().upper()
    if key not in RDF_FORMATS:
        raise UnsupportedFormatError(
            f"unsupported output format '{name}', use one of {sorted(RDF_FORMATS)}"
        )
    return key


def resolve_output_path(input_file: Path, output_file: Path | None, output_format: str) -> Path:
    """Derive the output file path.

    Without an explicit output the input path minus its extension plus
    ``_out`` is used. The format extension is appended unless the output
    already ends with it.
    """
    key = normalize_format(output_format)
    ext = RDF_FORMAT_EXTENSIONS[key]
    if output_file is None:
        output_file = input_file.with_name(f"{input_file.stem}_out")
    if output_file.suffix.lower() != f".{ext}":
        output_file = output_file.with_name(f"{output_file.name}.{ext}")
    return output_file


def write_graph(graph: Graph, path: Path, output_format: str) -> Path:
    key = normalize_format(output_format)
    logger.info(f"Writing data to RDF file {path} using format '{key}'")
    path.parent.mkdir(parents=True, exist_ok=True)
    graph.serialize(destination=str(path), format=RDF_FORMATS[key], encoding="utf-8")
    return path


def _input_format(path: Path) -> str | None:
    suffix = path.suffix.lower().lstrip(".")
    for key, ext in RDF_FORMAT_EXTENSIONS.items():
        if ext == suffix:
            return RDF_FORMATS[key]
    return None


def read_graph(path: Path) -> Graph:
    graph = Graph()
    try:
        graph.parse(str(path), format=_input_format(path))
    except Exception as e:
        # rdflib raises plugin specific errors (SAX, JSON, BadSyntax ...)
        raise RdfConversionError(f"could not read RDF file {path}: {e}") from e
    return graph


def convert_rdf_file(input_file: Path, output_file: Path, output_format: str) -> Path:
    """Read an RDF file and save its content in another RDF format."""
    logger.info("Reading input file...")
    graph = read_graph(input_file)
    return write_graph(graph, output_file, output_format)
