"""SVG serialization for sinusoid documents."""

from pathlib import Path

import svg

from errors import WriteError
from models import SinusoidDocument

XML_PREFACE = '<?xml version="1.0" standalone="no"?>\n'


def path_data(document: SinusoidDocument) -> "list[svg.PathData]":
    """Build the path commands for every row.

    Each row starts with a move-to on its first point followed by
    straight line-to commands through the remaining points.
    """
    commands: list[svg.PathData] = []
    for path in document.paths:
        if not path.points:
            continue
        (x0, y0), *rest = path.points
        commands.append(svg.M(x0, y0))
        commands.extend(svg.L(x, y) for x, y in rest)
    return commands


def document_to_svg(document: SinusoidDocument) -> str:
    """Convert a sinusoid document to an SVG string.

    Args:
        document: Rendered SinusoidDocument

    Returns:
        SVG content as string

    AIDEV-NOTE: All rows go into a single <path> element. The viewBox
    matches the document size so viewers can scale it proportionally.
    """
    elements: list[svg.Element] = []

    commands = path_data(document)
    if commands:
        elements.append(
            svg.Path(
                d=commands,
                fill=document.fill,
                stroke=document.stroke,
                stroke_width=document.stroke_width,
            )
        )

    final_svg = svg.SVG(
        width=document.width,
        height=document.height,
        viewBox=svg.ViewBoxSpec(0, 0, document.width, document.height),
        elements=elements,
    )
    return final_svg.as_str()


def save_svg(document: SinusoidDocument, output_path: "str | Path") -> Path:
    """Write a document to disk as a standalone SVG file.

    Args:
        document: Rendered SinusoidDocument
        output_path: Destination file path

    Returns:
        Path that was written

    Raises:
        WriteError: If the file cannot be written
    """
    output_path = Path(output_path)
    content = XML_PREFACE + document_to_svg(document)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"Failed to write {output_path}: {e}") from e
    return output_path
