"""TikZ rendering of an exploded marker layout."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .utils import latex_escape
from ..layout import LayoutRecord

logger = logging.getLogger(__name__)

# Layout offsets are screen pixels; 100px renders as 2cm.
CM_PER_PX = 0.02

standalone_tpl = r"""\documentclass[border=4pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  sp/marker radius/.store in=\spMarkerR,  sp/marker radius=3pt,
  sp/anchor radius/.store in=\spAnchorR,  sp/anchor radius=1.6pt,
  sp/leg width/.store in=\spLegW,         sp/leg width=0.6pt,
  sp anchor/.style={circle,fill=black,inner sep=0pt,minimum size=2*\spAnchorR},
  leg/.style={line width=\spLegW, draw=black!60},
  marker/.style={circle,draw=black,fill=white,line width=0.6pt,inner sep=0pt,minimum size=2*\spMarkerR},
  mlabel/.style={font=\footnotesize, inner sep=1pt},
}
\begin{document}
%s
\end{document}
"""


def _format_float(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _point(record: LayoutRecord, scale: float) -> str:
    # screen y grows downward, TikZ y grows upward
    return f"({_format_float(record.x * scale)},{_format_float(-record.y * scale)})"


def _draw_order(records: Sequence[LayoutRecord]) -> List[int]:
    """Return positions into ``records`` in drawing order."""
    # later nodes are drawn on top, so the highest stack order goes last
    positions = list(range(len(records)))
    if any(record.stack_order is not None for record in records):
        positions.sort(key=lambda pos: (records[pos].stack_order or 0, records[pos].index))
    return positions


def generate_tikz_code(
    records: Sequence[LayoutRecord],
    *,
    scale: float = CM_PER_PX,
    labels: Optional[Sequence[str]] = None,
    title: Optional[str] = None,
) -> str:
    """Return a ``tikzpicture`` with the anchor at the origin, legs and markers.

    ``labels`` pair with ``records`` by position, so any slice or subset of a
    layout can be labelled.
    """

    if labels is not None and len(labels) != len(records):
        raise ValueError(f"expected {len(records)} label(s), got {len(labels)}")

    lines = [r"\begin{tikzpicture}"]
    lines.append(r"  \node[sp anchor] (anchor) at (0,0) {};")

    for record in records:
        if record.should_render_leg:
            lines.append(f"  \\draw[leg] (anchor.center) -- {_point(record, scale)};")

    for pos in _draw_order(records):
        record = records[pos]
        lines.append(f"  \\node[marker] (m{pos}) at {_point(record, scale)} {{}};")
        if labels is not None:
            text = latex_escape(str(labels[pos]))
            lines.append(f"  \\node[mlabel,above] at (m{pos}.north) {{{text}}};")

    if title:
        lines.append(
            "  \\node[font=\\bfseries,above] at (current bounding box.north) {"
            + latex_escape(title.strip())
            + "};"
        )
    lines.append(r"\end{tikzpicture}")
    logger.info("Generated TikZ code for %d marker(s)", len(records))
    return "\n".join(lines)


def generate_tikz_document(
    records: Sequence[LayoutRecord],
    *,
    title: Optional[str] = None,
    scale: float = CM_PER_PX,
    labels: Optional[Sequence[str]] = None,
) -> str:
    """Render a standalone document around :func:`generate_tikz_code`."""

    tikz_code = generate_tikz_code(records, scale=scale, labels=labels, title=title)
    return standalone_tpl % tikz_code
