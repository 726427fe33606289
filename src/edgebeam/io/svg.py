"""Standalone SVG preview of a PathSpec.

The document is sized to the spec's canvas and draws the beam the way the
rendering layer does: a wide faint fringe clipped to the glow mask and a
thin bright core, both blurred and dashed so one dash cycle covers the
whole perimeter. Given a duration, the dash offset is animated in the
requested loop mode.
"""

from pathlib import Path
from xml.sax.saxutils import quoteattr

from edgebeam.config import LoopMode
from edgebeam.core.beam import dash_offset, dash_pattern, offset_keyframes
from edgebeam.core.pathdata import format_number
from edgebeam.domain import PathSpec
from edgebeam.exceptions import ExportError


def render_svg(
    spec: PathSpec,
    color: str = "#00FFFF",
    stroke_width: float = 1.5,
    glow_radius: float = 1.5,
    glow_opacity: float = 0.9,
    beam_length: float = 0.3,
    progress: float = 0.0,
    duration_ms: int | None = None,
    loop_mode: LoopMode = LoopMode.RESTART,
) -> str:
    """Render a PathSpec as an SVG document.

    Args:
        spec: Path spec to draw
        color: Beam and glow colour
        stroke_width: Core stroke width; the fringe is 2.5 times wider
        glow_radius: Gaussian blur standard deviation
        glow_opacity: Opacity of the core; the fringe uses 45% of it
        beam_length: Fraction of the perimeter that is lit
        progress: Animation progress (0-1) of the still frame
        duration_ms: Duration of one traversal; None draws a still frame
        loop_mode: How the animation repeats when ``duration_ms`` is given

    Returns:
        SVG document text
    """
    width = format_number(spec.svg_width)
    height = format_number(spec.svg_height)
    visible, gap = dash_pattern(spec.perimeter, beam_length)
    dasharray = f"{format_number(visible)} {format_number(gap)}"
    offset = format_number(dash_offset(progress, spec.perimeter))
    d = quoteattr(spec.path_d)

    animation = ""
    if duration_ms is not None:
        keyframes, cycle_ms = offset_keyframes(spec.perimeter, duration_ms, loop_mode)
        values = ";".join(format_number(v) for v in keyframes)
        animation = (
            f'<animate attributeName="stroke-dashoffset" values="{values}" '
            f'dur="{cycle_ms}ms" repeatCount="indefinite"/>'
        )

    defs = [
        '<filter id="edge-glow" x="-50%" y="-50%" width="200%" height="200%">',
        f'<feGaussianBlur in="SourceGraphic" stdDeviation="{format_number(glow_radius)}" '
        'result="blur"/>',
        '<feColorMatrix in="blur" type="matrix" '
        'values="1 0 0 0 0  0 1 0 0 0  0 0 1 0 0  0 0 0 5 0"/>',
        "</filter>",
    ]
    fringe_clip = ""
    if spec.mask_d is not None and spec.mask_fill_rule is not None:
        defs.append(
            f'<clipPath id="glow-mask"><path d={quoteattr(spec.mask_d)} '
            f'clip-rule="{spec.mask_fill_rule.value}"/></clipPath>'
        )
        fringe_clip = ' clip-path="url(#glow-mask)"'

    stroke = (
        f'stroke={quoteattr(color)} stroke-linecap="round" fill="none" '
        f'filter="url(#edge-glow)" stroke-dasharray="{dasharray}" '
        f'stroke-dashoffset="{offset}"'
    )
    fringe = (
        f'<g{fringe_clip}><path d={d} {stroke} '
        f'stroke-width="{format_number(stroke_width * 2.5)}" '
        f'opacity="{format_number(glow_opacity * 0.45)}">{animation}</path></g>'
    )
    core = (
        f'<path d={d} {stroke} stroke-width="{format_number(stroke_width)}" '
        f'opacity="{format_number(glow_opacity)}">{animation}</path>'
    )

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
        f"<defs>{''.join(defs)}</defs>"
        f"{fringe}{core}"
        "</svg>\n"
    )


def write_svg(
    spec: PathSpec,
    output_path: Path,
    color: str = "#00FFFF",
    stroke_width: float = 1.5,
    beam_length: float = 0.3,
    duration_ms: int | None = None,
    loop_mode: LoopMode = LoopMode.RESTART,
) -> Path:
    """Write an SVG preview of ``spec`` to ``output_path``.

    Args:
        spec: Path spec to draw
        output_path: Destination file
        color: Beam and glow colour
        stroke_width: Core stroke width
        beam_length: Fraction of the perimeter that is lit
        duration_ms: Duration of one traversal; None writes a still frame
        loop_mode: How the animation repeats

    Returns:
        The path written

    Raises:
        ExportError: If the file cannot be written
    """
    document = render_svg(
        spec,
        color=color,
        stroke_width=stroke_width,
        beam_length=beam_length,
        duration_ms=duration_ms,
        loop_mode=loop_mode,
    )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise ExportError(str(output_path), str(e)) from e
    return output_path
