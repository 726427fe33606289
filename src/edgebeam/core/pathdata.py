"""SVG path data writing and reading.

The engine emits a deliberately small subset of the SVG path grammar that
every downstream renderer accepts:

- ``M x,y``: move
- ``L x,y``: line
- ``A rx,ry rotation large-arc,sweep x,y``: elliptical arc
- ``Z``: close

Only absolute commands are written and read.
"""

import math
import re

from edgebeam.exceptions import PathDataError

_TOKEN_RE = re.compile(
    r"(?P<cmd>[A-Za-z])"
    r"|(?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
    r"|(?P<sep>[\s,]+)"
    r"|(?P<bad>.)"
)

_ARG_COUNTS = {"M": 2, "L": 2, "A": 7, "Z": 0}

Point2D = tuple[float, float]


def format_number(value: float) -> str:
    """Format a coordinate for path data.

    Integral values are written without a fractional part and other values
    use the shortest decimal that round-trips, so ``360.0`` becomes ``360``
    and ``0.1 + 0.2`` stays ``0.30000000000000004``.

    Args:
        value: Finite number to format

    Returns:
        Decimal string

    Raises:
        PathDataError: If the value is NaN or infinite

    Examples:
        >>> format_number(360.0)
        '360'
        >>> format_number(-0.0)
        '0'
        >>> format_number(12.5)
        '12.5'
    """
    value = float(value)
    if not math.isfinite(value):
        raise PathDataError(repr(value), "coordinates must be finite")
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _pair(x: float, y: float) -> str:
    return f"{format_number(x)},{format_number(y)}"


class PathData:
    """Accumulates path commands and renders them as a ``d`` string.

    Every drawing method returns the builder so calls can be chained.

    Example:
        >>> str(PathData().move_to(0, 0).line_to(360, 0))
        'M 0,0 L 360,0'
    """

    def __init__(self) -> None:
        self._commands: list[str] = []
        self._start: Point2D | None = None
        self._end: Point2D | None = None

    def move_to(self, x: float, y: float) -> "PathData":
        """Start a new subpath at (x, y)."""
        self._commands.append(f"M {_pair(x, y)}")
        if self._start is None:
            self._start = (x, y)
        self._end = (x, y)
        return self

    def line_to(self, x: float, y: float) -> "PathData":
        """Draw a straight segment to (x, y)."""
        self._commands.append(f"L {_pair(x, y)}")
        self._end = (x, y)
        return self

    def arc_to(
        self,
        rx: float,
        ry: float,
        x: float,
        y: float,
        *,
        large_arc: bool = False,
        sweep: bool = True,
        rotation: float = 0.0,
    ) -> "PathData":
        """Draw an elliptical arc to (x, y).

        Args:
            rx: Horizontal radius
            ry: Vertical radius
            x: End point x
            y: End point y
            large_arc: Take the longer of the two candidate arcs
            sweep: Sweep in the positive-angle (clockwise on screen) direction
            rotation: X-axis rotation of the ellipse in degrees
        """
        self._commands.append(
            f"A {_pair(rx, ry)} {format_number(rotation)} "
            f"{int(large_arc)},{int(sweep)} {_pair(x, y)}"
        )
        self._end = (x, y)
        return self

    def close(self) -> "PathData":
        """Close the current subpath."""
        self._commands.append("Z")
        self._end = self._start
        return self

    @property
    def start(self) -> Point2D | None:
        """First point of the path."""
        return self._start

    @property
    def end(self) -> Point2D | None:
        """Current point after the last command."""
        return self._end

    @property
    def commands(self) -> list[str]:
        """Rendered commands in order."""
        return list(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return " ".join(self._commands)


def parse_path_data(path_d: str) -> list[tuple[str, tuple[float, ...]]]:
    """Parse path data written in the M/L/A/Z subset.

    Repeated argument groups after one command letter are accepted; extra
    pairs after ``M`` are treated as ``L``, as in SVG.

    Args:
        path_d: Path data string

    Returns:
        List of (command, arguments) tuples

    Raises:
        PathDataError: On unknown or relative commands, stray characters,
            or a wrong number of arguments
    """
    tokens: list[str | float] = []
    for match in _TOKEN_RE.finditer(path_d):
        kind = match.lastgroup
        if kind == "cmd":
            tokens.append(match.group())
        elif kind == "num":
            tokens.append(float(match.group()))
        elif kind == "bad":
            raise PathDataError(path_d, f"unexpected character {match.group()!r}")

    commands: list[tuple[str, tuple[float, ...]]] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not isinstance(token, str):
            raise PathDataError(path_d, "path data must start with a command")
        if token not in _ARG_COUNTS:
            raise PathDataError(path_d, f"unsupported command {token!r}")
        i += 1

        count = _ARG_COUNTS[token]
        if count == 0:
            commands.append((token, ()))
            continue

        command = token
        first = True
        while first or (i < len(tokens) and not isinstance(tokens[i], str)):
            args = tokens[i : i + count]
            if len(args) != count or any(isinstance(a, str) for a in args):
                raise PathDataError(path_d, f"command {command!r} expects {count} numbers")
            commands.append((command, tuple(float(a) for a in args)))
            i += count
            if command == "M":
                command = "L"
            first = False

    return commands


def path_points(path_d: str) -> list[Point2D]:
    """Return every command end point in the path.

    Arc bulges are not included; use :func:`edgebeam.core.measure.measure_path`
    for the exact extent.
    """
    points: list[Point2D] = []
    for _command, args in parse_path_data(path_d):
        if args:
            points.append((args[-2], args[-1]))
    return points
