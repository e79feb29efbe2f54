"""Text rendering of tile grids."""

from .grid import Grid

COLOR_BUCKETS = 7

# ANSI foreground codes by tile value modulo COLOR_BUCKETS
_ANSI_COLORS: dict[int, int] = {
    1: 31,  # red
    2: 32,  # green
    3: 36,  # cyan
    4: 35,  # magenta
    5: 37,  # white
    6: 33,  # yellow
}
_DEFAULT_COLOR = 34  # blue
_RESET = "\x1b[0m"


def colorize(value: int) -> str:
    """Wrap a tile value in the ANSI color for its bucket."""
    code = _ANSI_COLORS.get(value % COLOR_BUCKETS, _DEFAULT_COLOR)
    return f"\x1b[{code}m{value}{_RESET}"


def render_grid(grid: Grid, colors: bool = False) -> str:
    """Render one line per row.

    Plain output concatenates tile values; colored output separates them with
    spaces. Every line, including the last, ends with a newline.
    """
    lines = []
    for row in grid.rows():
        if colors:
            lines.append("".join(f"{colorize(value)} " for value in row))
        else:
            lines.append("".join(str(value) for value in row))
    return "".join(f"{line}\n" for line in lines)
