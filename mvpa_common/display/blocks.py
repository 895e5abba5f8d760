"""
Text-block compositor.

A TextBlock is a rectangular grid of characters stored as a tuple of equally
wide lines. Every layout in the display package (matrices, sequences, records,
N-D pages) is ultimately one compose() call over a grid of smaller blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class TextBlock:
    """Immutable rectangular block of text lines."""

    lines: Tuple[str, ...] = ()

    def __post_init__(self):
        widths = {len(line) for line in self.lines}
        if len(widths) > 1:
            raise ValueError(f"TextBlock lines must have equal width, got widths {sorted(widths)}")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextBlock":
        """Build a block from ragged lines, right-padding them with spaces."""
        lines = [str(line) for line in lines]
        width = max((len(line) for line in lines), default=0)
        return cls(tuple(line.ljust(width) for line in lines))

    @classmethod
    def from_text(cls, text: str) -> "TextBlock":
        """One line per newline-separated part of `text`; '' gives a 1x0 block."""
        return cls.from_lines(text.split('\n'))

    @classmethod
    def blank(cls, height: int, width: int) -> "TextBlock":
        return cls(tuple(' ' * width for _ in range(max(height, 0))))

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    def pad(self, height: int, width: int) -> "TextBlock":
        """Right/bottom-pad with spaces to at least `height` x `width`."""
        width = max(width, self.width)
        lines = [line.ljust(width) for line in self.lines]
        lines.extend(' ' * width for _ in range(height - len(lines)))
        return TextBlock(tuple(lines))

    def columns(self, start: Optional[int] = None, stop: Optional[int] = None) -> "TextBlock":
        """Character-column slice, applied identically to every line."""
        return TextBlock(tuple(line[start:stop] for line in self.lines))

    def indent(self, n: int) -> "TextBlock":
        return compose([[TextBlock.blank(self.height, n), self]])

    def to_text(self) -> str:
        """Join lines with newlines, dropping the padding at line ends."""
        return '\n'.join(line.rstrip() for line in self.lines)

    def __str__(self) -> str:
        return self.to_text()


Cell = Union[TextBlock, str, None]


def as_block(cell: Cell) -> TextBlock:
    """Coerce a grid cell to a TextBlock (None is an absent 0x0 cell)."""
    if cell is None:
        return TextBlock()
    if isinstance(cell, TextBlock):
        return cell
    if isinstance(cell, str):
        return TextBlock.from_text(cell)
    raise TypeError(f"Expected TextBlock, str or None as grid cell, got {type(cell).__name__}")


def compose(grid: Sequence[Sequence[Cell]]) -> TextBlock:
    """
    Lay out a 2-D grid of blocks into a single block.

    Every column is as wide as its widest cell and every row as tall as its
    tallest cell; cells are right/bottom-padded with spaces to that size and
    concatenated left-to-right, then top-to-bottom. Rows whose cells all have
    zero height are dropped from the layout. Ragged rows are treated as having
    absent (None) cells at the end.

    Parameters
    ----------
    grid : sequence of sequences of TextBlock, str or None
        Rows of cells.

    Returns
    -------
    TextBlock
        The composed block (empty if every row is empty).

    Example
    -------
    >>> print(compose([['[ ', TextBlock.from_text('1\\n3'), ' ]']]).to_text())
    [ 1 ]
      3
    """
    rows = [[as_block(cell) for cell in row] for row in grid]
    if not rows:
        return TextBlock()

    ncols = max(len(row) for row in rows)
    for row in rows:
        row.extend(TextBlock() for _ in range(ncols - len(row)))

    col_widths = [max(row[k].width for row in rows) for k in range(ncols)]
    row_heights = [max((cell.height for cell in row), default=0) for row in rows]

    lines = []
    for row, height in zip(rows, row_heights):
        if height == 0:
            continue
        padded = [cell.pad(height, width) for cell, width in zip(row, col_widths)]
        for k in range(height):
            lines.append(''.join(cell.lines[k] for cell in padded))
    return TextBlock(tuple(lines))


def hconcat(blocks: Iterable[Cell]) -> TextBlock:
    """Concatenate blocks left-to-right (one-row grid)."""
    return compose([list(blocks)])


def vstack(blocks: Iterable[Cell]) -> TextBlock:
    """Stack blocks top-to-bottom (one-column grid)."""
    return compose([[block] for block in blocks])


__all__ = [
    'TextBlock',
    'as_block',
    'compose',
    'hconcat',
    'vstack',
]
