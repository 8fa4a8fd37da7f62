"""
Textual rendering of containers.

A container prints as one line per row with elements separated by a
single space and no trailing newline after the final row:

    >>> print(Matrix2i(1, 2, 3, 4))
    1 2
    3 4

Floating elements use C ``%g`` formatting (6 significant digits), so
float32 values print the way the viewer's stream output did rather than
with their float64 expansion.
"""

from __future__ import annotations

from typing import Any

import numpy as np


def format_element(value: Any) -> str:
    """Render a single element."""
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(int(value))


def format_matrix(matrix: Any) -> str:
    """
    Render a container as rows of space-separated elements.

    Args:
        matrix: Any specialized Matrix or Vector

    Returns:
        Multi-line string, rows joined by newlines
    """
    lines = []
    for row in range(matrix.rows):
        lines.append(" ".join(
            format_element(matrix[row, col]) for col in range(matrix.cols)
        ))
    return "\n".join(lines)
