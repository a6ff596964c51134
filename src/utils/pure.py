from decimal import Decimal
from typing import List, Literal, Optional

_ALIGN_RULES = {"l": ":---", "c": ":---:", "r": "---:"}


def format_price(price: Decimal) -> str:
    return f"${price:.2f}"


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List[object]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: column headers, or None to promote the first row.
        rows: table body, cells are str()-ed.
        aligns: 'l', 'c' or 'r' per column, centered by default.

    Returns:
        str: the table, or "" when there are no rows.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    cells = [[str(c) for c in row] for row in [headers, *rows]]
    aligns = aligns or ["c"] * len(headers)
    if len(aligns) != len(headers):
        raise ValueError("Length of aligns must match number of headers.")

    lines = ["| " + " | ".join(cells[0]) + " |"]
    lines.append("| " + " | ".join(_ALIGN_RULES[a] for a in aligns) + " |")
    lines.extend("| " + " | ".join(row) + " |" for row in cells[1:])
    return "\n".join(lines)
