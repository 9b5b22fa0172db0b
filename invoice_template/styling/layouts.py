# invoice_template/styling/layouts.py
"""
Table border/padding policies and the document default style.

A policy maps the renderer's hook names to callables taking
``(i, node)``: ``i`` is a row boundary index (0 = above the first row,
``len(body)`` = below the last one) and ``node`` is the table node, so
``node['table']['body']`` gives access to the row count.
"""
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

Node = Dict[str, Any]
LayoutPolicy = Mapping[str, Callable[..., float]]

DEFAULT_STYLE = MappingProxyType({'fontSize': 10})

NO_BORDERS = 'noBorders'


def _row_count(node: Node) -> int:
    return len(node['table']['body'])


def _zero(i: int = 0, node: Optional[Node] = None) -> int:
    return 0


# --- Line items table: single rule under the header row ---

def _table_h_line_width(i: int, node: Optional[Node] = None) -> int:
    return 1 if i == 1 else 0


def _table_padding_top(i: int, node: Optional[Node] = None) -> int:
    return 15 if i == 1 else 5


def _table_padding_bottom(i: int = 0, node: Optional[Node] = None) -> int:
    return 5


TABLE_LAYOUT: LayoutPolicy = MappingProxyType({
    'hLineWidth': _table_h_line_width,
    'vLineWidth': _zero,
    'paddingLeft': _zero,
    'paddingRight': _zero,
    'paddingTop': _table_padding_top,
    'paddingBottom': _table_padding_bottom,
})


# --- Totals table: rule on top, double rule around the grand total ---

def _footer_h_line_width(i: int, node: Node) -> int:
    rows = _row_count(node)
    return 1 if i in (0, rows, rows - 1) else 0


def _footer_padding_top(i: int, node: Node) -> int:
    rows = _row_count(node)
    return 10 if i in (0, rows - 1) else 5


def _footer_padding_bottom(i: int, node: Node) -> int:
    rows = _row_count(node)
    return 10 if i in (rows - 1, rows - 2) else 5


FOOTER_LAYOUT: LayoutPolicy = MappingProxyType({
    'hLineWidth': _footer_h_line_width,
    'vLineWidth': _zero,
    'paddingLeft': _zero,
    'paddingRight': _zero,
    'paddingTop': _footer_padding_top,
    'paddingBottom': _footer_padding_bottom,
})
