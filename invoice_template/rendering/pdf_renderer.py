# invoice_template/rendering/pdf_renderer.py
import io
import logging
from datetime import datetime
from typing import Any, BinaryIO, Dict, List, Mapping, Optional, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..builders.template_builder import build_template
from ..config.loader import RendererConfig
from ..models import InvoiceOptions
from ..styling.layouts import NO_BORDERS
from .fonts import fonts_from_config, resolve_font

logger = logging.getLogger(__name__)

PAGE_SIZES = {'A4': A4, 'LETTER': LETTER}
ALIGNMENTS = {'left': TA_LEFT, 'right': TA_RIGHT, 'center': TA_CENTER}
LINE_HEIGHT = 1.2
# keeps measured "auto" columns from wrapping on rounding
AUTO_WIDTH_SLACK = 1


def _no_borders_padding_left(i, node):
    return 4 if i else 0


def _no_borders_padding_right(i, node):
    return 4 if i < len(node['table']['widths']) - 1 else 0


# Built-in layout the document definition refers to by name.
NAMED_LAYOUTS = {
    NO_BORDERS: {
        'hLineWidth': lambda i, node: 0,
        'vLineWidth': lambda i, node: 0,
        'paddingLeft': _no_borders_padding_left,
        'paddingRight': _no_borders_padding_right,
        'paddingTop': lambda i, node: 2,
        'paddingBottom': lambda i, node: 2,
    },
}


def _resolve_layout(layout: Union[str, Mapping[str, Any], None]) -> Mapping[str, Any]:
    if isinstance(layout, str):
        return NAMED_LAYOUTS[layout]
    return layout or NAMED_LAYOUTS[NO_BORDERS]


def _column_count(node: Dict[str, Any]) -> int:
    table = node['table']
    if table.get('widths'):
        return len(table['widths'])
    return max((len(row) for row in table['body']), default=0)


def table_style_commands(node: Dict[str, Any]) -> List[tuple]:
    """
    Evaluates the node's border/padding policy for every row and column
    boundary and translates the result into reportlab TableStyle commands.
    """
    layout = _resolve_layout(node.get('layout'))
    num_rows = len(node['table']['body'])
    num_cols = _column_count(node)
    commands = [('VALIGN', (0, 0), (-1, -1), 'TOP')]

    for row in range(num_rows):
        commands.append(('TOPPADDING', (0, row), (-1, row), layout['paddingTop'](row, node)))
        commands.append(('BOTTOMPADDING', (0, row), (-1, row), layout['paddingBottom'](row, node)))
    for col in range(num_cols):
        commands.append(('LEFTPADDING', (col, 0), (col, -1), layout['paddingLeft'](col, node)))
        commands.append(('RIGHTPADDING', (col, 0), (col, -1), layout['paddingRight'](col, node)))

    for boundary in range(num_rows + 1):
        width = layout['hLineWidth'](boundary, node)
        if not width:
            continue
        if boundary < num_rows:
            commands.append(('LINEABOVE', (0, boundary), (-1, boundary), width, colors.black))
        else:
            commands.append(('LINEBELOW', (0, num_rows - 1), (-1, num_rows - 1), width, colors.black))

    for boundary in range(num_cols + 1):
        width = layout['vLineWidth'](boundary, node)
        if not width:
            continue
        if boundary < num_cols:
            commands.append(('LINEBEFORE', (boundary, 0), (boundary, -1), width, colors.black))
        else:
            commands.append(('LINEAFTER', (num_cols - 1, 0), (num_cols - 1, -1), width, colors.black))

    return commands


class _FlowableFactory:
    """Converts layout tree blocks into reportlab flowables."""

    def __init__(self, font_name: str, default_style: Mapping[str, Any], available_width: float):
        self.font_name = font_name
        self.available_width = available_width
        self.default_font_size = default_style.get('fontSize', 10)

    def paragraph_style(self, block: Mapping[str, Any]) -> ParagraphStyle:
        font_size = block.get('fontSize', self.default_font_size)
        return ParagraphStyle(
            name='block',
            fontName=self.font_name,
            fontSize=font_size,
            leading=font_size * LINE_HEIGHT,
            textColor=colors.toColor(block.get('color', 'black')),
            alignment=ALIGNMENTS.get(block.get('alignment', 'left'), TA_LEFT),
        )

    def paragraph(self, text: Any, block: Mapping[str, Any]) -> Paragraph:
        markup = escape(str(text)).replace('\n', '<br/>')
        return Paragraph(markup, self.paragraph_style(block))

    def with_margin(self, flowables: List[Any], block: Mapping[str, Any]) -> List[Any]:
        # Horizontal margins are not used by the invoice template.
        margin = block.get('margin') if isinstance(block, Mapping) else None
        if not margin:
            return flowables
        _, top, _, bottom = margin
        result = [Spacer(1, top)] if top else []
        result.extend(flowables)
        if bottom:
            result.append(Spacer(1, bottom))
        return result

    def block(self, block: Any) -> List[Any]:
        if isinstance(block, Mapping):
            if 'table' in block:
                return self.with_margin(self.table(block), block)
            if 'stack' in block:
                flowables = [flowable for part in block['stack'] for flowable in self.block(part)]
                return self.with_margin(flowables, block)
            return self.with_margin([self.paragraph(block.get('text', ''), block)], block)
        return [self.paragraph(block, {})]

    def cell_texts(self, cell: Any) -> List[str]:
        if isinstance(cell, Mapping):
            if 'stack' in cell:
                return [text for part in cell['stack'] for text in self.cell_texts(part)]
            return [str(cell.get('text', ''))]
        return [str(cell)]

    def text_width(self, cell: Any) -> float:
        font_size = cell.get('fontSize', self.default_font_size) if isinstance(cell, Mapping) else self.default_font_size
        return max((stringWidth(text, self.font_name, font_size) for text in self.cell_texts(cell)), default=0)

    def column_widths(self, node: Dict[str, Any], available_width: float) -> List[float]:
        """Resolves '*' and 'auto' widths; fixed widths are content widths, padding is added on top."""
        layout = _resolve_layout(node.get('layout'))
        body = node['table']['body']
        widths = node['table'].get('widths') or ['*'] * _column_count(node)

        resolved: List[Optional[float]] = []
        for col, width in enumerate(widths):
            padding = layout['paddingLeft'](col, node) + layout['paddingRight'](col, node)
            if width == '*':
                resolved.append(None)
            elif width == 'auto':
                content = max((self.text_width(row[col]) for row in body if col < len(row)), default=0)
                resolved.append(content + padding + AUTO_WIDTH_SLACK)
            else:
                resolved.append(float(width) + padding)

        stars = resolved.count(None)
        if stars:
            remaining = max(available_width - sum(w for w in resolved if w is not None), 0)
            resolved = [remaining / stars if w is None else w for w in resolved]
        return resolved

    def table(self, node: Dict[str, Any]) -> List[Any]:
        body = node['table']['body']
        if not body:
            logger.debug("Skipping table without rows")
            return []
        data = [[self.block(cell) for cell in row] for row in body]
        table = Table(
            data,
            colWidths=self.column_widths(node, self.available_width),
            repeatRows=node['table'].get('headerRows', 0),
        )
        table.setStyle(TableStyle(table_style_commands(node)))
        return [table]


class InvoiceDocument:
    """
    A document definition together with the fonts it is drawn with.

    ``fonts`` maps a family name to a base64-encoded TrueType file and is
    passed through unchanged until rendering.
    """

    def __init__(self, definition: Dict[str, Any], fonts: Optional[Mapping[str, str]] = None,
                 config: Optional[RendererConfig] = None):
        self.definition = definition
        self.fonts = dict(fonts) if fonts else {}
        self.config = config or RendererConfig()

    def _story(self, available_width: float) -> List[Any]:
        font_name = resolve_font(self.fonts, self.config.font_family)
        factory = _FlowableFactory(font_name, self.definition.get('defaultStyle', {}), available_width)
        story = []
        for block in self.definition.get('content', []):
            story.extend(factory.block(block))
        return story

    def write(self, target: Union[str, BinaryIO]) -> None:
        """Renders the document as PDF into a file path or a binary file object."""
        left, top, right, bottom = self.config.page_margins
        doc = SimpleDocTemplate(
            target,
            pagesize=PAGE_SIZES[self.config.page_size],
            leftMargin=left,
            topMargin=top,
            rightMargin=right,
            bottomMargin=bottom,
            title=self.config.title,
        )
        story = self._story(doc.width)
        logger.info(f"Rendering invoice PDF ({len(story)} flowables, page size {self.config.page_size})")
        doc.build(story)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write(buffer)
        return buffer.getvalue()


def create_invoice_document(
    options: Union[InvoiceOptions, Mapping[str, Any], None] = None,
    fonts: Optional[Mapping[str, str]] = None,
    config: Optional[RendererConfig] = None,
    now: Optional[datetime] = None,
) -> InvoiceDocument:
    """
    Builds the invoice template and hands it, with its fonts, to the renderer.
    Without an explicit font map the font configured in ``config`` is loaded.
    """
    config = config or RendererConfig()
    if fonts is None:
        fonts = fonts_from_config(config)
    return InvoiceDocument(build_template(options, now=now), fonts=fonts, config=config)
