"""
Markup converter - turns a tag/text/close-tag event stream into tree nodes.

Supports:
- Headings h1..h6, offset by a caller-supplied base level
- Paragraph-like block tags
- Unordered and ordered lists, including nested lists
- Line breaks inside any block
- Inline tags, which are passed through as plain text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Dict, List, Optional

from ..models.base import Node
from ..models.list import List as ListNode, ListItem
from ..models.paragraph import Heading, Paragraph
from ..styles.paragraph_style import ParagraphStyle

logger = logging.getLogger(__name__)

HEADING_TAGS: Dict[str, int] = {f"h{n}": n - 1 for n in range(1, 7)}
BLOCK_TAGS = frozenset({"p", "div", "pre", "blockquote"})
LIST_TAGS = frozenset({"ul", "ol"})
LIST_ITEM_TAG = "li"
BREAK_TAG = "br"
INLINE_TAGS = frozenset({
    "b", "strong", "i", "em", "u", "span", "a", "code",
    "sub", "sup", "small", "font", "img",
})
VOID_TAGS = frozenset({
    "br", "img", "hr", "input", "meta", "link", "wbr", "col",
    "area", "base", "embed", "source", "track", "param",
})


@dataclass
class ListContext:
    """An open list and the item of the list-item tag currently open in it."""

    node: ListNode
    item: Optional[ListItem] = None


class MarkupConverter:
    """
    Consumes markup events and appends the resulting nodes to a target.
    
    Examples:
        >>> converter = MarkupConverter(document, base_level=2)
        >>> converter.open_tag("h1")
        >>> converter.text("Results")
        >>> converter.close_tag("h1")
    """

    def __init__(self, target: Node, base_level: int = 1,
                 default_style: Optional[ParagraphStyle] = None):
        """
        Initialize markup converter.
        
        Args:
            target: Node receiving the converted top-level nodes
            base_level: Outline level produced for h1
            default_style: Paragraph style for produced paragraphs and list items
        """
        if base_level < 1:
            raise ValueError(f"Base level must be >= 1, got {base_level}")

        self.target = target
        self.base_level = base_level
        self.default_style = default_style
        self.tag_stack: List[str] = []
        self.list_stack: List[ListContext] = []
        self.pending: Optional[str] = None
        self.nodes: List[Node] = []

    def open_tag(self, name: str, attrs: Optional[Dict[str, Optional[str]]] = None) -> None:
        """Handle an open-tag event. Attributes are accepted but not interpreted."""
        tag = name.lower()
        if tag in INLINE_TAGS:
            return
        if tag == BREAK_TAG:
            self.tag_stack.append(tag)
            return

        if tag in LIST_TAGS:
            self._open_list()
        else:
            self._flush()
            if tag == LIST_ITEM_TAG and self.list_stack:
                self.list_stack[-1].item = None
        self.tag_stack.append(tag)

    def text(self, content: str) -> None:
        """Handle a text event; text is buffered until the next flush."""
        if not content:
            return
        self.pending = content if self.pending is None else self.pending + content

    def close_tag(self, name: str) -> None:
        """
        Handle a close-tag event.
        
        Tags left open inside the closed one are closed implicitly, with a
        warning. A close tag without matching open tag is ignored.
        """
        tag = name.lower()
        if tag in INLINE_TAGS:
            return
        if tag not in self.tag_stack:
            logger.warning(f"Ignoring closing tag </{tag}> without matching open tag")
            return

        position = len(self.tag_stack) - 1 - self.tag_stack[::-1].index(tag)
        unclosed = self.tag_stack[position + 1:]
        if unclosed:
            logger.warning(f"Closing tag </{tag}> implicitly closes {unclosed}")
        while len(self.tag_stack) > position:
            self._close_innermost()

    def _close_innermost(self) -> None:
        tag = self.tag_stack[-1]
        if tag == BREAK_TAG:
            self.pending = (self.pending or "") + "\n"
        else:
            self._flush(closing=True)
            if tag in LIST_TAGS:
                self.list_stack.pop()
        self.tag_stack.pop()

    def _current_tag(self) -> Optional[str]:
        for tag in reversed(self.tag_stack):
            if tag != BREAK_TAG:
                return tag
        return None

    def _flush(self, closing: bool = False) -> None:
        text, self.pending = self.pending, None
        tag = self._current_tag()
        if text is None:
            # Closing an empty paragraph or item still produces it
            if not closing or tag not in ("p", LIST_ITEM_TAG):
                return
            text = ""

        if tag in HEADING_TAGS:
            self._emit(Heading(text, self.base_level + HEADING_TAGS[tag], self.default_style))
        elif tag == LIST_ITEM_TAG and self.list_stack:
            self._add_item_text(self.list_stack[-1], text, closing)
        elif tag == "p":
            self._emit(Paragraph(text, self.default_style))
        elif not text.strip():
            # Whitespace between structural tags
            return
        elif tag is None or tag in BLOCK_TAGS:
            self._emit(Paragraph(text, self.default_style))
        else:
            if tag == LIST_ITEM_TAG:
                logger.warning("List item outside of a list, adding it as paragraph")
            else:
                logger.warning(f"Text inside unsupported tag <{tag}>, adding it as paragraph")
            self._emit(Paragraph(text, self.default_style))

    def _add_item_text(self, context: ListContext, text: str, closing: bool = False) -> None:
        if context.item is None:
            if text.strip() or closing:
                context.item = context.node.add_item(text, self.default_style)
        elif text.strip():
            context.item.append(Paragraph(text, self.default_style))

    def _open_list(self) -> None:
        nested = ListNode()
        enclosing = self.list_stack[-1] if self.list_stack else None
        if enclosing is not None and self._current_tag() == LIST_ITEM_TAG:
            self._flush()
            if enclosing.item is None:
                enclosing.item = enclosing.node.add_item()
            enclosing.item.append(nested)
        else:
            self._emit(nested)
            self._flush()
        self.list_stack.append(ListContext(nested))
        logger.debug(f"Opened list at depth {len(self.list_stack)}")

    def _emit(self, node: Node) -> None:
        self.target.append(node)
        self.nodes.append(node)


class HtmlEventTokenizer(HTMLParser):
    """HTML tokenizer feeding open/text/close events into a MarkupConverter."""

    def __init__(self, converter: MarkupConverter):
        super().__init__(convert_charrefs=True)
        self.converter = converter

    def handle_starttag(self, tag: str, attrs: list) -> None:
        self.converter.open_tag(tag, dict(attrs))
        if tag in VOID_TAGS:
            self.converter.close_tag(tag)

    def handle_startendtag(self, tag: str, attrs: list) -> None:
        self.converter.open_tag(tag, dict(attrs))
        self.converter.close_tag(tag)

    def handle_endtag(self, tag: str) -> None:
        if tag in VOID_TAGS:
            return
        self.converter.close_tag(tag)

    def handle_data(self, data: str) -> None:
        self.converter.text(data)


def convert_markup(markup: Optional[str], target: Node, base_level: int = 1,
                   default_style: Optional[ParagraphStyle] = None) -> List[Node]:
    """
    Convert markup into nodes appended to target.
    
    Input that does not start with '<' is taken as literal text and becomes a
    single paragraph.
    
    Args:
        markup: Markup or plain text
        target: Node receiving the converted nodes, e.g. a document or table cell
        base_level: Outline level produced for h1
        default_style: Paragraph style for produced paragraphs
        
    Returns:
        Nodes appended directly to target, in order
    """
    if not markup:
        return []

    converter = MarkupConverter(target, base_level, default_style)
    if not markup.startswith("<"):
        paragraph = Paragraph(markup, default_style)
        target.append(paragraph)
        return [paragraph]

    tokenizer = HtmlEventTokenizer(converter)
    tokenizer.feed(markup)
    tokenizer.close()
    if converter.tag_stack:
        logger.warning(f"Markup ended with unclosed tags: {converter.tag_stack}")
    if converter.pending and converter.pending.strip():
        logger.warning(f"Markup ended with unflushed text: {converter.pending!r}")
    logger.debug(f"Converted markup into {len(converter.nodes)} nodes")
    return converter.nodes
