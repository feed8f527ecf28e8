#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/doctree2md/renderers/handlers.py
"""Formatting handlers, one per known node kind.

Every handler has the signature ``handler(dispatcher, state, node)`` and
returns a ``HandlerResult``. It writes through ``dispatcher.sink``, reads
``dispatcher.options``, and recurses through the dispatcher:

- ``dispatcher.dispatch_sequence(state, nodes)`` threads the state from one
  child to the next ("same state"), which inline content and the document
  header rely on.
- ``dispatcher.dispatch_each(state, nodes)`` gives every child the same
  snapshot ("state copy"), so nothing one child does reaches the next.

The kind set is closed: ``HANDLERS`` maps each Docutils tag name to its
handler and ``resolve_handler`` returns None for anything else.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional

from doctree2md.ast.nodes import Node
from doctree2md.constants import (
    CODE_FENCE,
    FOOTNOTE_ANCHOR_PREFIX,
    HEADING_MARKER,
    LINE_NUMBER_CLASS,
    LIST_INDENT,
    LIST_ITEM_MARKER,
    TITLE_UNDERLINE,
)
from doctree2md.options.markdown import MarkdownRendererOptions
from doctree2md.renderers.results import ContinueInto, Handled, HandlerResult
from doctree2md.renderers.state import Mode, RenderState
from doctree2md.utils.text import slugify, squeeze_spaces

if TYPE_CHECKING:
    from doctree2md.renderers.dispatch import Dispatcher

logger = logging.getLogger(__name__)

Handler = Callable[["Dispatcher", RenderState, Node], HandlerResult]

# Docutils system message levels
_MESSAGE_LEVELS = {
    "1": logging.INFO,
    "2": logging.WARNING,
    "3": logging.ERROR,
    "4": logging.CRITICAL,
}


def _emit_inline(dispatcher: Dispatcher, state: RenderState, node: Node) -> None:
    """Write text children verbatim and dispatch element children, in order."""
    for child in node.children:
        if child.is_text:
            dispatcher.sink.write(child.value)
        else:
            state = dispatcher.dispatch(state, child)


def handle_title(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render a document, topic or section title.

    At the top of the document the title becomes an underlined line and the
    header starts; in the body it is a level-one heading; in a section the
    heading level follows the section depth.
    """
    sink = dispatcher.sink
    title = node.text or ""

    if state.mode is Mode.TOP:
        sink.writeline(title)
        sink.writeline(TITLE_UNDERLINE)
        return Handled(state.with_mode(Mode.HEADER))

    if state.mode is Mode.BODY:
        sink.writeline()
        sink.writeline(f"{HEADING_MARKER} {title}")
        sink.writeline()
    elif state.mode is Mode.SECTION:
        sink.write(HEADING_MARKER * state.depth + " ")
        # section numbers and other inline markup come before the title text
        dispatcher.dispatch_sequence(state, node.elements())
        if dispatcher.options.emit_anchors:
            sink.write(f'<a name="{slugify(title)}">{title}</a>')
        else:
            sink.write(title)
        sink.writeline()
        sink.writeline()

    return Handled(state)


def handle_docinfo(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render bibliographic fields as table rows and open the document body."""
    if state.mode is not Mode.HEADER:
        return Handled(state)

    sink = dispatcher.sink
    sink.writeline()
    for field_node in node.elements():
        value = field_node.text
        if value is None:
            value = " ".join(field_node.text_content().split())
        sink.writeline(f"| {field_node.kind} | {value} |")
    sink.writeline()
    return Handled(state.with_mode(Mode.BODY))


def handle_topic(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    if state.mode is Mode.BODY:
        dispatcher.dispatch_sequence(state, node.elements())
    return Handled(state)


def handle_paragraph(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render a paragraph according to the enclosing block.

    Body and section paragraphs end with a blank line, list item paragraphs
    with a single line break, note paragraphs become block quotes and
    footnote paragraphs stay on the footnote's line.
    """
    sink = dispatcher.sink

    if state.mode is Mode.HEADER and dispatcher.options.header_paragraphs_as_body:
        state = state.with_mode(Mode.BODY)

    if state.mode in (Mode.BODY, Mode.SECTION):
        _emit_inline(dispatcher, state, node)
        sink.writeline()
        sink.writeline()
    elif state.mode is Mode.BULLET_LIST_ITEM:
        _emit_inline(dispatcher, state, node)
        sink.writeline()
    elif state.mode is Mode.NOTE:
        for child in node.children:
            if child.is_text:
                sink.writeline(f"> {child.value}")
                sink.writeline()
    elif state.mode is Mode.FOOTNOTE:
        _emit_inline(dispatcher, state, node)

    return Handled(state)


def handle_section(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    section_state = RenderState(Mode.SECTION, state.depth + 1)
    dispatcher.dispatch_each(section_state, node.elements())
    return Handled(state)


def handle_note(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    dispatcher.dispatch_each(state.with_mode(Mode.NOTE), node.elements())
    return Handled(state)


def handle_bullet_list(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render a bullet list.

    A list directly in the body or a section starts a fresh list scope at
    depth zero. A list inside a list item is one level deeper than its
    parent. Only the end of an outermost list is followed by a blank line.
    """
    if state.mode in (Mode.BODY, Mode.SECTION):
        list_state = state.with_mode(Mode.BULLET_LIST).with_depth(0)
    elif state.mode is Mode.BULLET_LIST_ITEM:
        list_state = state.right()
    else:
        list_state = state

    dispatcher.dispatch_sequence(list_state, node.elements())

    if list_state.depth == 0:
        dispatcher.sink.writeline()
    return Handled(state)


def handle_list_item(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    item_state = state.with_mode(Mode.BULLET_LIST_ITEM) if state.mode is Mode.BULLET_LIST else state
    # an outermost item is indented one step; each nested list adds another
    dispatcher.sink.write(LIST_INDENT * (item_state.depth + 1) + LIST_ITEM_MARKER)
    dispatcher.dispatch_each(item_state, node.elements())
    return Handled(state)


def format_reference_link(node: Node) -> Optional[str]:
    """Build the Markdown link for a reference node.

    Resolution order: an external ``refuri``; an internal ``refid`` with a
    ``name`` (the anchor is the slug of the name); an internal ``refid``
    alone (the anchor is the slug of the link text). Returns None when the
    node has neither attribute.

    Examples
    --------
        >>> from doctree2md.ast import element
        >>> format_reference_link(element("reference", "X", refuri="http://x"))
        ' [X](http://x) '
        >>> format_reference_link(element("reference", "Intro Part", refid="intro-part"))
        ' [Intro Part](#intro-part) '

    """
    label = node.text
    refuri = node.get("refuri")
    refid = node.get("refid")
    name = node.get("name")

    if refuri is not None:
        return f" [{label if label is not None else refuri}]({refuri}) "
    if refid is not None and name is not None:
        return f" [{label or ''}](#{slugify(name)}) "
    if refid is not None:
        return f" [{label or ''}](#{slugify(label)}) "
    return None


def handle_reference(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    sink = dispatcher.sink
    link = format_reference_link(node) or ""

    if state.mode is Mode.BULLET_LIST_ITEM:
        dispatcher.dispatch_sequence(state, node.elements())
        sink.write(link)
        sink.writeline()
    elif state.mode is Mode.BODY:
        if dispatcher.options.render_body_references:
            sink.write(link)
    elif state.mode is Mode.SECTION:
        sink.write(link)
    elif state.mode is Mode.FOOTNOTE:
        sink.write(link)
        sink.writeline()

    return Handled(state)


def handle_figure(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    image = node.find("image")
    caption = node.find("caption")
    uri = image.get("uri") if image is not None else None
    alt = caption.text if caption is not None else None

    dispatcher.sink.writeline(f"![{alt or ''}]({uri or ''})")
    dispatcher.sink.writeline()
    return Handled(state)


def handle_image(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Accept a standalone image without output.

    Images are rendered through their enclosing figure, which reads the
    ``uri`` itself. Registering the kind keeps standalone images from being
    reported as unknown.
    """
    return Handled(state)


def handle_footnote(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    child_state = state.with_mode(Mode.FOOTNOTE) if state.mode is Mode.SECTION else state
    return ContinueInto(node.elements(), child_state)


def handle_footnote_reference(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    label = node.text or ""
    dispatcher.sink.write(f"[[{label}]](#{FOOTNOTE_ANCHOR_PREFIX}{label})")
    return Handled(state)


def handle_label(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    if state.mode is Mode.FOOTNOTE:
        label = node.text or ""
        dispatcher.sink.write(f'- <a name="{FOOTNOTE_ANCHOR_PREFIX}{label}">[{label}]</a> ')
    return Handled(state)


def handle_literal(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    dispatcher.sink.write(f" `{node.text_content()}` ")
    return Handled(state)


def handle_literal_block(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render a literal block as fenced code.

    The fence is tagged with the last token of the ``classes`` attribute
    (``"code python"`` gives ``python``). Line-number spans inserted for
    numbered code blocks are left out.
    """
    sink = dispatcher.sink
    classes = (node.get("classes") or "").split()
    sink.writeline(CODE_FENCE + (classes[-1] if classes else ""))

    for child in node.children:
        if child.is_text:
            sink.write(child.value)
        elif child.get("classes") != LINE_NUMBER_CLASS:
            sink.write(child.text_content())

    sink.writeline()
    sink.writeline(CODE_FENCE)
    sink.writeline()
    return Handled(state)


def handle_strong(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    dispatcher.sink.write(f" **{node.text_content()}** ")
    return Handled(state)


def handle_emphasis(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    dispatcher.sink.write(f" *{node.text_content()}* ")
    return Handled(state)


def handle_generated(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Render generated text such as section numbers.

    In a section title the number is followed by ``". "``.
    """
    number = squeeze_spaces(node.text_content())
    if state.mode is Mode.SECTION:
        dispatcher.sink.write(f"{number}. ")
    else:
        dispatcher.sink.write(number)
    return Handled(state)


def handle_target(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    return Handled(state)


def handle_document(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    return ContinueInto(node.elements(), state)


def handle_system_message(dispatcher: Dispatcher, state: RenderState, node: Node) -> HandlerResult:
    """Send the text of a parser system message to the log, never to the output."""
    if not dispatcher.options.report_system_messages:
        return Handled(state)

    level = _MESSAGE_LEVELS.get(node.get("level") or "", logging.WARNING)
    source = node.get("source") or "<document>"
    line = node.get("line") or "?"
    for child in node.elements():
        logger.log(level, "%s:%s: %s", source, line, child.text_content().strip())
    return Handled(state)


HANDLERS: Mapping[str, Handler] = MappingProxyType(
    {
        "title": handle_title,
        "docinfo": handle_docinfo,
        "topic": handle_topic,
        "paragraph": handle_paragraph,
        "section": handle_section,
        "note": handle_note,
        "bullet_list": handle_bullet_list,
        "list_item": handle_list_item,
        "reference": handle_reference,
        "figure": handle_figure,
        "image": handle_image,
        "footnote": handle_footnote,
        "footnote_reference": handle_footnote_reference,
        "label": handle_label,
        "literal": handle_literal,
        "literal_block": handle_literal_block,
        "strong": handle_strong,
        "emphasis": handle_emphasis,
        "generated": handle_generated,
        "target": handle_target,
        "document": handle_document,
        "system_message": handle_system_message,
    }
)

# Kinds whose support can be switched off, with the option field that controls them
_OPTIONAL_KINDS = {
    "literal_block": "render_code_blocks",
    "strong": "render_inline_markup",
    "emphasis": "render_inline_markup",
}


def resolve_handler(kind: str, options: MarkdownRendererOptions) -> Optional[Handler]:
    """Look up the handler for a node kind.

    Returns None for kinds outside the known set and for kinds whose support
    is disabled in ``options``.
    """
    option_name = _OPTIONAL_KINDS.get(kind)
    if option_name is not None and not getattr(options, option_name):
        return None
    return HANDLERS.get(kind)
