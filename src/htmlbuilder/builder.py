# src/htmlbuilder/builder.py
import logging
from typing import Any, List, Mapping, Optional, Union

from .core import ElementNode, EventBinding, NodeDescriptor, NodeFactory
from .errors import MalformedLineError
from .line_parser import DEFAULT_ATTRIBUTE_SEPARATOR, LineParser
from .lines import DEFAULT_MARKER, Block, Line, extract_lines, split_blocks
from .reconstruct import PendingNode, reconstruct
from .registry import EventRegistry

logger = logging.getLogger(__name__)


class HTMLBuilder:
    """
    Compiles indentation-based templates into element trees.

    Each top-level line of a template becomes an independent root node that is
    appended, in template order, to the builder's container. Event bindings
    registered on the builder are available to every template it compiles.

    Example template:
        div.window#main
        >div.window-bar
        >>span.window-title(Hello &amp; welcome)
        >>button(&times;)[type=button; disabled]@close
        >div.window-body
    """

    def __init__(
            self,
            container: Optional[ElementNode] = None,
            attribute_separator: str = DEFAULT_ATTRIBUTE_SEPARATOR,
            indent_marker: str = DEFAULT_MARKER,
            node_factory: Optional[NodeFactory] = None,
    ):
        self.node_factory: NodeFactory = node_factory or ElementNode.create
        self.container = container if container is not None else self.node_factory("body")
        self.registry = EventRegistry()
        self._parser = LineParser()
        self.diagnostics: List[str] = []
        self.set_attribute_separator(attribute_separator)
        self.set_indent_marker(indent_marker)

    # --- Configuration ---

    def set_container(self, container: ElementNode) -> None:
        """Changes the node that receives the generated root elements."""
        self.container = container

    def register_event(self, binding: Union[EventBinding, Mapping[str, Any]]) -> EventBinding:
        """Registers an event usable as `@name` in every template of this builder."""
        return self.registry.register(binding)

    def set_attribute_separator(self, symbol: str) -> None:
        """
        Changes the symbol that separates the attributes inside brackets.
        e.g. with '/': `input[type=text / disabled]`
        """
        if not symbol:
            raise ValueError("The attribute separator cannot be empty.")
        self._parser.attribute_separator = symbol

    @property
    def attribute_separator(self) -> str:
        return self._parser.attribute_separator

    def set_indent_marker(self, marker: str) -> None:
        if len(marker) != 1 or marker.isspace():
            raise ValueError(f"The indentation marker must be a single visible character, got {marker!r}.")
        self.indent_marker = marker

    # --- Templates ---

    def reindent(self, template: str, levels: int = 1) -> str:
        """
        Indents a template by `levels` markers so it can be spliced into another one.
        """
        if levels < 0:
            raise ValueError("reindent(): the indentation level cannot be negative.")
        if levels == 0:
            return template.strip()

        prefix = self.indent_marker * levels
        lines = [line.strip() for line in template.strip().split("\n")]
        return "\n".join(prefix + line for line in lines if line).strip()

    def compile(self, template: str) -> List[ElementNode]:
        """
        Generates the elements described by a template and appends them to the container.

        Blocks are appended one by one. If a line cannot be parsed, the error propagates
        and its block is not appended; blocks appended before it stay attached.

        Returns:
            List[ElementNode]: The root nodes appended to the container, in order.

        Raises:
            MalformedLineError: If a line has no tag name.
        """
        self.diagnostics = []
        if not template.strip():
            return []

        blocks = split_blocks(extract_lines(template, self.indent_marker))
        roots: List[ElementNode] = []
        for block in blocks:
            root = self._build_block(block)
            self.container.append_child(root)
            roots.append(root)

        logger.debug("Compiled %d top-level element(s) into <%s>", len(roots), self.container.tag)
        return roots

    def _build_block(self, block: Block) -> ElementNode:
        root = self._materialize(self._parse(block.root))
        pending = [PendingNode(self._materialize(self._parse(line)), line.depth) for line in block.children]
        return reconstruct(root, pending)

    def _parse(self, line: Line) -> NodeDescriptor:
        try:
            descriptor = self._parser.parse(line.descriptor)
        except MalformedLineError as e:
            raise MalformedLineError(line.raw, line.number) from e
        self.diagnostics.extend(f"line {line.number}: {message}" for message in descriptor.diagnostics)
        return descriptor

    def _materialize(self, descriptor: NodeDescriptor) -> ElementNode:
        """Creates a node and applies the classes, id, text, attributes and events of a descriptor."""
        node = self.node_factory(descriptor.tag)
        for c in descriptor.classes:
            node.add_class(c)
        for name, value in descriptor.attributes:
            node.set_attribute(name, "" if value is None else value)
        if descriptor.id:
            node.set_attribute("id", descriptor.id)
        if descriptor.text:
            node.text = descriptor.text

        for name in descriptor.event_names:
            binding = self.registry.resolve(name)
            if binding is None:
                logger.debug("No event registered under '%s'; <%s> gets no listener for it.", name, descriptor.tag)
                continue
            node.add_event_listener(binding)
        return node
