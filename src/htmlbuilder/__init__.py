from .builder import HTMLBuilder
from .core import ElementNode, EventBinding, NodeDescriptor
from .errors import BuilderError, MalformedLineError, RegistrationError
from .line_parser import LineParser
from .registry import EventRegistry
from .render import to_html, to_soup

__all__ = [
    "HTMLBuilder",
    "ElementNode",
    "EventBinding",
    "NodeDescriptor",
    "BuilderError",
    "MalformedLineError",
    "RegistrationError",
    "LineParser",
    "EventRegistry",
    "to_html",
    "to_soup",
]
