# src/htmlbuilder/render.py
import logging
from typing import Iterable, Union

from bs4 import BeautifulSoup, Tag

from .core import ElementNode

logger = logging.getLogger(__name__)


def _style_to_string(style: dict) -> str:
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


def _build_tag(soup: BeautifulSoup, node: ElementNode) -> Tag:
    """Recursively converts an ElementNode into a BeautifulSoup Tag."""
    attrs = {}
    if node.id:
        attrs["id"] = node.id
    if node.classes:
        attrs["class"] = " ".join(node.classes)
    attrs.update(node.attrs)
    if node.style:
        attrs["style"] = _style_to_string(node.style)

    tag = soup.new_tag(node.tag, attrs=attrs)
    # Children are prepended in front of the content text when a tree is built
    for child in node.children:
        tag.append(_build_tag(soup, child))
    if node.text:
        tag.append(node.text)
    return tag


def to_soup(nodes: Union[ElementNode, Iterable[ElementNode]]) -> BeautifulSoup:
    """
    Builds a BeautifulSoup document from one node or a sequence of sibling nodes.
    Event listeners have no HTML representation and are left out.
    """
    if isinstance(nodes, ElementNode):
        nodes = [nodes]

    soup = BeautifulSoup("", "html.parser")
    for node in nodes:
        soup.append(_build_tag(soup, node))
    return soup


def to_html(nodes: Union[ElementNode, Iterable[ElementNode]], pretty: bool = False) -> str:
    """Serializes nodes to an HTML string."""
    soup = to_soup(nodes)
    return soup.prettify() if pretty else str(soup)
