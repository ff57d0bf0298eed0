# tests/core/test_render.py
from bs4 import BeautifulSoup

from htmlbuilder import ElementNode, HTMLBuilder, to_html, to_soup


def test_to_html_single_node():
    node = ElementNode(
        tag="div",
        id="x",
        classes=["a", "b"],
        attrs={"disabled": "", "data-k": "v"},
        text="Hi & bye",
        children=[ElementNode(tag="span")],
    )
    # BeautifulSoup writes attributes in alphabetical order
    assert to_html(node) == '<div class="a b" data-k="v" disabled="" id="x"><span></span>Hi &amp; bye</div>'


def test_children_come_before_content_text():
    """Kinderen staan vóór de tekst van het element, zoals na prepend in een DOM."""
    roots = HTMLBuilder().compile("button(Hello)\n>span(icon)")
    assert to_html(roots) == "<button><span>icon</span>Hello</button>"


def test_style_is_rendered_as_declarations():
    node = ElementNode(tag="div", style={"width": "800px", "height": "462px"})
    assert to_html(node) == '<div style="width: 800px; height: 462px"></div>'


def test_to_html_of_compiled_template():
    """De gegenereerde HTML volgt de structuur van het sjabloon."""
    builder = HTMLBuilder()
    roots = builder.compile("ul#list\n>li(one)\n>li(two)\np(&lt;end&gt;)")
    assert to_html(roots) == '<ul id="list"><li>one</li><li>two</li></ul><p>&lt;end&gt;</p>'


def test_to_soup_is_queryable():
    builder = HTMLBuilder()
    builder.compile("div.window\n>span.window-title(Hello)\n>button[type=button]")
    soup = to_soup(builder.container)

    assert isinstance(soup, BeautifulSoup)
    assert soup.select_one("body > div.window > span.window-title").get_text() == "Hello"
    assert soup.find("button")["type"] == "button"


def test_listeners_are_not_serialized():
    builder = HTMLBuilder()
    builder.register_event({"name": "close", "type": "click", "callback": print})
    roots = builder.compile("button(x)@close")
    assert to_html(roots) == "<button>x</button>"


def test_pretty_output_is_indented():
    roots = HTMLBuilder().compile("div\n>p(text)")
    pretty = to_html(roots, pretty=True)
    assert pretty.splitlines()[0] == "<div>"
    assert " <p>" in pretty
