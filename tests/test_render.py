import io

import pytest

from treemark.config import RenderOptions
from treemark.errors import InvalidTagError, MalformedAttributeListError, VoidElementError
from treemark.evaluator import Evaluator
from treemark.normalize import normalize
from treemark.render import Renderer, render_element

HTML = RenderOptions()
XML = RenderOptions(xml=True, extension_tags={"feed", "entry"})


def _flat(tree, options=HTML):
    out = io.StringIO()
    Renderer(out, options, Evaluator()).render(normalize(tree), root=True)
    return out.getvalue()


def test_text_child():
    assert _flat(["div", "hello"]) == "<div>hello</div>"


def test_numbers_are_written_as_text():
    assert _flat(["p", 1, " and ", 2.5]) == "<p>1 and 2.5</p>"


def test_nested_children_in_order():
    assert _flat(["ul", ["li", "a"], ["li", "b"]]) == "<ul><li>a</li><li>b</li></ul>"


def test_attributes_are_spliced_into_opening_tag():
    html = _flat(["a", ".btn", ":href", "/x", ".primary", ":download", ["span", "go"]])
    assert html == '<a class="btn primary" href="/x" download><span>go</span></a>'


def test_void_element_self_closes():
    assert _flat(["img", ":src", "a.png", ":alt", "A"]) == '<img src="a.png" alt="A"/>'
    assert _flat(["br"]) == "<br/>"


def test_void_element_rejects_children():
    with pytest.raises(VoidElementError):
        _flat(["br", "text"])


def test_doctype_only_for_root_html():
    assert _flat(["html", ["body"]]) == "<!DOCTYPE html><html><body></body></html>"
    assert _flat(["div", ["html"]]) == "<div><html></html></div>"


def test_configured_doctype_params():
    options = RenderOptions(doctype=["html", "PUBLIC", '"-//W3C//DTD HTML 4.01//EN"'])
    assert _flat(["html"], options).startswith(
        '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN"><html>'
    )


def test_xml_mode_pairs_tags_and_collapses_empty_elements():
    assert _flat(["feed", ["entry", "x"], ["entry"]], XML) == "<feed><entry>x</entry><entry/></feed>"
    assert _flat(["br"], XML) == "<br/>"


def test_xml_mode_has_no_doctype():
    assert _flat(["html", ["body", "x"]], XML) == "<html><body>x</body></html>"


def test_invalid_tag():
    with pytest.raises(InvalidTagError) as excinfo:
        _flat(["not-a-real-tag"])
    assert excinfo.value.tag == "not-a-real-tag"


def test_invalid_nested_tag_aborts():
    with pytest.raises(InvalidTagError):
        _flat(["div", ["p", "ok"], ["blink", "no"]])


def test_extension_tags_are_allowed():
    assert _flat(["svg", ":width", 10, ["circle", ":r", 4]]) == '<svg width="10"><circle r="4"></circle></svg>'
    options = RenderOptions(extension_tags=["my-widget"])
    assert _flat(["my-widget", "x"], options) == "<my-widget>x</my-widget>"


def test_text_is_not_escaped():
    assert _flat(["p", "a & b"]) == "<p>a & b</p>"


def test_pretty_breaks_lines_by_tree_shape():
    out = io.StringIO()
    tree = normalize(["div", "intro", ["p", "one"], ["p", ["b", "two"]], "outro"])
    Renderer(out, HTML, pretty=True).render(tree, root=True)
    assert out.getvalue() == "<div>\nintro\n<p>one</p>\n<p>\n<b>two</b>\n</p>\noutro\n</div>\n"


def test_render_element_with_attribute_pairs():
    html = render_element("div", [("class", "a"), ("id", "m"), ("class", "b")], ["x", ["i", "y"]])
    assert html == '<div class="a b" id="m">x<i>y</i></div>'


def test_render_element_with_flat_attributes():
    assert render_element("span", ["id", "s"], ["x"]) == '<span id="s">x</span>'
    with pytest.raises(MalformedAttributeListError):
        render_element("span", ["id", "s", "class"], ["x"])


def test_render_element_checks_tag_first():
    with pytest.raises(InvalidTagError):
        render_element("nope", [], ["{{ missing }}"])
