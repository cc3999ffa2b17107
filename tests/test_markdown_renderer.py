from pulse_quiz.core.markdown_renderer import MarkdownRenderer, renderer


def test_render_fragment_basic_markdown():
    html = renderer.render_fragment("**Bold** and *italic*")
    assert "<strong>Bold</strong>" in html
    assert "<em>italic</em>" in html


def test_render_fragment_empty_input():
    assert renderer.render_fragment("   ") == "<p><em>No content provided.</em></p>"


def test_raw_html_is_escaped_by_default():
    html = renderer.render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_html_can_be_enabled():
    html = MarkdownRenderer(enable_html=True).render_fragment("<b>raw</b>")
    assert "<b>raw</b>" in html


def test_full_document_wraps_body_and_loads_mathjax():
    document = renderer.render_full_document("Solve $x^2 = 4$", title="A <b> title", font_size=22)
    assert document.startswith("<!doctype html>")
    assert "<title>A &lt;b&gt; title</title>" in document
    assert "font-size: 22pt" in document
    assert "mathjax" in document.lower()
    assert "$x^2 = 4$" in document
