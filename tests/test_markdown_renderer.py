from exam_app.core.markdown_renderer import MarkdownRenderer
from exam_app.core.models import Note

from helpers import make_question


def test_fragment_keeps_math_for_mathjax():
    html = MarkdownRenderer().render_fragment("Solve **$x^2 = 4$**")

    assert "<strong>$x^2 = 4$</strong>" in html


def test_empty_fragment_has_placeholder():
    assert "No content provided" in MarkdownRenderer().render_fragment("   ")


def test_raw_html_is_not_passed_through():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")

    assert "<script>" not in html


def test_note_document_includes_title_and_mathjax():
    note = Note(id=1, subject_id=1, title="Angles & arcs", content="| a | b |\n| - | - |\n| 1 | 2 |")

    document = MarkdownRenderer().render_note(note, font_size=14)

    assert "<h2>Angles &amp; arcs</h2>" in document
    assert "<table>" in document
    assert "MathJax" in document
    assert "font-size: 14pt" in document


def test_question_answer_is_hidden_until_requested():
    renderer = MarkdownRenderer()
    question = make_question(1, correct="C")

    hidden = renderer.render_question(question)
    shown = renderer.render_question(question, show_answer=True)

    assert "<strong>A.</strong> Option A" in hidden
    assert "Correct answer" not in hidden
    assert "Correct answer: C" in shown
    assert "Because." in shown
