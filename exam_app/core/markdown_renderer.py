"""Markdown + LaTeX rendering of notes, questions and explanations.

Notes and question prompts come from the server as markdown, sometimes with
``$...$`` math. The renderer turns them into HTML documents for
``QWebEngineView`` and leaves the math to MathJax at display time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import html

from markdown_it import MarkdownIt

from exam_app.core.models import Note, Question

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"


@dataclass(slots=True)
class MarkdownRenderer:
    """Turns server-provided markdown into HTML fragments and documents."""

    text_color: str = "#000000"
    background_color: str = "transparent"
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": False})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        stripped = (markdown_text or "").strip()
        if not stripped:
            return "<p><em>No content provided.</em></p>"
        return self._markdown.render(stripped)

    def render_note(self, note: Note, font_size: int = 12) -> str:
        body = f"<h2>{html.escape(note.title)}</h2>\n{self.render_fragment(note.content)}"
        return self.wrap_document(body, title=note.title, font_size=font_size)

    def render_question(
        self,
        question: Question,
        font_size: int = 12,
        show_answer: bool = False,
    ) -> str:
        """Render the prompt and lettered options, optionally with key and explanation."""
        parts = [self.render_fragment(question.question_text)]
        if question.options:
            items = "".join(
                f"<li><strong>{html.escape(option.key)}.</strong> "
                f"{self._markdown.renderInline(option.text or '(empty)')}</li>"
                for option in question.options
            )
            parts.append(f"<ul class=\"options\">{items}</ul>")
        else:
            parts.append("<p><em>No options available for this question.</em></p>")

        meta = [str(question.year)] if question.year else []
        if question.difficulty_level:
            meta.append(question.difficulty_level)
        if meta:
            parts.append(f"<p class=\"meta\">{html.escape(' · '.join(meta))}</p>")

        if show_answer:
            parts.append(f"<h3>Correct answer: {html.escape(question.correct_option_key)}</h3>")
            if question.explanation_text:
                parts.append("<h3>Explanation</h3>")
                parts.append(self.render_fragment(question.explanation_text))
        return self.wrap_document("\n".join(parts), title=f"Question {question.id}", font_size=font_size)

    def wrap_document(self, body_html: str, title: str = "ExamPrepQt", font_size: int = 12) -> str:
        """Wrap a fragment in a minimal HTML document that loads MathJax."""
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{html.escape(title)}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: {self.background_color}; color: {self.text_color}; font-size: {font_size}pt; line-height: 1.5; }}
      ul.options {{ list-style: none; padding-left: 0; }}
      ul.options li {{ margin: 0.4rem 0; }}
      p.meta {{ opacity: 0.7; font-size: 0.9em; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }}, svg: {{ fontCache: 'global' }} }};
    </script>
    <script defer src=\"{_MATHJAX_SCRIPT}\"></script>
  </head>
  <body>
    <div class=\"content\">{body_html}</div>
  </body>
</html>"""


renderer = MarkdownRenderer()
