"""Question rendering utilities for the play view."""

from __future__ import annotations

from pulse_quiz.core.markdown_renderer import renderer


def render_question(question_text: str, font_size: int = 16) -> str:
    """Render question text (Markdown, optional $math$) as a full HTML document
    ready for display in a QWebEngineView."""
    return renderer.render_full_document(
        question_text.strip() or "(No question text)", font_size=font_size
    )
