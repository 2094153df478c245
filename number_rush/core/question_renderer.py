"""Markdown-based rendering of questions for rich-text Qt labels.

Questions are written as a tiny markdown document and rendered to HTML with
markdown-it. Qt's rich-text engine understands the resulting subset of HTML,
so the same fragment can go straight into a ``QLabel``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from number_rush.core.models import QuestionView


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html})

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No question.</em></p>"
        return self._markdown.render(sanitized)


renderer = MarkdownRenderer()


def render_question_markdown(question: QuestionView) -> str:
    """Return the markdown for ``operand1 op operand2 =``."""
    return f"**{question.operand1} {question.operation.symbol} {question.operand2} =**"


def render_question_html(question: QuestionView | None, font_size: int = 28) -> str:
    """Render the expression as an HTML fragment.

    Hint options are not part of the fragment; they are shown as separate
    buttons labelled with :func:`format_option_label`.

    Args:
        question: The question to show, or None for an empty placeholder
        font_size: Font size in points for the expression

    Returns:
        HTML fragment suitable for a rich-text QLabel
    """
    markdown_text = render_question_markdown(question) if question else ""
    body = renderer.render_fragment(markdown_text)
    return f'<div style="font-size: {font_size}pt; text-align: center;">{body}</div>'


def format_option_label(index: int, value: int) -> str:
    """Label for the hint button at ``index`` (A, B, C, D)."""
    return f"{chr(ord('A') + index)}.  {value}"
