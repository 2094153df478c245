from number_rush.core.models import Operation, QuestionView
from number_rush.core.question_renderer import (
    format_option_label,
    render_question_html,
    render_question_markdown,
)


def test_markdown_shows_expression():
    view = QuestionView(operand1=12, operand2=4, operation=Operation.DIVIDE)
    assert render_question_markdown(view) == "**12 ÷ 4 =**"


def test_html_contains_expression():
    view = QuestionView(operand1=7, operand2=3, operation=Operation.SUBTRACT)
    html = render_question_html(view, font_size=30)
    assert "<strong>7 - 3 =</strong>" in html
    assert "font-size: 30pt" in html


def test_html_never_lists_hint_options(manager_with_hint):
    snapshot = manager_with_hint.snapshot()
    assert snapshot.options

    html = render_question_html(snapshot.question)

    for idx in range(len(snapshot.options)):
        assert f"{chr(ord('A') + idx)}." not in html


def test_option_labels_use_letters():
    labels = [format_option_label(idx, value) for idx, value in enumerate((5, 6, 7, 8))]
    assert labels == ["A.  5", "B.  6", "C.  7", "D.  8"]


def test_html_placeholder_without_question():
    assert "No question." in render_question_html(None)
