"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Number Rush"
WINDOW_MIN_WIDTH: int = 520
WINDOW_MIN_HEIGHT: int = 560

DIFFICULTY_PROMPT: str = "Choose your difficulty level to begin"
DIFFICULTY_LABELS: dict[str, str] = {
    "easy": "Easy",
    "medium": "Medium",
    "hard": "Hard",
}

QUESTION_HEADER: str = "Question"
SCORE_HEADER: str = "Score"
ANSWER_PLACEHOLDER: str = "Your answer"
NEXT_QUESTION_BUTTON: str = "Next Question"
HINT_BUTTON: str = "Hint"
HINT_BUTTON_USED: str = "Hint shown"
HINT_TOOLTIP: str = "Switch this question to multiple choice"

COMPLETE_TITLE: str = "Game Complete!"
FINAL_SCORE_TEMPLATE: str = "Final Score: {score}/{total}"
TIME_TAKEN_TEMPLATE: str = "Time taken: {elapsed}"
PLAY_AGAIN_BUTTON: str = "Play Again"

THEME_BUTTON_DARK: str = "Dark Mode"
THEME_BUTTON_LIGHT: str = "Light Mode"
ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"
SETTINGS_BUTTON: str = "Settings"

CONFIRM_QUIT_MESSAGE: str = "A game is in progress. Quit anyway?"
