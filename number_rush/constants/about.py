"""Static metadata describing Number Rush."""

APP_NAME = "Number Rush"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Number Rush is a quick mental arithmetic drill built with Qt. "
    "Pick a difficulty, answer ten questions as fast as you can, and see how you did."
)

HELP_TEXT = (
    "Choose Easy, Medium or Hard to start a game of ten questions.\n\n"
    "Type your answer and press Enter (or the Next Question button) to continue. "
    "Stuck? Press the hint button to switch the current question to multiple choice; "
    "the hint stays on until you answer.\n\n"
    "Easy uses numbers from 1 to 10, Medium up to 50, and Hard up to 100. "
    "Division questions always have a whole-number answer."
)
