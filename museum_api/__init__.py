"""Museum Exhibit API: themes, items, quizzes and recipient registration."""

__version__ = "1.0.0"
