"""StudyHub: study sets, flashcards, quizzes and notes over a relational store."""

__version__ = "0.1.0"
