"""API routers."""

from studyhub.routers import flashcards, notes, progress, quizzes, study_sets, users

__all__ = ["flashcards", "notes", "progress", "quizzes", "study_sets", "users"]
