"""Repository layer for database operations using repository pattern."""

from studyhub.repositories.flashcard_repository import FlashcardRepository
from studyhub.repositories.note_repository import NoteRepository
from studyhub.repositories.progress_repository import StudyProgressRepository
from studyhub.repositories.quiz_repository import QuizRepository
from studyhub.repositories.study_set_repository import StudySetRepository
from studyhub.repositories.user_repository import UserRepository

__all__ = [
    "FlashcardRepository",
    "NoteRepository",
    "QuizRepository",
    "StudyProgressRepository",
    "StudySetRepository",
    "UserRepository",
]
