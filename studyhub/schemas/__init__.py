"""Pydantic schemas for request/response validation."""

from studyhub.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardCreate,
    FlashcardCreateRequest,
    FlashcardReviewRequest,
    FlashcardsListResponse,
    FlashcardUpdate,
)
from studyhub.schemas.note_schemas import (
    Note,
    NoteCreate,
    NoteCreateRequest,
    NotesListResponse,
    NoteUpdate,
)
from studyhub.schemas.progress_schemas import (
    StudyProgress,
    StudyProgressCreate,
    StudyProgressCreateRequest,
    StudyProgressListResponse,
    StudyProgressUpdate,
)
from studyhub.schemas.quiz_schemas import (
    Quiz,
    QuizCreate,
    QuizCreateRequest,
    QuizUpdate,
    QuizzesListResponse,
)
from studyhub.schemas.study_set_schemas import (
    StudySet,
    StudySetCreate,
    StudySetCreateRequest,
    StudySetsListResponse,
    StudySetUpdate,
)
from studyhub.schemas.user_schemas import (
    User,
    UserCreate,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
    UserUpdate,
    UserUpdateRequest,
)

__all__ = [
    "Flashcard",
    "FlashcardCreate",
    "FlashcardCreateRequest",
    "FlashcardReviewRequest",
    "FlashcardUpdate",
    "FlashcardsListResponse",
    "Note",
    "NoteCreate",
    "NoteCreateRequest",
    "NoteUpdate",
    "NotesListResponse",
    "Quiz",
    "QuizCreate",
    "QuizCreateRequest",
    "QuizUpdate",
    "QuizzesListResponse",
    "StudyProgress",
    "StudyProgressCreate",
    "StudyProgressCreateRequest",
    "StudyProgressListResponse",
    "StudyProgressUpdate",
    "StudySet",
    "StudySetCreate",
    "StudySetCreateRequest",
    "StudySetUpdate",
    "StudySetsListResponse",
    "User",
    "UserCreate",
    "UserLoginRequest",
    "UserRegisterRequest",
    "UserResponse",
    "UserUpdate",
    "UserUpdateRequest",
]
