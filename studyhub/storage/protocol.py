"""Protocol for the data-access layer."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from studyhub import schemas

Payload = Mapping[str, Any]


@runtime_checkable
class StorageProtocol(Protocol):
    """
    Every operation the request handlers may perform on the store.

    Lookups and updates return ``None`` when the target does not exist.
    Deletes are idempotent and remove dependent rows atomically. Creates
    validate the payload before touching the store and raise
    ``ConstraintError`` on dangling references or duplicate usernames.
    """

    # Users
    def get_user(self, user_id: int) -> schemas.User | None: ...

    def get_user_by_username(self, username: str) -> schemas.User | None: ...

    def create_user(self, payload: schemas.UserCreate | Payload) -> schemas.User: ...

    def update_user(
        self, user_id: int, changes: schemas.UserUpdate | Payload
    ) -> schemas.User | None: ...

    def delete_user(self, user_id: int) -> bool: ...

    # Study sets
    def get_study_set(self, study_set_id: int) -> schemas.StudySet | None: ...

    def get_study_sets_by_user(self, user_id: int) -> list[schemas.StudySet]: ...

    def create_study_set(self, payload: schemas.StudySetCreate | Payload) -> schemas.StudySet: ...

    def update_study_set(
        self, study_set_id: int, changes: schemas.StudySetUpdate | Payload
    ) -> schemas.StudySet | None: ...

    def delete_study_set(self, study_set_id: int) -> bool: ...

    # Flashcards
    def get_flashcard(self, flashcard_id: int) -> schemas.Flashcard | None: ...

    def get_flashcards_by_study_set(self, study_set_id: int) -> list[schemas.Flashcard]: ...

    def create_flashcard(self, payload: schemas.FlashcardCreate | Payload) -> schemas.Flashcard: ...

    def update_flashcard(
        self, flashcard_id: int, changes: schemas.FlashcardUpdate | Payload
    ) -> schemas.Flashcard | None: ...

    def record_flashcard_review(
        self, flashcard_id: int, *, correct: bool
    ) -> schemas.Flashcard | None: ...

    def delete_flashcard(self, flashcard_id: int) -> bool: ...

    # Quizzes
    def get_quiz(self, quiz_id: int) -> schemas.Quiz | None: ...

    def get_quizzes_by_study_set(self, study_set_id: int) -> list[schemas.Quiz]: ...

    def create_quiz(self, payload: schemas.QuizCreate | Payload) -> schemas.Quiz: ...

    def update_quiz(
        self, quiz_id: int, changes: schemas.QuizUpdate | Payload
    ) -> schemas.Quiz | None: ...

    def delete_quiz(self, quiz_id: int) -> bool: ...

    # Notes
    def get_note(self, note_id: int) -> schemas.Note | None: ...

    def get_notes_by_study_set(self, study_set_id: int) -> list[schemas.Note]: ...

    def create_note(self, payload: schemas.NoteCreate | Payload) -> schemas.Note: ...

    def update_note(
        self, note_id: int, changes: schemas.NoteUpdate | Payload
    ) -> schemas.Note | None: ...

    def delete_note(self, note_id: int) -> bool: ...

    # Study progress
    def get_progress(self, progress_id: int) -> schemas.StudyProgress | None: ...

    def get_progress_by_user(self, user_id: int) -> list[schemas.StudyProgress]: ...

    def create_progress(
        self, payload: schemas.StudyProgressCreate | Payload
    ) -> schemas.StudyProgress: ...

    def update_progress(
        self, progress_id: int, changes: schemas.StudyProgressUpdate | Payload | None = None
    ) -> schemas.StudyProgress | None: ...

    def delete_progress(self, progress_id: int) -> bool: ...
