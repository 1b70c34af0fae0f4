"""Storage backed by the relational database through SQLAlchemy."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import pydantic
import structlog
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from studyhub import repositories, schemas
from studyhub.database import Database
from studyhub.exceptions import (
    ConnectivityError,
    ConstraintError,
    DuplicateUsernameError,
    MissingParentError,
)
from studyhub.repositories.base_repository import Repository
from studyhub.storage.protocol import Payload
from studyhub.validation import parse_payload, update_changes

logger = structlog.get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def _translate_integrity_error(error: IntegrityError, entity: str, username: str | None) -> ConstraintError:
    detail = str(error.orig).lower()
    if username is not None and "username" in detail:
        return DuplicateUsernameError(username)
    if "foreign key" in detail:
        return MissingParentError(entity)
    return ConstraintError(f"Cannot save {entity}: {error.orig}")


class DatabaseStorage:
    """
    Storage over a relational database.

    Every operation runs in its own session and transaction and returns
    its pooled connection before returning. Referential integrity,
    uniqueness and cascades are enforced by the store and the ORM
    relationships declared in ``studyhub.models``.
    """

    def __init__(self, database: Database) -> None:
        """Initialize storage with the database handle."""
        self.database = database

    @contextmanager
    def _session(self, entity: str, username: str | None = None) -> Iterator[Session]:
        try:
            with self.database.session() as db:
                yield db
        except IntegrityError as e:
            logger.info("constraint_violation", entity=entity, error=str(e.orig))
            raise _translate_integrity_error(e, entity, username) from e
        except (OperationalError, PoolTimeoutError) as e:
            logger.error("database_unavailable", entity=entity, error=str(e))
            raise ConnectivityError() from e

    def _get(
        self, repo_cls: type[Repository], schema: type[SchemaT], entity_id: int
    ) -> SchemaT | None:
        with self._session(schema.__name__) as db:
            entity = repo_cls(db).get_by_id(entity_id)
            return schema.model_validate(entity) if entity is not None else None

    def _list(
        self, fetch: Callable[[Session], list], schema: type[SchemaT]
    ) -> list[SchemaT]:
        with self._session(schema.__name__) as db:
            return [schema.model_validate(entity) for entity in fetch(db)]

    def _create(
        self,
        repo_cls: type[Repository],
        shape: type[pydantic.BaseModel],
        schema: type[SchemaT],
        payload: pydantic.BaseModel | Payload,
    ) -> SchemaT:
        fields = parse_payload(shape, payload).model_dump()
        with self._session(schema.__name__, fields.get("username")) as db:
            repo = repo_cls(db)
            missing = repo.find_missing_parent(fields)
            if missing is not None:
                raise MissingParentError(schema.__name__, *missing)
            return schema.model_validate(repo.create(**fields))

    def _update(
        self,
        repo_cls: type[Repository],
        shape: type[pydantic.BaseModel],
        schema: type[SchemaT],
        entity_id: int,
        changes: pydantic.BaseModel | Payload,
    ) -> SchemaT | None:
        fields = update_changes(parse_payload(shape, changes))
        with self._session(schema.__name__, fields.get("username")) as db:
            repo = repo_cls(db)
            entity = repo.update(entity_id, **fields) if fields else repo.get_by_id(entity_id)
            return schema.model_validate(entity) if entity is not None else None

    def _delete(self, repo_cls: type[Repository], entity: str, entity_id: int) -> bool:
        with self._session(entity) as db:
            return repo_cls(db).delete(entity_id)

    # Users

    def get_user(self, user_id: int) -> schemas.User | None:
        return self._get(repositories.UserRepository, schemas.User, user_id)

    def get_user_by_username(self, username: str) -> schemas.User | None:
        with self._session("User") as db:
            user = repositories.UserRepository(db).get_by_username(username)
            return schemas.User.model_validate(user) if user is not None else None

    def create_user(self, payload: schemas.UserCreate | Payload) -> schemas.User:
        return self._create(repositories.UserRepository, schemas.UserCreate, schemas.User, payload)

    def update_user(
        self, user_id: int, changes: schemas.UserUpdate | Payload
    ) -> schemas.User | None:
        return self._update(
            repositories.UserRepository, schemas.UserUpdate, schemas.User, user_id, changes
        )

    def delete_user(self, user_id: int) -> bool:
        """Delete a user with all of their study sets, the sets' contents and progress."""
        return self._delete(repositories.UserRepository, "User", user_id)

    # Study sets

    def get_study_set(self, study_set_id: int) -> schemas.StudySet | None:
        return self._get(repositories.StudySetRepository, schemas.StudySet, study_set_id)

    def get_study_sets_by_user(self, user_id: int) -> list[schemas.StudySet]:
        return self._list(
            lambda db: repositories.StudySetRepository(db).get_by_user_id(user_id),
            schemas.StudySet,
        )

    def create_study_set(self, payload: schemas.StudySetCreate | Payload) -> schemas.StudySet:
        return self._create(
            repositories.StudySetRepository, schemas.StudySetCreate, schemas.StudySet, payload
        )

    def update_study_set(
        self, study_set_id: int, changes: schemas.StudySetUpdate | Payload
    ) -> schemas.StudySet | None:
        return self._update(
            repositories.StudySetRepository,
            schemas.StudySetUpdate,
            schemas.StudySet,
            study_set_id,
            changes,
        )

    def delete_study_set(self, study_set_id: int) -> bool:
        """Delete a study set with its flashcards, quizzes, notes and progress."""
        return self._delete(repositories.StudySetRepository, "StudySet", study_set_id)

    # Flashcards

    def get_flashcard(self, flashcard_id: int) -> schemas.Flashcard | None:
        return self._get(repositories.FlashcardRepository, schemas.Flashcard, flashcard_id)

    def get_flashcards_by_study_set(self, study_set_id: int) -> list[schemas.Flashcard]:
        return self._list(
            lambda db: repositories.FlashcardRepository(db).get_by_study_set_id(study_set_id),
            schemas.Flashcard,
        )

    def create_flashcard(self, payload: schemas.FlashcardCreate | Payload) -> schemas.Flashcard:
        return self._create(
            repositories.FlashcardRepository, schemas.FlashcardCreate, schemas.Flashcard, payload
        )

    def update_flashcard(
        self, flashcard_id: int, changes: schemas.FlashcardUpdate | Payload
    ) -> schemas.Flashcard | None:
        return self._update(
            repositories.FlashcardRepository,
            schemas.FlashcardUpdate,
            schemas.Flashcard,
            flashcard_id,
            changes,
        )

    def record_flashcard_review(
        self, flashcard_id: int, *, correct: bool
    ) -> schemas.Flashcard | None:
        with self._session("Flashcard") as db:
            flashcard = repositories.FlashcardRepository(db).record_review(
                flashcard_id, correct=correct
            )
            return schemas.Flashcard.model_validate(flashcard) if flashcard is not None else None

    def delete_flashcard(self, flashcard_id: int) -> bool:
        return self._delete(repositories.FlashcardRepository, "Flashcard", flashcard_id)

    # Quizzes

    def get_quiz(self, quiz_id: int) -> schemas.Quiz | None:
        return self._get(repositories.QuizRepository, schemas.Quiz, quiz_id)

    def get_quizzes_by_study_set(self, study_set_id: int) -> list[schemas.Quiz]:
        return self._list(
            lambda db: repositories.QuizRepository(db).get_by_study_set_id(study_set_id),
            schemas.Quiz,
        )

    def create_quiz(self, payload: schemas.QuizCreate | Payload) -> schemas.Quiz:
        return self._create(repositories.QuizRepository, schemas.QuizCreate, schemas.Quiz, payload)

    def update_quiz(
        self, quiz_id: int, changes: schemas.QuizUpdate | Payload
    ) -> schemas.Quiz | None:
        return self._update(
            repositories.QuizRepository, schemas.QuizUpdate, schemas.Quiz, quiz_id, changes
        )

    def delete_quiz(self, quiz_id: int) -> bool:
        return self._delete(repositories.QuizRepository, "Quiz", quiz_id)

    # Notes

    def get_note(self, note_id: int) -> schemas.Note | None:
        return self._get(repositories.NoteRepository, schemas.Note, note_id)

    def get_notes_by_study_set(self, study_set_id: int) -> list[schemas.Note]:
        return self._list(
            lambda db: repositories.NoteRepository(db).get_by_study_set_id(study_set_id),
            schemas.Note,
        )

    def create_note(self, payload: schemas.NoteCreate | Payload) -> schemas.Note:
        return self._create(repositories.NoteRepository, schemas.NoteCreate, schemas.Note, payload)

    def update_note(
        self, note_id: int, changes: schemas.NoteUpdate | Payload
    ) -> schemas.Note | None:
        return self._update(
            repositories.NoteRepository, schemas.NoteUpdate, schemas.Note, note_id, changes
        )

    def delete_note(self, note_id: int) -> bool:
        return self._delete(repositories.NoteRepository, "Note", note_id)

    # Study progress

    def get_progress(self, progress_id: int) -> schemas.StudyProgress | None:
        return self._get(repositories.StudyProgressRepository, schemas.StudyProgress, progress_id)

    def get_progress_by_user(self, user_id: int) -> list[schemas.StudyProgress]:
        return self._list(
            lambda db: repositories.StudyProgressRepository(db).get_by_user_id(user_id),
            schemas.StudyProgress,
        )

    def create_progress(
        self, payload: schemas.StudyProgressCreate | Payload
    ) -> schemas.StudyProgress:
        return self._create(
            repositories.StudyProgressRepository,
            schemas.StudyProgressCreate,
            schemas.StudyProgress,
            payload,
        )

    def update_progress(
        self, progress_id: int, changes: schemas.StudyProgressUpdate | Payload | None = None
    ) -> schemas.StudyProgress | None:
        """Refresh ``last_studied_at`` of a progress record."""
        parse_payload(schemas.StudyProgressUpdate, changes or {})
        with self._session("StudyProgress") as db:
            progress = repositories.StudyProgressRepository(db).touch(progress_id)
            return schemas.StudyProgress.model_validate(progress) if progress is not None else None

    def delete_progress(self, progress_id: int) -> bool:
        return self._delete(repositories.StudyProgressRepository, "StudyProgress", progress_id)
