"""In-memory storage with the same contract as the database storage."""

import itertools
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pydantic
import structlog

from studyhub import schemas
from studyhub.exceptions import DuplicateUsernameError, MissingParentError
from studyhub.storage.protocol import Payload
from studyhub.validation import parse_payload, update_changes

logger = structlog.get_logger(__name__)


@dataclass
class _Table:
    """Rows of one entity keyed by id, plus its reference rules."""

    entity: str
    schema: type[pydantic.BaseModel]
    # foreign key column -> referenced table
    parents: dict[str, str] = field(default_factory=dict)
    # child table -> foreign key column in that table
    children: dict[str, str] = field(default_factory=dict)
    rows: dict[int, dict[str, Any]] = field(default_factory=dict)
    ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))


def _now() -> datetime:
    return datetime.now(UTC)


class MemoryStorage:
    """
    Storage kept in process memory.

    Mirrors the relational schema: ids auto-increment, references are
    checked on insert, usernames are unique and deletes cascade children
    first. A single lock makes each operation atomic, so no partially
    cascaded state is ever visible.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tables: dict[str, _Table] = {
            "users": _Table(
                "User",
                schemas.User,
                children={"study_sets": "user_id", "progress": "user_id"},
            ),
            "study_sets": _Table(
                "StudySet",
                schemas.StudySet,
                parents={"user_id": "users"},
                children={
                    "flashcards": "study_set_id",
                    "quizzes": "study_set_id",
                    "notes": "study_set_id",
                    "progress": "study_set_id",
                },
            ),
            "flashcards": _Table("Flashcard", schemas.Flashcard, parents={"study_set_id": "study_sets"}),
            "quizzes": _Table("Quiz", schemas.Quiz, parents={"study_set_id": "study_sets"}),
            "notes": _Table("Note", schemas.Note, parents={"study_set_id": "study_sets"}),
            "progress": _Table(
                "StudyProgress",
                schemas.StudyProgress,
                parents={"user_id": "users", "study_set_id": "study_sets"},
            ),
        }

    def _get(self, name: str, entity_id: int) -> Any:  # noqa: ANN401
        table = self._tables[name]
        with self._lock:
            row = table.rows.get(entity_id)
            return table.schema.model_validate(row) if row is not None else None

    def _list(self, name: str, column: str, value: int) -> list[Any]:
        table = self._tables[name]
        with self._lock:
            return [
                table.schema.model_validate(row)
                for _, row in sorted(table.rows.items())
                if row[column] == value
            ]

    def _check_references(self, table: _Table, row: dict[str, Any]) -> None:
        for column, parent_name in table.parents.items():
            parent = self._tables[parent_name]
            if row[column] not in parent.rows:
                raise MissingParentError(table.entity, parent.entity, row[column])

    def _check_username(self, username: str, user_id: int | None = None) -> None:
        for existing_id, row in self._tables["users"].rows.items():
            if row["username"] == username and existing_id != user_id:
                raise DuplicateUsernameError(username)

    def _insert(self, name: str, fields: dict[str, Any]) -> Any:  # noqa: ANN401
        table = self._tables[name]
        with self._lock:
            self._check_references(table, fields)
            if name == "users":
                self._check_username(fields["username"])
            row_id = next(table.ids)
            row = {"id": row_id, **fields}
            table.rows[row_id] = row
            logger.info("entity_created", entity=table.entity, id=row_id)
            return table.schema.model_validate(row)

    def _apply(self, name: str, entity_id: int, fields: dict[str, Any]) -> Any:  # noqa: ANN401
        table = self._tables[name]
        with self._lock:
            row = table.rows.get(entity_id)
            if row is None:
                return None
            if "username" in fields:
                self._check_username(fields["username"], entity_id)
            row.update(fields)
            if fields:
                logger.info(
                    "entity_updated", entity=table.entity, id=entity_id, fields=sorted(fields)
                )
            return table.schema.model_validate(row)

    def _collect_cascade(self, name: str, entity_id: int, doomed: list[tuple[str, int]]) -> None:
        for child_name, column in self._tables[name].children.items():
            for child_id, child in list(self._tables[child_name].rows.items()):
                if child[column] == entity_id and (child_name, child_id) not in doomed:
                    self._collect_cascade(child_name, child_id, doomed)
        if (name, entity_id) not in doomed:
            doomed.append((name, entity_id))

    def _delete(self, name: str, entity_id: int) -> bool:
        with self._lock:
            if entity_id not in self._tables[name].rows:
                return False
            doomed: list[tuple[str, int]] = []
            self._collect_cascade(name, entity_id, doomed)
            for doomed_name, doomed_id in doomed:
                self._tables[doomed_name].rows.pop(doomed_id, None)
            logger.info(
                "entity_deleted",
                entity=self._tables[name].entity,
                id=entity_id,
                cascaded=len(doomed) - 1,
            )
            return True

    # Users

    def get_user(self, user_id: int) -> schemas.User | None:
        return self._get("users", user_id)

    def get_user_by_username(self, username: str) -> schemas.User | None:
        with self._lock:
            for row in self._tables["users"].rows.values():
                if row["username"] == username:
                    return schemas.User.model_validate(row)
            return None

    def create_user(self, payload: schemas.UserCreate | Payload) -> schemas.User:
        fields = parse_payload(schemas.UserCreate, payload).model_dump()
        return self._insert("users", {**fields, "created_at": _now()})

    def update_user(
        self, user_id: int, changes: schemas.UserUpdate | Payload
    ) -> schemas.User | None:
        return self._apply("users", user_id, update_changes(parse_payload(schemas.UserUpdate, changes)))

    def delete_user(self, user_id: int) -> bool:
        return self._delete("users", user_id)

    # Study sets

    def get_study_set(self, study_set_id: int) -> schemas.StudySet | None:
        return self._get("study_sets", study_set_id)

    def get_study_sets_by_user(self, user_id: int) -> list[schemas.StudySet]:
        return self._list("study_sets", "user_id", user_id)

    def create_study_set(self, payload: schemas.StudySetCreate | Payload) -> schemas.StudySet:
        fields = parse_payload(schemas.StudySetCreate, payload).model_dump()
        return self._insert("study_sets", {**fields, "created_at": _now()})

    def update_study_set(
        self, study_set_id: int, changes: schemas.StudySetUpdate | Payload
    ) -> schemas.StudySet | None:
        fields = update_changes(parse_payload(schemas.StudySetUpdate, changes))
        return self._apply("study_sets", study_set_id, fields)

    def delete_study_set(self, study_set_id: int) -> bool:
        return self._delete("study_sets", study_set_id)

    # Flashcards

    def get_flashcard(self, flashcard_id: int) -> schemas.Flashcard | None:
        return self._get("flashcards", flashcard_id)

    def get_flashcards_by_study_set(self, study_set_id: int) -> list[schemas.Flashcard]:
        return self._list("flashcards", "study_set_id", study_set_id)

    def create_flashcard(self, payload: schemas.FlashcardCreate | Payload) -> schemas.Flashcard:
        fields = parse_payload(schemas.FlashcardCreate, payload).model_dump()
        return self._insert(
            "flashcards",
            {**fields, "times_reviewed": 0, "times_correct": 0, "created_at": _now()},
        )

    def update_flashcard(
        self, flashcard_id: int, changes: schemas.FlashcardUpdate | Payload
    ) -> schemas.Flashcard | None:
        fields = update_changes(parse_payload(schemas.FlashcardUpdate, changes))
        return self._apply("flashcards", flashcard_id, fields)

    def record_flashcard_review(
        self, flashcard_id: int, *, correct: bool
    ) -> schemas.Flashcard | None:
        with self._lock:
            row = self._tables["flashcards"].rows.get(flashcard_id)
            if row is None:
                return None
            fields = {
                "times_reviewed": row["times_reviewed"] + 1,
                "times_correct": row["times_correct"] + (1 if correct else 0),
            }
            return self._apply("flashcards", flashcard_id, fields)

    def delete_flashcard(self, flashcard_id: int) -> bool:
        return self._delete("flashcards", flashcard_id)

    # Quizzes

    def get_quiz(self, quiz_id: int) -> schemas.Quiz | None:
        return self._get("quizzes", quiz_id)

    def get_quizzes_by_study_set(self, study_set_id: int) -> list[schemas.Quiz]:
        return self._list("quizzes", "study_set_id", study_set_id)

    def create_quiz(self, payload: schemas.QuizCreate | Payload) -> schemas.Quiz:
        fields = parse_payload(schemas.QuizCreate, payload).model_dump()
        return self._insert("quizzes", {**fields, "created_at": _now()})

    def update_quiz(
        self, quiz_id: int, changes: schemas.QuizUpdate | Payload
    ) -> schemas.Quiz | None:
        return self._apply("quizzes", quiz_id, update_changes(parse_payload(schemas.QuizUpdate, changes)))

    def delete_quiz(self, quiz_id: int) -> bool:
        return self._delete("quizzes", quiz_id)

    # Notes

    def get_note(self, note_id: int) -> schemas.Note | None:
        return self._get("notes", note_id)

    def get_notes_by_study_set(self, study_set_id: int) -> list[schemas.Note]:
        return self._list("notes", "study_set_id", study_set_id)

    def create_note(self, payload: schemas.NoteCreate | Payload) -> schemas.Note:
        fields = parse_payload(schemas.NoteCreate, payload).model_dump()
        return self._insert("notes", {**fields, "created_at": _now()})

    def update_note(
        self, note_id: int, changes: schemas.NoteUpdate | Payload
    ) -> schemas.Note | None:
        return self._apply("notes", note_id, update_changes(parse_payload(schemas.NoteUpdate, changes)))

    def delete_note(self, note_id: int) -> bool:
        return self._delete("notes", note_id)

    # Study progress

    def get_progress(self, progress_id: int) -> schemas.StudyProgress | None:
        return self._get("progress", progress_id)

    def get_progress_by_user(self, user_id: int) -> list[schemas.StudyProgress]:
        return self._list("progress", "user_id", user_id)

    def create_progress(
        self, payload: schemas.StudyProgressCreate | Payload
    ) -> schemas.StudyProgress:
        fields = parse_payload(schemas.StudyProgressCreate, payload).model_dump()
        return self._insert("progress", {**fields, "last_studied_at": _now()})

    def update_progress(
        self, progress_id: int, changes: schemas.StudyProgressUpdate | Payload | None = None
    ) -> schemas.StudyProgress | None:
        parse_payload(schemas.StudyProgressUpdate, changes or {})
        return self._apply("progress", progress_id, {"last_studied_at": _now()})

    def delete_progress(self, progress_id: int) -> bool:
        return self._delete("progress", progress_id)
