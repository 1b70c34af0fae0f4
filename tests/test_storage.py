"""Contract tests run against every storage implementation."""

import pytest

from studyhub import schemas
from studyhub.exceptions import ConstraintError, MissingParentError, ValidationError
from studyhub.models import StudyCategory
from studyhub.storage import StorageProtocol


class TestUsers:
    """Test suite for user operations."""

    def test_create_user_assigns_id_and_timestamp(self, storage: StorageProtocol) -> None:
        user = storage.create_user({"username": "alice", "password": "hash"})

        assert user.id > 0
        assert user.username == "alice"
        assert user.password == "hash"
        assert user.created_at is not None

    def test_get_user(self, storage: StorageProtocol, test_user: schemas.User) -> None:
        fetched = storage.get_user(test_user.id)

        assert fetched == test_user

    def test_get_user_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.get_user(99999) is None

    def test_get_user_by_username(self, storage: StorageProtocol, test_user: schemas.User) -> None:
        assert storage.get_user_by_username("testuser") == test_user
        assert storage.get_user_by_username("nobody") is None

    def test_duplicate_username_is_rejected(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        """Test that a colliding username fails and leaves the original row unchanged."""
        with pytest.raises(ConstraintError):
            storage.create_user({"username": "testuser", "password": "other"})

        assert storage.get_user(test_user.id) == test_user
        assert storage.get_user_by_username("testuser") == test_user

    def test_update_user(self, storage: StorageProtocol, test_user: schemas.User) -> None:
        updated = storage.update_user(test_user.id, {"username": "renamed"})

        assert updated is not None
        assert updated.username == "renamed"
        assert updated.password == test_user.password
        assert storage.get_user_by_username("testuser") is None

    def test_update_user_to_taken_username_is_rejected(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        other = storage.create_user({"username": "bob", "password": "hash"})

        with pytest.raises(ConstraintError):
            storage.update_user(other.id, {"username": "testuser"})

        assert storage.get_user(other.id) == other

    def test_update_user_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.update_user(99999, {"username": "ghost"}) is None

    def test_create_user_missing_password_fails_validation(self, storage: StorageProtocol) -> None:
        with pytest.raises(ValidationError):
            storage.create_user({"username": "alice"})


class TestStudySets:
    """Test suite for study set operations."""

    def test_create_study_set(self, storage: StorageProtocol, test_user: schemas.User) -> None:
        study_set = storage.create_study_set(
            {"user_id": test_user.id, "title": "Algorithms", "category": "computer_science"}
        )

        assert study_set.id > 0
        assert study_set.user_id == test_user.id
        assert study_set.title == "Algorithms"
        assert study_set.description is None
        assert study_set.category is StudyCategory.COMPUTER_SCIENCE

    def test_create_study_set_for_missing_user_creates_nothing(
        self, storage: StorageProtocol
    ) -> None:
        with pytest.raises(MissingParentError) as exc_info:
            storage.create_study_set({"user_id": 4242, "title": "Orphan", "category": "history"})

        assert exc_info.value.entity == "StudySet"
        assert exc_info.value.parent == "User"
        assert exc_info.value.parent_id == 4242
        assert storage.get_study_sets_by_user(4242) == []

    @pytest.mark.parametrize("user_id", ["1", True, 1.0])
    def test_create_study_set_with_non_integer_owner_fails_validation(
        self, storage: StorageProtocol, test_user: schemas.User, user_id: object
    ) -> None:
        assert test_user.id == 1

        with pytest.raises(ValidationError):
            storage.create_study_set({"user_id": user_id, "title": "Set", "category": "history"})

        assert storage.get_study_sets_by_user(test_user.id) == []

    def test_create_study_set_with_unknown_category_fails_validation(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        with pytest.raises(ValidationError):
            storage.create_study_set(
                {"user_id": test_user.id, "title": "Songs", "category": "music"}
            )

        assert storage.get_study_sets_by_user(test_user.id) == []

    def test_study_sets_listed_in_insertion_order(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        titles = ["Zoology", "Algebra", "Mechanics"]
        for title, category in zip(titles, ["biology", "mathematics", "physics"], strict=True):
            storage.create_study_set({"user_id": test_user.id, "title": title, "category": category})

        listed = storage.get_study_sets_by_user(test_user.id)

        assert [study_set.title for study_set in listed] == titles

    def test_list_for_user_without_study_sets_is_empty(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        assert storage.get_study_sets_by_user(test_user.id) == []

    def test_update_study_set_partial(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        updated = storage.update_study_set(test_study_set.id, {"category": "chemistry"})

        assert updated is not None
        assert updated.category is StudyCategory.CHEMISTRY
        assert updated.title == test_study_set.title
        assert updated.description == test_study_set.description

    def test_update_study_set_clears_description(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        updated = storage.update_study_set(test_study_set.id, {"description": None})

        assert updated is not None
        assert updated.description is None

    def test_update_study_set_with_unknown_category_fails_validation(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        with pytest.raises(ValidationError):
            storage.update_study_set(test_study_set.id, {"category": "music"})

        assert storage.get_study_set(test_study_set.id) == test_study_set

    def test_update_study_set_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.update_study_set(99999, {"title": "Nothing"}) is None


class TestFlashcards:
    """Test suite for flashcard operations."""

    def test_create_flashcard_starts_with_zero_counters(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        created = storage.create_flashcard(
            {"question": "What is ATP?", "answer": "Energy currency", "study_set_id": test_study_set.id}
        )

        fetched = storage.get_flashcard(created.id)

        assert fetched is not None
        assert fetched.question == "What is ATP?"
        assert fetched.answer == "Energy currency"
        assert fetched.category is None
        assert fetched.times_reviewed == 0
        assert fetched.times_correct == 0

    def test_client_supplied_counters_are_ignored(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        flashcard = storage.create_flashcard(
            {
                "id": 777,
                "question": "Q",
                "answer": "A",
                "study_set_id": test_study_set.id,
                "times_reviewed": 10,
                "times_correct": 10,
            }
        )

        assert flashcard.id != 777
        assert flashcard.times_reviewed == 0
        assert flashcard.times_correct == 0

    def test_create_flashcard_for_missing_study_set(self, storage: StorageProtocol) -> None:
        with pytest.raises(ConstraintError):
            storage.create_flashcard({"question": "Q", "answer": "A", "study_set_id": 4242})

        assert storage.get_flashcards_by_study_set(4242) == []

    def test_create_flashcard_with_wrong_type_fails_validation(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        with pytest.raises(ValidationError):
            storage.create_flashcard(
                {"question": ["not", "text"], "answer": "A", "study_set_id": test_study_set.id}
            )

    @pytest.mark.parametrize("study_set_id", ["1", True])
    def test_create_with_non_integer_study_set_fails_validation(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet, study_set_id: object
    ) -> None:
        assert test_study_set.id == 1

        with pytest.raises(ValidationError):
            storage.create_flashcard({"question": "Q", "answer": "A", "study_set_id": study_set_id})
        with pytest.raises(ValidationError):
            storage.create_quiz({"study_set_id": study_set_id, "title": "Quiz"})
        with pytest.raises(ValidationError):
            storage.create_note({"study_set_id": study_set_id, "title": "N", "content": "C"})
        with pytest.raises(ValidationError):
            storage.create_progress({"user_id": 1, "study_set_id": study_set_id})

        assert storage.get_flashcards_by_study_set(test_study_set.id) == []
        assert storage.get_quizzes_by_study_set(test_study_set.id) == []
        assert storage.get_notes_by_study_set(test_study_set.id) == []
        assert storage.get_progress_by_user(1) == []

    def test_record_review_counts_outcomes(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        flashcard = storage.create_flashcard(
            {"question": "Q", "answer": "A", "study_set_id": test_study_set.id}
        )

        storage.record_flashcard_review(flashcard.id, correct=True)
        storage.record_flashcard_review(flashcard.id, correct=False)
        reviewed = storage.record_flashcard_review(flashcard.id, correct=True)

        assert reviewed is not None
        assert reviewed.times_reviewed == 3
        assert reviewed.times_correct == 2
        assert storage.get_flashcard(flashcard.id) == reviewed

    def test_record_review_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.record_flashcard_review(99999, correct=True) is None

    def test_update_flashcard_keeps_counters(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        flashcard = storage.create_flashcard(
            {"question": "Q", "answer": "A", "study_set_id": test_study_set.id}
        )
        storage.record_flashcard_review(flashcard.id, correct=True)

        updated = storage.update_flashcard(
            flashcard.id, {"answer": "Better answer", "times_reviewed": 0}
        )

        assert updated is not None
        assert updated.answer == "Better answer"
        assert updated.question == "Q"
        assert updated.times_reviewed == 1
        assert updated.times_correct == 1

    def test_delete_flashcard_twice_is_idempotent(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        flashcard = storage.create_flashcard(
            {"question": "Q", "answer": "A", "study_set_id": test_study_set.id}
        )

        assert storage.delete_flashcard(flashcard.id) is True
        assert storage.delete_flashcard(flashcard.id) is False
        assert storage.get_flashcard(flashcard.id) is None

    def test_delete_missing_flashcard_is_noop(self, storage: StorageProtocol) -> None:
        assert storage.delete_flashcard(99999) is False


class TestQuizzes:
    """Test suite for quiz operations."""

    def test_create_and_list_quizzes(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        first = storage.create_quiz({"study_set_id": test_study_set.id, "title": "Midterm"})
        second = storage.create_quiz({"study_set_id": test_study_set.id, "title": "Final"})

        assert first.created_at is not None
        assert storage.get_quizzes_by_study_set(test_study_set.id) == [first, second]

    def test_update_quiz_keeps_creation_timestamp(
        self, storage: StorageProtocol, test_study_set: schemas.StudySet
    ) -> None:
        quiz = storage.create_quiz({"study_set_id": test_study_set.id, "title": "Draft"})

        updated = storage.update_quiz(
            quiz.id, {"title": "Weekly quiz", "created_at": "2000-01-01T00:00:00"}
        )

        assert updated is not None
        assert updated.title == "Weekly quiz"
        assert updated.created_at == quiz.created_at

    def test_create_quiz_for_missing_study_set(self, storage: StorageProtocol) -> None:
        with pytest.raises(ConstraintError):
            storage.create_quiz({"study_set_id": 4242, "title": "Orphan"})

    def test_delete_quiz(self, storage: StorageProtocol, test_study_set: schemas.StudySet) -> None:
        quiz = storage.create_quiz({"study_set_id": test_study_set.id, "title": "Midterm"})

        assert storage.delete_quiz(quiz.id) is True
        assert storage.get_quiz(quiz.id) is None
        assert storage.delete_quiz(quiz.id) is False


class TestNotes:
    """Test suite for note operations."""

    def test_note_lifecycle(self, storage: StorageProtocol, test_study_set: schemas.StudySet) -> None:
        note = storage.create_note(
            {"study_set_id": test_study_set.id, "title": "Mitosis", "content": "Prophase first"}
        )
        assert storage.get_notes_by_study_set(test_study_set.id) == [note]

        updated = storage.update_note(note.id, {"content": "Prophase, metaphase"})
        assert updated is not None
        assert updated.title == "Mitosis"
        assert updated.content == "Prophase, metaphase"

        assert storage.delete_note(note.id) is True
        assert storage.get_note(note.id) is None

    def test_update_note_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.update_note(99999, {"title": "Nothing"}) is None


class TestStudyProgress:
    """Test suite for study progress operations."""

    def test_progress_lifecycle(
        self,
        storage: StorageProtocol,
        test_user: schemas.User,
        test_study_set: schemas.StudySet,
    ) -> None:
        progress = storage.create_progress(
            {"user_id": test_user.id, "study_set_id": test_study_set.id}
        )

        assert progress.last_studied_at is not None
        assert storage.get_progress_by_user(test_user.id) == [progress]

        touched = storage.update_progress(progress.id)
        assert touched is not None
        assert touched.last_studied_at >= progress.last_studied_at

        assert storage.delete_progress(progress.id) is True
        assert storage.get_progress(progress.id) is None

    def test_create_progress_for_missing_study_set(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        with pytest.raises(MissingParentError) as exc_info:
            storage.create_progress({"user_id": test_user.id, "study_set_id": 4242})

        assert (exc_info.value.parent, exc_info.value.parent_id) == ("StudySet", 4242)
        assert storage.get_progress_by_user(test_user.id) == []

    def test_update_progress_not_found_returns_none(self, storage: StorageProtocol) -> None:
        assert storage.update_progress(99999) is None


class TestCascadeDelete:
    """Test suite for cascading deletes."""

    def test_delete_user_removes_everything_beneath(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        s1 = storage.create_study_set({"user_id": test_user.id, "title": "S1", "category": "history"})
        s2 = storage.create_study_set({"user_id": test_user.id, "title": "S2", "category": "other"})
        f1 = storage.create_flashcard({"question": "Q1", "answer": "A1", "study_set_id": s1.id})
        f2 = storage.create_flashcard({"question": "Q2", "answer": "A2", "study_set_id": s1.id})
        quiz = storage.create_quiz({"study_set_id": s2.id, "title": "Quiz"})
        note = storage.create_note({"study_set_id": s2.id, "title": "Note", "content": "Text"})
        progress = storage.create_progress({"user_id": test_user.id, "study_set_id": s1.id})

        assert storage.delete_user(test_user.id) is True

        assert storage.get_user(test_user.id) is None
        assert storage.get_study_set(s1.id) is None
        assert storage.get_study_set(s2.id) is None
        assert storage.get_flashcard(f1.id) is None
        assert storage.get_flashcard(f2.id) is None
        assert storage.get_quiz(quiz.id) is None
        assert storage.get_note(note.id) is None
        assert storage.get_progress(progress.id) is None
        assert storage.get_study_sets_by_user(test_user.id) == []

    def test_delete_study_set_removes_its_contents_only(
        self, storage: StorageProtocol, test_user: schemas.User
    ) -> None:
        doomed = storage.create_study_set(
            {"user_id": test_user.id, "title": "Doomed", "category": "physics"}
        )
        kept = storage.create_study_set(
            {"user_id": test_user.id, "title": "Kept", "category": "physics"}
        )
        doomed_card = storage.create_flashcard(
            {"question": "Q", "answer": "A", "study_set_id": doomed.id}
        )
        kept_card = storage.create_flashcard({"question": "Q", "answer": "A", "study_set_id": kept.id})
        doomed_progress = storage.create_progress(
            {"user_id": test_user.id, "study_set_id": doomed.id}
        )
        kept_progress = storage.create_progress({"user_id": test_user.id, "study_set_id": kept.id})

        assert storage.delete_study_set(doomed.id) is True

        assert storage.get_flashcard(doomed_card.id) is None
        assert storage.get_progress(doomed_progress.id) is None
        assert storage.get_flashcard(kept_card.id) == kept_card
        assert storage.get_progress_by_user(test_user.id) == [kept_progress]
        assert storage.get_user(test_user.id) == test_user

    def test_delete_missing_user_is_noop(self, storage: StorageProtocol) -> None:
        assert storage.delete_user(99999) is False


def test_implementations_satisfy_protocol(storage: StorageProtocol) -> None:
    assert isinstance(storage, StorageProtocol)
