"""Database models."""

import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studyhub.database import Base


class StudyCategory(str, enum.Enum):
    """Subject categories a study set can be filed under."""

    BIOLOGY = "biology"
    COMPUTER_SCIENCE = "computer_science"
    HISTORY = "history"
    MATHEMATICS = "mathematics"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    LITERATURE = "literature"
    LANGUAGES = "languages"
    OTHER = "other"


class User(Base):
    """Account owning study sets and progress records."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    study_sets: Mapped[list["StudySet"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="StudySet.id"
    )
    progress: Mapped[list["StudyProgress"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="StudyProgress.id"
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, username='{self.username}')>"


class StudySet(Base):
    """A titled collection of study material in one subject category."""

    __tablename__ = "study_sets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[StudyCategory] = mapped_column(
        Enum(
            StudyCategory,
            name="study_category",
            values_callable=lambda members: [member.value for member in members],
            create_constraint=True,
        ),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="study_sets")
    flashcards: Mapped[list["Flashcard"]] = relationship(
        back_populates="study_set", cascade="all, delete-orphan", order_by="Flashcard.id"
    )
    quizzes: Mapped[list["Quiz"]] = relationship(
        back_populates="study_set", cascade="all, delete-orphan", order_by="Quiz.id"
    )
    notes: Mapped[list["Note"]] = relationship(
        back_populates="study_set", cascade="all, delete-orphan", order_by="Note.id"
    )
    progress: Mapped[list["StudyProgress"]] = relationship(
        back_populates="study_set", cascade="all, delete-orphan", order_by="StudyProgress.id"
    )

    def __repr__(self) -> str:
        """String representation of StudySet."""
        return f"<StudySet(id={self.id}, title='{self.title}', category='{self.category.value}')>"


class Flashcard(Base):
    """Question/answer card with review counters."""

    __tablename__ = "flashcards"
    __table_args__ = (
        CheckConstraint("times_reviewed >= 0", name="ck_flashcards_times_reviewed_non_negative"),
        CheckConstraint("times_correct >= 0", name="ck_flashcards_times_correct_non_negative"),
        CheckConstraint(
            "times_correct <= times_reviewed", name="ck_flashcards_correct_within_reviewed"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    study_set_id: Mapped[int] = mapped_column(
        ForeignKey("study_sets.id", ondelete="CASCADE"), index=True, nullable=False
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    times_reviewed: Mapped[int] = mapped_column(default=0, server_default="0", nullable=False)
    times_correct: Mapped[int] = mapped_column(default=0, server_default="0", nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    study_set: Mapped[StudySet] = relationship(back_populates="flashcards")

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, question='{self.question[:50]}...')>"


class Quiz(Base):
    """Quiz attached to a study set."""

    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    study_set_id: Mapped[int] = mapped_column(
        ForeignKey("study_sets.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    study_set: Mapped[StudySet] = relationship(back_populates="quizzes")


class Note(Base):
    """Free-form note attached to a study set."""

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    study_set_id: Mapped[int] = mapped_column(
        ForeignKey("study_sets.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    study_set: Mapped[StudySet] = relationship(back_populates="notes")


class StudyProgress(Base):
    """Record of a user studying a study set."""

    __tablename__ = "study_progress"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    study_set_id: Mapped[int] = mapped_column(
        ForeignKey("study_sets.id", ondelete="CASCADE"), index=True, nullable=False
    )
    last_studied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="progress")
    study_set: Mapped[StudySet] = relationship(back_populates="progress")
