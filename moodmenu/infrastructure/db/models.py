from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    Integer,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from moodmenu.core.auth import Role

from .base import Base

DEFAULT_RECIPE_IMAGE = "🍽️"


class Mood(str, enum.Enum):
    """Closed set of moods a recipe can be filed under."""

    HAPPY = "happy"
    SAD = "sad"
    ENERGETIC = "energetic"
    RELAXED = "relaxed"
    ADVENTUROUS = "adventurous"


class UserModel(Base):
    """SQLAlchemy model for users table."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    # Login key; stored as given, comparisons are case-sensitive
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", values_callable=lambda e: [x.value for x in e]),
        default=Role.USER,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role.value})>"


class RecipeModel(Base):
    """SQLAlchemy model for recipes table."""

    __tablename__ = "recipes"
    __table_args__ = (CheckConstraint("servings > 0", name="ck_recipes_servings_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    mood: Mapped[Mood] = mapped_column(
        Enum(Mood, name="recipe_mood", values_callable=lambda e: [x.value for x in e]),
        nullable=False,
        index=True,
    )
    ingredients: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    prep_time: Mapped[str] = mapped_column(String(64), nullable=False)
    servings: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_RECIPE_IMAGE)

    # Soft-delete marker: hidden recipes stay in the table
    visible: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default=text("true"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<RecipeModel(id={self.id}, name={self.name}, mood={self.mood.value})>"
