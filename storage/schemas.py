"""SQLAlchemy schemas for goals, objectives and tasks."""

from __future__ import annotations

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base."""


class WeeklyGoalRecord(Base):
    """Weekly goals table, one row per ISO week."""

    __tablename__ = "weekly_goals"
    __table_args__ = (UniqueConstraint("week", "year", name="uq_weekly_goals_week_year"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text)
    week: Mapped[int] = mapped_column(Integer)
    year: Mapped[int] = mapped_column(Integer)


class DailyObjectiveRecord(Base):
    """Daily objectives table, one row per calendar day."""

    __tablename__ = "daily_objectives"
    __table_args__ = (
        UniqueConstraint("day_of_year", "year", name="uq_daily_objectives_day_year"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text)
    day_of_year: Mapped[int] = mapped_column(Integer)
    year: Mapped[int] = mapped_column(Integer)


class TaskRecord(Base):
    """Tasks table."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(1), default="T", server_default="T", index=True)  # T/D/S/X
    day_of_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
