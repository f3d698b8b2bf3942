from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Build(Base):
    """Latest stat snapshot and derived CV for one character slot."""

    __tablename__ = "builds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    character_pk: Mapped[int] = mapped_column(
        ForeignKey("characters.id"), nullable=False, unique=True
    )
    crit_rate: Mapped[float] = mapped_column(Float, nullable=False)
    crit_dmg: Mapped[float] = mapped_column(Float, nullable=False)
    atk: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    spd: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    cv: Mapped[float] = mapped_column(Float, nullable=False)
    build_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (Index("ix_builds_cv", "cv"),)
