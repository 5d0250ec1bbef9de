"""SQLAlchemy ORM models."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Developer profile model."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(
            "experience_years >= 0 AND experience_years <= 50",
            name="ck_profiles_experience_years",
        ),
        CheckConstraint(
            "hourly_rate >= 0 AND hourly_rate <= 1000",
            name="ck_profiles_hourly_rate",
        ),
        UniqueConstraint("email", name="uq_profiles_email"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(100), nullable=False)
    experience_years: Mapped[int] = mapped_column(Integer, nullable=False)
    available_for_work: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    hourly_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    # Relationships
    skills: Mapped[list["ProfileSkillModel"]] = relationship(
        "ProfileSkillModel",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ProfileSkillModel.position",
        lazy="selectin",
    )


class ProfileSkillModel(Base):
    """One skill of a profile (composite PK on profile_id + position)."""

    __tablename__ = "profile_skills"

    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    # Relationships
    profile: Mapped["ProfileModel"] = relationship(
        "ProfileModel",
        back_populates="skills",
    )
