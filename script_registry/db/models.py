"""SQLAlchemy ORM models."""
import enum
import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from script_registry.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class ScriptCategory(str, enum.Enum):
    SOFTWARE = "software"
    SECURITY = "security"
    CONFIGURATION = "configuration"
    COMMAND = "command"


_CATEGORY_VALUES = ", ".join(f"'{category.value}'" for category in ScriptCategory)


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, unique=True)

    assignments = relationship(
        "ScriptAssignment",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Script(Base):
    __tablename__ = "scripts"
    __table_args__ = (
        CheckConstraint(f"category IN ({_CATEGORY_VALUES})", name="ck_scripts_category"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    command = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(20), nullable=False)
    is_global = Column(Boolean, nullable=False, default=False)
    auto_enrollment = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)

    assignments = relationship(
        "ScriptAssignment",
        back_populates="script",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ScriptAssignment(Base):
    __tablename__ = "script_customers"

    script_id = Column(
        String(36),
        ForeignKey("scripts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    customer_id = Column(
        String(64),
        ForeignKey("customers.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    script = relationship("Script", back_populates="assignments")
    customer = relationship("Customer", back_populates="assignments")
