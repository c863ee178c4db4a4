"""Pydantic schemas used by the HTTP API."""
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from script_registry.db.models import ScriptCategory


class CustomerCreate(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class CustomerResponse(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ScriptPayload(BaseModel):
    """Request body for creating or replacing a script.

    Category stays a plain string here so that unknown values reach the
    service and are rejected with the registry's own validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    command: Optional[str] = None
    description: Optional[str] = ""
    category: Optional[str] = None
    is_global: Optional[bool] = Field(default=False, validation_alias=AliasChoices("isGlobal", "is_global"))
    auto_enrollment: Optional[bool] = Field(
        default=False,
        validation_alias=AliasChoices("autoEnrollment", "auto_enrollment"),
    )
    customers: Optional[list[str]] = Field(
        default=None,
        validation_alias=AliasChoices("customers", "customerIds", "customer_ids"),
    )


class ScriptResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    command: str
    description: str
    category: ScriptCategory
    is_global: bool = Field(
        validation_alias=AliasChoices("isGlobal", "is_global"),
        serialization_alias="isGlobal",
    )
    auto_enrollment: bool = Field(
        validation_alias=AliasChoices("autoEnrollment", "auto_enrollment"),
        serialization_alias="autoEnrollment",
    )
    customers: list[str]
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        serialization_alias="updatedAt",
    )


class SuccessResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime
