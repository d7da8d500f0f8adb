from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from datetime import date, datetime
from enum import Enum


class UpdateCategoryEnum(str, Enum):
    """Section a job update is listed under"""
    LATEST_JOB = "LATEST_JOB"
    ADMIT_CARD = "ADMIT_CARD"
    ANSWER_KEY = "ANSWER_KEY"
    RESULT = "RESULT"


class JobUpdateBase(BaseModel):
    organization: Optional[str] = Field(None, max_length=255)
    post_name: Optional[str] = Field(None, max_length=255)
    qualification: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    total_vacancies: Optional[int] = Field(None, ge=0)
    start_date: Optional[date] = None
    last_date: Optional[date] = None
    official_link: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.last_date and self.last_date < self.start_date:
            raise ValueError("last_date cannot be before start_date")
        return self


class JobUpdateCreate(JobUpdateBase):
    """Schema for creating a job update"""
    title: str = Field(..., min_length=1, max_length=255)
    category: UpdateCategoryEnum = UpdateCategoryEnum.LATEST_JOB


class JobUpdateUpdate(JobUpdateBase):
    """
    Schema for partial updates. Only fields present in the request body are
    written; an empty body is rejected by the CRUD layer.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[UpdateCategoryEnum] = None

    @field_validator("title", "category", "is_active")
    @classmethod
    def reject_null(cls, v):
        # Omitting a field leaves it untouched; an explicit null is never valid here
        if v is None:
            raise ValueError("field cannot be null")
        return v


class JobUpdateResponse(BaseModel):
    """Schema for job update response"""
    id: int
    title: str
    category: UpdateCategoryEnum
    organization: Optional[str] = None
    post_name: Optional[str] = None
    qualification: Optional[str] = None
    description: Optional[str] = None
    total_vacancies: Optional[int] = None
    start_date: Optional[date] = None
    last_date: Optional[date] = None
    official_link: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobUpdatePage(BaseModel):
    """One page of job updates plus paging metadata"""
    rows: List[JobUpdateResponse]
    count: int
    total_pages: int
    current_page: int
