import enum
from sqlalchemy import Column, Integer, String, Boolean, Date, Enum
from app.core.database import Base
from app.models.mixins import SoftDeleteMixin, TimestampMixin


class UpdateCategory(str, enum.Enum):
    """
    Section of the site a job update is listed under.

    - LATEST_JOB: New recruitment notification
    - ADMIT_CARD: Hall ticket / admit card release
    - ANSWER_KEY: Provisional or final answer key
    - RESULT: Exam result or merit list
    """
    LATEST_JOB = "LATEST_JOB"
    ADMIT_CARD = "ADMIT_CARD"
    ANSWER_KEY = "ANSWER_KEY"
    RESULT = "RESULT"


class JobUpdate(SoftDeleteMixin, TimestampMixin, Base):
    """
    A job posting or one of its follow-up notices (admit card, answer key,
    result). Soft-deleted rows stay in the table with deleted_at set.
    """
    __tablename__ = "job_updates"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    category = Column(Enum(UpdateCategory), default=UpdateCategory.LATEST_JOB, nullable=False, index=True)

    organization = Column(String(255), nullable=True, index=True)
    post_name = Column(String(255), nullable=True)
    qualification = Column(String(255), nullable=True)
    description = Column(String, nullable=True)
    total_vacancies = Column(Integer, nullable=True)

    start_date = Column(Date, nullable=True)
    last_date = Column(Date, nullable=True)
    official_link = Column(String(500), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<JobUpdate(id={self.id}, title='{self.title}', category={self.category.value})>"
