"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from viewcounter.adapters.persistence.database import Base


class ViewCounterModel(Base):
    __tablename__ = "view_counters"

    # host + path; paths can be long, hosts up to 253 chars
    key: Mapped[str] = mapped_column(String(2048), primary_key=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )
