"""SQLAlchemy ORM models for the threshold settings store"""

from sqlalchemy import Column, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ExpiryThresholdSettings(Base):
    """Persisted expiry thresholds for one profile"""

    __tablename__ = "expiry_threshold_settings"

    profile_id = Column(Text, primary_key=True)
    warning_days = Column(Integer, nullable=False)
    expiring_days = Column(Integer, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
