"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Column, DateTime, String, Text

from bank_notifications.infrastructure.database import Base


class NotificationModel(Base):
    """Database representation of one notification revision."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True)
    recipient = Column(String(320), nullable=False)
    message = Column(Text, nullable=False)
    channel = Column(String(10), nullable=False)
    priority = Column(String(10), nullable=False)
    state = Column(String(10), nullable=False, index=True)
    cost = Column(String(20), nullable=False, default="0")
    created_at = Column(DateTime(), nullable=False)
    sent_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
