"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import BigInteger, Boolean, Column, String, Text
from sqlalchemy.sql import expression

from boardnotify.infrastructure.database import Base, table_name


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = table_name("notifications")

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    message = Column(Text, nullable=False)
    from_user = Column(String(255), nullable=False)
    create_at = Column(BigInteger, nullable=False)
    read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    link = Column(String(512), nullable=False, default="")
    board_id = Column(String(36), nullable=False, default="")
    card_id = Column(String(36), nullable=False, default="")


__all__ = ["NotificationModel"]
