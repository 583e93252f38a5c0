"""SQLAlchemy model for the boards consulted during link derivation."""

from sqlalchemy import Column, String

from boardnotify.infrastructure.database import Base, table_name


class BoardModel(Base):
    """Database representation of a board."""

    __tablename__ = table_name("boards")

    id = Column(String(36), primary_key=True)
    title = Column(String(255), nullable=False, default="")


__all__ = ["BoardModel"]
