# server/models/card.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Text, DateTime
from . import Base


def _utcnow():
    return datetime.now(timezone.utc)


# -------------------------------
# Card Model
# -------------------------------

class Card(Base):
    """
    A blog card. The slug is derived from the title and unique across cards.
    """
    __tablename__ = "cards"

    id = Column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    content = Column(Text, nullable=False)
    image = Column(String, nullable=False)
    category = Column(String, nullable=False)
    author = Column(String, nullable=False)
    read_time = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
