from sqlalchemy import Column, Integer, String, DateTime, Text, Index
from .base import Base, now_utc


class GuestbookMessage(Base):
    __tablename__ = 'guestbook_messages'
    id = Column(Integer, primary_key=True, autoincrement=True)
    author_name = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_guestbook_messages_created_at', 'created_at'),
    )

    def __repr__(self):
        return f"<GuestbookMessage id={self.id} author_name={self.author_name!r}>"
