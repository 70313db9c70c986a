from sqlalchemy import Column, Integer, String, DateTime, Text, Index
from .base import Base, now_utc


class Video(Base):
    __tablename__ = 'videos'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    video_url = Column(Text, nullable=False)
    thumbnail_url = Column(Text, nullable=True)
    uploaded_by = Column(String(100), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_videos_uploaded_at', 'uploaded_at'),
    )

    def __repr__(self):
        return f"<Video id={self.id} title={self.title!r}>"
