from sqlalchemy import Column, Integer, String, DateTime, Text, Index
from .base import Base, now_utc


class Photo(Base):
    __tablename__ = 'photos'
    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    # URL or storage path of the image
    file_path = Column(Text, nullable=False)
    uploaded_by = Column(String(100), nullable=False)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    __table_args__ = (
        Index('idx_photos_uploaded_at', 'uploaded_at'),
    )

    def __repr__(self):
        return f"<Photo id={self.id} filename={self.filename!r}>"
