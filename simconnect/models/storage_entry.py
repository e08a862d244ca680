from sqlalchemy import Column, String, Text
from simconnect.core.database import Base
from simconnect.models.base import TimestampMixin


class StorageEntry(Base, TimestampMixin):
    __tablename__ = "storage_entries"

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=False)
