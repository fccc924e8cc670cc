"""Master data — option vocabularies shown in create/edit forms."""

from sqlalchemy import Column, Integer, String, DateTime, UniqueConstraint
from sqlalchemy.sql import func

from organiza.infrastructure.database import Base


class MasterDataItem(Base):
    __tablename__ = "master_data_items"
    __table_args__ = (UniqueConstraint("kind", "name", name="uq_master_data_kind_name"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(String(50), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<MasterDataItem {self.kind}: {self.name}>"
