"""Visit domain model — maps to the 'visits' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from organiza.infrastructure.database import Base


class Visit(Base):
    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    project_id = Column(Integer, nullable=True)  # project created from this visit

    # Local wall-clock time, see organiza.core.clock
    date = Column(DateTime, nullable=False, index=True)
    status = Column(String(50), nullable=False, default="pendente")  # pendente, realizada, cancelada, orçamento
    summary = Column(Text, nullable=False)
    photos = Column(JSON, nullable=False, default=list)

    budget_amount = Column(Numeric(12, 2), nullable=True)
    budget_pdf_url = Column(String(1000), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client = relationship("Client", back_populates="visits")

    def __repr__(self):
        return f"<Visit {self.id} - {self.date} ({self.status})>"
