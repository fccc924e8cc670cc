"""Project and Payment domain models — 'projects' and 'payments' tables."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from organiza.infrastructure.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    visit_id = Column(Integer, ForeignKey("visits.id"), nullable=True)

    name = Column(String(300), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(100), nullable=False, default="A iniciar")
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    value = Column(Numeric(12, 2), nullable=False)
    payment_method = Column(String(20), nullable=False, default="vista")  # vista, parcelado
    payment_instrument = Column(String(100), nullable=True)

    photos_before = Column(JSON, nullable=False, default=list)
    photos_after = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    client = relationship("Client", back_populates="projects")
    payments = relationship(
        "Payment",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Payment.id",
    )

    @property
    def payment_status(self) -> str:
        from organiza.application.services.payment_plan import derive_payment_status
        return derive_payment_status(self.payments)

    def __repr__(self):
        return f"<Project {self.id} - {self.name}>"


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default="pendente")  # pendente, pago
    due_date = Column(Date, nullable=True)
    description = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    project = relationship("Project", back_populates="payments")

    def __repr__(self):
        return f"<Payment {self.id} - {self.amount} ({self.status})>"
