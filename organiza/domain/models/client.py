"""Client domain model — maps to the 'clients' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from organiza.infrastructure.database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(200), nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    address = Column(String(500), nullable=False)
    preferences = Column(Text, nullable=True)
    cpf = Column(String(14), nullable=True)
    birthday = Column(String(5), nullable=True)  # DD/MM

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    projects = relationship("Project", back_populates="client")
    visits = relationship("Visit", back_populates="client")

    def __repr__(self):
        return f"<Client {self.id} - {self.name}>"
