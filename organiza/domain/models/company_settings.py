"""Company settings — a single row with branding shown in the UI header."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from organiza.infrastructure.database import Base


class CompanySettings(Base):
    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String(200), nullable=False, default="Minha Empresa")
    logo_url = Column(String(1000), nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<CompanySettings {self.company_name}>"
