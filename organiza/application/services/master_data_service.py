"""Master data service — option vocabularies and company settings."""

from typing import Dict, List, Tuple

import structlog
from sqlalchemy.orm import Session

from organiza.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from organiza.domain.models.company_settings import CompanySettings
from organiza.domain.models.master_data import MasterDataItem
from organiza.domain.schemas.master_data import CompanySettingsUpdate

logger = structlog.get_logger(__name__)

DEFAULT_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "visit_status": ("pendente", "realizada", "cancelada", "orçamento"),
    "project_status": ("A iniciar", "Em andamento", "Pausado", "Atrasado", "Concluído", "Cancelado"),
    "payment_status": ("pendente", "pago", "parcialmente pago"),
    "payment_instrument": ("Pix", "Dinheiro", "Cartão de Crédito", "Cartão de Débito", "Transferência"),
    "photo_type": ("camera", "upload"),
}


def list_options(db: Session, kind: str) -> List[MasterDataItem]:
    return (
        db.query(MasterDataItem)
        .filter(MasterDataItem.kind == kind)
        .order_by(MasterDataItem.id)
        .all()
    )


def add_option(db: Session, kind: str, name: str) -> MasterDataItem:
    name = name.strip()
    exists = db.query(MasterDataItem).filter(MasterDataItem.kind == kind, MasterDataItem.name == name).first()
    if exists:
        raise BusinessRuleViolationException("Opção já cadastrada", {"kind": kind, "name": name})

    item = MasterDataItem(kind=kind, name=name)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Master data option added", kind=kind, name=name)
    return item


def delete_option(db: Session, kind: str, item_id: int) -> None:
    item = db.query(MasterDataItem).filter(MasterDataItem.kind == kind, MasterDataItem.id == item_id).first()
    if item is None:
        raise EntityNotFoundException("Opção não encontrada", {"kind": kind, "id": item_id})
    db.delete(item)
    db.commit()


def seed_master_data(db: Session) -> int:
    """Insert the default vocabularies for kinds that have no options yet."""
    created = 0
    for kind, names in DEFAULT_OPTIONS.items():
        if db.query(MasterDataItem.id).filter(MasterDataItem.kind == kind).first():
            continue
        db.add_all(MasterDataItem(kind=kind, name=name) for name in names)
        created += len(names)
    db.commit()
    return created


def get_company_settings(db: Session) -> CompanySettings:
    settings_row = db.query(CompanySettings).first()
    if settings_row is None:
        settings_row = CompanySettings(company_name="Minha Empresa")
        db.add(settings_row)
        db.commit()
        db.refresh(settings_row)
    return settings_row


def update_company_settings(db: Session, data: CompanySettingsUpdate) -> CompanySettings:
    settings_row = get_company_settings(db)
    settings_row.company_name = data.company_name
    settings_row.logo_url = data.logo_url
    db.commit()
    db.refresh(settings_row)
    return settings_row
