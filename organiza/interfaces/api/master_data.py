"""Master data API — option lists and company settings."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from organiza.application.services.master_data_service import (
    add_option,
    delete_option,
    get_company_settings,
    list_options,
    update_company_settings,
)
from organiza.domain.models.user import User
from organiza.domain.schemas.master_data import (
    CompanySettingsRead,
    CompanySettingsUpdate,
    MasterDataItemCreate,
    MasterDataItemRead,
    MasterDataKind,
)
from organiza.infrastructure.database import get_db
from organiza.interfaces.api.deps import get_current_user, require_admin

router = APIRouter(prefix="/api", tags=["Master Data"])


@router.get("/master-data/{kind}", response_model=List[MasterDataItemRead])
def get_options(kind: MasterDataKind, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return list_options(db, kind)


@router.post("/master-data/{kind}", response_model=MasterDataItemRead, status_code=status.HTTP_201_CREATED)
def post_option(
    kind: MasterDataKind,
    body: MasterDataItemCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return add_option(db, kind, body.name)


@router.delete("/master-data/{kind}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_option(
    kind: MasterDataKind,
    item_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    delete_option(db, kind, item_id)


@router.get("/settings/company", response_model=CompanySettingsRead)
def read_company_settings(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return get_company_settings(db)


@router.put("/settings/company", response_model=CompanySettingsRead)
def put_company_settings(
    body: CompanySettingsUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return update_company_settings(db, body)
