"""Report service — spreadsheet exports of clients, visits and projects.

Handles:
- Flattening records into Portuguese-labelled rows
- Formatting dates as dd/mm/yyyy
- Writing a single-sheet .xlsx workbook in memory
"""

from datetime import date
from io import BytesIO
from typing import Any, Dict, List, Optional

import pandas as pd

from organiza.application.services.payment_plan import to_money
from organiza.application.services.visit_service import list_visits
from organiza.domain.repositories.client_repository import ClientRepository
from organiza.domain.repositories.project_repository import ProjectRepository
from organiza.domain.repositories.visit_repository import VisitRepository

SHEET_NAME = "Dados"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _fmt_date(value) -> str:
    return value.strftime("%d/%m/%Y") if value else ""


def to_xlsx(rows: List[Dict[str, Any]], columns: List[str]) -> bytes:
    """Render rows as an .xlsx workbook; an empty export still has its header."""
    df = pd.DataFrame(rows, columns=columns)
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
    return buffer.getvalue()


CLIENT_COLUMNS = ["Nome", "Telefone", "E-mail", "Endereço", "CPF", "Aniversário", "Preferências", "Data de Cadastro"]


def client_rows(repo: ClientRepository) -> List[Dict[str, Any]]:
    return [
        {
            "Nome": c.name,
            "Telefone": c.phone,
            "E-mail": c.email or "",
            "Endereço": c.address,
            "CPF": c.cpf or "",
            "Aniversário": c.birthday or "",
            "Preferências": c.preferences or "",
            "Data de Cadastro": _fmt_date(c.created_at),
        }
        for c in repo.list_all()
    ]


VISIT_COLUMNS = ["Data", "Hora", "Cliente", "Status", "Resumo", "Orçamento (R$)"]


def visit_rows(
    client_repo: ClientRepository,
    visit_repo: VisitRepository,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[Dict[str, Any]]:
    clients = {c.id: c.name for c in client_repo.list_all()}
    return [
        {
            "Data": _fmt_date(v.date),
            "Hora": v.date.strftime("%H:%M"),
            "Cliente": clients.get(v.client_id, "N/A"),
            "Status": v.status,
            "Resumo": v.summary,
            "Orçamento (R$)": float(to_money(v.budget_amount)) if v.budget_amount is not None else None,
        }
        for v in list_visits(visit_repo, start, end)
    ]


PROJECT_COLUMNS = [
    "Projeto", "Cliente", "Início", "Conclusão", "Status", "Valor (R$)",
    "Forma de Pagamento", "Status do Pagamento", "Recebido (R$)", "A Receber (R$)",
]


def project_rows(client_repo: ClientRepository, project_repo: ProjectRepository) -> List[Dict[str, Any]]:
    clients = {c.id: c.name for c in client_repo.list_all()}
    rows = []
    for p in project_repo.list_all():
        received = sum((to_money(x.amount) for x in p.payments if x.status == "pago"), to_money(0))
        outstanding = sum((to_money(x.amount) for x in p.payments if x.status == "pendente"), to_money(0))
        rows.append({
            "Projeto": p.name,
            "Cliente": clients.get(p.client_id, "N/A"),
            "Início": _fmt_date(p.start_date),
            "Conclusão": _fmt_date(p.end_date),
            "Status": p.status,
            "Valor (R$)": float(to_money(p.value)),
            "Forma de Pagamento": "À vista" if p.payment_method == "vista" else "Parcelado",
            "Status do Pagamento": p.payment_status,
            "Recebido (R$)": float(received),
            "A Receber (R$)": float(outstanding),
        })
    return rows
