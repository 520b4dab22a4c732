# diarias/core/models.py
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

# A tabela 'diarias' no Supabase tem as colunas:
#   id (uuid), militar_nome (text), valor (numeric), created_at (timestamptz)
# id e created_at são atribuídos pelo banco na inserção.


def parse_created_at(raw: Union[str, datetime, None]) -> Optional[datetime]:
    """Converte o created_at vindo do Supabase (ISO-8601) em datetime com fuso."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        parsed = raw
    else:
        parsed = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Diaria:
    id: str
    militar_nome: str
    valor: float
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Diaria":
        """Monta uma Diaria a partir de uma linha retornada pelo Supabase."""
        return cls(
            id=str(row["id"]),
            militar_nome=row.get("militar_nome") or "",
            valor=float(row.get("valor") or 0),
            created_at=parse_created_at(row.get("created_at")),
        )


@dataclass(frozen=True)
class ResumoMilitar:
    nome: str
    quantidade: int
    total: float
