# diarias/core/db.py
import logging
from typing import List, Union

from supabase import create_client, Client

from diarias.config import SUPABASE_URL, SUPABASE_KEY, DIARIAS_TABLE
from diarias.core.models import Diaria

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Falha em qualquer operação do Supabase (rede, autenticação ou consulta)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def wrap(cls, error: Exception) -> "StoreError":
        # APIError do postgrest traz a mensagem do banco em .message
        message = getattr(error, "message", None) or str(error)
        return cls(message)


def get_supabase_client() -> Client:
    """Retorna uma instância do cliente Supabase."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


# --- Funções para Diárias ---
def list_diarias(supabase_client: Client, table: str = DIARIAS_TABLE) -> List[Diaria]:
    """Obtém todas as diárias, da mais recente para a mais antiga."""
    try:
        response = supabase_client.table(table).select("*").order("created_at", desc=True).execute()
    except Exception as e:
        logger.error("Erro ao obter diárias do Supabase: %s", e)
        raise StoreError.wrap(e) from e
    return [Diaria.from_row(row) for row in response.data or []]


def add_diaria(supabase_client: Client, militar_nome: str, valor: float,
               table: str = DIARIAS_TABLE) -> Union[Diaria, None]:
    """Insere uma nova diária. id e created_at são gerados pelo Supabase."""
    try:
        response = supabase_client.table(table).insert({
            "militar_nome": militar_nome,
            "valor": valor,
        }).execute()
    except Exception as e:
        logger.error("Erro ao inserir diária no Supabase: %s", e)
        raise StoreError.wrap(e) from e
    if not response.data:
        return None
    return Diaria.from_row(response.data[0])


def update_diaria(supabase_client: Client, diaria_id: str, militar_nome: str, valor: float,
                  table: str = DIARIAS_TABLE) -> None:
    """Atualiza nome e valor de uma diária."""
    try:
        supabase_client.table(table).update({
            "militar_nome": militar_nome,
            "valor": valor,
        }).eq("id", diaria_id).execute()
    except Exception as e:
        logger.error("Erro ao atualizar diária %s no Supabase: %s", diaria_id, e)
        raise StoreError.wrap(e) from e


def delete_diaria(supabase_client: Client, diaria_id: str, table: str = DIARIAS_TABLE) -> None:
    """Exclui uma diária pelo id."""
    try:
        supabase_client.table(table).delete().eq("id", diaria_id).execute()
    except Exception as e:
        logger.error("Erro ao excluir diária %s do Supabase: %s", diaria_id, e)
        raise StoreError.wrap(e) from e
