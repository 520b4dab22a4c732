# diarias/core/state.py
import logging
from typing import Callable, Optional, Tuple

from supabase import Client

from diarias.config import DIARIAS_TABLE, SALDO_MENSAL
from diarias.core import db, summary
from diarias.core.models import Diaria, ResumoMilitar
from diarias.utils.text_utils import is_blank, normalize_name, parse_valor, valor_to_input

logger = logging.getLogger(__name__)

CONFIRMAR_EXCLUSAO = "Tem certeza que deseja excluir esta diária?"


def _sem_alerta(message: str) -> None:
    logger.warning("Alerta sem canal de exibição: %s", message)


def _sem_confirmacao(message: str) -> bool:
    return False


class DiariasController:
    """Estado da página de diárias.

    Guarda a última lista lida do Supabase, os campos dos formulários (nova
    diária, filtros e edição) e calcula as visões derivadas (lista filtrada,
    totais e resumo por militar). Toda alteração no banco é seguida de uma
    nova leitura completa da lista.

    `alert(mensagem)` mostra um erro ao usuário e `confirm(mensagem)` pede uma
    confirmação sim/não; quem monta o controller decide como entregá-los.
    """

    def __init__(self, supabase_client: Client,
                 saldo_mensal: float = SALDO_MENSAL,
                 alert: Optional[Callable[[str], None]] = None,
                 confirm: Optional[Callable[[str], bool]] = None,
                 table: str = DIARIAS_TABLE):
        self.supabase_client = supabase_client
        self.saldo_mensal = saldo_mensal
        self.alert = alert or _sem_alerta
        self.confirm = confirm or _sem_confirmacao
        self.table = table

        self.diarias: Tuple[Diaria, ...] = ()
        self.loading = False

        # Formulário de nova diária
        self.novo_militar = ""
        self.novo_valor = ""

        # Filtros
        self.filtro_militar = ""
        self.filtro_valor_min = ""
        self.filtro_valor_max = ""

        # Edição (uma diária por vez)
        self.editando_id: Optional[str] = None
        self.edit_militar = ""
        self.edit_valor = ""

    # --- Carregamento ---
    def carregar(self) -> None:
        self.loading = True
        try:
            self.diarias = tuple(db.list_diarias(self.supabase_client, table=self.table))
        except db.StoreError as e:
            logger.error("Erro ao carregar: %s", e.message)
        finally:
            self.loading = False

    # --- Inserção ---
    def inserir(self) -> None:
        valor = parse_valor(self.novo_valor)
        if is_blank(self.novo_militar) or valor is None:
            return

        militar_nome = normalize_name(self.novo_militar)
        try:
            db.add_diaria(self.supabase_client, militar_nome, valor, table=self.table)
        except db.StoreError as e:
            self.alert("Erro ao inserir: " + e.message)
            return

        logger.info("Diária inserida: %s %.2f", militar_nome, valor)
        self.novo_militar = ""
        self.novo_valor = ""
        self.carregar()

    # --- Exclusão ---
    def excluir(self, diaria_id: str) -> None:
        if not self.confirm(CONFIRMAR_EXCLUSAO):
            return

        try:
            db.delete_diaria(self.supabase_client, diaria_id, table=self.table)
        except db.StoreError as e:
            self.alert("Erro ao excluir: " + e.message)
            return

        logger.info("Diária excluída: %s", diaria_id)
        self.carregar()

    # --- Edição ---
    def iniciar_edicao(self, diaria: Diaria) -> None:
        self.editando_id = diaria.id
        self.edit_militar = diaria.militar_nome
        self.edit_valor = valor_to_input(diaria.valor)

    def salvar_edicao(self, diaria_id: str) -> None:
        valor = parse_valor(self.edit_valor)
        if valor is None:
            self.alert("Erro ao atualizar: valor inválido")
            return

        militar_nome = normalize_name(self.edit_militar)
        try:
            db.update_diaria(self.supabase_client, diaria_id, militar_nome, valor, table=self.table)
        except db.StoreError as e:
            self.alert("Erro ao atualizar: " + e.message)
            return

        logger.info("Diária atualizada: %s -> %s %.2f", diaria_id, militar_nome, valor)
        self.editando_id = None
        self.carregar()

    def cancelar_edicao(self) -> None:
        self.editando_id = None
        self.edit_militar = ""
        self.edit_valor = ""

    def buscar(self, diaria_id: str) -> Optional[Diaria]:
        return next((d for d in self.diarias if d.id == diaria_id), None)

    # --- Filtros ---
    def limpar_filtros(self) -> None:
        self.filtro_militar = ""
        self.filtro_valor_min = ""
        self.filtro_valor_max = ""

    @property
    def tem_filtros(self) -> bool:
        return bool(self.filtro_militar or self.filtro_valor_min or self.filtro_valor_max)

    # --- Visões derivadas ---
    @property
    def diarias_filtradas(self) -> Tuple[Diaria, ...]:
        return summary.filtrar_diarias(
            self.diarias,
            self.filtro_militar,
            parse_valor(self.filtro_valor_min) if self.filtro_valor_min else None,
            parse_valor(self.filtro_valor_max) if self.filtro_valor_max else None,
        )

    @property
    def total_gasto(self) -> float:
        return summary.total_gasto(self.diarias)

    @property
    def saldo_disponivel(self) -> float:
        return summary.saldo_disponivel(self.saldo_mensal, self.total_gasto)

    @property
    def percentual_gasto(self) -> float:
        return summary.percentual_gasto(self.total_gasto, self.saldo_mensal)

    @property
    def resumo_por_militar(self) -> Tuple[ResumoMilitar, ...]:
        return summary.resumo_por_militar(self.diarias_filtradas)
