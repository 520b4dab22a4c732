# diarias/main.py
import logging
from datetime import date
from typing import Any, Mapping, Optional

from flask import Flask, flash, get_flashed_messages, redirect, render_template, request, url_for
from supabase import Client

from diarias import config
from diarias.core.db import get_supabase_client
from diarias.core.state import CONFIRMAR_EXCLUSAO, DiariasController
from diarias.utils.formatting import formatar_data, formatar_reais

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Mapping[str, Any]] = None,
               supabase_client: Optional[Client] = None) -> Flask:
    """Monta a aplicação Flask da página de diárias.

    `settings` sobrescreve os valores de diarias.config; `supabase_client`
    permite injetar um cliente já pronto (nos testes, um mock).
    """
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.FLASK_SECRET_KEY,
        SALDO_MENSAL=config.SALDO_MENSAL,
        DIARIAS_TABLE=config.DIARIAS_TABLE,
        TIMEZONE=config.TIMEZONE,
        LOG_LEVEL=config.LOG_LEVEL,
    )
    if settings:
        app.config.update(settings)

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=app.config["LOG_LEVEL"],
    )

    if supabase_client is None:
        supabase_client = get_supabase_client()
        logger.info("Cliente Supabase inicializado.")

    # Uma única página para um único operador: o estado vive junto da aplicação.
    controller = DiariasController(
        supabase_client,
        saldo_mensal=app.config["SALDO_MENSAL"],
        alert=lambda message: flash(message, "erro"),
        confirm=lambda message: request.form.get("confirmado") == "sim",
        table=app.config["DIARIAS_TABLE"],
    )
    app.extensions["diarias"] = controller
    controller.carregar()

    app.add_template_filter(formatar_reais, "reais")
    app.add_template_filter(lambda d: formatar_data(d, app.config["TIMEZONE"]), "data")

    def voltar():
        return redirect(url_for("index"))

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            c=controller,
            alertas=get_flashed_messages(category_filter=["erro"]),
            ano=date.today().year,
            confirmar_exclusao=CONFIRMAR_EXCLUSAO,
        )

    @app.route("/diarias", methods=["POST"])
    def inserir():
        controller.novo_militar = request.form.get("militar_nome", "")
        controller.novo_valor = request.form.get("valor", "")
        controller.inserir()
        return voltar()

    @app.route("/diarias/<diaria_id>/excluir", methods=["POST"])
    def excluir(diaria_id):
        controller.excluir(diaria_id)
        return voltar()

    @app.route("/diarias/<diaria_id>/editar", methods=["POST"])
    def editar(diaria_id):
        diaria = controller.buscar(diaria_id)
        if diaria is not None:
            controller.iniciar_edicao(diaria)
        return voltar()

    @app.route("/diarias/<diaria_id>/salvar", methods=["POST"])
    def salvar(diaria_id):
        controller.edit_militar = request.form.get("militar_nome", "")
        controller.edit_valor = request.form.get("valor", "")
        controller.salvar_edicao(diaria_id)
        return voltar()

    @app.route("/edicao/cancelar", methods=["POST"])
    def cancelar():
        controller.cancelar_edicao()
        return voltar()

    @app.route("/filtros")
    def filtrar():
        controller.filtro_militar = request.args.get("militar", "")
        controller.filtro_valor_min = request.args.get("valor_min", "")
        controller.filtro_valor_max = request.args.get("valor_max", "")
        return voltar()

    @app.route("/filtros/limpar", methods=["POST"])
    def limpar_filtros():
        controller.limpar_filtros()
        return voltar()

    @app.route("/recarregar", methods=["POST"])
    def recarregar():
        controller.carregar()
        return voltar()

    return app
