# diarias/utils/text_utils.py
import math
import re
from typing import Optional, Union

_NUMERO = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)([eE][+-]?\d+)?")


def normalize_name(s: str) -> str:
    """Nome do militar como é gravado: sem espaços nas pontas e em maiúsculas.
    Ex: "  joão silva " -> "JOÃO SILVA"
    """
    if not s:
        return ""
    return s.strip().upper()


def is_blank(s: Union[str, None]) -> bool:
    return s is None or not str(s).strip()


def parse_valor(s: Union[str, float, int, None]) -> Optional[float]:
    """Lê um valor digitado no formulário.

    Aceita vírgula ou ponto como separador decimal, expoente ("1e3" -> 1000.0)
    e, como um campo numérico do navegador, usa o prefixo numérico do texto
    ("12.5abc" -> 12.5).
    Retorna None quando não há número finito a ser lido.
    """
    if s is None:
        return None
    if isinstance(s, (int, float)):
        valor = float(s)
    else:
        match = _NUMERO.match(str(s).strip())
        if not match:
            return None
        valor = float(match.group(0).replace(",", "."))
    return valor if math.isfinite(valor) else None


def valor_to_input(valor: float) -> str:
    """Valor como aparece num campo numérico, sem perder casas decimais.
    Ex: 150.0 -> "150", 12.5 -> "12.5", 1e-07 -> "1e-07"
    """
    texto = repr(float(valor))
    return texto[:-2] if texto.endswith(".0") else texto
