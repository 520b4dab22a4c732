# diarias/utils/formatting.py
from datetime import datetime
from typing import Optional, Union

from babel.dates import format_datetime, get_timezone
from babel.numbers import format_currency

from diarias.config import TIMEZONE

LOCALE = "pt_BR"
MOEDA = "BRL"
FORMATO_DATA = "dd/MM/yyyy, HH:mm"


def formatar_reais(valor: Union[float, int, None]) -> str:
    """Formata um valor em reais. Ex: 1234.5 -> 'R$ 1.234,50'"""
    return format_currency(float(valor or 0), MOEDA, locale=LOCALE)


def formatar_data(data: Optional[datetime], tz: Optional[str] = None) -> str:
    """Formata o created_at de uma diária no fuso configurado. Ex: '10/07/2025, 09:30'"""
    if data is None:
        return ""
    return format_datetime(
        data, FORMATO_DATA, tzinfo=get_timezone(tz or TIMEZONE), locale=LOCALE
    )
