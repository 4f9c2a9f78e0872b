# === components/validators.py ===
from __future__ import annotations
import re
from datetime import date
from typing import Optional

from components.masks import only_digits, CPF_LEN
from services import settings

_date_rx = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

def _check_digit(digits: str, weight: int) -> int:
    soma = sum(int(ch) * (weight - i) for i, ch in enumerate(digits))
    resto = 11 - (soma % 11)
    return 0 if resto in (10, 11) else resto

def is_valid_cpf(s: str) -> bool:
    d = only_digits(s)
    if len(d) != CPF_LEN:
        return False
    # 000.000.000-00, 111.111.111-11... passam na conta mas não existem
    if d == d[0] * CPF_LEN:
        return False
    if _check_digit(d[:9], 10) != int(d[9]):
        return False
    return _check_digit(d[:10], 11) == int(d[10])

def parse_date(s: str) -> Optional[date]:
    """dd/mm/aaaa -> date; None se o texto não for uma data real do calendário."""
    m = _date_rx.fullmatch(s or "")
    if not m:
        return None
    dia, mes, ano = (int(g) for g in m.groups())
    # anos 0000-0099 não são aceitos (viram 19xx em calendários legados)
    if ano < 100:
        return None
    try:
        # date() recusa 31/04, 29/02 fora de ano bissexto, 31/02...
        return date(ano, mes, dia)
    except ValueError:
        return None

def is_valid_date(s: str, today: Optional[date] = None) -> bool:
    """Data de nascimento: formato exato, data existente e não futura."""
    d = parse_date(s)
    if d is None:
        return False
    if today is None:
        today = settings.today()
    return d <= today
