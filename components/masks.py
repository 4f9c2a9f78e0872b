# === components/masks.py ===
import re

_re_digits = re.compile(r"[^0-9]+")

CPF_MASK = "###.###.###-##"
DATE_MASK = "##/##/####"
CPF_LEN = CPF_MASK.count("#")
DATE_LEN = DATE_MASK.count("#")

def only_digits(s: str) -> str:
    return _re_digits.sub("", s or "")

def apply_mask(s: str, pattern: str) -> str:
    """
    Preenche cada '#' do padrão com um dígito de `s`.
    - separador só entra quando ainda há dígito depois dele
    - dígitos que não cabem no padrão são descartados
    """
    digits = iter(only_digits(s)[:pattern.count("#")])
    out, pending = [], ""
    for ch in pattern:
        if ch != "#":
            pending += ch
            continue
        nxt = next(digits, None)
        if nxt is None:
            break
        out.append(pending + nxt)
        pending = ""
    return "".join(out)

def mask_cpf(s: str) -> str:
    """ddd.ddd.ddd-dd incremental (máx. 14 chars)."""
    return apply_mask(s, CPF_MASK)

def mask_date(s: str) -> str:
    """dd/mm/aaaa incremental (máx. 10 chars)."""
    return apply_mask(s, DATE_MASK)
