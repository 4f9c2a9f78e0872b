# components/forms.py  (campos e avisos do cadastro)
from __future__ import annotations
from typing import Callable, Optional
import flet as ft

from components.masks import mask_cpf, mask_date

# ----------------- util -----------------
def _safe_update(ctrl: ft.Control) -> None:
    try:
        ctrl.update()
    except AssertionError:
        # controle ainda não está na página (primeira pintura / testes)
        pass

# ----------------- componentes visuais -----------------
def FieldRow(label: str, control: ft.Control, width: int | None = None) -> ft.Container:
    return ft.Container(
        width=width,
        content=ft.Column(
            spacing=4,
            controls=[
                ft.Text(label, size=12, color=ft.Colors.ON_SURFACE_VARIANT),
                control,
            ],
        ),
    )

def snack_ok(page: ft.Page, msg: str) -> None:
    page.open(ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.GREEN_600))

def snack_err(page: ft.Page, msg: str) -> None:
    page.open(ft.SnackBar(content=ft.Text(msg), bgcolor=ft.Colors.ERROR))

def set_error(tf: ft.TextField, msg: Optional[str]) -> None:
    tf.error_text = msg or None
    _safe_update(tf)

# ----------------- inputs -----------------
def text_input(value: str = "", label: str = "", width: int | None = None,
               on_value: Optional[Callable[[str], str]] = None, **kw) -> ft.TextField:
    tf = ft.TextField(label=label, value=value or "", width=width, dense=True, **kw)
    if on_value:
        tf.on_change = lambda e: on_value(tf.value or "")
    return tf

def _masked_input(tf: ft.TextField, apply: Callable[[str], str]) -> ft.TextField:
    """
    Liga a máscara ao on_change: o valor digitado passa por `apply`
    e o retorno volta para o campo.
    """
    def _mask(e=None):
        new = apply(tf.value or "")
        if (tf.value or "") != new:
            tf.value = new
            _safe_update(tf)
    tf.on_change = _mask
    _mask(None)
    return tf

def cpf_input(label: str = "CPF (xxx.xxx.xxx-xx)", value: str = "", width: int | None = None,
              on_value: Callable[[str], str] = mask_cpf) -> ft.TextField:
    tf = ft.TextField(label=label, value=value or "", width=width,
                      keyboard_type=ft.KeyboardType.NUMBER, max_length=14, dense=True)
    return _masked_input(tf, on_value)

def date_input(label: str = "Data de Nascimento (DD/MM/AAAA)", value: str = "", width: int | None = None,
               on_value: Callable[[str], str] = mask_date) -> ft.TextField:
    tf = ft.TextField(label=label, value=value or "", width=width,
                      keyboard_type=ft.KeyboardType.NUMBER, max_length=10, dense=True)
    return _masked_input(tf, on_value)
