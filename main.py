from __future__ import annotations
from pathlib import Path
import flet as ft

from components.forms import FieldRow, snack_ok, snack_err, set_error, text_input, cpf_input, date_input
from services import settings
from services.cadastro import PassengerForm, FULL_NAME, CPF, BIRTH_DATE
from services.log import log


# ======================== TEMA ========================
LIGHT = dict(
    BG="#F3F4F6", SURFACE="#FFFFFF", TEXT="#1F2937", ACCENT="#3B82F6",
)


# ======================== TELA ========================
def build(page: ft.Page, form: PassengerForm | None = None) -> ft.Control:
    T = LIGHT

    def _on_success(msg: str):
        snack_ok(page, msg)

    form = form or PassengerForm(on_success=_on_success)

    fields: dict[str, ft.TextField] = {}

    # limpa o erro do campo assim que o usuário volta a digitar nele
    def _edit(key: str, setter):
        def apply(value: str) -> str:
            out = setter(value)
            tf = fields.get(key)
            if tf is not None and tf.error_text:
                set_error(tf, None)
            return out
        return apply

    nome = text_input(label="Nome Completo", on_value=_edit(FULL_NAME, form.set_full_name))
    cpf  = cpf_input(on_value=_edit(CPF, form.set_cpf))
    nasc = date_input(on_value=_edit(BIRTH_DATE, form.set_birth_date))
    fields.update({FULL_NAME: nome, CPF: cpf, BIRTH_DATE: nasc})

    def cadastrar(e=None):
        errors = form.submit()
        for key, tf in fields.items():
            tf.error_text = errors.get(key)
        if errors:
            snack_err(page, "Corrija os campos destacados.")
        else:
            # o controlador já zerou o estado; espelha nos campos
            nome.value = form.state.full_name
            cpf.value = form.state.cpf
            nasc.value = form.state.birth_date
        page.update()

    btn = ft.ElevatedButton(
        "Cadastrar",
        width=380,
        bgcolor=T["ACCENT"],
        color=ft.Colors.WHITE,
        on_click=cadastrar,
    )

    return ft.Container(
        expand=True,
        bgcolor=T["BG"],
        alignment=ft.alignment.center,
        padding=16,
        content=ft.Container(
            width=420,
            padding=32,
            border_radius=8,
            bgcolor=T["SURFACE"],
            content=ft.Column(
                tight=True,
                spacing=12,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                controls=[
                    ft.Text("Cadastro de Passageiro", size=22, weight=ft.FontWeight.BOLD, color=T["TEXT"]),
                    FieldRow("Nome", nome, 380),
                    FieldRow("CPF", cpf, 380),
                    FieldRow("Nascimento", nasc, 380),
                    btn,
                ],
            ),
        ),
    )


# ======================== APP ========================
def main(page: ft.Page):
    # “modo mínimo” de diagnóstico, se necessário
    if settings.minimal_mode():
        page.add(ft.Container(padding=20, content=ft.Text("Minimal OK", size=20, weight=ft.FontWeight.W_700)))
        return

    page.title = settings.APP_TITLE
    page.padding = 0
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = LIGHT["BG"]

    page.add(build(page))
    log("tela de cadastro montada")


if __name__ == "__main__":
    ROOT = Path(__file__).resolve().parent
    ft.app(target=main, view=ft.AppView.FLET_APP, assets_dir=str(ROOT))
