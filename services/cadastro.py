# services/cadastro.py — estado e submissão do cadastro de passageiro
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, Optional

from components.masks import mask_cpf, mask_date
from components.validators import is_valid_cpf, is_valid_date
from services.log import log

# chaves fixas do mapa de erros
FULL_NAME = "full_name"
CPF = "cpf"
BIRTH_DATE = "birth_date"
FIELDS = (FULL_NAME, CPF, BIRTH_DATE)

REQUIRED = "required"
INVALID = "invalid"

MESSAGES: Dict[str, Dict[str, str]] = {
    FULL_NAME:  {REQUIRED: "Nome completo é obrigatório"},
    CPF:        {REQUIRED: "CPF é obrigatório",
                 INVALID:  "CPF inválido"},
    BIRTH_DATE: {REQUIRED: "Data de nascimento é obrigatória",
                 INVALID:  "Data de nascimento inválida"},
}

SUCCESS_MESSAGE = "Cadastro realizado com sucesso!"


def message_for(field_key: str, kind: str) -> str:
    return MESSAGES[field_key][kind]


@dataclass
class FormState:
    full_name: str = ""
    cpf: str = ""
    birth_date: str = ""
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def reset(self) -> None:
        self.full_name = ""
        self.cpf = ""
        self.birth_date = ""
        self.errors = {}


def validate(state: FormState, today: Optional[date] = None) -> Dict[str, str]:
    """
    Valida os três campos, sempre todos (sem parar no primeiro erro),
    e devolve {campo: mensagem}. Mapa vazio = formulário válido.
    """
    errors: Dict[str, str] = {}

    if not (state.full_name or "").strip():
        errors[FULL_NAME] = message_for(FULL_NAME, REQUIRED)

    if not (state.cpf or "").strip():
        errors[CPF] = message_for(CPF, REQUIRED)
    elif not is_valid_cpf(state.cpf):
        errors[CPF] = message_for(CPF, INVALID)

    if not (state.birth_date or "").strip():
        errors[BIRTH_DATE] = message_for(BIRTH_DATE, REQUIRED)
    elif not is_valid_date(state.birth_date, today=today):
        errors[BIRTH_DATE] = message_for(BIRTH_DATE, INVALID)

    return errors


class PassengerForm:
    """
    Controlador do formulário: guarda o FormState, aplica as máscaras a cada
    tecla e orquestra a submissão.

    on_success recebe a mensagem de sucesso (a UI decide como exibir).
    today fixa a data de referência (testes); None = settings.today().
    """

    def __init__(self, on_success: Optional[Callable[[str], None]] = None,
                 today: Optional[date] = None):
        self.state = FormState()
        self.on_success = on_success
        self.today = today

    # ---------- teclas ----------
    def set_full_name(self, value: str) -> str:
        self.state.full_name = value or ""
        return self.state.full_name

    def set_cpf(self, value: str) -> str:
        self.state.cpf = mask_cpf(value)
        return self.state.cpf

    def set_birth_date(self, value: str) -> str:
        self.state.birth_date = mask_date(value)
        return self.state.birth_date

    # ---------- submissão ----------
    def submit(self) -> Dict[str, str]:
        errors = validate(self.state, today=self.today)
        if errors:
            # valores ficam como estão para o usuário corrigir
            self.state.errors = errors
            log("cadastro recusado", level="WARN", campos=list(errors))
            return errors

        if self.on_success:
            self.on_success(SUCCESS_MESSAGE)
        self.state.reset()
        log("cadastro concluído")
        return {}
