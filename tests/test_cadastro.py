# tests/test_cadastro.py
from datetime import date

import pytest

from services.cadastro import (
    BIRTH_DATE, CPF, FULL_NAME, INVALID, REQUIRED, SUCCESS_MESSAGE,
    FormState, PassengerForm, message_for, validate,
)

HOJE = date(2024, 6, 15)


@pytest.fixture
def avisos():
    return []


@pytest.fixture
def form(avisos):
    return PassengerForm(on_success=avisos.append, today=HOJE)


def test_tudo_vazio_gera_tres_obrigatorios(form, avisos):
    form.set_full_name("  ")
    errors = form.submit()
    assert errors == {
        FULL_NAME: "Nome completo é obrigatório",
        CPF: "CPF é obrigatório",
        BIRTH_DATE: "Data de nascimento é obrigatória",
    }
    assert form.state.errors == errors
    assert form.state.has_errors
    assert avisos == []


def test_cadastro_valido_notifica_e_limpa(form, avisos, capsys):
    form.set_full_name("Ana Silva")
    form.set_cpf("529.982.247-25")
    form.set_birth_date("01/01/2000")
    assert form.submit() == {}
    assert avisos == [SUCCESS_MESSAGE]
    assert form.state == FormState()
    assert not form.state.has_errors
    assert "cadastro concluído" in capsys.readouterr().out


def test_invalidos_preservam_valores(form, avisos):
    form.set_full_name("Ana Silva")
    form.set_cpf("52998224700")
    form.set_birth_date("31/04/2024")
    errors = form.submit()
    assert errors == {
        CPF: message_for(CPF, INVALID),
        BIRTH_DATE: message_for(BIRTH_DATE, INVALID),
    }
    assert form.state.full_name == "Ana Silva"
    assert form.state.cpf == "529.982.247-00"
    assert form.state.birth_date == "31/04/2024"
    assert avisos == []


def test_data_futura_e_invalida(form):
    form.set_full_name("Ana Silva")
    form.set_cpf("52998224725")
    form.set_birth_date("16/06/2024")
    assert form.submit() == {BIRTH_DATE: "Data de nascimento inválida"}


def test_log_nao_expoe_valores(form, capsys):
    form.set_cpf("52998224700")
    form.submit()
    out = capsys.readouterr().out
    assert "529" not in out
    assert "cpf" in out


def test_erros_anteriores_somem_apos_sucesso(form, avisos):
    form.submit()
    assert form.state.has_errors
    form.set_full_name("Ana Silva")
    form.set_cpf("52998224725")
    form.set_birth_date("01012000")
    assert form.submit() == {}
    assert form.state.errors == {}


def test_teclas_aplicam_mascaras(form):
    assert form.set_cpf("5299822") == "529.982.2"
    assert form.set_cpf("529982247251") == "529.982.247-25"
    assert form.set_birth_date("0101") == "01/01"
    assert form.set_full_name("  Ana ") == "  Ana "
    assert form.state.cpf == "529.982.247-25"
    assert form.state.birth_date == "01/01"


def test_sem_callback_de_sucesso():
    f = PassengerForm(today=HOJE)
    f.set_full_name("Ana Silva")
    f.set_cpf("52998224725")
    f.set_birth_date("01/01/2000")
    assert f.submit() == {}


def test_validate_nao_altera_estado():
    state = FormState(full_name="", cpf="123", birth_date="1/1/2000")
    errors = validate(state, today=HOJE)
    assert errors == {
        FULL_NAME: message_for(FULL_NAME, REQUIRED),
        CPF: message_for(CPF, INVALID),
        BIRTH_DATE: message_for(BIRTH_DATE, INVALID),
    }
    assert state.errors == {}
