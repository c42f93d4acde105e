# app/schemas/auth.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class RegisterRequest(SQLModel):
    """
    Sign-up payload: account credentials plus the initial profile.

    Presence of email, senha, tipo_pessoa, nome_completo and cpf_cnpj
    is checked by the service so that a missing field answers with the
    API's own 400 message. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    senha: str | None = None

    tipo_pessoa: str | None = None
    nome_completo: str | None = None
    cpf_cnpj: str | None = None
    endereco: str | None = None
    numero: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    cidade: str | None = None
    estado: str | None = None
    cep: str | None = None
    telefone: str | None = None
    telefone_empresa: str | None = None
    whatsapp: str | None = None
    mostrar_dados_orcamento: bool | None = None


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="ignore")

    email: str | None = None
    senha: str | None = None


class MessageResponse(SQLModel):
    """Plain success acknowledgement."""

    message: str


class RegisterResponse(MessageResponse):
    userId: int
