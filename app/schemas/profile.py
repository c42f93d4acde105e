# app/schemas/profile.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class ProfileFields(SQLModel):
    """
    Editable profile fields.

    The update is a full overwrite: any field left out is stored as
    null. ``tipo_pessoa`` is fixed at sign-up and not part of it.
    """

    model_config = ConfigDict(extra="ignore")

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


class ProfileUpdate(ProfileFields):
    """Payload for PUT /api/perfil."""

    pass


class ProfileRead(ProfileFields):
    """Response schema returned to clients."""

    id: int
    usuario_id: int
    tipo_pessoa: str
