# app/models/profile.py
from sqlmodel import SQLModel, Field


class Profile(SQLModel, table=True):
    """
    Personal or business data attached to a user (one-to-one).

    Created together with the User at sign-up; afterwards only the
    owning user may overwrite it.
    """

    __tablename__ = "perfis"

    id: int | None = Field(default=None, primary_key=True)

    usuario_id: int = Field(
        foreign_key="usuarios.id",
        unique=True,
        index=True,
    )

    # "fisica" | "juridica"
    tipo_pessoa: str = Field(max_length=20)
    nome_completo: str = Field(max_length=255)

    # CPF (individual) or CNPJ (business); unique across all profiles
    cpf_cnpj: str = Field(
        unique=True,
        index=True,
        max_length=20,
    )

    # Address
    endereco: str | None = Field(default=None, max_length=255)
    numero: str | None = Field(default=None, max_length=20)
    complemento: str | None = Field(default=None, max_length=255)
    bairro: str | None = Field(default=None, max_length=255)
    cidade: str | None = Field(default=None, max_length=255)
    estado: str | None = Field(default=None, max_length=50)
    cep: str | None = Field(default=None, max_length=20)

    # Contact
    telefone: str | None = Field(default=None, max_length=20)
    telefone_empresa: str | None = Field(default=None, max_length=20)
    whatsapp: str | None = Field(default=None, max_length=20)

    # Print the shop's data on generated quotes
    mostrar_dados_orcamento: bool | None = Field(default=False)
