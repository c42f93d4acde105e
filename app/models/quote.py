# app/models/quote.py
from sqlalchemy import Text
from sqlmodel import SQLModel, Field


class Quote(SQLModel, table=True):
    """
    Lens / frame price quote ("orçamento") for a client prescription.

    Suffixes:
      - _od: right eye (oculus dexter)
      - _oe: left eye

    Every lookup is scoped by (id, usuario_id); a quote is only visible
    to the user who created it.
    """

    __tablename__ = "orcamentos"

    id: int | None = Field(default=None, primary_key=True)

    usuario_id: int = Field(
        foreign_key="usuarios.id",
        index=True,
    )

    # Prescription
    grau_esferico_od: float | None = None
    grau_esferico_oe: float | None = None
    grau_cilindrico_od: float | None = None
    grau_cilindrico_oe: float | None = None
    eixo_od: int | None = None
    eixo_oe: int | None = None
    dnp_od: float | None = None
    dnp_oe: float | None = None
    adicao: float | None = None

    # Lens
    tipo_lente: str | None = Field(default=None, max_length=255)
    material_lente: str | None = Field(default=None, max_length=255)
    tratamento_lente: str | None = Field(default=None, max_length=255)
    observacoes: str | None = Field(default=None, sa_type=Text)

    # Prices
    valor_lente: float | None = None
    valor_armacao: float | None = None

    # End client
    nome_cliente: str | None = Field(default=None, max_length=255)
    cpf_cliente: str | None = Field(default=None, max_length=20)
