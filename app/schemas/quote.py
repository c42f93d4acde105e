# app/schemas/quote.py
from pydantic import ConfigDict
from sqlmodel import SQLModel


class QuoteBase(SQLModel):
    """
    The 17 client-supplied quote fields.

    No field-level rules here: create only requires both spherical
    powers (checked by the service), update requires nothing.
    """

    model_config = ConfigDict(extra="ignore")

    grau_esferico_od: float | None = None
    grau_esferico_oe: float | None = None
    grau_cilindrico_od: float | None = None
    grau_cilindrico_oe: float | None = None
    eixo_od: int | None = None
    eixo_oe: int | None = None
    dnp_od: float | None = None
    dnp_oe: float | None = None
    adicao: float | None = None
    tipo_lente: str | None = None
    material_lente: str | None = None
    tratamento_lente: str | None = None
    observacoes: str | None = None
    valor_lente: float | None = None
    valor_armacao: float | None = None
    nome_cliente: str | None = None
    cpf_cliente: str | None = None


class QuoteCreate(QuoteBase):
    pass


class QuoteUpdate(QuoteBase):
    """Full overwrite: omitted fields are stored as null."""

    pass


class QuoteRead(QuoteBase):
    id: int
    usuario_id: int


class QuoteCreated(SQLModel):
    message: str
    orcamentoId: int
