"""
Sales order Pydantic models
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def data_from_timestamp(value: Any) -> Any:
    """
    Accept full timestamps for dataPedido and keep only the calendar date.

    Clients serialize dates as ISO timestamps ("2024-05-10T10:30:00.000Z");
    the date is taken in the offset the timestamp was written in.
    Anything unparseable is passed through for Pydantic to reject.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


class PedidoVenda(BaseModel):
    """Sales order linking a customer to a car"""
    model_config = ConfigDict(populate_by_name=True)

    id_pedido: int = Field(0, alias="idPedido")
    id_carro: int = Field(..., alias="idCarro")
    id_cliente: int = Field(..., alias="idCliente")
    data_pedido: date = Field(..., alias="dataPedido")
    valor_pedido: float = Field(..., alias="valorPedido")

    normalize_data_pedido = field_validator("data_pedido", mode="before")(data_from_timestamp)


class PedidoVendaListagem(BaseModel):
    """Denormalized sales order row used by the order listing"""
    model_config = ConfigDict(populate_by_name=True)

    id_pedido: int = Field(..., alias="idPedido")
    id_carro: int = Field(..., alias="idCarro")
    id_cliente: int = Field(..., alias="idCliente")
    nome_cliente: str = Field(..., alias="nomeCliente")
    cpf_cliente: str = Field(..., alias="cpfCliente")
    marca_carro: str = Field(..., alias="marcaCarro")
    modelo_carro: str = Field(..., alias="modeloCarro")
    data_pedido: date = Field(..., alias="dataPedido")
    valor_pedido: float = Field(..., alias="valorPedido")


class PedidoVendaRequest(BaseModel):
    """Request body for creating or updating a sales order"""
    model_config = ConfigDict(populate_by_name=True)

    id_cliente: int = Field(..., alias="idCliente")
    id_carro: int = Field(..., alias="idCarro")
    data_pedido: date = Field(..., alias="dataPedido")
    valor_pedido: float = Field(..., alias="valorPedido")

    normalize_data_pedido = field_validator("data_pedido", mode="before")(data_from_timestamp)

    def to_pedido(self, id_pedido: int = 0) -> PedidoVenda:
        return PedidoVenda(
            id_pedido=id_pedido,
            id_carro=self.id_carro,
            id_cliente=self.id_cliente,
            data_pedido=self.data_pedido,
            valor_pedido=self.valor_pedido
        )
