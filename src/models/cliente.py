"""
Customer-related Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field


class Cliente(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_cliente: int = Field(0, alias="idCliente")
    nome: str
    cpf: str = Field(..., description="National tax id (CPF)")
    telefone: str


class ClienteRequest(BaseModel):
    nome: str
    cpf: str
    telefone: str

    def to_cliente(self, id_cliente: int = 0) -> Cliente:
        return Cliente(id_cliente=id_cliente, nome=self.nome, cpf=self.cpf, telefone=self.telefone)
