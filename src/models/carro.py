"""
Car-related Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field


class Carro(BaseModel):
    """A car in the dealership inventory. id_carro stays 0 until persisted."""
    model_config = ConfigDict(populate_by_name=True)

    id_carro: int = Field(0, alias="idCarro")
    marca: str
    modelo: str
    ano: int
    cor: str


class CarroRequest(BaseModel):
    marca: str
    modelo: str
    ano: int
    cor: str

    def to_carro(self, id_carro: int = 0) -> Carro:
        return Carro(id_carro=id_carro, marca=self.marca, modelo=self.modelo, ano=self.ano, cor=self.cor)
