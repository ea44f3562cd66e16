"""
Car inventory API routes
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from models.carro import CarroRequest
from services.carros_service import CarrosService
from services.dependencies import get_carros_service

router = APIRouter()
logger = logging.getLogger(__name__)

MENSAGEM_ERRO_LISTAGEM = "Não foi possível acessar a listagem de carros"


@router.get("/lista/carros")
async def listar_carros(service: CarrosService = Depends(get_carros_service)):
    """List every car"""
    try:
        carros = await service.listar()
        if carros is None:
            return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})

        return JSONResponse(status_code=200, content=jsonable_encoder(carros, by_alias=True))

    except Exception as e:
        logger.error(f"Erro ao acessar listagem de carros: {e}")
        return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})


@router.post("/novo/carro")
async def cadastrar_carro(
    request: CarroRequest,
    service: CarrosService = Depends(get_carros_service)
):
    """Register a new car"""
    try:
        if await service.cadastrar(request.to_carro()):
            return JSONResponse(status_code=200, content={"mensagem": "Carro cadastrado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao cadastrar o carro. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao cadastrar o carro: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível cadastrar o carro. Entre em contato com o administrador do sistema."}
        )


@router.delete("/delete/carro/{id_carro}")
async def remover_carro(id_carro: int, service: CarrosService = Depends(get_carros_service)):
    """Remove a car by id"""
    try:
        if await service.remover(id_carro):
            return JSONResponse(status_code=200, content={"mensagem": "Carro removido com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao remover o carro. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao remover o carro {id_carro}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível remover o carro. Entre em contato com o administrador do sistema."}
        )


@router.put("/atualizar/carro/{id_carro}")
async def atualizar_carro(
    id_carro: int,
    request: CarroRequest,
    service: CarrosService = Depends(get_carros_service)
):
    """Replace every field of a car"""
    try:
        if await service.atualizar(request.to_carro(id_carro)):
            return JSONResponse(status_code=200, content={"mensagem": "Carro atualizado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao atualizar o carro. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao atualizar o carro {id_carro}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível atualizar o carro. Entre em contato com o administrador do sistema."}
        )
