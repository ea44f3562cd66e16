"""
Customer API routes
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from models.cliente import ClienteRequest
from services.clientes_service import ClientesService
from services.dependencies import get_clientes_service

router = APIRouter()
logger = logging.getLogger(__name__)

# Same text as the car listing
MENSAGEM_ERRO_LISTAGEM = "Não foi possível acessar a listagem de carros"


@router.get("/lista/clientes")
async def listar_clientes(service: ClientesService = Depends(get_clientes_service)):
    """List every customer"""
    try:
        clientes = await service.listar()
        if clientes is None:
            return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})

        return JSONResponse(status_code=200, content=jsonable_encoder(clientes, by_alias=True))

    except Exception as e:
        logger.error(f"Erro ao acessar listagem de clientes: {e}")
        return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})


@router.post("/novo/cliente")
async def cadastrar_cliente(
    request: ClienteRequest,
    service: ClientesService = Depends(get_clientes_service)
):
    """Register a new customer"""
    try:
        if await service.cadastrar(request.to_cliente()):
            return JSONResponse(status_code=200, content={"mensagem": "Cliente cadastrado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao cadastrar o cliente. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao cadastrar o cliente: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível cadastrar o cliente. Entre em contato com o administrador do sistema."}
        )


@router.delete("/delete/cliente/{id_cliente}")
async def remover_cliente(id_cliente: int, service: ClientesService = Depends(get_clientes_service)):
    """Remove a customer by id"""
    try:
        if await service.remover(id_cliente):
            return JSONResponse(status_code=200, content={"mensagem": "Cliente removido com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao remover o cliente. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao remover o cliente {id_cliente}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível remover o cliente. Entre em contato com o administrador do sistema."}
        )


@router.put("/atualizar/cliente/{id_cliente}")
async def atualizar_cliente(
    id_cliente: int,
    request: ClienteRequest,
    service: ClientesService = Depends(get_clientes_service)
):
    """Replace every field of a customer"""
    try:
        if await service.atualizar(request.to_cliente(id_cliente)):
            return JSONResponse(status_code=200, content={"mensagem": "Cliente atualizado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao atualizar o cliente. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao atualizar o cliente {id_cliente}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível atualizar o cliente. Entre em contato com o administrador do sistema."}
        )
