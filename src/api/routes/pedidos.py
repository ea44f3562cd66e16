"""
Sales order API routes
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from models.pedido_venda import PedidoVendaRequest
from services.pedidos_service import PedidosService
from services.dependencies import get_pedidos_service

router = APIRouter()
logger = logging.getLogger(__name__)

# Same text as the car listing
MENSAGEM_ERRO_LISTAGEM = "Não foi possível acessar a listagem de carros"


@router.get("/lista/pedidos")
async def listar_pedidos(service: PedidosService = Depends(get_pedidos_service)):
    """List active sales orders with customer and car display fields"""
    try:
        pedidos = await service.listar()
        if pedidos is None:
            return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})

        return JSONResponse(status_code=200, content=jsonable_encoder(pedidos, by_alias=True))

    except Exception as e:
        logger.error(f"Erro ao acessar listagem de pedidos: {e}")
        return JSONResponse(status_code=400, content={"mensagem": MENSAGEM_ERRO_LISTAGEM})


@router.post("/novo/pedido")
async def cadastrar_pedido(
    request: PedidoVendaRequest,
    service: PedidosService = Depends(get_pedidos_service)
):
    """
    Register a new sales order.

    The referenced customer and car are not looked up first; a dangling
    reference fails at the database and is reported as a 400.
    """
    try:
        if await service.cadastrar(request.to_pedido()):
            return JSONResponse(status_code=200, content={"mensagem": "Pedido cadastrado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao cadastrar o pedido. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao cadastrar o pedido: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível cadastrar o pedido. Entre em contato com o administrador do sistema."}
        )


@router.delete("/delete/pedido/{id_pedido}")
async def remover_pedido(id_pedido: int, service: PedidosService = Depends(get_pedidos_service)):
    try:
        if await service.remover(id_pedido):
            return JSONResponse(status_code=200, content={"mensagem": "Pedido removido com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao remover o pedido. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao remover o pedido {id_pedido}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível remover o pedido. Entre em contato com o administrador do sistema."}
        )


@router.put("/atualizar/pedido/{id_pedido}")
async def atualizar_pedido(
    id_pedido: int,
    request: PedidoVendaRequest,
    service: PedidosService = Depends(get_pedidos_service)
):
    try:
        if await service.atualizar(request.to_pedido(id_pedido)):
            return JSONResponse(status_code=200, content={"mensagem": "Pedido atualizado com sucesso!"})

        return JSONResponse(
            status_code=400,
            content={"mensagem": "Erro ao atualizar o pedido. Entre em contato com o administrador do sistema."}
        )

    except Exception as e:
        logger.error(f"Erro ao atualizar o pedido {id_pedido}: {e}")
        return JSONResponse(
            status_code=400,
            content={"mensagem": "Não foi possível atualizar o pedido. Entre em contato com o administrador do sistema."}
        )
