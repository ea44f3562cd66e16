"""
Sales order endpoints, including the denormalized listing
"""

from datetime import date, datetime

import pytest

from models.pedido_venda import data_from_timestamp


@pytest.fixture
def cadastros(client, carro_payload, cliente_payload):
    """One car and one customer already registered"""
    client.post("/novo/carro", json=carro_payload)
    client.post("/novo/cliente", json=cliente_payload)
    return {"idCarro": 1, "idCliente": 1}


@pytest.fixture
def pedido_payload(cadastros):
    return {**cadastros, "dataPedido": "2024-05-10", "valorPedido": 150000.5}


class TestPedidos:

    def test_cadastro_and_denormalized_listagem(self, client, pedido_payload):
        response = client.post("/novo/pedido", json=pedido_payload)

        assert response.status_code == 200
        assert response.json() == {"mensagem": "Pedido cadastrado com sucesso!"}

        pedidos = client.get("/lista/pedidos").json()
        assert pedidos == [{
            "idPedido": 1,
            "idCarro": 1,
            "idCliente": 1,
            "nomeCliente": "Maria Souza",
            "cpfCliente": "123.456.789-00",
            "marcaCarro": "Toyota",
            "modeloCarro": "Corolla",
            "dataPedido": "2024-05-10",
            "valorPedido": 150000.5
        }]

    def test_cadastro_with_deleted_references_fails(self, client, pedido_payload):
        client.delete("/delete/carro/1")

        response = client.post("/novo/pedido", json=pedido_payload)

        assert response.status_code == 400
        assert response.json()["mensagem"].startswith("Erro ao cadastrar o pedido")
        assert client.get("/lista/pedidos").json() == []

    def test_invalid_date_returns_400(self, client, pedido_payload):
        response = client.post("/novo/pedido", json={**pedido_payload, "dataPedido": "not-a-date"})

        assert response.status_code == 400

    def test_atualizar_pedido(self, client, pedido_payload):
        client.post("/novo/pedido", json=pedido_payload)

        response = client.put("/atualizar/pedido/1", json={**pedido_payload, "valorPedido": 140000})

        assert response.status_code == 200
        assert response.json() == {"mensagem": "Pedido atualizado com sucesso!"}
        assert client.get("/lista/pedidos").json()[0]["valorPedido"] == 140000.0

    def test_atualizar_pedido_inexistente(self, client, pedido_payload):
        response = client.put("/atualizar/pedido/77", json=pedido_payload)

        assert response.status_code == 400

    def test_remover_pedido(self, client, pedido_payload):
        client.post("/novo/pedido", json=pedido_payload)

        assert client.delete("/delete/pedido/1").json() == {"mensagem": "Pedido removido com sucesso!"}
        assert client.delete("/delete/pedido/1").status_code == 400

    def test_listagem_failure(self, client, services):
        services.pedidos.broken = True

        response = client.get("/lista/pedidos")

        assert response.status_code == 400
        assert response.json() == {"mensagem": "Não foi possível acessar a listagem de carros"}

    @pytest.mark.parametrize("timestamp", [
        "2024-05-10T10:30:00",
        "2024-05-10T10:30:00.000Z",
        "2024-05-10T23:59:59-03:00",
    ])
    def test_cadastro_accepts_timestamp_date(self, client, pedido_payload, timestamp):
        response = client.post("/novo/pedido", json={**pedido_payload, "dataPedido": timestamp})

        assert response.status_code == 200
        assert client.get("/lista/pedidos").json()[0]["dataPedido"] == "2024-05-10"


@pytest.mark.parametrize("value,expected", [
    (datetime(2024, 5, 10, 10, 30), date(2024, 5, 10)),
    ("2024-05-10T10:30:00.000Z", date(2024, 5, 10)),
    ("2024-05-10", "2024-05-10"),
    ("2024-05-10Tgarbage", "2024-05-10Tgarbage"),
])
def test_data_from_timestamp(value, expected):
    assert data_from_timestamp(value) == expected
