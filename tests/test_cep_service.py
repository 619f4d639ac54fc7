import pytest
import requests
from unittest.mock import patch, MagicMock
from services.cep import ViaCepClient
from services.errors import PostalLookupError

PAULISTA_JSON = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "complemento": "de 612 a 1510 - lado par",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
}


def fake_response(payload=None, status=200, bad_json=False):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    if bad_json:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


def test_url_and_timeout():
    client = ViaCepClient(base_url="https://viacep.example/", timeout=3)
    with patch("services.cep.requests.get", return_value=fake_response(PAULISTA_JSON)) as get:
        client.lookup("01310100")
    get.assert_called_once_with("https://viacep.example/ws/01310100/json/", timeout=3)


def test_lookup_maps_fields_verbatim():
    with patch("services.cep.requests.get", return_value=fake_response(PAULISTA_JSON)):
        record = ViaCepClient().lookup("01310100")
    assert record.street == "Avenida Paulista"
    assert record.neighborhood == "Bela Vista"
    assert record.city == "São Paulo"
    assert record.state == "SP"
    assert record.postal_code == "01310-100"
    assert record.complement == "de 612 a 1510 - lado par"


def test_lookup_missing_keys_become_empty_strings():
    with patch("services.cep.requests.get", return_value=fake_response({"uf": "DF"})):
        record = ViaCepClient().lookup("70000000")
    assert record.street == ""
    assert record.state == "DF"


@pytest.mark.parametrize("erro", [True, "true"])
def test_lookup_not_found_returns_none(erro):
    with patch("services.cep.requests.get", return_value=fake_response({"erro": erro})):
        assert ViaCepClient().lookup("99999999") is None


def test_connection_error_becomes_lookup_error():
    with patch("services.cep.requests.get", side_effect=requests.ConnectionError("down")):
        with pytest.raises(PostalLookupError):
            ViaCepClient().lookup("01310100")


def test_timeout_becomes_lookup_error():
    with patch("services.cep.requests.get", side_effect=requests.Timeout("slow")):
        with pytest.raises(PostalLookupError):
            ViaCepClient().lookup("01310100")


def test_http_error_status_becomes_lookup_error():
    with patch("services.cep.requests.get", return_value=fake_response(status=500)):
        with pytest.raises(PostalLookupError):
            ViaCepClient().lookup("01310100")


def test_non_json_body_becomes_lookup_error():
    with patch("services.cep.requests.get", return_value=fake_response(bad_json=True)):
        with pytest.raises(PostalLookupError):
            ViaCepClient().lookup("01310100")


def test_unexpected_payload_shape_becomes_lookup_error():
    with patch("services.cep.requests.get", return_value=fake_response(["not", "a", "dict"])):
        with pytest.raises(PostalLookupError):
            ViaCepClient().lookup("01310100")


def test_session_is_used_when_given():
    session = MagicMock()
    session.get.return_value = fake_response(PAULISTA_JSON)
    with patch("services.cep.requests.get") as get:
        ViaCepClient(session=session).lookup("01310100")
    get.assert_not_called()
    session.get.assert_called_once()
