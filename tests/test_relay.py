import pytest

from kswap_farming.errors import FarmingSDKError
from kswap_farming.http import HttpClient
from kswap_farming.relay import RelayClient


def _send(relay, auth_token="token"):
    return relay.send_contract_transaction(
        wallet_id="wallet-1",
        to_address="0xAbCdEf0000000000000000000000000000000001",
        data="0x3d18b912",
        value=0,
        password="secret",
        chain_id=3888,
        auth_token=auth_token,
    )


def test_send_contract_transaction_returns_hash(recording_requestor):
    requestor = recording_requestor({"data": {"sendContractTransaction": {"hash": "0xabc", "status": "SENT"}}})
    relay = RelayClient("https://relay.example", HttpClient(requestor), gas_limit=750_000)

    assert _send(relay) == "0xabc"
    _, kwargs = requestor.calls[0]
    assert kwargs["json"]["variables"]["input"]["gasLimit"] == "750000"
    assert kwargs["timeout"] == 30


def test_http_failure_without_message(recording_requestor):
    requestor = recording_requestor("Bad Gateway", status_code=502)
    relay = RelayClient("https://relay.example", HttpClient(requestor))

    with pytest.raises(FarmingSDKError) as excinfo:
        _send(relay)
    assert excinfo.value.code == "HTTP_ERROR"
    assert excinfo.value.details["status"] == 502


def test_http_failure_with_graphql_message(recording_requestor):
    requestor = recording_requestor({"errors": [{"message": "Invalid password"}]}, status_code=401)
    relay = RelayClient("https://relay.example", HttpClient(requestor))

    with pytest.raises(FarmingSDKError) as excinfo:
        _send(relay)
    assert excinfo.value.code == "RELAY_ERROR"
    assert excinfo.value.message == "Invalid password"
    assert excinfo.value.details["status"] == 401


def test_graphql_errors_raise_first_message(recording_requestor):
    requestor = recording_requestor(
        {"errors": [{"message": "execution reverted"}, {"message": "second"}], "data": None}
    )
    relay = RelayClient("https://relay.example", HttpClient(requestor))

    with pytest.raises(FarmingSDKError) as excinfo:
        _send(relay)
    assert excinfo.value.message == "execution reverted"


@pytest.mark.parametrize(
    "payload",
    ["not json", {"data": {}}, {"data": {"sendContractTransaction": {"status": "SENT"}}}],
)
def test_invalid_relay_responses(recording_requestor, payload):
    relay = RelayClient("https://relay.example", HttpClient(recording_requestor(payload)))

    with pytest.raises(FarmingSDKError) as excinfo:
        _send(relay)
    assert excinfo.value.code == "INVALID_RESPONSE"


def test_bearer_header_omitted_without_token(recording_requestor):
    requestor = recording_requestor({"data": {"ok": True}})
    client = HttpClient(requestor)

    client.send_post_request("https://relay.example", "/api/graphql", "", {"query": "{}"})

    _, kwargs = requestor.calls[0]
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["headers"]["User-Agent"] == "python-kswap-farming-sdk/0.1"
