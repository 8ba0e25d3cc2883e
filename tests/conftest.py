from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from hexbytes import HexBytes

_MISSING = object()


class Reverted(Exception):
    pass


class FakeCall:
    def __init__(self, contract: "FakeContract", name: str, args: tuple) -> None:
        self.contract = contract
        self.name = name
        self.args = args

    async def call(self, *args, **kwargs):
        self.contract.calls.append((self.name, self.args))
        response = self.contract.responses.get(self.name, _MISSING)
        if response is _MISSING:
            raise Reverted(f"{self.name} reverted")
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(*self.args)
        return response


class FakeFunctions:
    def __init__(self, contract: "FakeContract") -> None:
        self._contract = contract

    def __getattr__(self, name: str):
        return lambda *args: FakeCall(self._contract, name, args)


class FakeContract:
    def __init__(self, responses: Optional[Dict[str, Any]] = None) -> None:
        self.responses: Dict[str, Any] = dict(responses or {})
        self.calls: List[tuple] = []
        self.functions = FakeFunctions(self)

    def called(self, name: str) -> List[tuple]:
        return [args for call_name, args in self.calls if call_name == name]


class FakeEth:
    def __init__(self, chain: "FakeChain") -> None:
        self._chain = chain

    def contract(self, address: str, abi):
        return self._chain.contract_at(address)

    async def estimate_gas(self, tx):
        self._chain.estimated.append(dict(tx))
        if isinstance(self._chain.gas_estimate, Exception):
            raise self._chain.gas_estimate
        return self._chain.gas_estimate

    @property
    def gas_price(self):
        async def _price():
            return self._chain.gas_price

        return _price()

    async def get_transaction_count(self, address, block_identifier="latest"):
        return self._chain.transaction_count

    async def send_raw_transaction(self, raw):
        self._chain.raw_transactions.append(bytes(raw))
        return HexBytes(b"\x12" * 32)


class FakeProvider:
    def __init__(self, chain: "FakeChain") -> None:
        self.eth = FakeEth(chain)


class FakeChain:
    """In-memory stand-in for the RPC node, keyed by contract address."""

    def __init__(self) -> None:
        self.contracts: Dict[str, FakeContract] = {}
        self.providers_created = 0
        self.estimated: List[dict] = []
        self.raw_transactions: List[bytes] = []
        self.gas_estimate = 100_000
        self.gas_price = 1_000_000_000
        self.transaction_count = 7

    def deploy(self, address: str, responses: Optional[Dict[str, Any]] = None) -> FakeContract:
        fake = FakeContract(responses)
        self.contracts[address.lower()] = fake
        return fake

    def contract_at(self, address: str) -> FakeContract:
        return self.contracts.setdefault(address.lower(), FakeContract())

    def provider_factory(self) -> FakeProvider:
        self.providers_created += 1
        return FakeProvider(self)


class RecordingSigner:
    def __init__(self, fail_on: Optional[Dict[str, Exception]] = None) -> None:
        self.requests = []
        self.fail_on = fail_on or {}

    async def submit(self, request) -> str:
        self.requests.append(request)
        error = self.fail_on.get(request.function_name)
        if error is not None:
            raise error
        return f"0xhash{len(self.requests)}"


class RecordingWallet:
    def __init__(self, address: str, signature: Any = None, sign_error: Optional[Exception] = None) -> None:
        self.address = address
        self.signature = signature if signature is not None else "0x" + "11" * 32 + "22" * 32 + "1b"
        self.sign_error = sign_error
        self.signed: List[dict] = []
        self.sent: List[dict] = []

    async def get_address(self) -> str:
        return self.address

    async def sign_typed_data(self, typed_data):
        self.signed.append(typed_data)
        if self.sign_error is not None:
            raise self.sign_error
        return self.signature

    async def send_transaction(self, tx) -> str:
        self.sent.append(tx)
        return "0xwallethash"


class RecordingResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.ok = status_code < 400
        self.text = str(payload)

    def json(self):
        if isinstance(self._payload, str):
            raise ValueError("not json")
        return self._payload


class RecordingRequestor:
    def __init__(self, payload: Any = None, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.calls = []

    def __call__(self, url, kwargs):
        self.calls.append((url, dict(kwargs)))
        return RecordingResponse(self.payload, self.status_code)


@pytest.fixture
def chain() -> FakeChain:
    return FakeChain()


@pytest.fixture
def recording_signer():
    return RecordingSigner


@pytest.fixture
def recording_wallet():
    return RecordingWallet


@pytest.fixture
def recording_requestor():
    return RecordingRequestor
