"""Relay interactions for custodial write operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .constants import RELAY_GAS_LIMIT, RELAY_GRAPHQL_PATH
from .errors import FarmingSDKError
from .http import HttpClient

logger = logging.getLogger(__name__)

SEND_CONTRACT_TRANSACTION_MUTATION = """
mutation SendContractTransaction($input: SendContractTransactionInput!) {
  sendContractTransaction(input: $input) {
    id
    hash
    status
  }
}
"""


@dataclass(slots=True)
class RelayClient:
    relay_base_url: str
    http_client: HttpClient
    graphql_path: str = RELAY_GRAPHQL_PATH
    gas_limit: int = RELAY_GAS_LIMIT

    def __post_init__(self) -> None:
        self.relay_base_url = self.relay_base_url.rstrip("/")

    def send_contract_transaction(
        self,
        *,
        wallet_id: str,
        to_address: str,
        data: str,
        value: int,
        password: str,
        chain_id: Optional[int],
        auth_token: str,
    ) -> str:
        """Ask the relay to sign and submit a call; returns the transaction hash."""

        request_body = {
            "query": SEND_CONTRACT_TRANSACTION_MUTATION,
            "variables": {
                "input": {
                    "walletId": wallet_id,
                    "toAddress": to_address,
                    "value": str(value),
                    "data": data,
                    "password": password,
                    "chainId": chain_id,
                    "gasLimit": str(self.gas_limit),
                }
            },
        }

        response = self.http_client.send_post_request(
            self.relay_base_url,
            self.graphql_path,
            "",
            request_body,
            bearer_token=auth_token,
        )

        if not isinstance(response, dict):
            raise FarmingSDKError.invalid_response_error("Invalid response from relay", response)

        errors = response.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) and errors else {}
            message = first.get("message") if isinstance(first, dict) else None
            raise FarmingSDKError.relay_error(message or str(errors), errors)

        result: Any = (response.get("data") or {}).get("sendContractTransaction")
        tx_hash = result.get("hash") if isinstance(result, dict) else None
        if not isinstance(tx_hash, str):
            raise FarmingSDKError.invalid_response_error(
                "Invalid relay response: missing transaction hash", response
            )

        logger.info("Relay accepted transaction %s (status %s)", tx_hash, result.get("status"))
        return tx_hash
