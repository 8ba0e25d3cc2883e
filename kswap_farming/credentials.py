"""Credential prompts used by the custodial signing backend."""
from __future__ import annotations

import getpass
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

DEFAULT_PROMPT = "Enter your internal wallet password to authorize this farming transaction: "


class CredentialProvider(Protocol):
    def request_secret(self, prompt: str) -> Optional[str]:
        """Return the wallet secret, or ``None`` when the user cancels."""
        ...


@dataclass
class StaticCredentialProvider(CredentialProvider):
    secret: Optional[str]

    def request_secret(self, prompt: str) -> Optional[str]:
        return self.secret or None


@dataclass
class TerminalCredentialProvider(CredentialProvider):
    reader: Callable[[str], str] = getpass.getpass

    def request_secret(self, prompt: str) -> Optional[str]:
        try:
            secret = self.reader(prompt)
        except (EOFError, KeyboardInterrupt):
            return None
        return secret or None
