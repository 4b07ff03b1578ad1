"""Single-use API credential handling."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


class Credential:
    """An API key referenced for exactly one generation attempt."""

    def __init__(self, secret: str) -> None:
        self._secret: Optional[str] = secret

    @property
    def secret(self) -> str:
        """Return the key.

        Raises:
            ConfigurationError: If the credential was already released.
        """
        if self._secret is None:
            raise ConfigurationError("API key has already been released")
        return self._secret

    @property
    def released(self) -> bool:
        return self._secret is None

    def release(self) -> None:
        """Overwrite and drop the key reference."""
        if self._secret is not None:
            self._secret = ""
            self._secret = None

    def __repr__(self) -> str:
        return f"Credential({'released' if self.released else '***'})"


@contextmanager
def credential_scope(secret: str) -> Iterator[Credential]:
    """Hold ``secret`` for the body of the block and release it on exit."""
    credential = Credential(secret)
    try:
        yield credential
    finally:
        credential.release()
        logger.debug("API key released")
