"""In-memory credential obfuscation for aumai-cfguard."""

from __future__ import annotations

import secrets
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import NoReturn

from aumai_cfguard.errors import EmptyCredentialError


class CredentialVault:
    """Hold the bearer credential XOR-masked with a random pad.

    The plaintext exists only transiently: while encoding at construction and
    inside buffers returned by :meth:`reveal`, which the caller zeroes after
    use (:meth:`revealed` does that automatically).  A ``bytearray`` passed
    in is zeroed in place once encoded; ``str`` input is immutable and
    cannot be cleared.

    This is a deterrence measure.  The mask lives next to the ciphertext, so a
    process that can read this memory can recover the credential.

    Example::

        vault = CredentialVault(os.environ["CLOUDFLARE_API_TOKEN"])
        with vault.revealed() as token:
            header = b"Bearer " + bytes(token)
    """

    __slots__ = ("_cipher", "_mask")

    def __init__(
        self,
        credential: str | bytes | bytearray,
        *,
        random_source: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        if isinstance(credential, str):
            plaintext = bytearray(credential.encode("utf-8"))
        else:
            plaintext = bytearray(credential)
        try:
            if not plaintext:
                raise EmptyCredentialError("credential must not be empty")
            mask = bytearray(random_source(len(plaintext)))
            if len(mask) != len(plaintext):
                raise ValueError("random_source returned a mask of the wrong length")
            self._mask = mask
            self._cipher = bytearray(p ^ m for p, m in zip(plaintext, mask))
        finally:
            _zero(plaintext)
            if isinstance(credential, bytearray):
                _zero(credential)

    def reveal(self) -> bytearray:
        """Return the plaintext credential in a fresh buffer the caller must zero."""
        return bytearray(c ^ m for c, m in zip(self._cipher, self._mask))

    @contextmanager
    def revealed(self) -> Iterator[bytearray]:
        """Yield the plaintext credential and zero the buffer on exit."""
        buffer = self.reveal()
        try:
            yield buffer
        finally:
            _zero(buffer)

    def __len__(self) -> int:
        return len(self._cipher)

    def __repr__(self) -> str:
        return f"CredentialVault(<redacted>, length={len(self._cipher)})"

    def __reduce__(self) -> NoReturn:
        raise TypeError("CredentialVault cannot be pickled")


def _zero(buffer: bytearray) -> None:
    for i in range(len(buffer)):
        buffer[i] = 0


__all__ = ["CredentialVault"]
