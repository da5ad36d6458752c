# src/todo_engine/core/ids.py

from __future__ import annotations

import logging
import random
import secrets
import time
import uuid

from .ports import RandomSource

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class SystemRandomSource:
    """OS-backed CSPRNG (os.urandom via secrets)."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class IdGenerator:
    """
    Opaque task id factory.

    - With a working RandomSource: a random UUID4 string.
    - Otherwise: "<epoch-ms>_<hex suffix>" from the non-cryptographic PRNG.
      Unique in practice, but carries no cryptographic guarantee.
    """

    def __init__(
        self,
        source: RandomSource | None = None,
        *,
        clock=now_ms,
        fallback_rng: random.Random | None = None,
    ) -> None:
        self._source = source
        self._clock = clock
        self._rng = fallback_rng or random.Random()
        self._warned = False

    def generate(self) -> str:
        if self._source is not None:
            try:
                raw = self._source.token_bytes(16)
                if len(raw) == 16:
                    return str(uuid.UUID(bytes=raw, version=4))
            except (NotImplementedError, OSError):
                if not self._warned:
                    logger.warning("Random source unavailable; using time-based ids.")
                    self._warned = True
        return f"{self._clock()}_{self._rng.getrandbits(52):x}"

    __call__ = generate


_default = IdGenerator(SystemRandomSource())


def generate_id() -> str:
    return _default.generate()
