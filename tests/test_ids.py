# tests/test_ids.py

from __future__ import annotations

import logging
import random
import uuid

from todo_engine.core.ids import IdGenerator, SystemRandomSource, generate_id

from .fakes import FailingRandomSource, FixedRandomSource


def test_strong_source_yields_uuid4_strings() -> None:
    gen = IdGenerator(FixedRandomSource())
    a, b = gen.generate(), gen()
    assert a != b
    assert uuid.UUID(a).version == 4
    assert uuid.UUID(b).version == 4


def test_missing_source_falls_back_to_time_and_suffix() -> None:
    gen = IdGenerator(None, clock=lambda: 1234, fallback_rng=random.Random(7))
    value = gen.generate()
    prefix, suffix = value.split("_")
    assert prefix == "1234"
    int(suffix, 16)


def test_failing_source_falls_back_and_warns_once(caplog) -> None:
    source = FailingRandomSource()
    gen = IdGenerator(source, clock=lambda: 99, fallback_rng=random.Random(1))

    with caplog.at_level(logging.WARNING, logger="todo_engine.core.ids"):
        values = {gen.generate() for _ in range(50)}

    assert len(values) == 50
    assert all(v.startswith("99_") for v in values)
    assert source.calls == 50
    warnings = [r for r in caplog.records if "Random source unavailable" in r.getMessage()]
    assert len(warnings) == 1


def test_default_generator_uses_system_randomness() -> None:
    values = {generate_id() for _ in range(100)}
    assert len(values) == 100
    assert all(len(v) == 36 for v in values)
    assert len(SystemRandomSource().token_bytes(16)) == 16
