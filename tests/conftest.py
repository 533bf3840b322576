from __future__ import annotations

import logging

import pytest

from oboBridge.ids.codec import PrefixContext
from oboBridge.ids.node_id import AtomicCounter, NodeIdGenerator


@pytest.fixture
def ctx() -> PrefixContext:
    """Context of an ontology whose header declares ``ontology: test``."""

    return PrefixContext(ontology_id="test")


@pytest.fixture
def generator() -> NodeIdGenerator:
    return NodeIdGenerator(AtomicCounter())


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep user config and env overrides out of every test."""

    monkeypatch.delenv("OBOBRIDGE_CONFIG", raising=False)
    monkeypatch.delenv("OBOBRIDGE_ONTOLOGY_ID", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_json_loggers():
    """Drop handlers bound to streams captured by earlier tests."""

    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("obobridge."):
            logging.getLogger(name).handlers.clear()
