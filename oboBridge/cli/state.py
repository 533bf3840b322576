"""Per-invocation state shared by CLI commands."""

from __future__ import annotations

from oboBridge.config import BridgeConfig
from oboBridge.ids.codec import PrefixContext
from oboBridge.utils.log_json import ConversionLog


class BridgeState:
    def __init__(self, config: BridgeConfig) -> None:
        self.config = config
        self.context = PrefixContext.from_config(config)
        self.log = ConversionLog.from_config(config.logging)
