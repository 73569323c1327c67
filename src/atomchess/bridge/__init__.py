"""Qt adapter package: signal/slot access to the rule engine."""

from atomchess.bridge.qt_bridge import GameBridge

__all__ = ["GameBridge"]
