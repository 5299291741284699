"""
Minesweeper agents module.

Provides agents that play through MinesweeperEnv:
- BaseAgent: Board-aware interface with reveal/flag action encoding
- FlaggingAgent: Flags proven mines, reveals proven safe cells, guesses otherwise
"""
from .base_agent import BaseAgent
from .flagging_agent import FlaggingAgent

__all__ = [
    "BaseAgent",
    "FlaggingAgent",
]
