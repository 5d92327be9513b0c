"""
Tharsis - Terraforming Mars Rules Engine

A deterministic engine for the card and board rules of Terraforming Mars.
It loads card catalogs and provides:
- Game state management (board, players, deck)
- Card, action and standard project resolution
- Legal action generation
- Exhaustive search over one player's generation
"""

__version__ = "0.1.0"
