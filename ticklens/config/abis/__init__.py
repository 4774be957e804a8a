"""
Contract ABI package for the tick scanner.

Contains the contract ABIs organized by protocol/type.
"""

from .state_view import STATE_VIEW_ABI

__all__ = [
    # Uniswap v4
    'STATE_VIEW_ABI',
]
