"""
Errors raised by players while choosing a move.
"""


class StrategyError(Exception):
    """A player could not produce a move. The game loop aborts the game."""


class InputClosedError(StrategyError):
    """The interactive input stream ended before a move was entered."""
