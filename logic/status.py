"""
Status text for TicTacToe.
Turns a GameState into the line of text shown under the board.
"""

from typing import Optional

from .config import GameConfig
from .game_state import GameState, Phase


def describe(game_state: GameState, config: Optional[GameConfig] = None) -> str:
    """
    Describe the game phase for the player.

    Args:
        game_state: The state to describe.
        config: Supplies the message texts (default: GameConfig()).

    Returns:
        The status message.
    """
    config = config or GameConfig()

    if game_state.phase == Phase.WON:
        return config.WIN_MESSAGE.format(mark=game_state.winner.value)
    if game_state.phase == Phase.DRAWN:
        return config.DRAW_MESSAGE

    if game_state.current_turn == config.COMPUTER_MARK:
        return config.THINKING_MESSAGE
    if not game_state.moves:
        return config.START_MESSAGE
    return config.YOUR_TURN_MESSAGE


def status_style(game_state: GameState) -> Optional[str]:
    """Style tag for the status line: "winner", "draw", or None while playing."""
    if game_state.phase == Phase.WON:
        return "winner"
    if game_state.phase == Phase.DRAWN:
        return "draw"
    return None
