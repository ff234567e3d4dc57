"""
HUD projection - the values the display panel shows each frame
"""

from mazequest.entities.collectible import powerup_label
from mazequest.utils.helpers import format_time, format_score


def hud_snapshot(state):
    """
    Collect display values from the game state

    Args:
        state: GameState

    Returns:
        Dictionary of raw and formatted HUD values
    """
    px, py = state.player.cell
    return {
        'level': state.level,
        'score': state.score,
        'score_text': format_score(state.score),
        'keys': state.keys,
        'keys_required': state.keys_required,
        'treasures': state.treasures,
        'elapsed': state.elapsed_seconds,
        'elapsed_text': format_time(state.elapsed_seconds),
        'powerup': state.active_powerup,
        'powerup_label': powerup_label(state.active_powerup),
        'powerup_remaining': state.powerup_timer if state.active_powerup else 0.0,
        'position': (px, py),
        'position_text': f"({px}, {py})",
        'progress': state.progress,
        'exit_unlocked': state.exit_unlocked,
        'game_over': state.game_over,
    }
