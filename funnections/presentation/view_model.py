"""
View Model Builder

Maps a GameState onto the render-ready GameView sent to clients.
"""

from typing import List

from ..models.game import GameState, GameStatus, Tile
from ..models.view import GameView, SolvedGroupView, TileView


def build_game_view(state: GameState, game_id: str, version: int = 0) -> GameView:
    """
    Builds a serializable snapshot of the game.

    Pure function: reads the state and never modifies it.

    Args:
        state: Current game state
        game_id: Session identifier echoed back to the client
        version: Session action counter at the time of the snapshot

    Returns:
        GameView ready for dataclasses.asdict / jsonify
    """
    game_status = state.status
    playing = game_status is GameStatus.PLAYING

    return GameView(
        game_id=game_id,
        date=state.date,
        message=state.message,
        status=game_status.value,
        game_over=not playing,
        won=game_status is GameStatus.WON,
        mistakes_left=state.mistakes_left,
        mistake_budget=state.mistake_budget,
        mistake_indicators=list(range(1, max(0, state.mistakes_left) + 1)),
        tiles=[_tile_view(tile, playing) for tile in state.tiles],
        solved_groups=[
            SolvedGroupView(label=index + 1, words=list(words))
            for index, words in enumerate(state.solved_groups)
        ],
        groups_remaining=len(state.remaining_groups),
        selected_count=len(state.selected_tiles()),
        version=version,
    )


def _tile_view(tile: Tile, playing: bool) -> TileView:
    return TileView(
        id=tile.id,
        word=tile.word,
        selected=tile.selected,
        group_id=tile.group_id,
        css_class=tile_css_class(tile),
        interactive=playing and not tile.solved,
    )


def tile_css_class(tile: Tile) -> str:
    classes: List[str] = ["tile"]
    if tile.selected:
        classes.append("selected")
    if tile.group_id > 0:
        classes.append(f"group-{tile.group_id}")
    return " ".join(classes)
