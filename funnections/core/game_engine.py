"""
Game Engine

Rules of the puzzle as plain functions over an explicit GameState.

Every mutating function checks the game status first and leaves a finished
game untouched. Functions mutate the state in place and return it together
with an ActionResult describing what happened.
"""

import random
from collections import Counter
from typing import Optional, Sequence, Tuple

from ..config.game_settings import (
    MSG_START, MSG_WRONG_SIZE, MSG_CORRECT, MSG_WIN, MSG_INCORRECT, MSG_GAME_OVER,
    GROUP_SIZE
)
from ..models.game import ActionResult, GameState, GameStatus, Tile

EngineResult = Tuple[GameState, ActionResult]


def initialize(word_groups: Sequence[Sequence[str]],
               mistake_budget: int,
               date: str,
               rng: Optional[random.Random] = None) -> GameState:
    """
    Creates a fresh game from the answer key.

    Tiles get ids 1..N in the order the words appear across the groups,
    then the grid is shuffled uniformly.

    Args:
        word_groups: The answer key, four groups of four words
        mistake_budget: Number of incorrect submissions allowed
        date: Puzzle date label shown to the player
        rng: Random source, defaults to a freshly seeded generator

    Returns:
        GameState ready to play
    """
    rng = rng or random.Random()
    words = [word for group in word_groups for word in group]
    tiles = [Tile(id=index + 1, word=word) for index, word in enumerate(words)]
    rng.shuffle(tiles)

    return GameState(
        tiles=tiles,
        mistakes_left=mistake_budget,
        mistake_budget=mistake_budget,
        remaining_groups=[list(group) for group in word_groups],
        date=date,
        message=MSG_START,
    )


def status(state: GameState) -> GameStatus:
    return state.status


def toggle_tile(state: GameState, tile_id: int) -> EngineResult:
    """Flips selection of an unsolved tile; unknown or solved tiles are ignored."""
    if state.game_over:
        return state, ActionResult.GAME_FINISHED

    for tile in state.tiles:
        if tile.id == tile_id:
            if tile.solved:
                return state, ActionResult.IGNORED
            tile.selected = not tile.selected
            return state, ActionResult.APPLIED

    return state, ActionResult.IGNORED


def deselect_all(state: GameState) -> EngineResult:
    if state.game_over:
        return state, ActionResult.GAME_FINISHED

    _clear_selection(state)
    return state, ActionResult.APPLIED


def shuffle(state: GameState, rng: Optional[random.Random] = None) -> EngineResult:
    """
    Reorders the unsolved tiles randomly.

    Solved tiles are moved after the unsolved ones and keep their relative order.
    """
    if state.game_over:
        return state, ActionResult.GAME_FINISHED

    rng = rng or random.Random()
    unsolved = [tile for tile in state.tiles if not tile.solved]
    solved = [tile for tile in state.tiles if tile.solved]
    rng.shuffle(unsolved)
    state.tiles = unsolved + solved
    return state, ActionResult.APPLIED


def submit(state: GameState) -> EngineResult:
    """
    Checks the current selection against the remaining groups.

    A correct guess labels the tiles with the next solve number and moves the
    group from remaining to solved. An incorrect guess costs one mistake and
    clears the selection. A selection of the wrong size changes nothing but
    the message.
    """
    if state.game_over:
        return state, ActionResult.GAME_FINISHED

    selected = state.selected_tiles()
    if len(selected) != GROUP_SIZE:
        state.message = MSG_WRONG_SIZE
        return state, ActionResult.WRONG_SELECTION_SIZE

    group_index = find_matching_group(state.remaining_groups, [tile.word for tile in selected])

    if group_index is None:
        state.mistakes_left = max(0, state.mistakes_left - 1)
        _clear_selection(state)
        if state.mistakes_left <= 0:
            state.message = MSG_GAME_OVER
            return state, ActionResult.LOST
        state.message = MSG_INCORRECT
        return state, ActionResult.INCORRECT

    state.next_group_label += 1
    matched = state.remaining_groups.pop(group_index)
    state.solved_groups.append(list(matched))
    for tile in selected:
        tile.selected = False
        tile.group_id = state.next_group_label

    if not state.remaining_groups:
        state.message = MSG_WIN
        return state, ActionResult.WON
    state.message = MSG_CORRECT
    return state, ActionResult.CORRECT


def find_matching_group(groups: Sequence[Sequence[str]], words: Sequence[str]) -> Optional[int]:
    """
    Index of the first group equal to ``words`` as a case-insensitive multiset.

    Returns None when no group matches.
    """
    guess = _fold(words)
    for index, group in enumerate(groups):
        if _fold(group) == guess:
            return index
    return None


def _fold(words: Sequence[str]) -> Counter:
    return Counter(word.casefold() for word in words)


def _clear_selection(state: GameState) -> None:
    for tile in state.tiles:
        tile.selected = False
