import random
import unittest

from funnections.config.game_settings import (
    MSG_START, MSG_WRONG_SIZE, MSG_CORRECT, MSG_WIN, MSG_INCORRECT, MSG_GAME_OVER,
)
from funnections.core import game_engine
from funnections.models.game import ActionResult, GameStatus

GROUPS = [
    ["A", "B", "C", "D"],
    ["E", "F", "G", "H"],
    ["I", "J", "K", "L"],
    ["M", "N", "O", "P"],
]


def _new_game(mistakes=4, seed=7):
    return game_engine.initialize(GROUPS, mistakes, "March 7, 2025", random.Random(seed))


def _tile_id(state, word):
    for tile in state.tiles:
        if tile.word == word:
            return tile.id
    raise KeyError(word)


def _select(state, words):
    for word in words:
        game_engine.toggle_tile(state, _tile_id(state, word))


def _snapshot(state):
    return (
        [(t.id, t.word, t.selected, t.group_id) for t in state.tiles],
        state.mistakes_left,
        [list(g) for g in state.remaining_groups],
        [list(g) for g in state.solved_groups],
        state.next_group_label,
        state.message,
    )


class TestInitialize(unittest.TestCase):
    def test_given_four_by_four_puzzle_when_initialized_then_sixteen_unique_tiles(self):
        state = _new_game()
        ids = sorted(t.id for t in state.tiles)
        self.assertEqual(ids, list(range(1, 17)))
        self.assertEqual(len(state.remaining_groups), 4)
        self.assertEqual(state.solved_groups, [])
        self.assertEqual(state.next_group_label, 0)
        self.assertEqual(state.mistakes_left, 4)
        self.assertEqual(state.message, MSG_START)
        self.assertEqual(state.date, "March 7, 2025")
        self.assertEqual(state.status, GameStatus.PLAYING)
        self.assertTrue(all(not t.selected and t.group_id == 0 for t in state.tiles))

    def test_given_puzzle_when_initialized_then_ids_follow_group_concatenation_order(self):
        state = _new_game()
        by_id = {t.id: t.word for t in state.tiles}
        words = [w for g in GROUPS for w in g]
        self.assertEqual([by_id[i] for i in range(1, 17)], words)

    def test_given_input_groups_when_initialized_then_answer_key_is_copied(self):
        groups = [list(g) for g in GROUPS]
        state = game_engine.initialize(groups, 4, "d", random.Random(1))
        groups[0].append("Z")
        self.assertEqual(state.remaining_groups[0], ["A", "B", "C", "D"])

    def test_given_many_seeds_when_initialized_then_tile_order_varies(self):
        orders = {
            tuple(t.id for t in game_engine.initialize(GROUPS, 4, "d", random.Random(seed)).tiles)
            for seed in range(20)
        }
        self.assertGreater(len(orders), 1)


class TestToggleAndDeselect(unittest.TestCase):
    def test_given_unsolved_tile_when_toggled_twice_then_state_restored(self):
        state = _new_game()
        before = _snapshot(state)
        tile_id = _tile_id(state, "C")

        _, result = game_engine.toggle_tile(state, tile_id)
        self.assertEqual(result, ActionResult.APPLIED)
        self.assertTrue(next(t for t in state.tiles if t.id == tile_id).selected)

        game_engine.toggle_tile(state, tile_id)
        self.assertEqual(_snapshot(state), before)

    def test_given_unknown_tile_id_when_toggled_then_ignored(self):
        state = _new_game()
        before = _snapshot(state)
        _, result = game_engine.toggle_tile(state, 999)
        self.assertEqual(result, ActionResult.IGNORED)
        self.assertEqual(_snapshot(state), before)

    def test_given_solved_tile_when_toggled_then_ignored(self):
        state = _new_game()
        _select(state, ["A", "B", "C", "D"])
        game_engine.submit(state)

        _, result = game_engine.toggle_tile(state, _tile_id(state, "A"))
        self.assertEqual(result, ActionResult.IGNORED)
        self.assertFalse(any(t.selected for t in state.tiles))

    def test_given_selection_when_deselect_all_then_nothing_selected(self):
        state = _new_game()
        _select(state, ["A", "F", "K"])
        _, result = game_engine.deselect_all(state)
        self.assertEqual(result, ActionResult.APPLIED)
        self.assertEqual(state.selected_tiles(), [])
        self.assertEqual(state.mistakes_left, 4)


class TestShuffle(unittest.TestCase):
    def test_given_partially_solved_board_when_shuffled_then_permutation_with_solved_last(self):
        state = _new_game()
        _select(state, ["E", "F", "G", "H"])
        game_engine.submit(state)
        _select(state, ["A", "I"])
        ids_before = sorted(t.id for t in state.tiles)
        solved_order = [t.id for t in state.tiles if t.group_id]

        _, result = game_engine.shuffle(state, random.Random(3))

        self.assertEqual(result, ActionResult.APPLIED)
        self.assertEqual(sorted(t.id for t in state.tiles), ids_before)
        self.assertEqual([t.id for t in state.tiles[-4:]], solved_order)
        self.assertTrue(all(t.group_id == 1 and not t.selected for t in state.tiles[-4:]))
        self.assertEqual(sorted(t.word for t in state.selected_tiles()), ["A", "I"])

    def test_given_fresh_board_when_shuffled_repeatedly_then_order_changes(self):
        state = _new_game()
        rng = random.Random(11)
        orders = set()
        for _ in range(10):
            game_engine.shuffle(state, rng)
            orders.add(tuple(t.id for t in state.tiles))
        self.assertGreater(len(orders), 1)


class TestSubmit(unittest.TestCase):
    def test_given_correct_selection_when_submitted_then_group_solved(self):
        state = _new_game()
        _select(state, ["E", "F", "G", "H"])

        _, result = game_engine.submit(state)

        self.assertEqual(result, ActionResult.CORRECT)
        self.assertEqual(len(state.remaining_groups), 3)
        self.assertEqual(state.solved_groups, [["E", "F", "G", "H"]])
        self.assertEqual(state.mistakes_left, 4)
        self.assertEqual(state.message, MSG_CORRECT)
        for tile in state.tiles:
            if tile.word in "EFGH":
                self.assertEqual(tile.group_id, 1)
                self.assertFalse(tile.selected)
            else:
                self.assertEqual(tile.group_id, 0)

    def test_given_incorrect_selection_when_submitted_then_mistake_consumed(self):
        state = _new_game()
        _select(state, ["A", "B", "C", "E"])

        _, result = game_engine.submit(state)

        self.assertEqual(result, ActionResult.INCORRECT)
        self.assertEqual(state.mistakes_left, 3)
        self.assertEqual(state.selected_tiles(), [])
        self.assertEqual(state.message, MSG_INCORRECT)
        self.assertEqual(len(state.remaining_groups), 4)

    def test_given_wrong_selection_size_when_submitted_then_only_message_changes(self):
        for words in (["A", "B", "C"], ["A", "B", "C", "D", "E"], []):
            state = _new_game()
            _select(state, words)
            _, result = game_engine.submit(state)
            self.assertEqual(result, ActionResult.WRONG_SELECTION_SIZE)
            self.assertEqual(state.message, MSG_WRONG_SIZE)
            self.assertEqual(state.mistakes_left, 4)
            self.assertEqual(len(state.selected_tiles()), len(words))

    def test_given_last_mistake_when_incorrect_submit_then_game_lost_and_frozen(self):
        state = _new_game(mistakes=1)
        _select(state, ["A", "B", "C", "E"])

        _, result = game_engine.submit(state)
        self.assertEqual(result, ActionResult.LOST)
        self.assertEqual(state.mistakes_left, 0)
        self.assertEqual(state.message, MSG_GAME_OVER)
        self.assertEqual(state.status, GameStatus.LOST)

        before = _snapshot(state)
        self.assertEqual(game_engine.submit(state)[1], ActionResult.GAME_FINISHED)
        self.assertEqual(game_engine.toggle_tile(state, 1)[1], ActionResult.GAME_FINISHED)
        self.assertEqual(game_engine.shuffle(state, random.Random(1))[1], ActionResult.GAME_FINISHED)
        self.assertEqual(game_engine.deselect_all(state)[1], ActionResult.GAME_FINISHED)
        self.assertEqual(_snapshot(state), before)
        self.assertEqual(state.mistakes_left, 0)

    def test_given_all_groups_in_any_order_when_solved_then_won_in_solve_order(self):
        state = _new_game()
        order = [GROUPS[2], GROUPS[0], GROUPS[3], GROUPS[1]]
        results = []
        for group in order:
            _select(state, group)
            results.append(game_engine.submit(state)[1])

        self.assertEqual(results, [ActionResult.CORRECT] * 3 + [ActionResult.WON])
        self.assertEqual(state.remaining_groups, [])
        self.assertEqual(state.solved_groups, order)
        self.assertEqual(state.message, MSG_WIN)
        self.assertEqual(state.status, GameStatus.WON)
        self.assertEqual(game_engine.status(state), GameStatus.WON)
        labels = {t.word: t.group_id for t in state.tiles}
        self.assertEqual(labels["I"], 1)
        self.assertEqual(labels["A"], 2)
        self.assertEqual(labels["M"], 3)
        self.assertEqual(labels["E"], 4)
        self.assertEqual(game_engine.submit(state)[1], ActionResult.GAME_FINISHED)

    def test_given_mixed_case_selection_when_submitted_then_matches_case_insensitively(self):
        groups = [["a", "B", "c", "D"], GROUPS[1], GROUPS[2], GROUPS[3]]
        state = game_engine.initialize(groups, 4, "d", random.Random(2))
        state.remaining_groups[0] = ["A", "B", "C", "D"]
        _select(state, ["a", "B", "c", "D"])

        _, result = game_engine.submit(state)

        self.assertEqual(result, ActionResult.CORRECT)
        self.assertEqual(state.solved_groups, [["A", "B", "C", "D"]])

    def test_given_duplicate_words_when_matching_then_multiset_and_first_group_wins(self):
        groups = [["M", "N", "O", "N"], ["M", "N", "O", "P"]]
        self.assertIsNone(game_engine.find_matching_group(groups, ["M", "N", "O", "O"]))
        self.assertEqual(game_engine.find_matching_group(groups, ["n", "M", "N", "o"]), 0)
        self.assertEqual(game_engine.find_matching_group([["X", "Y", "Z", "W"]] * 2, ["W", "X", "Y", "Z"]), 0)


if __name__ == '__main__':
    unittest.main()
