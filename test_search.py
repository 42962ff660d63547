"""
Tests for the minimax AI player.

The opening search from an empty board walks the whole game tree, so
test_self_play_from_empty_board_is_a_draw takes a few seconds.

Usage:
    pytest test_search.py
    python test_search.py
"""

import sys

from logic.config import GameConfig
from logic.game_state import GameState, Mark, GameStatus, Outcome
from logic.ai_player import AIPlayer, best_move


def _self_play(state: GameState) -> Outcome:
    """Let the search play both sides until the game ends."""
    while state.outcome().is_ongoing:
        move = best_move(state, state.current_mover())
        assert state.legal(move), f"Search returned illegal move {move}"
        assert state.apply_move(move)
        if state.outcome().is_ongoing:
            state.switch_turn()
    return state.outcome()


def _reachable_states():
    """Every non-terminal position reachable through legal play, with its mover."""
    seen = {}

    def walk(state):
        key = (state.to_string(), state.current_mover())
        if key in seen or not state.outcome().is_ongoing:
            return
        seen[key] = state.copy()
        for position in state.empty_positions():
            state.apply_move(position)
            state.switch_turn()
            walk(state)
            state.switch_turn()
            state.undo_move(position)

    walk(GameState())
    return list(seen.values())


# ==================== IMMEDIATE TACTICS ====================

def test_completes_own_row():
    state = GameState.from_string("XX. OO. ...", current_player=Mark.X)
    assert best_move(state, Mark.X) == 3


def test_completes_row_with_quiet_opponent():
    state = GameState.from_string("XX. .O. O..", current_player=Mark.X)
    assert best_move(state, Mark.X) == 3


def test_blocks_opponent_row():
    state = GameState.from_string("XX. .O. ...", current_player=Mark.O)
    assert best_move(state, Mark.O) == 3


def test_blocks_opponent_column():
    state = GameState.from_string("X.. X.O ...", current_player=Mark.O)
    assert best_move(state, Mark.O) == 7


def test_wins_instead_of_blocking():
    # Both sides threaten, taking the win comes first
    state = GameState.from_string("OO. XX. X..", current_player=Mark.O)
    assert best_move(state, Mark.O) == 3


def test_no_depth_bonus_prefers_lowest_winning_index():
    # X can win at once on 9, but 2 forks (8 and 9) and also wins,
    # and ties go to the lower index
    state = GameState.from_string("X.O OX. ...", current_player=Mark.X)
    assert best_move(state, Mark.X) == 2


def test_last_empty_cell():
    state = GameState.from_string("XOX XOO OX.", current_player=Mark.X)
    assert best_move(state, Mark.X) == 9


def test_full_board_has_no_move():
    state = GameState.from_string("XOX XOO OXX", current_player=Mark.O)
    assert best_move(state, Mark.O) is None


# ==================== SCORING ====================

def test_evaluate_terminal_scores():
    ai = AIPlayer(Mark.X, verbose=False)
    assert ai.evaluate(GameState.from_string("XXX OO. ..."), maximizing=False) == GameConfig.WIN_SCORE
    assert ai.evaluate(GameState.from_string("OOO XX. X.."), maximizing=True) == GameConfig.LOSS_SCORE
    assert ai.evaluate(GameState.from_string("XOX XOO OXX"), maximizing=True) == GameConfig.DRAW_SCORE


def test_evaluate_forced_loss():
    # O to move can't cover all of X's threats (3, 8 and 9)
    ai = AIPlayer(Mark.O, verbose=False)
    state = GameState.from_string("XX. OXO ...", current_player=Mark.O)
    before = (state.to_string(), state.current_mover())
    assert ai.evaluate(state, maximizing=True) == GameConfig.LOSS_SCORE
    assert (state.to_string(), state.current_mover()) == before


def test_evaluate_places_mark_for_its_role():
    # The state says X to move, but maximizing means O plays 3 and wins
    ai = AIPlayer(Mark.O, verbose=False)
    state = GameState.from_string("OO. XX. X..", current_player=Mark.X)
    assert ai.evaluate(state, maximizing=True) == GameConfig.WIN_SCORE
    assert state.current_mover() == Mark.X
    assert state.to_string() == "OO.XX.X.."


# ==================== STATE RESTORATION ====================

def test_search_leaves_state_untouched():
    state = GameState.from_string("X.. .O. ..X", current_player=Mark.O)
    board_before = [list(row) for row in state.board]

    ai = AIPlayer(Mark.O, verbose=False)
    move = ai.get_best_move(state)

    assert move is not None
    assert state.board == board_before
    assert state.current_mover() == Mark.O
    assert ai.positions_evaluated > 0


def test_search_for_the_side_not_to_move_restores_mover():
    state = GameState.from_string("XX. .O. ...", current_player=Mark.X)
    assert best_move(state, Mark.O) == 3
    assert state.current_mover() == Mark.X
    assert state.to_string() == "XX..O...."


def test_best_move_is_always_legal():
    # Late positions only: the whole tree would be too slow to search from every node
    states = [s for s in _reachable_states() if len(s.empty_positions()) <= 4]
    assert states
    for state in states:
        snapshot = (state.to_string(), state.current_mover())
        move = best_move(state, state.current_mover())
        assert state.legal(move), snapshot
        assert (state.to_string(), state.current_mover()) == snapshot


def test_best_move_is_legal_in_early_positions():
    # First reachable position with 5, 6, 7 and 8 empty cells
    first_by_empties = {}
    for state in _reachable_states():
        first_by_empties.setdefault(len(state.empty_positions()), state)

    for empties in (5, 6, 7, 8):
        state = first_by_empties[empties]
        snapshot = (state.to_string(), state.current_mover())
        move = best_move(state, state.current_mover())
        assert state.legal(move), snapshot
        assert (state.to_string(), state.current_mover()) == snapshot


def test_move_suggestion():
    ai = AIPlayer(Mark.O, verbose=False)
    suggestion = ai.get_move_suggestion(GameState.from_string("XX. .O. ...", current_player=Mark.O))
    assert suggestion == "Place O at 3 (row 0, col 2)"
    assert ai.get_move_suggestion(GameState.from_string("XOX XOO OXX")) == "No moves available!"


# ==================== PERFECT PLAY ====================

def test_centre_opening_always_draws():
    # Corner replies hold the draw, an edge reply loses to best play
    for reply in (1, 3, 7, 9):
        state = GameState()
        assert state.apply_move(5)
        state.switch_turn()
        assert state.apply_move(reply)
        state.switch_turn()

        outcome = _self_play(state)
        assert outcome.status == GameStatus.DRAW, f"reply {reply}: {state.to_string()}"


def test_self_play_from_empty_board_is_a_draw():
    state = GameState()
    opening = best_move(state, Mark.X)
    assert opening == 1  # every opening scores 0, lowest index wins

    state.apply_move(opening)
    state.switch_turn()
    outcome = _self_play(state)
    assert outcome.status == GameStatus.DRAW, state.to_string()


if __name__ == "__main__":
    from test_modules import run_module_tests
    sys.exit(1 if run_module_tests(globals()) else 0)
