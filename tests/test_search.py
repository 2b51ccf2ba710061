# This file is part of bldcheck.
#
# bldcheck is free software: you can redistribute it and/or modify it under the
# terms of the GNU Affero General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# bldcheck is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Affero General Public License for more
# details.
#
# You should have received a copy of the GNU Affero General Public License
# along with bldcheck.  If not, see <https://www.gnu.org/licenses/>.

from math import comb

import pytest

from conftest import make_state
from cube import SOLVED, Turn, scramble_to_state
from inspection import inspect_corners, inspect_edges, inspect_cube
from operations import CornerSwap, CornerTwist, EdgeSwap, EdgeFlip
from search import (CORNER_ALTERNATIVES, EDGE_ALTERNATIVES, MOVE_ALTERNATIVES,
        ModifiedSequence, ModifiedSequenceCollection, Modifier, NearbySearch,
        corner_swap_alternatives, corner_twist_alternatives,
        edge_flip_alternatives, edge_swap_alternatives, generate_alternatives,
        search_move_sequences, turn_alternatives)

################################################################################
## Modified sequences ##########################################################
################################################################################

BASE = [CornerSwap(2, 0, 0), CornerSwap(2, 1, 0), CornerTwist(4, 1)]

def test_modified_sequence_overlays_steps():
    modified = ModifiedSequence(BASE, [Modifier(1, CornerSwap(2, 5, 2))])
    assert modified.get_sequence() == [CornerSwap(2, 0, 0), CornerSwap(2, 5, 2),
            CornerTwist(4, 1)]
    assert modified.is_modified(1)
    assert not modified.is_modified(0)
    assert list(modified.original) == BASE

def test_modified_sequence_multiple_modifiers():
    modified = ModifiedSequence(BASE).with_modifier(0, CornerSwap(2, 3, 1))
    modified = modified.with_modifier(2, CornerTwist(4, 2))
    assert modified.get_sequence() == [CornerSwap(2, 3, 1), CornerSwap(2, 1, 0),
            CornerTwist(4, 2)]
    assert [m.step for m in modified.modifiers] == [0, 2]

def test_modifier_past_end_is_ignored():
    modified = ModifiedSequence(BASE, [Modifier(7, CornerTwist(0, 1))])
    assert modified.get_sequence() == BASE

def test_modified_sequence_display():
    modified = ModifiedSequence(BASE, [Modifier(1, CornerSwap(2, 5, 2))])
    assert str(modified).splitlines() == [
        'Step 1: Swap: UFR ↔ UBL',
        'Step 2: **Swap: UFR ↔ RDB**',
        'Step 3: Twist: BDL',
    ]

def test_modified_sequences_are_distinct_results():
    a = ModifiedSequence(BASE, [Modifier(0, CornerSwap(2, 3, 1))])
    b = ModifiedSequence(BASE, [Modifier(0, CornerSwap(2, 3, 1))])
    assert a.get_sequence() == b.get_sequence()
    assert a != b

################################################################################
## Alternatives ################################################################
################################################################################

@pytest.mark.parametrize('op, gen, count', [
    (CornerSwap(2, 5, 2), corner_swap_alternatives, 23),
    (CornerSwap(2, 2, 0), corner_swap_alternatives, 23),
    (CornerTwist(3, 1), corner_twist_alternatives, 15),
    (EdgeSwap(6, 11, 1), edge_swap_alternatives, 23),
    (EdgeFlip(4), edge_flip_alternatives, 11),
])
def test_alternative_counts(op, gen, count):
    alternatives = gen(op)
    assert len(alternatives) == count
    assert len(set(alternatives)) == count
    assert op not in alternatives
    assert all(type(alt) is type(op) for alt in alternatives)
    assert generate_alternatives(op) == alternatives

def test_swap_alternatives_keep_buffer():
    assert all(alt.target1 == 2
            for alt in corner_swap_alternatives(CornerSwap(2, 0, 0)))
    assert all(alt.target1 == 6
            for alt in edge_swap_alternatives(EdgeSwap(6, 0, 0)))

def test_twist_alternatives_never_zero():
    assert all(alt.orientation in (1, 2)
            for alt in corner_twist_alternatives(CornerTwist(0, 1)))

def test_alternatives_by_kind():
    assert generate_alternatives(EdgeFlip(0), CORNER_ALTERNATIVES) == []
    assert generate_alternatives(CornerTwist(0, 1), EDGE_ALTERNATIVES) == []
    assert len(generate_alternatives(EdgeFlip(0), EDGE_ALTERNATIVES)) == 11

def test_turn_alternatives():
    assert turn_alternatives(Turn('U')) == [Turn("U'"), Turn('U2'), Turn('u'),
            Turn("u'"), Turn('u2')]
    assert turn_alternatives(Turn('M2')) == [Turn('M'), Turn("M'")]
    assert generate_alternatives(Turn('R'), MOVE_ALTERNATIVES) == \
            turn_alternatives(Turn('R'))

################################################################################
## Neighbourhood search ########################################################
################################################################################

def expected_counts(ops, swap_alts, other_alts):
    s = sum(1 for op in ops if isinstance(op, (CornerSwap, EdgeSwap)))
    t = len(ops) - s
    one = swap_alts * s + other_alts * t
    two = (comb(s, 2) * swap_alts * swap_alts + s * t * swap_alts * other_alts +
            comb(t, 2) * other_alts * other_alts)
    return [one, two]

@pytest.mark.parametrize('ops', [
    [],
    [CornerSwap(2, 0, 0)],
    [CornerSwap(2, 0, 0), CornerTwist(3, 1)],
    [CornerTwist(0, 1), CornerTwist(3, 2)],
    [CornerSwap(2, 0, 2), CornerSwap(2, 3, 2), CornerSwap(2, 6, 1),
        CornerTwist(1, 1)],
])
def test_corner_counts(ops):
    search = NearbySearch(ops, CORNER_ALTERNATIVES)
    [one, two] = expected_counts(ops, 23, 15)
    assert search.count_one_change() == one
    assert search.count_two_changes() == two
    assert len(search.explore_one_change(SOLVED)) == one
    assert len(search.explore_two_changes(SOLVED)) == two

@pytest.mark.parametrize('ops', [
    [EdgeFlip(0)],
    [EdgeFlip(0), EdgeFlip(1)],
    [EdgeSwap(6, 0, 0), EdgeSwap(6, 1, 0), EdgeFlip(3)],
])
def test_edge_counts(ops):
    search = NearbySearch(ops, EDGE_ALTERNATIVES)
    [one, two] = expected_counts(ops, 23, 11)
    assert len(search.explore_one_change(SOLVED)) == one
    assert len(search.explore_two_changes(SOLVED)) == two

def test_swap_and_twist_pair():
    search = NearbySearch([CornerSwap(2, 0, 0), CornerTwist(3, 1)],
            CORNER_ALTERNATIVES)
    assert search.count_one_change() == 38
    assert search.count_two_changes() == 345

def test_single_swap_scenario():
    state = make_state(cp=[2, 1, 0, 3, 4, 5, 6, 7])
    ops = inspect_corners(state)
    assert len(ops) == 1
    search = NearbySearch(ops, CORNER_ALTERNATIVES)
    assert len(search.explore_one_change(state)) == 23
    assert search.explore_two_changes(state) == []

def test_enumeration_order():
    ops = [CornerSwap(2, 0, 0), CornerSwap(2, 1, 0), CornerTwist(4, 1)]
    search = NearbySearch(ops, CORNER_ALTERNATIVES)
    one = [m.modifiers for [m, _] in search.iter_one_change(SOLVED)]
    assert one[0] == (Modifier(0, CornerSwap(2, 0, 1)),)
    assert [mods[0].step for mods in one] == [0] * 23 + [1] * 23 + [2] * 15

    two = [m.modifiers for [m, _] in search.iter_two_changes(SOLVED)]
    steps = [(a.step, b.step) for [a, b] in two]
    assert steps == [(0, 1)] * 529 + [(0, 2)] * 345 + [(1, 2)] * 345
    assert two[0] == (Modifier(0, CornerSwap(2, 0, 1)),
            Modifier(1, CornerSwap(2, 0, 0)))
    assert two[1] == (Modifier(0, CornerSwap(2, 0, 1)),
            Modifier(1, CornerSwap(2, 0, 1)))

@pytest.mark.parametrize('scramble', ["R U R'", "L' B D2 F"])
def test_recorded_states_match_sequences(scramble):
    state = scramble_to_state(scramble)
    ops = inspect_corners(state)
    search = NearbySearch(ops, CORNER_ALTERNATIVES)
    for [modified, final] in search.explore(state):
        assert modified.apply(state) == final

def test_recorded_edge_states_match_sequences():
    state = scramble_to_state("U' R U R'")
    search = NearbySearch(inspect_edges(state), EDGE_ALTERNATIVES)
    variants = search.explore(state)
    assert len(variants) == 46 + 529
    for [modified, final] in variants:
        assert modified.apply(state) == final

def test_mixed_search():
    state = scramble_to_state("R U R' U' R' F R2 U' R' U' R U R' F'")
    [corners, edges, _] = inspect_cube(state)
    search = NearbySearch(edges + corners)
    assert search.count_one_change() == 69
    assert search.count_two_changes() == 3 * 529
    for [modified, final] in search.explore(state, max_distance=1):
        assert modified.apply(state) == final

def test_nothing_is_filtered():
    search = NearbySearch([CornerSwap(2, 0, 0)], CORNER_ALTERNATIVES)
    finals = [final for [_, final] in search.explore(SOLVED)]
    assert len(finals) == 23
    assert not all(final.is_solved() for final in finals)

################################################################################
## Move level search ###########################################################
################################################################################

def test_move_search_finds_wrong_turn():
    initial = scramble_to_state("R D R' U' R D' R'")
    sequences = [['R', 'D', "R'"], ['U'], ['R', "D'", "R'"]]
    assert initial.run_alg(sum(sequences, [])) == SOLVED

    # U2 instead of U in the second sequence
    target = initial.run_alg("R D R' U2 R D' R'")
    results = search_move_sequences(sequences, initial, target)
    assert len(results) == 1
    [result] = results
    assert result.index == 1
    assert result.get_collection() == [['R', 'D', "R'"], ['U2'],
            ['R', "D'", "R'"]]
    assert result.apply(initial) == target
    assert str(result).splitlines()[1] == 'Sequence 2: **U2**'

def test_move_search_no_match():
    initial = scramble_to_state("R U")
    assert search_move_sequences([["U'", "R'"]], initial,
            scramble_to_state('F B')) == []

def test_modified_collection_without_modifier():
    collection = ModifiedSequenceCollection([['R'], ['U']])
    assert collection.get_collection() == [['R'], ['U']]
    assert collection.apply(SOLVED) == scramble_to_state('R U')
