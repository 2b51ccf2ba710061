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

import dataclasses
import itertools
import logging

import log
import util
from cube import N_CORNERS, N_EDGES, MOVE_GROUP, Turn, parse_alg
from operations import CornerSwap, CornerTwist, EdgeSwap, EdgeFlip

################################################################################
## Modified sequences ##########################################################
################################################################################

@dataclasses.dataclass(frozen=True)
class Modifier:
    step: int
    operation: object

# A base sequence with a few steps replaced. The base is never touched;
# get_sequence() builds the modified copy. Two modified sequences are separate
# results even if they come out the same, so equality is identity.
class ModifiedSequence:
    def __init__(self, original, modifiers=()):
        self.original = tuple(original)
        self.modifiers = tuple(modifiers)

    def with_modifier(self, step, operation):
        return ModifiedSequence(self.original,
                self.modifiers + (Modifier(step, operation),))

    def get_sequence(self):
        sequence = list(self.original)
        for m in self.modifiers:
            if m.step < len(sequence):
                sequence[m.step] = m.operation
        return sequence

    def is_modified(self, step):
        return any(m.step == step for m in self.modifiers)

    def apply(self, state):
        for op in self.get_sequence():
            state = op.apply(state)
        return state

    def lines(self, indent=''):
        items = ['**%s**' % op if self.is_modified(i) else op
                for [i, op] in enumerate(self.get_sequence())]
        return util.step_lines(items, indent=indent)

    def __repr__(self):
        return 'ModifiedSequence(%d steps, modifiers=%s)' % (
                len(self.original), list(self.modifiers))

    def __str__(self):
        return '\n'.join(self.lines())

################################################################################
## Alternatives ################################################################
################################################################################

# Every other operation of the same kind. The buffer stays fixed; the target
# and orientation range over everything, the buffer slot included.

def corner_swap_alternatives(op):
    return [alt for alt in (CornerSwap(op.target1, t, o)
            for t in range(N_CORNERS) for o in range(3)) if alt != op]

def corner_twist_alternatives(op):
    return [alt for alt in (CornerTwist(t, o)
            for t in range(N_CORNERS) for o in (1, 2)) if alt != op]

def edge_swap_alternatives(op):
    return [alt for alt in (EdgeSwap(op.target1, t, o)
            for t in range(N_EDGES) for o in range(2)) if alt != op]

def edge_flip_alternatives(op):
    return [EdgeFlip(t) for t in range(N_EDGES) if t != op.target]

def turn_alternatives(turn):
    return [Turn(m) for m in MOVE_GROUP[turn.name] if m != turn.name]

CORNER_ALTERNATIVES = {
    CornerSwap: corner_swap_alternatives,
    CornerTwist: corner_twist_alternatives,
}
EDGE_ALTERNATIVES = {
    EdgeSwap: edge_swap_alternatives,
    EdgeFlip: edge_flip_alternatives,
}
MIXED_ALTERNATIVES = {**CORNER_ALTERNATIVES, **EDGE_ALTERNATIVES}
MOVE_ALTERNATIVES = {Turn: turn_alternatives}

# Operation kinds missing from the generator table have no alternatives
def generate_alternatives(op, generators=MIXED_ALTERNATIVES):
    gen = generators.get(type(op))
    if gen is None:
        return []
    return gen(op)

################################################################################
## Neighbourhood search ########################################################
################################################################################

# Enumerates every modified version of a base sequence with exactly one or
# exactly two steps replaced, along with the state it leads to from a given
# initial state. Results come out lazily, ordered by step (or step pair) and
# then by alternative.
class NearbySearch:
    def __init__(self, base, generators=MIXED_ALTERNATIVES):
        self.base = list(base)
        self.generators = generators
        self.step_alternatives = [generate_alternatives(op, generators)
                for op in self.base]

    def _run(self, state, start, stop=None):
        for op in self.base[start:stop]:
            state = op.apply(state)
        return state

    # State before each step, plus the final state
    def _prefix_states(self, state):
        states = [state]
        for op in self.base:
            states.append(op.apply(states[-1]))
        return states

    def iter_one_change(self, state):
        prefix = self._prefix_states(state)
        for [k, alternatives] in enumerate(self.step_alternatives):
            for alt in alternatives:
                modified = ModifiedSequence(self.base, [Modifier(k, alt)])
                yield (modified, self._run(alt.apply(prefix[k]), k + 1))

    def iter_two_changes(self, state):
        prefix = self._prefix_states(state)
        for [i, j] in itertools.combinations(range(len(self.base)), 2):
            for alt_i in self.step_alternatives[i]:
                middle = self._run(alt_i.apply(prefix[i]), i + 1, j)
                for alt_j in self.step_alternatives[j]:
                    modified = ModifiedSequence(self.base,
                            [Modifier(i, alt_i), Modifier(j, alt_j)])
                    yield (modified, self._run(alt_j.apply(middle), j + 1))

    def explore_one_change(self, state):
        return list(self.iter_one_change(state))

    def explore_two_changes(self, state):
        return list(self.iter_two_changes(state))

    def explore(self, state, max_distance=2):
        variants = self.explore_one_change(state)
        if max_distance >= 2:
            variants += self.explore_two_changes(state)
        log.LOGGER.log(logging.DEBUG, f"nearby search: {len(self.base)} steps, "
                f"{len(variants)} variants")
        return variants

    # Closed form variant counts, without enumerating anything
    def count_one_change(self):
        return sum(len(alts) for alts in self.step_alternatives)

    def count_two_changes(self):
        return sum(len(a) * len(b) for [a, b] in
                itertools.combinations(self.step_alternatives, 2))

################################################################################
## Move level search ###########################################################
################################################################################

# Several move sequences executed one after another, with one of them replaced
# by a modified version
class ModifiedSequenceCollection:
    def __init__(self, sequences, index=None, modified=None):
        self.sequences = [list(seq) for seq in sequences]
        self.index = index
        self.modified = modified

    def get_collection(self):
        collection = [list(seq) for seq in self.sequences]
        if self.modified is not None:
            collection[self.index] = [str(t) for t in self.modified.get_sequence()]
        return collection

    def apply(self, state):
        for seq in self.get_collection():
            state = state.run_alg(seq)
        return state

    def __str__(self):
        lines = []
        for [i, seq] in enumerate(self.sequences):
            if i == self.index:
                moves = ['**%s**' % t if self.modified.is_modified(k) else str(t)
                        for [k, t] in enumerate(self.modified.get_sequence())]
            else:
                moves = seq
            lines.append('Sequence %s: %s' % (i + 1, ' '.join(moves)))
        return '\n'.join(lines)

# Find every single-move slip (a turn replaced by another of its group) in a
# collection of move sequences that takes initial_state to target_state
def search_move_sequences(sequences, initial_state, target_state):
    sequences = [parse_alg(seq) for seq in sequences]
    results = []
    state = initial_state
    for [index, seq] in enumerate(sequences):
        search = NearbySearch([Turn(m) for m in seq], MOVE_ALTERNATIVES)
        for [modified, after] in search.iter_one_change(state):
            for rest in sequences[index + 1:]:
                after = after.run_alg(rest)
            if after == target_state:
                results.append(ModifiedSequenceCollection(sequences, index,
                        modified))
        state = state.run_alg(seq)
    log.LOGGER.log(logging.DEBUG, f"move search: {len(results)} matches")
    return results
