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

import collections
import itertools

import util
from inspection import (SWAP_INSPECTION_PAIR, inspect_corners, inspect_edges,
        inspect_cube)
from operations import EdgeSwap, count_swaps
from search import (NearbySearch, CORNER_ALTERNATIVES, EDGE_ALTERNATIVES,
        MIXED_ALTERNATIVES)

# Given the state a solve started from, work out which one or two operations of
# the correct solution were done wrong to end up in some other state. Every
# variant is computed up front; detect() is then just a lookup.
class WrongOperationDetector:
    kind = None
    generators = None

    def __init__(self, initial_state):
        self.initial_state = initial_state
        [self.correct_solution, self.parity] = self.inspect(initial_state)

        search = NearbySearch(self.correct_solution, self.generators)
        with util.time_execution('%s detector index' % self.kind):
            self.one_change_variants = search.explore_one_change(initial_state)
            self.two_change_variants = search.explore_two_changes(initial_state)

        self.by_state = collections.defaultdict(list)
        for [modified, state] in self.variants():
            self.by_state[state].append(modified)

    def inspect(self, state):
        raise NotImplementedError()

    def variants(self):
        return itertools.chain(self.one_change_variants,
                self.two_change_variants)

    def variant_count(self):
        return len(self.one_change_variants) + len(self.two_change_variants)

    # All modified sequences that lead to exactly this state. Empty if none do,
    # which just means it wasn't a one or two operation mistake.
    def detect(self, observed_state):
        return list(self.by_state.get(observed_state, ()))

    # A physical solve fixes corner parity with an alg that also exchanges UF
    # and UR, which the operations don't model. Undo that so a state reached
    # by actually turning the cube can be looked up.
    def from_physical(self, state):
        if self.parity:
            [a, b] = SWAP_INSPECTION_PAIR
            return EdgeSwap(a, b, 0).apply(state)
        return state

    def format_detection_result(self, observed_state):
        lines = ['Initial state:']
        lines += util.state_lines(self.initial_state)
        lines += ['', 'Correct solution:']
        lines += util.step_lines(self.correct_solution, indent='  ')
        lines += ['', 'Observed state:']
        lines += util.state_lines(observed_state)
        lines.append('')

        matches = self.detect(observed_state)
        if not matches:
            lines.append('No matching wrong operation found.')
            lines.append('The state might not be reachable by changing one or '
                    'two operations.')
        else:
            lines.append('Found %s possible wrong operation(s):' % len(matches))
            for [i, modified] in enumerate(matches):
                lines += ['', 'Possibility %s:' % (i + 1), 'Did you apply:']
                lines += modified.lines(indent='  ')
        return '\n'.join(lines)

class CornerWrongOperationDetector(WrongOperationDetector):
    kind = 'corner'
    generators = CORNER_ALTERNATIVES

    def inspect(self, state):
        operations = inspect_corners(state)
        return [operations, count_swaps(operations) % 2 == 1]

class EdgeWrongOperationDetector(WrongOperationDetector):
    kind = 'edge'
    generators = EDGE_ALTERNATIVES

    def inspect(self, state):
        return [inspect_edges(state), False]

# Both piece kinds in the order they're executed: edges first, then corners
class MixedWrongOperationDetector(WrongOperationDetector):
    kind = 'mixed'
    generators = MIXED_ALTERNATIVES

    def inspect(self, state):
        [corners, edges, parity] = inspect_cube(state)
        return [edges + corners, parity]

DETECTORS = {
    'corner': CornerWrongOperationDetector,
    'edge': EdgeWrongOperationDetector,
    'mixed': MixedWrongOperationDetector,
}
