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

import logging

import config
import log
import util
from algdb import MoveSequenceCollection
from cube import scramble_to_state
from detector import MixedWrongOperationDetector
from inspection import inspect_cube
from search import search_move_sequences

class BldSolution:
    def __init__(self, corner_operations, edge_operations, parity,
            move_sequences):
        self.corner_operations = corner_operations
        self.edge_operations = edge_operations
        self.parity = parity
        # Execution order: edges, then corners
        self.all_operations = edge_operations + corner_operations
        self.move_sequences = move_sequences

    def lines(self):
        lines = ['Corners:']
        lines += util.step_lines(self.corner_operations, indent='  ') or ['  (none)']
        lines.append('Edges:')
        lines += util.step_lines(self.edge_operations, indent='  ') or ['  (none)']
        if self.parity:
            lines.append('Parity: yes')
        if len(self.move_sequences):
            lines.append('Algorithms:')
            lines += ['  ' + line for line in str(self.move_sequences).splitlines()]
        return lines

    def __str__(self):
        return '\n'.join(self.lines())

# Full blindfolded solve: corners, then edges with the parity swap if the
# corners needed one, then the algorithms for both if we have an algorithm
# database to translate with
class BldWorkflow:
    def __init__(self, translator=None):
        self.translator = translator

    def solve(self, state):
        [corners, edges, parity] = inspect_cube(state)
        move_sequences = MoveSequenceCollection()
        if self.translator is not None:
            move_sequences = (self.translator.convert_edges(edges) +
                    self.translator.convert_corners(corners))
        log.LOGGER.log(logging.INFO, f"solved: {len(corners)} corner and "
                f"{len(edges)} edge operations, {len(move_sequences)} algs, "
                f"parity={parity}")
        return BldSolution(corners, edges, parity, move_sequences)

# Variants of the combined edge+corner solution, with one or two operations
# changed, that end up in target_state (as reached by turning the cube)
def find_variants_reaching_target(initial_state, target_state):
    detector = MixedWrongOperationDetector(initial_state)
    matches = detector.detect(detector.from_physical(target_state))
    return [(modified, target_state) for modified in matches]

class CombinedSearchResult:
    def __init__(self, solution, operation_variants, move_variants,
            initial_state, target_state, scramble=None):
        self.solution = solution
        self.operation_variants = operation_variants
        self.move_variants = move_variants
        self.initial_state = initial_state
        self.target_state = target_state
        self.scramble = scramble

    def total_count(self):
        return len(self.operation_variants) + len(self.move_variants)

    def summary(self):
        lines = ['Total alternatives found: %s' % self.total_count(),
            '  - Operation-level alternatives: %s' % len(self.operation_variants),
            '  - Move-level alternatives: %s' % len(self.move_variants)]
        if self.total_count():
            lines.append('At least one alternative reaches the target state.')
        else:
            lines.append('No alternative reaches the target state.')
        return '\n'.join(lines)

    def display_detailed(self, max_variants=config.MAX_DISPLAYED_VARIANTS):
        lines = []
        if self.scramble:
            lines += ['Scramble:', '  ' + self.scramble, '']
        lines += ['Initial state:'] + util.state_lines(self.initial_state)
        lines += ['', 'Target state:'] + util.state_lines(self.target_state)
        lines += ['', '=== Original solution ===']
        lines += self.solution.lines()

        sections = [('Operation', [m for [m, _] in self.operation_variants]),
                ('Move', self.move_variants)]
        for [label, variants] in sections:
            lines.append('')
            if not variants:
                lines += ['=== %s variants ===' % label,
                        'No %s variants found.' % label.lower()]
                continue
            lines.append('=== %s variants (%s found) ===' % (label, len(variants)))
            for [i, variant] in enumerate(variants[:max_variants]):
                lines += ['', '%s variant %s:' % (label, i + 1)]
                lines += ['  ' + line for line in str(variant).splitlines()]
            if len(variants) > max_variants:
                lines.append('... and %s more %s variants' % (
                        len(variants) - max_variants, label.lower()))

        lines += ['', '=== Summary ===', self.summary()]
        return '\n'.join(lines)

# Look for what went wrong in a solve both ways: one or two wrong operations,
# or one wrong turn inside the algorithms
class CombinedSearch:
    def __init__(self, workflow):
        self.workflow = workflow

    def search(self, initial_state, target_state, scramble=None):
        solution = self.workflow.solve(initial_state)
        with util.time_execution('operation search'):
            operation_variants = find_variants_reaching_target(initial_state,
                    target_state)
        with util.time_execution('move search'):
            move_variants = search_move_sequences(
                    [seq.moves for seq in solution.move_sequences],
                    initial_state, target_state)
        return CombinedSearchResult(solution, operation_variants,
                move_variants, initial_state, target_state, scramble=scramble)

    def search_from_scramble(self, scramble, target_state):
        return self.search(scramble_to_state(scramble), target_state,
                scramble=scramble)
