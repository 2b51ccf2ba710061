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

################################################################################
## Cube state ##################################################################
################################################################################

N_CORNERS = 8
N_EDGES = 12

SOLVED_CP = tuple(range(N_CORNERS))
SOLVED_CO = (0,) * N_CORNERS
SOLVED_EP = tuple(range(N_EDGES))
SOLVED_EO = (0,) * N_EDGES

class NotationError(ValueError):
    pass

# A cube state: corner permutation/orientation and edge permutation/orientation.
# Everything is stored in tuples, so states are immutable and can be shared,
# hashed and compared freely. cp and ep are assumed to be permutations; nothing
# here checks that.
class State:
    def __init__(self, cp=SOLVED_CP, co=SOLVED_CO, ep=SOLVED_EP, eo=SOLVED_EO):
        self.cp = tuple(cp)
        self.co = tuple(co)
        self.ep = tuple(ep)
        self.eo = tuple(eo)

    # Compose with a move transform. Slot i of the result gets the piece that
    # was in slot move.cp[i], with the move's orientation change added
    def apply_move(self, move):
        cp = tuple(self.cp[i] for i in move.cp)
        co = tuple((self.co[i] + t) % 3 for [i, t] in zip(move.cp, move.co))
        ep = tuple(self.ep[i] for i in move.ep)
        eo = tuple((self.eo[i] + f) % 2 for [i, f] in zip(move.ep, move.eo))
        return State(cp, co, ep, eo)

    def run_alg(self, alg):
        state = self
        for move in parse_alg(alg):
            state = state.apply_move(MOVES[move])
        return state

    def with_corners(self, cp, co):
        return State(cp, co, self.ep, self.eo)

    def with_edges(self, ep, eo):
        return State(self.cp, self.co, ep, eo)

    def corners_solved(self):
        return self.cp == SOLVED_CP and self.co == SOLVED_CO

    def edges_solved(self):
        return self.ep == SOLVED_EP and self.eo == SOLVED_EO

    def is_solved(self):
        return self == SOLVED

    def _key(self):
        return (self.cp, self.co, self.ep, self.eo)

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return 'State(cp=%s, co=%s, ep=%s, eo=%s)' % (list(self.cp),
                list(self.co), list(self.ep), list(self.eo))

    def __str__(self):
        return '\n'.join('%s: %s' % (name, list(value)) for [name, value] in
                zip(('cp', 'co', 'ep', 'eo'), self._key()))

SOLVED = State()

################################################################################
## Moves #######################################################################
################################################################################

Z8 = SOLVED_CO
Z12 = SOLVED_EO

# Clockwise quarter turns as move transforms, in the convention used by
# State.apply_move. Lowercase is a wide (two layer) turn. M follows L, E follows
# D and S follows F.
BASE_MOVES = {
    'U': ([3, 0, 1, 2, 4, 5, 6, 7], Z8,
        [0, 1, 2, 3, 7, 4, 5, 6, 8, 9, 10, 11], Z12),
    'u': ([3, 0, 1, 2, 4, 5, 6, 7], Z8,
        [3, 0, 1, 2, 7, 4, 5, 6, 8, 9, 10, 11],
        [1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0]),
    'D': ([0, 1, 2, 3, 5, 6, 7, 4], Z8,
        [0, 1, 2, 3, 4, 5, 6, 7, 9, 10, 11, 8], Z12),
    'd': ([0, 1, 2, 3, 5, 6, 7, 4], Z8,
        [1, 2, 3, 0, 4, 5, 6, 7, 9, 10, 11, 8],
        [1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0]),
    'L': ([4, 1, 2, 0, 7, 5, 6, 3], [2, 0, 0, 1, 1, 0, 0, 2],
        [11, 1, 2, 7, 4, 5, 6, 0, 8, 9, 10, 3], Z12),
    'l': ([4, 1, 2, 0, 7, 5, 6, 3], [2, 0, 0, 1, 1, 0, 0, 2],
        [11, 1, 2, 7, 8, 5, 4, 0, 10, 9, 6, 3],
        [0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 1, 0]),
    'R': ([0, 2, 6, 3, 4, 1, 5, 7], [0, 1, 2, 0, 0, 2, 1, 0],
        [0, 5, 9, 3, 4, 2, 6, 7, 8, 1, 10, 11], Z12),
    'r': ([0, 2, 6, 3, 4, 1, 5, 7], [0, 1, 2, 0, 0, 2, 1, 0],
        [0, 5, 9, 3, 6, 2, 10, 7, 4, 1, 8, 11],
        [0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 1, 0]),
    'F': ([0, 1, 3, 7, 4, 5, 2, 6], [0, 0, 1, 2, 0, 0, 2, 1],
        [0, 1, 6, 10, 4, 5, 3, 7, 8, 9, 2, 11],
        [0, 0, 1, 1, 0, 0, 1, 0, 0, 0, 1, 0]),
    'f': ([0, 1, 3, 7, 4, 5, 2, 6], [0, 0, 1, 2, 0, 0, 2, 1],
        [0, 1, 6, 10, 4, 7, 3, 11, 8, 5, 2, 9],
        [0, 0, 1, 1, 0, 1, 1, 1, 0, 1, 1, 1]),
    'B': ([1, 5, 2, 3, 0, 4, 6, 7], [1, 2, 0, 0, 2, 1, 0, 0],
        [4, 8, 2, 3, 1, 5, 6, 7, 0, 9, 10, 11],
        [1, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0]),
    'b': ([1, 5, 2, 3, 0, 4, 6, 7], [1, 2, 0, 0, 2, 1, 0, 0],
        [4, 8, 2, 3, 1, 9, 6, 5, 0, 11, 10, 7],
        [1, 1, 0, 0, 1, 1, 0, 1, 1, 1, 0, 1]),
    'M': (SOLVED_CP, Z8, [0, 1, 2, 3, 8, 5, 4, 7, 10, 9, 6, 11],
        [0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 1, 0]),
    'S': (SOLVED_CP, Z8, [0, 1, 2, 3, 4, 7, 6, 11, 8, 5, 10, 9],
        [0, 0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 1]),
    'E': (SOLVED_CP, Z8, [1, 2, 3, 0, 4, 5, 6, 7, 8, 9, 10, 11],
        [1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0]),
}

TURN_STR = {1: '', 2: '2', 3: "'"}
INV_TURN_STR = {v: k for [k, v] in TURN_STR.items()}

# All move transforms by name, e.g. MOVES["R'"]. Half and inverse turns are just
# the quarter turn applied two or three times.
MOVES = {}
def gen_moves():
    for [name, [cp, co, ep, eo]] in BASE_MOVES.items():
        move = State(cp, co, ep, eo)
        composed = move
        for n in range(1, 4):
            MOVES[name + TURN_STR[n]] = composed
            composed = composed.apply_move(move)

gen_moves()

# Groups of moves that are easily mistaken for each other: any turn of the same
# face, wide or not, or any turn of the same slice
MOVE_GROUPS = ([[f + TURN_STR[n] for f in [face, face.lower()] for n in (1, 3, 2)]
            for face in 'UDLRFB'] +
        [[s + TURN_STR[n] for n in (1, 3, 2)] for s in 'MSE'])
MOVE_GROUP = {move: group for group in MOVE_GROUPS for move in group}

@dataclasses.dataclass(frozen=True)
class Turn:
    name: str

    def apply(self, state):
        return state.apply_move(MOVES[self.name])

    def __str__(self):
        return self.name

################################################################################
## Utilities ###################################################################
################################################################################

# Normalize a move token to its name in MOVES. Some alg sheets write R2' or R3,
# which are just R2 and R'.
def parse_move(move):
    name = move.replace("2'", '2')
    if name.endswith('3'):
        name = name[:-1] + "'"
    if name not in MOVES:
        raise NotationError('unknown move: %r' % move)
    return name

def parse_turn(move):
    return INV_TURN_STR[move[1:]]

def parse_alg(alg):
    if isinstance(alg, (list, tuple)):
        alg = ' '.join(alg)
    return [parse_move(move) for move in alg.split()]

def invert_moves(moves):
    return [m[0] + TURN_STR[4 - parse_turn(m)] for m in reversed(parse_alg(moves))]

def invert_alg(alg):
    return ' '.join(invert_moves(alg))

def scramble_to_state(scramble):
    return SOLVED.run_alg(scramble)
