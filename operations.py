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

import util

# Sticker names used as algorithm sheet keys. For a swap, the sticker is the
# one the buffer sticker goes to, so it depends on the target slot and the
# orientation the buffer piece had before the swap.
CORNER_STICKERS = (
    ('UBL', 'BUL', 'LUB'),
    ('UBR', 'RUB', 'BUR'),
    ('UFR', 'FUR', 'RUF'),
    ('UFL', 'LUF', 'FUL'),
    ('DBL', 'LDB', 'BDL'),
    ('DBR', 'BDR', 'RDB'),
    ('DFR', 'RDF', 'FDR'),
    ('DFL', 'FDL', 'LDF'),
)

# Twists name the sticker that has to be turned onto the U/D face, which goes
# around the corner the other way
TWIST_STICKERS = (
    ('UBL', 'LUB', 'BUL'),
    ('UBR', 'BUR', 'RUB'),
    ('UFR', 'RUF', 'FUR'),
    ('UFL', 'FUL', 'LUF'),
    ('DBL', 'BDL', 'LDB'),
    ('DBR', 'RDB', 'BDR'),
    ('DFR', 'FDR', 'RDF'),
    ('DFL', 'LDF', 'FDL'),
)

EDGE_STICKERS = (
    ('BL', 'LB'),
    ('BR', 'RB'),
    ('FR', 'RF'),
    ('FL', 'LF'),
    ('UB', 'BU'),
    ('UR', 'RU'),
    ('UF', 'FU'),
    ('UL', 'LU'),
    ('DB', 'BD'),
    ('DR', 'RD'),
    ('DF', 'FD'),
    ('DL', 'LD'),
)

################################################################################
## Corner operations ###########################################################
################################################################################

# Exchange the pieces in two corner slots. orientation is the buffer piece's
# twist before the swap; it moves with the piece into target2.
@dataclasses.dataclass(frozen=True)
class CornerSwap:
    target1: int
    target2: int
    orientation: int

    def apply(self, state):
        [t1, t2] = [self.target1, self.target2]
        cp = list(state.cp)
        co = list(state.co)
        [cp[t1], cp[t2]] = [cp[t2], cp[t1]]
        co[t1] = (self.orientation + state.co[t2]) % 3
        co[t2] = (state.co[t1] + 3 - self.orientation) % 3
        return state.with_corners(cp, co)

    @property
    def sticker(self):
        return CORNER_STICKERS[self.target2][self.orientation]

    def __str__(self):
        return 'Swap: %s ↔ %s' % (CORNER_STICKERS[self.target1][0],
                self.sticker)

# Twist a corner in place, undoing an orientation of 1 (clockwise) or 2
@dataclasses.dataclass(frozen=True)
class CornerTwist:
    target: int
    orientation: int

    def apply(self, state):
        co = list(state.co)
        co[self.target] = (co[self.target] + 3 - self.orientation) % 3
        return state.with_corners(state.cp, co)

    @property
    def sticker(self):
        return TWIST_STICKERS[self.target][self.orientation]

    def __str__(self):
        return 'Twist: %s' % self.sticker

################################################################################
## Edge operations #############################################################
################################################################################

# Edge swaps add the orientation to both pieces, since flipping is symmetric
@dataclasses.dataclass(frozen=True)
class EdgeSwap:
    target1: int
    target2: int
    orientation: int

    def apply(self, state):
        [t1, t2] = [self.target1, self.target2]
        ep = list(state.ep)
        eo = list(state.eo)
        [ep[t1], ep[t2]] = [ep[t2], ep[t1]]
        eo[t1] = (state.eo[t2] + self.orientation) % 2
        eo[t2] = (state.eo[t1] + self.orientation) % 2
        return state.with_edges(ep, eo)

    @property
    def sticker(self):
        return EDGE_STICKERS[self.target2][self.orientation]

    def __str__(self):
        return 'Swap: %s ↔ %s' % (EDGE_STICKERS[self.target1][0], self.sticker)

@dataclasses.dataclass(frozen=True)
class EdgeFlip:
    target: int

    def apply(self, state):
        eo = list(state.eo)
        eo[self.target] = (eo[self.target] + 1) % 2
        return state.with_edges(state.ep, eo)

    @property
    def sticker(self):
        return EDGE_STICKERS[self.target][0]

    def __str__(self):
        return 'Flip: %s (flipped)' % self.sticker

SWAP_TYPES = (CornerSwap, EdgeSwap)

def is_swap(op):
    return isinstance(op, SWAP_TYPES)

def count_swaps(operations):
    return sum(1 for op in operations if is_swap(op))

def apply_operations(state, operations):
    for op in operations:
        state = op.apply(state)
    return state

def format_operations(operations):
    return '\n'.join(util.step_lines(operations))
