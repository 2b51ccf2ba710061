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
from cube import N_CORNERS, N_EDGES
from operations import (CornerSwap, CornerTwist, EdgeSwap, EdgeFlip,
        count_swaps)

# UR and UF: with swap inspection on, each is treated as the other's home slot,
# which leaves them exchanged at the end for the corner parity alg to fix
SWAP_INSPECTION_PAIR = (5, 6)

def swap_inspection_remap(value, enabled=True):
    if enabled:
        [a, b] = SWAP_INSPECTION_PAIR
        if value == a:
            return b
        if value == b:
            return a
    return value

# Cycle decomposition through a fixed buffer, the way a blindfolded solve goes:
# shoot the buffer piece to its home until the buffer is solved, then break
# into the next unsolved cycle, then fix orientation of pieces that are home
# but twisted/flipped.
class PieceInspection:
    name = None
    buffer = None
    n_pieces = None

    def __init__(self):
        # Slots that can start a new cycle, in priority order
        self.scan_order = [i for i in range(self.n_pieces) if i != self.buffer]

    def pieces(self, state):
        raise NotImplementedError()

    def swap(self, target, orientation):
        raise NotImplementedError()

    def reorient(self, target, orientation):
        raise NotImplementedError()

    def remap(self, value):
        return value

    def solve(self, state):
        operations = []
        def emit(op):
            nonlocal state
            operations.append(op)
            state = op.apply(state)

        buf = self.buffer
        while True:
            # Trace the cycle through the buffer. Orientation is read before
            # each swap
            [perm, ori] = self.pieces(state)
            while self.remap(perm[buf]) != buf:
                emit(self.swap(self.remap(perm[buf]), ori[buf]))
                [perm, ori] = self.pieces(state)

            # Break into the next cycle, if any
            for i in self.scan_order:
                if self.remap(perm[i]) != i:
                    break
            else:
                break
            emit(self.swap(i, ori[buf]))

        for i in range(self.n_pieces):
            ori = self.pieces(state)[1]
            if ori[i] != 0:
                emit(self.reorient(i, ori[i]))

        log.LOGGER.log(logging.DEBUG, f"{self.name} inspection: "
                f"{len(operations)} operations, {count_swaps(operations)} swaps")
        return operations

class CornerInspection(PieceInspection):
    name = 'corner'
    buffer = config.CORNER_BUFFER
    n_pieces = N_CORNERS

    def pieces(self, state):
        return [state.cp, state.co]

    def swap(self, target, orientation):
        return CornerSwap(self.buffer, target, orientation)

    def reorient(self, target, orientation):
        return CornerTwist(target, orientation)

class EdgeInspection(PieceInspection):
    name = 'edge'
    buffer = config.EDGE_BUFFER
    n_pieces = N_EDGES

    def __init__(self, swap_inspection=False):
        super().__init__()
        self.swap_inspection = swap_inspection

    def pieces(self, state):
        return [state.ep, state.eo]

    def swap(self, target, orientation):
        return EdgeSwap(self.buffer, target, orientation)

    def reorient(self, target, orientation):
        return EdgeFlip(target)

    def remap(self, value):
        return swap_inspection_remap(value, self.swap_inspection)

def inspect_corners(state):
    return CornerInspection().solve(state)

def inspect_edges(state, swap_inspection=False):
    return EdgeInspection(swap_inspection=swap_inspection).solve(state)

# Corners first, then edges. An odd number of corner swaps means the corners
# end with a parity alg, which also exchanges UF and UR, so edges are inspected
# with those two swapped.
def inspect_cube(state):
    corners = inspect_corners(state)
    parity = count_swaps(corners) % 2 == 1
    edges = inspect_edges(state, swap_inspection=parity)
    return [corners, edges, parity]
