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

from cube import NotationError, invert_moves, parse_alg, parse_move

# Expand commutator/conjugate shorthand as written in alg sheets into a flat
# list of moves:
#   A: B  ->  A B A'
#   M/A   ->  M A M2 A' M     (M a single move)
#   A, B  ->  A B A' B'
# Operators are tried in that order, splitting at the first occurrence, and
# each side is expanded recursively. Square brackets are ignored.
def expand_notation(text):
    text = text.replace('[', ' ').replace(']', ' ').strip()
    if not text:
        return []
    return expand(text)

def split_operands(text, op):
    [left, right] = [s.strip() for s in text.split(op, 1)]
    if not left or not right:
        raise NotationError('missing operand for %r in %r' % (op, text))
    return [left, right]

def single_move(text):
    tokens = text.split()
    if len(tokens) != 1:
        return None
    try:
        return parse_move(tokens[0])
    except NotationError:
        return None

def expand(text):
    if ':' in text:
        [a, b] = split_operands(text, ':')
        a = expand(a)
        return a + expand(b) + invert_moves(a)

    # A slash only counts when a single move is left of it. Otherwise the
    # text is a commutator or plain moves with the slash further in.
    if '/' in text:
        m = single_move(text.split('/', 1)[0])
        if m is not None:
            a = expand(split_operands(text, '/')[1])
            return [m] + a + [m[0] + '2'] + invert_moves(a) + [m]

    if ',' in text:
        [a, b] = split_operands(text, ',')
        a = expand(a)
        b = expand(b)
        return a + b + invert_moves(a) + invert_moves(b)

    return parse_alg(text)

def expand_alg(text):
    return ' '.join(expand_notation(text))
