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

import csv
import dataclasses
import io
import json
import logging

import db
import log
from cube import parse_alg
from notation import expand_notation
from operations import CornerSwap, CornerTwist, EdgeSwap, EdgeFlip

# Sheets keyed by a pair of stickers (first target, second target) and sheets
# keyed by a single sticker
PAIR_SHEETS = ('ufr_expanded', 'uf_expanded')
SINGLE_SHEETS = ('ufr_parity', 'ufr_twist', 'uf_flip')
SHEETS = PAIR_SHEETS + SINGLE_SHEETS

class SheetFormatError(ValueError):
    pass

class AlgorithmNotFound(KeyError):
    def __init__(self, sheet, *stickers):
        super().__init__(sheet, *stickers)
        self.sheet = sheet
        self.stickers = stickers

    def __str__(self):
        return 'no algorithm in %s for %s' % (self.sheet,
                ' → '.join(self.stickers))

################################################################################
## Sheet parsing ###############################################################
################################################################################

# Parse a 3-style CSV: the header row has the second sticker of each column,
# the first column has the first sticker of each row. Empty cells are skipped.
# Returns {first: {second: notation}}.
def parse_3style_csv(data):
    rows = [[cell.strip() for cell in row]
            for row in csv.reader(io.StringIO(data))]
    if not rows or not any(rows[0]):
        raise SheetFormatError('CSV sheet has no header row')
    header = rows[0]

    table = {}
    for row in rows[1:]:
        if not row or not row[0]:
            continue
        entries = {header[i]: cell for [i, cell] in enumerate(row)
                if i > 0 and cell and i < len(header) and header[i]}
        if entries:
            table[row[0]] = entries
    return table

# Check that a decoded sheet has the right shape: {first: {second: str}} for
# pair sheets, {first: str} otherwise
def check_sheet(sheet_name, table):
    if sheet_name not in SHEETS:
        raise SheetFormatError('unknown sheet: %r' % sheet_name)
    if not isinstance(table, dict):
        raise SheetFormatError('%s: expected an object at the top level'
                % sheet_name)
    for [first, entry] in table.items():
        if sheet_name in PAIR_SHEETS:
            if not isinstance(entry, dict) or not all(isinstance(v, str)
                    for v in entry.values()):
                raise SheetFormatError('%s: entry %r should map stickers to '
                        'algorithms' % (sheet_name, first))
        elif not isinstance(entry, str):
            raise SheetFormatError('%s: entry %r should be an algorithm'
                    % (sheet_name, first))
    return table

def parse_sheet(sheet_name, data, sheet_format='json'):
    if sheet_format == 'csv':
        table = parse_3style_csv(data)
        # A CSV only has one column of algorithms per row for single sheets
        if sheet_name in SINGLE_SHEETS:
            table = {first: next(iter(entry.values()))
                    for [first, entry] in table.items()}
    elif sheet_format == 'json':
        try:
            table = json.loads(data)
        except json.JSONDecodeError as e:
            raise SheetFormatError('%s: %s' % (sheet_name, e)) from e
    else:
        raise SheetFormatError('unknown sheet format: %r' % sheet_format)
    return check_sheet(sheet_name, table)

################################################################################
## Importing ###################################################################
################################################################################

def store_alg(session, sheet, first, second, notation):
    moves = ' '.join(expand_notation(notation))
    return session.upsert(db.Algorithm, {'sheet_id': sheet.id, 'first': first,
            'second': second}, notation=notation, moves=moves)

# Store all algorithms of a parsed sheet, replacing ones for the same stickers
def import_sheet(session, sheet_name, table):
    check_sheet(sheet_name, table)
    sheet = session.upsert(db.AlgSheet, {'name': sheet_name})
    count = 0
    for [first, entry] in table.items():
        if sheet_name in PAIR_SHEETS:
            for [second, notation] in entry.items():
                store_alg(session, sheet, first, second, notation)
                count += 1
        else:
            store_alg(session, sheet, first, None, entry)
            count += 1
    log.LOGGER.log(logging.INFO, f"imported {count} algorithms into {sheet_name}")
    return count

################################################################################
## Translation #################################################################
################################################################################

@dataclasses.dataclass
class MoveSequence:
    moves: list
    description: str = ''

    def __str__(self):
        return ' '.join(self.moves)

class MoveSequenceCollection:
    def __init__(self, sequences=()):
        self.sequences = list(sequences)

    def __iter__(self):
        return iter(self.sequences)

    def __len__(self):
        return len(self.sequences)

    def __add__(self, other):
        return MoveSequenceCollection(self.sequences + other.sequences)

    def all_moves(self):
        return [m for seq in self.sequences for m in seq.moves]

    def apply(self, state):
        return state.run_alg(self.all_moves())

    def __str__(self):
        lines = []
        for seq in self.sequences:
            if seq.description:
                lines.append('// %s' % seq.description)
            lines.append(str(seq))
        return '\n'.join(lines)

# Lookups in the algorithm sheets stored in the database
class AlgorithmDatabase:
    def __init__(self, session):
        self.session = session

    def lookup(self, sheet_name, first, second=None):
        sheet = self.session.query_first(db.AlgSheet, name=sheet_name)
        alg = None
        if sheet is not None:
            alg = self.session.query_first(db.Algorithm, sheet_id=sheet.id,
                    first=first, second=second)
        log.LOGGER.log(logging.DEBUG, f"lookup {sheet_name} {first} {second}: "
                f"{alg.moves if alg else None}")
        if alg is None:
            stickers = [first] if second is None else [first, second]
            raise AlgorithmNotFound(sheet_name, *stickers)
        return parse_alg(alg.moves)

# Turn abstract operations into the algorithms that execute them: swaps are
# done two at a time with one alg, a leftover corner swap with a parity alg.
class OperationsToTurns:
    def __init__(self, algdb):
        self.algdb = algdb

    def pair(self, sheet_name, op1, op2):
        moves = self.algdb.lookup(sheet_name, op1.sticker, op2.sticker)
        return MoveSequence(moves, '%s → %s' % (op1.sticker, op2.sticker))

    def single(self, sheet_name, label, op):
        moves = self.algdb.lookup(sheet_name, op.sticker)
        return MoveSequence(moves, '%s: %s' % (label, op.sticker))

    def convert(self, operations, swap_type, pair_sheet, single):
        sequences = []
        pending = None
        for op in operations:
            if isinstance(op, swap_type):
                if pending is None:
                    pending = op
                else:
                    sequences.append(self.pair(pair_sheet, pending, op))
                    pending = None
                continue
            if pending is not None:
                sequences += single(pending)
                pending = None
            sequences += single(op)
        if pending is not None:
            sequences += single(pending)
        return MoveSequenceCollection(sequences)

    def convert_corners(self, operations):
        def single(op):
            if isinstance(op, CornerTwist):
                return [self.single('ufr_twist', 'Twist', op)]
            return [self.single('ufr_parity', 'Parity', op)]
        return self.convert(operations, CornerSwap, 'ufr_expanded', single)

    # A leftover edge swap is UF/UR, which the corner parity alg takes care of
    def convert_edges(self, operations):
        def single(op):
            if isinstance(op, EdgeFlip):
                return [self.single('uf_flip', 'Flip', op)]
            return []
        return self.convert(operations, EdgeSwap, 'uf_expanded', single)
