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

import pytest

import db
from algdb import AlgorithmDatabase, import_sheet
from cube import State

# Small algorithm sheets. The expanded/parity/twist entries are keyed by
# stickers that don't necessarily match what the algs do on a real cube; the
# translation only looks them up.
TEST_SHEETS = {
    'ufr_expanded': {
        'RDB': {'RDF': "D' R U R' D R U' R'"},
        'RDF': {'UFL': "U' R' D' R U R' D R"},
    },
    'ufr_parity': {
        'RDB': "U2 D' R' F R2 U' R' U' R U R' F' R U R' U D",
    },
    'ufr_twist': {
        'FUL': "R' D R D' R' D R U' R' D' R D R' D' R U",
    },
    'uf_expanded': {
        'FR': {'DL': "R U R' F R F'", 'DR': "U' R U R'"},
        'DR': {'UL': 'R2 F R2 F\''},
    },
    'uf_flip': {
        'UB': "R U R' U R U2 R'",
        'UR': "R U R' U R U2 R' U",
    },
}

@pytest.fixture
def session():
    db.init_db('sqlite://')
    with db.get_session() as session:
        yield session

@pytest.fixture
def algdb(session):
    for [name, table] in TEST_SHEETS.items():
        import_sheet(session, name, table)
    return AlgorithmDatabase(session)

def make_state(cp=range(8), co=(0,) * 8, ep=range(12), eo=(0,) * 12):
    return State(cp, co, ep, eo)
