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

import argparse
import logging
import sys

import config
import db
import log
from algdb import (SHEETS, AlgorithmDatabase, AlgorithmNotFound,
        OperationsToTurns, SheetFormatError, import_sheet, parse_sheet)
from cube import NotationError, scramble_to_state
from detector import DETECTORS
from workflow import BldWorkflow, CombinedSearch

def db_workflow(session):
    return BldWorkflow(OperationsToTurns(AlgorithmDatabase(session)))

def cmd_solve(args):
    state = scramble_to_state(args.scramble)
    if args.algs:
        with db.get_session() as session:
            solution = db_workflow(session).solve(state)
    else:
        solution = BldWorkflow().solve(state)
    print(solution)

# The wrong alg is what was actually turned after the scramble
def cmd_detect(args):
    state = scramble_to_state(args.scramble)
    detector = DETECTORS[args.kind](state)
    observed = detector.from_physical(state.run_alg(args.wrong_alg))
    print(detector.format_detection_result(observed))

def cmd_search(args):
    state = scramble_to_state(args.scramble)
    target = state.run_alg(args.wrong_alg)
    with db.get_session() as session:
        search = CombinedSearch(db_workflow(session))
        result = search.search(state, target, scramble=args.scramble)
    print(result.display_detailed(args.max_variants))

def cmd_import(args):
    sheet_format = args.format
    if sheet_format is None:
        sheet_format = 'csv' if args.file.lower().endswith('.csv') else 'json'
    with open(args.file) as f:
        table = parse_sheet(args.sheet, f.read(), sheet_format)
    with db.get_session() as session:
        count = import_sheet(session, args.sheet, table)
    print('imported %s algorithms into %s' % (count, args.sheet))

def main(argv=None):
    parser = argparse.ArgumentParser(prog='bldcheck', description='Blindfolded '
            'solving helper: find the operations for a scramble, and what went '
            'wrong when a solve fails')
    parser.add_argument('-d', '--debug', action='store_true',
            help='enable debug logging')
    parser.add_argument('--db', default=config.DB_PATH,
            help='SQLAlchemy URL of the algorithm database')
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('solve', help='show the solution for a scramble')
    p.add_argument('scramble')
    p.add_argument('-a', '--algs', action='store_true',
            help='also translate the operations into algorithms')
    p.set_defaults(func=cmd_solve, needs_db=False)

    p = subparsers.add_parser('detect', help='find the wrong operations that '
            'explain a failed solve')
    p.add_argument('scramble')
    p.add_argument('wrong_alg', help='the moves actually done after the scramble')
    p.add_argument('-k', '--kind', choices=sorted(DETECTORS), default='corner')
    p.set_defaults(func=cmd_detect, needs_db=False)

    p = subparsers.add_parser('search', help='search wrong operations and '
            'wrong turns inside the algorithms')
    p.add_argument('scramble')
    p.add_argument('wrong_alg', help='the moves actually done after the scramble')
    p.add_argument('-n', '--max-variants', type=int,
            default=config.MAX_DISPLAYED_VARIANTS)
    p.set_defaults(func=cmd_search, needs_db=True)

    p = subparsers.add_parser('import', help='import an algorithm sheet')
    p.add_argument('sheet', choices=SHEETS)
    p.add_argument('file', help='JSON or 3-style CSV file')
    p.add_argument('-f', '--format', choices=['json', 'csv'],
            help='file format, by default from the file extension')
    p.set_defaults(func=cmd_import, needs_db=True)

    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)
    if args.debug:
        log.LOGGER.setLevel(logging.DEBUG)

    if args.needs_db or getattr(args, 'algs', False):
        db.init_db(args.db)

    try:
        args.func(args)
    except (NotationError, AlgorithmNotFound, SheetFormatError) as e:
        print('error: %s' % e, file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
