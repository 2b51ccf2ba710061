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

import contextlib
import logging
import time

import log

@contextlib.contextmanager
def time_execution(label):
    start = time.time()
    yield
    log.LOGGER.log(logging.DEBUG, '%s: %.3fs' % (label, time.time() - start))

# Numbered "Step n: ..." lines, as used in every solution listing
def step_lines(items, indent=''):
    return ['%sStep %s: %s' % (indent, i + 1, item)
            for [i, item] in enumerate(items)]

def state_lines(state, indent='  '):
    return [indent + line for line in str(state).splitlines()]
