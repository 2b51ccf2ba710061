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
import threading

import sqlalchemy as sa
from sqlalchemy import (text, Column, Index, DateTime, ForeignKey, Integer,
        String, Text)
from sqlalchemy.orm import (declarative_base, relationship,
        Session as DBSession, sessionmaker)

SESSION_MAKER = None

Base = declarative_base()

# Base class of DB tables to add id/created_at/updated_at columns everywhere
now = text("datetime('now', 'localtime')")
class NiceBase:
    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, default=now)
    updated_at = Column(DateTime, default=now, onupdate=now)

# One algorithm sheet: ufr_expanded, ufr_parity, ufr_twist, uf_expanded or
# uf_flip
class AlgSheet(Base, NiceBase):
    __tablename__ = 'alg_sheets'
    name = Column(String(32), unique=True)
    algs = relationship('Algorithm', back_populates='sheet')

# An algorithm for one sticker (parity/twist/flip sheets) or for a pair of
# stickers (the expanded sheets). notation is what the sheet had, moves is the
# expanded turn sequence.
class Algorithm(Base, NiceBase):
    __tablename__ = 'algorithms'
    sheet_id = Column(Integer, ForeignKey(AlgSheet.id))
    sheet = relationship('AlgSheet', back_populates='algs')
    first = Column(String(8))
    second = Column(String(8))
    notation = Column(Text)
    moves = Column(String(512))

Index('alg_sticker_idx', Algorithm.sheet_id, Algorithm.first, Algorithm.second)

# Subclass of DBSession with some convenience functions
class NiceSession(DBSession):
    def query_first(self, table, *args, **kwargs):
        return self.query(table).filter_by(*args, **kwargs).first()

    def query_all(self, table, *args, **kwargs):
        return self.query(table).filter_by(*args, **kwargs).all()

    # Insert a new row in this table with the given column values
    def insert(self, table, **kwargs):
        row = table(**kwargs)
        self.add(row)
        # Flushing gets the row an ID from the db
        self.flush()
        return row

    # Update an existing row that matches match_args if one exists, otherwise
    # insert a new one
    def upsert(self, table, match_args, **kwargs):
        for row in self.query_all(table, **match_args):
            for [k, v] in kwargs.items():
                setattr(row, k, v)
            return row
        else:
            return self.insert(table, **match_args, **kwargs)

THREAD_LOCALS = threading.local()

@contextlib.contextmanager
def get_session():
    if getattr(THREAD_LOCALS, 'session', None):
        yield THREAD_LOCALS.session
    else:
        THREAD_LOCALS.session = session = SESSION_MAKER()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            THREAD_LOCALS.session = None

def init_db(db_url):
    global SESSION_MAKER
    engine = sa.create_engine(db_url)
    SESSION_MAKER = sessionmaker(autoflush=False, bind=engine,
            class_=NiceSession)
    Base.metadata.create_all(bind=engine)
