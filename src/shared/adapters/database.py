"""Engine and session factory shared by the staff and case units of work."""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import config

logger = logging.getLogger(__name__)


def make_engine(uri: str = None):
    uri = uri or config.get_database_uri()
    connect_args = {}
    if uri.startswith("sqlite"):
        # request handlers run on the threadpool
        connect_args["check_same_thread"] = False
    return create_engine(uri, connect_args=connect_args)


engine = make_engine()

DEFAULT_SESSION_FACTORY = sessionmaker(bind=engine)
