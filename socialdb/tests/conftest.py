import logging

import mongomock
import pytest

from socialdb.services.db import get_db


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def db(mongo_client):
    return get_db(mongo_client)


@pytest.fixture(autouse=True)
def _propagate_logs():
    # let caplog see records from the JSON logger
    logger = logging.getLogger("socialdb-init")
    logger.propagate = True
    yield
    logger.propagate = False
