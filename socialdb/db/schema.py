"""
Schema for the socialmedia database - collections and indexes.

Creates the four collections (users, posts, chats, messages) and the
indexes the application queries rely on. Every step can be re-run:
existing collections are skipped, identical indexes are a no-op on the server.

"run(db)" performs the whole sequence.
"""

from pymongo import ASCENDING, DESCENDING
from socialdb.services.logger import get_logger

logger = get_logger()

COLLECTIONS = ["users", "posts", "chats", "messages"]

# (collection, keys, options)
INDEXES = [
    ("users", [("username", ASCENDING)], {"unique": True}),
    ("users", [("email", ASCENDING)], {"unique": True, "sparse": True}),
    ("posts", [("userId", ASCENDING)], {}),
    ("posts", [("createdAt", DESCENDING)], {}),
    ("chats", [("members", ASCENDING)], {}),
    ("messages", [("chatId", ASCENDING)], {}),
    ("messages", [("createdAt", DESCENDING)], {}),
]


def ensure_collections(db):
    existing = set(db.list_collection_names())
    created = []

    for name in COLLECTIONS:
        if name in existing:
            logger.debug("collection_exists", extra={"extra": {"collection": name}})
            continue
        db.create_collection(name)
        created.append(name)
        logger.info("collection_created", extra={"extra": {"collection": name}})

    return created


def ensure_indexes(db):
    # DuplicateKeyError on conflicting data is left to the caller
    names = []
    for collection, keys, options in INDEXES:
        name = db[collection].create_index(keys, **options)
        names.append(name)
        logger.info(
            "index_ensured",
            extra={"extra": {"collection": collection, "index": name, **options}},
        )
    return names


def describe_schema(db):
    """
    Read back the indexes of the declared collections.

    Returns {collection: {index_name: {"key": [...], "unique": bool, "sparse": bool}}},
    without the implicit _id_ index.
    """
    schema = {}
    existing = set(db.list_collection_names())

    for name in COLLECTIONS:
        if name not in existing:
            continue
        indexes = {}
        for index_name, info in db[name].index_information().items():
            if index_name == "_id_":
                continue
            indexes[index_name] = {
                "key": [(field, int(direction)) for field, direction in info["key"]],
                "unique": bool(info.get("unique", False)),
                "sparse": bool(info.get("sparse", False)),
            }
        schema[name] = indexes

    return schema


def run(db):
    created = ensure_collections(db)
    indexes = ensure_indexes(db)
    return created, indexes
