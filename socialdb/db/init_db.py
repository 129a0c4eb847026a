from pymongo.errors import PyMongoError
from socialdb.db import schema
from socialdb.services.db import get_client, get_db, ping
from socialdb.services.logger import get_logger

logger = get_logger()

CONFIRMATION = "Database initialized successfully"


def main():
    client = get_client()
    try:
        #Check MongoDB connection
        try:
            ping(client)
            logger.info("mongodb_connected")
        except PyMongoError:
            logger.exception("mongodb_connection_failed")
            raise

        db = get_db(client)
        try:
            created, indexes = schema.run(db)
        except PyMongoError:
            logger.exception("schema_initialization_failed", extra={"extra": {"database": db.name}})
            raise

        logger.info(
            "schema_initialized",
            extra={"extra": {
                "database": db.name,
                "collections_created": created,
                "indexes": indexes,
                "schema": schema.describe_schema(db),
            }},
        )
        print(CONFIRMATION)
    finally:
        client.close()


if __name__ == "__main__":
    main()
