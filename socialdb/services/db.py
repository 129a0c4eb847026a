from pymongo.mongo_client import MongoClient
from dotenv import load_dotenv
import os

DATABASE_NAME = "socialmedia"


def get_client():
    load_dotenv()

    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    SELECTION_TIMEOUT_MS = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "30000"))

    return MongoClient(MONGO_URI, serverSelectionTimeoutMS=SELECTION_TIMEOUT_MS)


def get_db(client=None):
    if client is None:
        client = get_client()
    return client[DATABASE_NAME]


def ping(client):
    client.admin.command("ping")
