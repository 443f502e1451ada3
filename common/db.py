from pymongo import MongoClient
from pymongo.errors import PyMongoError
from common.config import Config
from common.logging import logger

# Mongo's own default when the URI names no database
FALLBACK_DATABASE = "test"


class MongoDB:
    """Owns the MongoClient for the lifetime of the app.

    Built once at startup and handed to the routes, so nothing reaches
    for a module-level connection.
    """

    def __init__(self, uri: str = None, database_name: str = None, client: MongoClient = None):
        self.uri = uri or Config.MONGO_URI
        self.database_name = database_name or Config.DATABASE_NAME
        self._client = client
        self._db = None

    def connect(self):
        if self._client is None:
            self._client = MongoClient(self.uri)
        try:
            self._client.admin.command("ping")
            logger.info("MongoDB connected")
        except PyMongoError as e:
            # Requests will report "Database error" until the server is reachable
            logger.error(f"MongoDB connection failed: {e}")
        return self

    def close(self):
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._db = None

    def get_db(self):
        if self._db is None:
            if self._client is None:
                self.connect()
            if self.database_name:
                self._db = self._client[self.database_name]
            else:
                self._db = self._client.get_default_database(default=FALLBACK_DATABASE)
        return self._db

    def collection(self, name: str):
        return self.get_db()[name]

    def ping(self) -> bool:
        try:
            self.get_db().command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
