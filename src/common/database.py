"""
MongoDB database utilities for the career coach service.

Provides connection management, collection access, and index creation for
the four collections the workflows use. One DatabaseClient is built at
application startup and handed to every repository; it is never a
module-level global.
"""

from typing import Optional
from pymongo import MongoClient, ASCENDING
from pymongo.collection import Collection
from pymongo.database import Database
import logging

from .config import Config
from .error_handling import STORE_CONNECTIVITY_ERRORS, StoreUnavailable

logger = logging.getLogger(__name__)

USERS = "users"
RESUMES = "resumes"
INDUSTRY_INSIGHTS = "industry_insights"
ASSESSMENTS = "assessments"


class DatabaseClient:
    """
    MongoDB client wrapper for the career coach service.

    Owns one pymongo MongoClient (which pools connections internally) and
    provides typed access to collections.
    """

    def __init__(
        self,
        mongodb_uri: Optional[str] = None,
        database: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        client: Optional[MongoClient] = None,
    ):
        """
        Initialize the database client. Connection is established lazily.

        Args:
            mongodb_uri: MongoDB connection string (defaults to Config.MONGODB_URI)
            database: Database name (defaults to Config.MONGO_DB_NAME)
            timeout_ms: Server selection timeout (defaults to Config.MONGO_TIMEOUT_MS)
            client: Pre-built MongoClient (tests)
        """
        self._mongodb_uri = mongodb_uri or Config.MONGODB_URI
        self._database_name = database or Config.MONGO_DB_NAME
        self._timeout_ms = timeout_ms or Config.MONGO_TIMEOUT_MS
        self._client: Optional[MongoClient] = client
        self._db: Optional[Database] = None

        if self._client is None and not self._mongodb_uri:
            raise ValueError("MONGODB_URI not configured in .env")

    def connect(self) -> None:
        """Create the underlying MongoClient if needed."""
        if self._client is None:
            self._client = MongoClient(
                self._mongodb_uri,
                serverSelectionTimeoutMS=self._timeout_ms,
                tz_aware=True,
            )
        self._db = self._client[self._database_name]
        logger.info(f"Connected to MongoDB: {self._database_name}")

    def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("Disconnected from MongoDB")

    @property
    def db(self) -> Database:
        """Get the database instance, connecting on first use."""
        if self._db is None:
            self.connect()
        return self._db

    @property
    def users(self) -> Collection:
        """Get the users collection."""
        return self.db[USERS]

    @property
    def resumes(self) -> Collection:
        """Get the resumes collection."""
        return self.db[RESUMES]

    @property
    def industry_insights(self) -> Collection:
        """Get the industry_insights collection."""
        return self.db[INDUSTRY_INSIGHTS]

    @property
    def assessments(self) -> Collection:
        """Get the assessments collection."""
        return self.db[ASSESSMENTS]

    def ping(self) -> bool:
        """
        Check the server is reachable.

        Returns:
            True if the ping succeeded, False otherwise
        """
        try:
            self.db.command("ping")
            return True
        except STORE_CONNECTIVITY_ERRORS as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def ensure_indexes(self) -> None:
        """
        Create the indexes the data model relies on.

        - users.subject_id: unique (one user per identity)
        - resumes.user_id: unique (one resume per user)
        - industry_insights.industry: unique (one report per industry)
        - assessments.(user_id, created_at): history listing

        Raises:
            StoreUnavailable: If the server cannot be reached
        """
        try:
            self.users.create_index([("subject_id", ASCENDING)], unique=True)
            self.resumes.create_index([("user_id", ASCENDING)], unique=True)
            self.industry_insights.create_index([("industry", ASCENDING)], unique=True)
            self.assessments.create_index(
                [("user_id", ASCENDING), ("created_at", ASCENDING)]
            )
        except STORE_CONNECTIVITY_ERRORS as e:
            raise StoreUnavailable(f"Index creation failed: {e}") from e
        logger.info("MongoDB indexes ensured")
