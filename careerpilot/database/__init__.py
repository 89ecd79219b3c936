"""Database connections for CareerPilot."""

from careerpilot.database.mongodb import MongoDB, MongoDBOperations, get_database
from careerpilot.database.redis_client import RedisClient

__all__ = ["MongoDB", "MongoDBOperations", "RedisClient", "get_database"]
