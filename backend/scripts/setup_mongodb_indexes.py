"""Setup MongoDB indexes for the account backend.

Creates the unique indexes on the users collection that enforce identity
constraints (user_id, login_id, email, display_name) at the storage layer.

Usage:
    python scripts/setup_mongodb_indexes.py

Environment Variables:
    MONGODB_URI: MongoDB connection string (required)
    MONGODB_DATABASE: Database name (default: pusan_trip)
"""

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient

from infrastructure.config import get_mongodb_database, get_mongodb_uri
from infrastructure.user.mongo_user_repository import MongoUserRepository

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def list_existing_indexes(repository: MongoUserRepository) -> None:
    """Log the indexes of the users collection for verification."""
    indexes = await repository.collection.list_indexes().to_list(length=None)

    logger.info(f"{repository.collection_name}:")
    for idx in indexes:
        name = idx.get("name", "unknown")
        keys = idx.get("key", {})
        unique = " (unique)" if idx.get("unique", False) else ""
        keys_str = ", ".join(f"{k}:{v}" for k, v in keys.items())
        logger.info(f"  - {name}: [{keys_str}]{unique}")


async def setup_all_indexes() -> int:
    """Create all indexes. Returns a process exit code."""
    uri = get_mongodb_uri()
    if not uri:
        logger.error("MONGODB_URI not configured!")
        return 1

    database_name = get_mongodb_database()
    logger.info(f"Connecting to MongoDB: {database_name}")

    client: AsyncIOMotorClient = AsyncIOMotorClient(uri, tz_aware=True)
    try:
        await client.admin.command("ping")
        repository = MongoUserRepository(client, database_name)
        await repository.ensure_indexes()
        await list_existing_indexes(repository)
    except Exception as e:
        logger.error(f"Error setting up indexes: {e}")
        return 1
    finally:
        client.close()

    logger.info("All indexes created successfully")
    return 0


def main() -> None:
    """Main entry point."""
    try:
        sys.exit(asyncio.run(setup_all_indexes()))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
