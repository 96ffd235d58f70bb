"""Predictor Store — async MongoDB collection wrapper with bounded connect and error mapping.

Invariants:
    - connect() pings the server: an unreachable or misauthenticating endpoint fails
      there, within the timeout, never on the first request
    - Every driver exception mapped to StorageConnectionError / PersistenceError
    - Documents leave this module as {"id": str, "name": str}; _id never escapes
    - No retries: failures surface to the caller immediately

Design Decisions:
    - One store per process, owned by the FastAPI lifespan and held on app.state
      (no module-level singleton)
    - motor over blocking pymongo: handlers await the driver on the event loop
    - insert_one gets a copy: the driver writes _id into the dict it is handed
"""

import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from predictor_api.core.domain_types import PredictorId
from predictor_api.core.errors import (
    ErrorContext, PersistenceError, StorageConnectionError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0


def _to_record(document: dict) -> dict:
    """Map a stored document to the public record shape."""
    record = {k: v for k, v in document.items() if k != "_id"}
    record["id"] = PredictorId(str(document["_id"])) if "_id" in document else None
    return record


class PredictorStore:
    """Owns the driver client and the predictors collection."""

    def __init__(
        self, client: AsyncIOMotorClient, collection: AsyncIOMotorCollection,
    ):
        self.client = client
        self.collection = collection

    async def create(self, record: dict) -> dict:
        """Insert record as a new document; the store assigns the id."""
        document = dict(record)
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            logger.error(
                f"Insert failed: {e}",
                extra={"operation": "create", "collection": self.collection.name},
            )
            raise PersistenceError(
                "create predictor", ErrorContext(debug_info={"driver_error": str(e)}),
            )
        created = _to_record({**document, "_id": result.inserted_id})
        logger.info(
            f"Created predictor '{created['name']}'",
            extra={"predictor_id": created["id"]},
        )
        return created

    async def list_all(self) -> list[dict]:
        """Return every stored record in store-native order."""
        try:
            cursor = self.collection.find({})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(
                f"Find failed: {e}",
                extra={"operation": "list", "collection": self.collection.name},
            )
            raise PersistenceError(
                "list predictors", ErrorContext(debug_info={"driver_error": str(e)}),
            )
        return [_to_record(d) for d in documents]

    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Store health check failed: {e}")
            return False

    def close(self) -> None:
        self.client.close()
        logger.info("Document store connection closed")


async def connect(
    uri: str,
    database_name: str,
    collection_name: str,
    timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS,
) -> PredictorStore:
    """Connect to the document store, failing fast if it is unreachable."""
    timeout_ms = int(timeout_seconds * 1000)
    try:
        client = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except PyMongoError as e:
        # Malformed URI or options are rejected before any network IO
        raise StorageConnectionError(str(e))

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StorageConnectionError(
            str(e), ErrorContext(operation="ping"),
        )

    collection = client[database_name][collection_name]
    logger.info(
        f"Connected to document store database '{database_name}'",
        extra={"collection": collection_name},
    )
    return PredictorStore(client, collection)
