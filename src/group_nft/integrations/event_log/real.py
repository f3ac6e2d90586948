"""Redis stream event log implementation."""

from typing import Any

from group_nft.integrations.event_log.abc import EventLog
from group_nft.models.events import RegistryEvent


class RealEventLog(EventLog):
    """Production event log appending to a Redis stream.

    Redis Schema:
    - group_nft:events - Stream with one entry per event
    """

    def __init__(self, redis_client: Any, stream: str = "group_nft:events") -> None:
        """Create RealEventLog.

        Args:
            redis_client: Connected redis.asyncio client
            stream: Stream key to append to
        """
        self._redis = redis_client
        self._stream = stream

    async def emit(self, event: RegistryEvent) -> None:
        await self._redis.xadd(self._stream, event.to_fields())
