"""Registry event publication integration."""

from group_nft.integrations.event_log.abc import EventLog
from group_nft.integrations.event_log.fake import FakeEventLog

__all__ = ["EventLog", "FakeEventLog"]
