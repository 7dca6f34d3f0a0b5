import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from takeout_opml.loader import CHANNEL_ID, CHANNEL_TITLE, CHANNEL_URL

logger = logging.getLogger(__name__)

FEED_URL_TEMPLATE = "https://www.youtube.com/feeds/videos.xml?channel_id="

XML_ATTRIBUTE_ENTITIES = {
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}
_ESCAPE_TABLE = str.maketrans(XML_ATTRIBUTE_ENTITIES)


def escape_attribute(value: Optional[str]) -> str:
    """Escape a string so it can sit inside a double-quoted XML attribute."""
    if not value:
        return ""
    if not any(char in value for char in XML_ATTRIBUTE_ENTITIES):
        return value
    return value.translate(_ESCAPE_TABLE)


def feed_url(channel_id: str) -> str:
    # Channel id is appended verbatim
    return f"{FEED_URL_TEMPLATE}{channel_id}"


@dataclass(frozen=True)
class FeedDescriptor:
    """One subscribed channel, ready to be written as an OPML outline."""

    id: str
    title: str
    url: str = ""

    @property
    def feed_url(self) -> str:
        return feed_url(self.id)

    @property
    def escaped_title(self) -> str:
        return escape_attribute(self.title)

    def outline(self) -> str:
        return outline_fragment(self)


def outline_fragment(descriptor: FeedDescriptor) -> str:
    """Render the self-closing <outline/> element for a descriptor.

    The feed URL is used for both xmlUrl and htmlUrl.
    """
    title = descriptor.escaped_title
    url = descriptor.feed_url
    return (
        f'<outline type="rss" title="{title}" text="{title}" version="RSS" '
        f'xmlUrl="{url}" htmlUrl="{url}"/>'
    )


def _field(record: Dict[str, Any], key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def to_descriptor(record: Dict[str, Any]) -> FeedDescriptor:
    return FeedDescriptor(
        id=_field(record, CHANNEL_ID),
        title=_field(record, CHANNEL_TITLE),
        url=_field(record, CHANNEL_URL),
    )


def map_records(records: Iterable[Dict[str, Any]]) -> List[FeedDescriptor]:
    """Map every record to a descriptor, keeping input order and duplicates."""
    descriptors = [to_descriptor(record) for record in records]
    logger.debug(f"Mapped {len(descriptors)} records to feed descriptors")
    return descriptors
