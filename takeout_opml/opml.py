import datetime
import logging
from email.utils import format_datetime
from pathlib import Path
from typing import List, Optional, Union

from jinja2 import Environment, FileSystemLoader

from takeout_opml.feeds import escape_attribute
from takeout_opml.tools.io import write_file

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
DOCUMENT_TEMPLATE = "subscriptions.opml.j2"
DEFAULT_TITLE = "YouTube channels"


def _environment() -> Environment:
    # Outlines are rendered as given
    env = Environment(loader=FileSystemLoader(searchpath=str(TEMPLATES_DIR)), autoescape=False)
    env.filters["xmlattr"] = escape_attribute
    return env


def http_date(moment: Optional[datetime.datetime] = None) -> str:
    """Format a timestamp as an RFC 1123 / HTTP date, e.g. 'Tue, 15 Oct 2024 12:00:00 GMT'."""
    if moment is None:
        moment = datetime.datetime.now(datetime.timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=datetime.timezone.utc)
    return format_datetime(moment.astimezone(datetime.timezone.utc), usegmt=True)


def render_document(
    outlines: List[str], title: str = DEFAULT_TITLE, created: Optional[datetime.datetime] = None
) -> str:
    """Wrap outline fragments in the OPML head and body."""
    if outlines:
        logger.info(f"Generated {len(outlines)} outline elements")
    else:
        logger.warning("No elements processed, the OPML body will be empty")

    template = _environment().get_template(DOCUMENT_TEMPLATE)
    return template.render(title=title, date_created=http_date(created), outlines=outlines)


async def write_document(path: Union[str, Path], content: str) -> None:
    logger.info(f"Writing OPML document to {path}")
    await write_file(path, content)
    logger.info(f"Finished writing {path}")
