import logging
import xml.etree.ElementTree as ET
from typing import Any

from services.ingestion.base_adapter import BaseRowAdapter
from services.ingestion.errors import XmlParseError

logger = logging.getLogger(__name__)


def _text_content(element: ET.Element) -> str:
    return "".join(element.itertext()).strip()


def _element_to_row(element: ET.Element) -> dict[str, Any]:
    row: dict[str, Any] = dict(element.attrib)

    children = list(element)
    if children:
        # repeated tags overwrite, last one wins
        for child in children:
            row[child.tag] = _text_content(child)
    else:
        text = _text_content(element)
        if text:
            row[element.tag] = text
    return row


def rows_from_xml(root: ET.Element) -> list[dict[str, Any]]:
    """
    Each direct child of the document root is one row:
    <root><item id="1"><name>A</name></item></root> -> [{"id": "1", "name": "A"}]
    Only root -> rows -> flat fields is supported; deeper trees degrade.
    """
    rows = []
    for element in root:
        row = _element_to_row(element)
        if row:
            rows.append(row)
    return rows


class XmlRowAdapter(BaseRowAdapter):
    def parse(self, content: str) -> list[dict[str, Any]]:
        try:
            root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise XmlParseError(f"Error parsing XML file: {exc}") from exc

        rows = rows_from_xml(root)
        dropped = len(root) - len(rows)
        if dropped:
            logger.debug("XML: dropped %s empty elements under <%s>", dropped, root.tag)
        return rows
