import logging
from dataclasses import dataclass, field
from typing import Any

import charset_normalizer

from services.ingestion import ADAPTER_REGISTRY
from services.ingestion.base_adapter import BaseRowAdapter
from services.ingestion.errors import IngestionError, UnsupportedFileType

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    filename: str
    extension: str
    rows: list[dict[str, Any]]
    warnings: list[str] = field(default_factory=list)


def get_file_extension(name: str) -> str:
    idx = name.rfind(".")
    if idx == -1:
        return ""
    return name[idx + 1:].lower()


def resolve_adapter(filename: str) -> BaseRowAdapter:
    extension = get_file_extension(filename)
    adapter_cls = ADAPTER_REGISTRY.get(extension)
    if adapter_cls is None:
        raise UnsupportedFileType(filename, extension)
    return adapter_cls(filename=filename)


def decode_content(raw: bytes) -> str:
    """UTF-8 first (BOM stripped); otherwise let charset_normalizer pick the encoding."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        best = charset_normalizer.from_bytes(raw).best()
        if best is None:
            raise IngestionError("Unable to detect file encoding")
        logger.info("Decoded upload using detected encoding %s", best.encoding)
        return str(best)


def ingest(filename: str, content: bytes | str) -> IngestionResult:
    # resolve before decoding so unsupported files never reach a parser
    adapter = resolve_adapter(filename)
    text = decode_content(content) if isinstance(content, bytes) else content
    rows = adapter.parse(text)
    return IngestionResult(
        filename=filename,
        extension=get_file_extension(filename),
        rows=rows,
        warnings=list(adapter.warnings),
    )


def parse_file_content(filename: str, content: bytes | str) -> list[dict[str, Any]]:
    return ingest(filename, content).rows
