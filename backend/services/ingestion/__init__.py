# services/ingestion/__init__.py

from services.ingestion.base_adapter import BaseRowAdapter
from services.ingestion.delimited_adapter import DelimitedRowAdapter, TsvRowAdapter
from services.ingestion.json_adapter import JsonRowAdapter
from services.ingestion.xml_adapter import XmlRowAdapter

ADAPTER_REGISTRY: dict[str, type[BaseRowAdapter]] = {
    "csv": DelimitedRowAdapter,
    "tsv": TsvRowAdapter,
    "txt": DelimitedRowAdapter,
    "json": JsonRowAdapter,
    "xml": XmlRowAdapter,
}
