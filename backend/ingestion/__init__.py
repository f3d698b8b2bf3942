"""Ingestion: request coercion, region resolution and build persistence."""

from .region import infer_region_from_uid, normalize_region, resolve_region
from .validation import IngestRejected, IngestRequest, validate_ingest_body

__all__ = [
    "IngestRejected",
    "IngestRequest",
    "infer_region_from_uid",
    "normalize_region",
    "resolve_region",
    "validate_ingest_body",
]
