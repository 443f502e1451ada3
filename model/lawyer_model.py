import re
from typing import List, Optional
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from common.db import MongoDB
from common.exceptions import InvalidRecord, StoreUnavailable
from common.logging import logger
from common.models import Lawyer

LAWYERS_COLLECTION = "lawyers"
# Two-letter filters read as abbreviations too (ny, la, dc)
ABBREVIATION_LENGTH = 2


def _initials(value: str) -> str:
    # "ny" -> words starting with n then y, so "ny" finds "New York"
    return r"\b" + r"\S*\s+".join(re.escape(ch) for ch in value)


def _contains(value: Optional[str]) -> Optional[dict]:
    """Case-insensitive literal substring condition; None for an empty filter.

    Two-character alphanumeric filters also match as word initials.
    """
    if not value:
        return None
    pattern = re.escape(value)
    if value.isalnum() and len(value) == ABBREVIATION_LENGTH:
        pattern = f"{pattern}|{_initials(value)}"
    return {"$regex": pattern, "$options": "i"}


def build_lawyer_query(expertise: Optional[str] = None, location: Optional[str] = None) -> dict:
    query = {}
    for field, value in (("expertise", expertise), ("location", location)):
        condition = _contains(value)
        if condition is not None:
            query[field] = condition
    return query


def find_lawyers(store: MongoDB, expertise: Optional[str] = None, location: Optional[str] = None) -> List[Lawyer]:
    """Lawyers whose expertise and location contain the given filters."""
    query = build_lawyer_query(expertise, location)
    try:
        documents = list(store.collection(LAWYERS_COLLECTION).find(query))
    except PyMongoError as e:
        raise StoreUnavailable(f"Lawyer search failed: {e}") from e

    lawyers = []
    for document in documents:
        try:
            lawyers.append(Lawyer.model_validate(document))
        except ValidationError as e:
            logger.error(f"Malformed lawyer document {document.get('_id')}: {e}")
            raise InvalidRecord("Lawyer directory contains a malformed record") from e
    return lawyers
