from typing import Optional
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from common.db import MongoDB
from common.exceptions import InvalidRecord, StoreUnavailable
from common.logging import logger
from common.models import Case

CASES_COLLECTION = "cases"


def find_case_by_number(store: MongoDB, case_number: str) -> Optional[Case]:
    """Exact-match lookup on caseNumber. Returns None when no case matches."""
    try:
        document = store.collection(CASES_COLLECTION).find_one({"caseNumber": case_number})
    except PyMongoError as e:
        raise StoreUnavailable(f"Case lookup failed: {e}") from e

    if document is None:
        return None

    try:
        return Case.model_validate(document)
    except ValidationError as e:
        logger.error(f"Malformed case document {document.get('_id')}: {e}")
        raise InvalidRecord(f"Case {case_number} is malformed") from e
