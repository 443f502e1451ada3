import os
from typing import List, Optional, Union
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from agents.pdf.pdf_service import PDFProcessor, pdf_processor
from agents.summary.prompting import build_analysis_prompt
from common.db import MongoDB
from common.exceptions import CaseNotFound, InvalidRequest, UnsupportedFormat
from common.gemini_api import GeminiAPI, ModelVariant
from common.logging import logger
from common.models import Case, Lawyer
from common.utils import load_document, temporary_upload
from model.case_model import find_case_by_number
from model.lawyer_model import find_lawyers


def get_case_status(store: MongoDB, case_number: str) -> Case:
    case = find_case_by_number(store, case_number)
    if case is None:
        raise CaseNotFound(f"No case with number {case_number!r}")
    return case


def search_lawyers(store: MongoDB, expertise: Optional[str] = None, location: Optional[str] = None) -> List[Lawyer]:
    lawyers = find_lawyers(store, expertise, location)
    logger.info(f"Lawyer search expertise={expertise!r} location={location!r}: {len(lawyers)} match(es)")
    return lawyers


async def analyze_document(upload: Union[UploadFile, str, None], gemini: GeminiAPI,
                           processor: PDFProcessor = pdf_processor) -> str:
    """Extract the uploaded PDF's text and ask Gemini for a summary."""
    # a plain form field named "file" is not an upload
    if not isinstance(upload, UploadFile):
        raise InvalidRequest("No file uploaded")

    logger.info(f"Received document for analysis: {upload.filename} ({upload.content_type})")
    if upload.content_type not in processor.supported_media_types:
        raise UnsupportedFormat(f"Declared content type {upload.content_type!r} is not a PDF")

    content = await upload.read()
    suffix = os.path.splitext(upload.filename or "")[1]

    with temporary_upload(content, suffix=suffix) as path:
        text = await run_in_threadpool(
            processor.extract_text, load_document(path), upload.content_type)

    return await gemini.generate(build_analysis_prompt(text), ModelVariant.ANALYSIS)


async def chat(message: str, gemini: GeminiAPI) -> str:
    return await gemini.generate(message, ModelVariant.CHAT)
