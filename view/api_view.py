from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse
from typing import List, Optional, Union
from controller.legal_controller import analyze_document, chat, get_case_status, search_lawyers
from common.db import MongoDB
from common.exceptions import (CaseNotFound, CorruptDocument, EmptyDocument, InvalidRequest,
                               StoreError, UnsupportedFormat, UpstreamError)
from common.gemini_api import GeminiAPI
from common.logging import logger
from common.models import AnalysisResponse, Case, ChatPayload, ChatResponse, Lawyer

router = APIRouter()

DATABASE_ERROR = "Database error"
ANALYSIS_ERROR = "Error analyzing document"
CHAT_ERROR = "Error fetching response from Gemini"


def get_store(request: Request) -> MongoDB:
    return request.app.state.store


def get_gemini(request: Request) -> GeminiAPI:
    return request.app.state.gemini


def error_response(status_code: int, message: str, key: str = "error") -> JSONResponse:
    return JSONResponse(status_code=status_code, content={key: message})


@router.get("/case/{case_number}", response_model=Case)
def case_status(case_number: str, store: MongoDB = Depends(get_store)):
    """Look up a case by its case number."""
    try:
        return get_case_status(store, case_number)
    except CaseNotFound:
        return error_response(404, CaseNotFound.message, key="message")
    except StoreError as e:
        logger.error(f"Case lookup failed for {case_number}: {e}")
        return error_response(500, DATABASE_ERROR)
    except Exception as e:
        logger.exception(f"Unexpected error looking up case {case_number}: {e}")
        return error_response(500, DATABASE_ERROR)


@router.get("/lawyers", response_model=List[Lawyer])
def lawyers(expertise: Optional[str] = None, location: Optional[str] = None,
            store: MongoDB = Depends(get_store)):
    """Lawyers whose expertise and location contain the given text."""
    try:
        return search_lawyers(store, expertise, location)
    except StoreError as e:
        logger.error(f"Lawyer search failed: {e}")
        return error_response(500, DATABASE_ERROR)
    except Exception as e:
        logger.exception(f"Unexpected error searching lawyers: {e}")
        return error_response(500, DATABASE_ERROR)


@router.post("/analyze-legal-doc", response_model=AnalysisResponse)
async def analyze_legal_doc(file: Union[UploadFile, str, None] = File(None),
                            gemini: GeminiAPI = Depends(get_gemini)):
    """Summarize an uploaded PDF legal document."""
    try:
        analysis = await analyze_document(file, gemini)
    except (InvalidRequest, UnsupportedFormat, EmptyDocument) as e:
        logger.warning(f"Rejected document upload: {e}")
        return error_response(400, e.message)
    except (CorruptDocument, UpstreamError) as e:
        logger.error(f"Error processing document: {e}")
        return error_response(500, ANALYSIS_ERROR)
    except Exception as e:
        logger.exception(f"Unexpected error processing document: {e}")
        return error_response(500, ANALYSIS_ERROR)
    return AnalysisResponse(analysis=analysis)


@router.post("/gemini-chat", response_model=ChatResponse)
async def gemini_chat(payload: ChatPayload, gemini: GeminiAPI = Depends(get_gemini)):
    """Forward a message to Gemini and return its reply."""
    try:
        reply = await chat(payload.message, gemini)
    except UpstreamError as e:
        logger.error(f"Gemini API Error: {e}")
        return error_response(500, CHAT_ERROR)
    except Exception as e:
        logger.exception(f"Unexpected error during chat: {e}")
        return error_response(500, CHAT_ERROR)
    return ChatResponse(reply=reply)
