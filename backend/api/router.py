import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile as StarletteUploadFile

from api.dependencies import get_llm_client
from config import settings
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResult, ErrorResponse
from services import document_extractor, resume_analyzer
from services.llm_client import LLMClient

logger = logging.getLogger(__name__)

router = APIRouter()

NO_RESUME_MESSAGE = "No resume uploaded."


@router.get("/health")
async def health(llm_client: LLMClient = Depends(get_llm_client)):
    return {
        "status": "ok",
        "llm_configured": llm_client.is_configured,
        "model": settings.gemini_model,
    }


@router.post(
    "/api/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    resume: UploadFile | str | None = File(None),
    jd: str = Form(""),
    llm_client: LLMClient = Depends(get_llm_client),
):
    # A plain text "resume" field or a nameless file part is not a document
    if not isinstance(resume, StarletteUploadFile) or not resume.filename:
        return JSONResponse(status_code=400, content={"error": NO_RESUME_MESSAGE})

    try:
        content = await resume.read()
        document = document_extractor.save_upload(resume.filename, content)
        resume_text = document_extractor.extract(document)
        if not resume_text.strip():
            logger.warning("No text extracted from %s", resume.filename)
        return await resume_analyzer.analyze(resume_text, jd, llm_client)
    except Exception as e:
        logger.exception("Server error while analyzing %s", resume.filename)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "details": str(e)},
        )


@router.post("/api/analyze/quick", response_model=AnalysisResult)
async def analyze_quick(
    body: QuickAnalyzeRequest,
    llm_client: LLMClient = Depends(get_llm_client),
):
    return await resume_analyzer.analyze(body.resume_text, body.jd, llm_client)
