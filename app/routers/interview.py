from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Optional
import logging

from app.dependencies import get_gemini_gateway
from app.exceptions import DecodeError
from app.models import (
    ErrorResponse,
    GradeRequest,
    GradingResult,
    InterviewSummary,
    QuestionRequest,
    QuestionsResponse,
    SummaryRequest,
)
from app.services.gemini_service import GeminiGateway
from app.services.interview_prompt import (
    build_grading_prompt,
    build_questions_prompt,
    build_summary_prompt,
)
from app.services.json_decoder import decode_json

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_ROLE = "Full Stack Developer"
DEFAULT_STACK = ["React", "Node.js"]

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


async def _generate_json(gemini: GeminiGateway, prompt: str, what: str) -> Any:
    reply = await gemini.generate(prompt)
    decoded = decode_json(reply)
    if not decoded.ok:
        raise DecodeError(f"Invalid {what} output from Gemini")
    return decoded.value


@router.post(
    "/generate-questions",
    responses={200: {"model": QuestionsResponse}, **ERROR_RESPONSES},
)
async def generate_questions_endpoint(
    request_data: Optional[QuestionRequest] = None,
    gemini: GeminiGateway = Depends(get_gemini_gateway),
):
    """
    Ask Gemini for six interview questions (two easy, two medium, two hard)
    for the given role and tech stack.
    """
    logger.info("Received request: /api/generate-questions")
    request_data = request_data or QuestionRequest()
    role = request_data.role or DEFAULT_ROLE
    stack = request_data.stack if request_data.stack is not None else DEFAULT_STACK

    try:
        questions = await _generate_json(
            gemini, build_questions_prompt(role, stack), "questions"
        )
    except Exception:
        logger.exception("Error generating questions")
        raise HTTPException(
            status_code=500, detail="Gemini question generation failed"
        )

    # Passed through as decoded, not re-validated
    return {"questions": questions}


@router.post(
    "/grade-answer",
    responses={200: {"model": GradingResult}, **ERROR_RESPONSES},
)
async def grade_answer_endpoint(
    request_data: Optional[GradeRequest] = None,
    gemini: GeminiGateway = Depends(get_gemini_gateway),
):
    logger.info("Received request: /api/grade-answer")
    if request_data is None or not request_data.question or not request_data.answer:
        raise HTTPException(status_code=400, detail="Missing data")

    try:
        return await _generate_json(
            gemini,
            build_grading_prompt(request_data.question, request_data.answer),
            "grading",
        )
    except Exception:
        logger.exception("Error grading answer")
        raise HTTPException(status_code=500, detail="Gemini grading failed")


@router.post(
    "/final-summary",
    responses={200: {"model": InterviewSummary}, **ERROR_RESPONSES},
)
async def final_summary_endpoint(
    request_data: Optional[SummaryRequest] = None,
    gemini: GeminiGateway = Depends(get_gemini_gateway),
):
    logger.info("Received request: /api/final-summary")
    candidate = request_data.candidate if request_data else None
    if candidate is None or candidate.answers is None:
        raise HTTPException(status_code=400, detail="Missing candidate data")

    try:
        return await _generate_json(
            gemini,
            build_summary_prompt(candidate.name, candidate.answers),
            "summary",
        )
    except Exception:
        logger.exception("Error generating summary")
        raise HTTPException(status_code=500, detail="Gemini summary failed")
