from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class ExtractedProfile(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    text: str = ""


class InterviewQuestion(BaseModel):
    id: str
    difficulty: Literal["easy", "medium", "hard"]
    text: str


class QuestionsResponse(BaseModel):
    questions: List[InterviewQuestion] = []


class GradingResult(BaseModel):
    score: float = Field(ge=0, le=10)
    feedback: str = ""


class InterviewSummary(BaseModel):
    final_score_percent: float = Field(alias="finalScorePercent", ge=0, le=100)
    summary: str = ""

    class Config:
        populate_by_name = True


class Candidate(BaseModel):
    name: Optional[str] = None
    # Kept as raw dicts so the answers reach the prompt exactly as sent
    answers: Optional[List[Dict[str, Any]]] = None


# --- Request bodies ---
# Fields are optional so the routers can answer with their own 400 messages.


class QuestionRequest(BaseModel):
    role: Optional[str] = None
    stack: Optional[List[str]] = None


class GradeRequest(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class SummaryRequest(BaseModel):
    candidate: Optional[Candidate] = None


class ErrorResponse(BaseModel):
    error: str
