import json
from typing import Any, Dict, List, Optional

QUESTION_COUNT = 6


def build_questions_prompt(role: str, stack: List[str]) -> str:
    stack_str = ", ".join(stack)
    return f"""
Generate {QUESTION_COUNT} technical interview questions for a {role} skilled in {stack_str}.
- 2 easy, 2 medium, 2 hard.
Return strict JSON: [{{"id":"q1","difficulty":"easy","text":"..."}}]
"""


def build_grading_prompt(question: str, answer: str) -> str:
    return f"""
Evaluate this answer (0–10) with 1–2 lines of feedback.
Question: {question}
Answer: {answer}
Return strict JSON: {{"score": number, "feedback": "..."}}
"""


def build_summary_prompt(name: Optional[str], answers: List[Dict[str, Any]]) -> str:
    return f"""
Summarize this interview:
Name: {name or "Unknown candidate"}
Answers: {json.dumps(answers, indent=2, ensure_ascii=False)}
Return strict JSON: {{"finalScorePercent": number, "summary": "..."}}
"""
