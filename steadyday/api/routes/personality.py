"""
Personality Route - Enneagram quiz and profiles
"""

from fastapi import APIRouter, Depends, HTTPException

from steadyday.api.dependencies import get_user_id, unwrap
from steadyday.api.models import QuizSubmit, ResultSave
from steadyday.personality import EnneagramType, results
from steadyday.personality.profiles import get_profile


router = APIRouter()


@router.get("/questions")
async def questions():
    items = results.list_questions()
    return {"questions": items, "total": len(items)}


@router.post("/quiz")
async def submit_quiz(body: QuizSubmit, user_id: str = Depends(get_user_id)):
    """Classify a full set of answers and store the result."""
    return unwrap(results.take_quiz(user_id, body.answers, wing=body.wing))


@router.put("/result")
async def save_result(body: ResultSave, user_id: str = Depends(get_user_id)):
    """Store a type the user already knows, without taking the quiz."""
    return unwrap(results.save_result(user_id, body.type, wing=body.wing, answers=body.answers))


@router.get("/result")
async def get_result(user_id: str = Depends(get_user_id)):
    result = results.get_result(user_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Quiz not taken yet")
    return result


@router.get("/profiles/{type_number}")
async def profile(type_number: int):
    if type_number not in {t.value for t in EnneagramType}:
        raise HTTPException(status_code=404, detail=f"Unknown Enneagram type: {type_number}")
    return get_profile(type_number).to_dict()
