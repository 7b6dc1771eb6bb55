# questionnaire/routers/questions.py
from typing import List

from fastapi import APIRouter, Depends

from questionnaire.deps import get_catalog
from questionnaire.models import Question
from questionnaire.services.catalog import Catalog

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[Question], response_model_exclude_none=True)
def list_questions(catalog: Catalog = Depends(get_catalog)):
    """Return the questionnaire in display order."""
    return list(catalog.list())
