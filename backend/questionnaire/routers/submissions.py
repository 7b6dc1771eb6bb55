# questionnaire/routers/submissions.py
from typing import List

from fastapi import APIRouter, Depends

from questionnaire.deps import get_store
from questionnaire.models import Submission
from questionnaire.services.store import SubmissionStore

router = APIRouter(tags=["submissions"])


@router.get("/submissions", response_model=List[Submission])
def list_submissions(store: SubmissionStore = Depends(get_store)):
    return store.snapshot()
