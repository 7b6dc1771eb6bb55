# questionnaire/routers/answers.py
from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from questionnaire.deps import get_catalog, get_store
from questionnaire.models import AnswersOut
from questionnaire.services.catalog import Catalog
from questionnaire.services.ingest import SAVED_MESSAGE, parse_answers, submit
from questionnaire.services.store import SubmissionStore

router = APIRouter(tags=["answers"])


@router.post("/answers", response_model=AnswersOut)
async def post_answers(
    request: Request,
    catalog: Catalog = Depends(get_catalog),
    store: SubmissionStore = Depends(get_store),
):
    """
    Accept one filled-in questionnaire.
    The body is read as JSON regardless of Content-Type. A body that does
    not decode as a list of answers, or that misses a required question,
    is answered with 400 and a plain-text message (see main.py).
    """
    answers = parse_answers(await request.body())
    # the store lock blocks, keep it off the event loop
    receipt = await run_in_threadpool(submit, catalog, store, answers)
    return AnswersOut(
        message=SAVED_MESSAGE,
        submission_id=receipt.submission.id,
        total_submissions=receipt.total,
    )
