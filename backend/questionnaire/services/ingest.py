# questionnaire/services/ingest.py
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from questionnaire.errors import MalformedAnswers, MissingRequiredAnswer, describe_errors
from questionnaire.models import Answer, Question, Submission
from questionnaire.services.catalog import Catalog
from questionnaire.services.store import SubmissionStore

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Ответы сохранены"

# JSON null decodes as an empty batch
_BATCH_ADAPTER = TypeAdapter(Optional[List[Answer]])


@dataclass(frozen=True)
class SubmissionReceipt:
    submission: Submission
    total: int  # store size right after this append


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_submission_id() -> str:
    return uuid.uuid4().hex


def parse_answers(body: bytes) -> List[Answer]:
    """
    Decode a request body as a list of answers, whatever its Content-Type.
    Raises MalformedAnswers with the decoder's error text.
    """
    try:
        answers = _BATCH_ADAPTER.validate_json(body)
    except ValidationError as e:
        raise MalformedAnswers(describe_errors(e.errors())) from e
    return answers or []


def first_missing(catalog: Catalog, answers: Sequence[Answer]) -> Optional[Question]:
    """
    Return the first required question (catalog order) with no non-empty answer,
    or None when every required question is covered.
    """
    for question in catalog.required():
        if not any(a.question_id == question.id and not a.is_empty for a in answers):
            return question
    return None


def submit(catalog: Catalog, store: SubmissionStore, answers: Iterable[Answer]) -> SubmissionReceipt:
    """
    Validate a batch against the catalog and store it.
    Raises MissingRequiredAnswer for the first unmet required question;
    nothing is stored in that case.
    """
    answers = tuple(answers)

    missing = first_missing(catalog, answers)
    if missing is not None:
        logger.info("Submission rejected: missing %s", missing.id)
        raise MissingRequiredAnswer(missing.id, missing.text)

    submission = Submission(
        id=new_submission_id(),
        answers=answers,
        timestamp=utc_now(),
    )
    total = store.append(submission)
    logger.info("Submission %s stored (total=%d)", submission.id, total)
    return SubmissionReceipt(submission=submission, total=total)
