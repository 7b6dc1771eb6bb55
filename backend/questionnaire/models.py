# questionnaire/models.py
"""
Wire models shared by the services and the routers.
Field aliases carry the camelCase names clients send and receive.
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)

# An answer value is absent, a string, a number or a boolean.
# Strict members stop `true` from being read as 1 and `1` as "1".
AnswerValue = Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]

QuestionType = Literal["text", "number", "select"]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: QuestionType
    options: Optional[Tuple[str, ...]] = None  # select only
    required: bool = False
    placeholder: Optional[str] = None


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    question_id: str = Field(alias="questionId")
    value: AnswerValue = None

    @property
    def is_empty(self) -> bool:
        """True when the value is missing or the empty string; False and 0 are answers."""
        return self.value is None or self.value == ""


class Submission(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    answers: Tuple[Answer, ...]
    timestamp: datetime


class AnswersOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    submission_id: str = Field(alias="submissionId")
    total_submissions: int = Field(alias="totalSubmissions")
