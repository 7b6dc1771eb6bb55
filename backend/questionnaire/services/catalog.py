# questionnaire/services/catalog.py
"""
The fixed, ordered list of questions shown to respondents.
Built once at start-up, either from the built-in questions or from a JSON file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from pydantic import TypeAdapter, ValidationError

from questionnaire.errors import CatalogError
from questionnaire.models import Question

logger = logging.getLogger(__name__)

_QUESTIONS_ADAPTER = TypeAdapter(List[Question])


DEFAULT_QUESTIONS: Tuple[Question, ...] = (
    Question(
        id="name",
        text="Как вас зовут?",
        type="text",
        required=True,
        placeholder="Введите ваше имя",
    ),
    Question(
        id="email",
        text="Ваш email",
        type="text",
        required=True,
        placeholder="example@domain.com",
    ),
    Question(
        id="age",
        text="Ваш возраст",
        type="number",
        required=False,
    ),
    Question(
        id="gender",
        text="Ваш пол",
        type="select",
        required=True,
        options=("Мужской", "Женский", "Не указывать"),
    ),
    Question(
        id="feedback",
        text="Оставьте ваш отзыв",
        type="text",
        required=False,
        placeholder="Напишите ваши пожелания...",
    ),
)


def _check(questions: Tuple[Question, ...]) -> None:
    seen = set()
    for q in questions:
        if q.id in seen:
            raise CatalogError(f"Duplicate question id: {q.id}")
        seen.add(q.id)
        if q.type == "select" and not q.options:
            raise CatalogError(f"Select question {q.id} has no options")
        if q.type != "select" and q.options:
            raise CatalogError(f"Question {q.id} of type {q.type} cannot have options")


class Catalog:
    """Immutable question catalog."""

    def __init__(self, questions: Iterable[Question]):
        self._questions = tuple(questions)
        _check(self._questions)

    @classmethod
    def default(cls) -> "Catalog":
        return cls(DEFAULT_QUESTIONS)

    @classmethod
    def from_file(cls, path: str | Path) -> "Catalog":
        """Load a JSON array of questions in the same shape GET /questions returns."""
        path = Path(path)
        try:
            questions = _QUESTIONS_ADAPTER.validate_json(path.read_bytes())
        except OSError as e:
            raise CatalogError(f"Cannot read questions file {path}: {e}") from e
        except ValidationError as e:
            raise CatalogError(f"Invalid questions file {path}: {e}") from e
        catalog = cls(questions)
        logger.info("Loaded %d questions from %s", len(catalog), path)
        return catalog

    def list(self) -> Tuple[Question, ...]:
        return self._questions

    def required(self) -> Tuple[Question, ...]:
        return tuple(q for q in self._questions if q.required)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)
