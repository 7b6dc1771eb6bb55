# questionnaire/errors.py
from __future__ import annotations


class AppError(Exception):
    # Base class for domain errors (intended, meaningful failures).
    pass


class CatalogError(AppError):
    # Raised when a question catalog is malformed (duplicate ids, bad options, unreadable file).
    pass


class IngestionError(AppError):
    # Raised when an answer batch is refused; surfaced to the client as 400.
    pass


class MissingRequiredAnswer(IngestionError):
    # Raised for the first required question (catalog order) without a non-empty answer.

    def __init__(self, question_id: str, question_text: str):
        self.question_id = question_id
        self.question_text = question_text
        super().__init__(f"Обязательный вопрос не заполнен: {question_text}")


class MalformedAnswers(IngestionError):
    # Raised when a request body does not decode as a list of answers.
    pass


def describe_errors(errors) -> str:
    """Flatten pydantic error dicts into plain text, one line per error."""
    lines = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid")
        line = f"{loc}: {msg}" if loc else msg
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error and str(ctx_error) not in msg:
            line += f" ({ctx_error})"
        lines.append(line)
    return "\n".join(lines) or "Invalid request body"
