# questionnaire/deps.py
from fastapi import Request

from questionnaire.services.catalog import Catalog
from questionnaire.services.store import SubmissionStore


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_store(request: Request) -> SubmissionStore:
    return request.app.state.store
