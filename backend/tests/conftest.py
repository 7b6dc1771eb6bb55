import pytest
from fastapi.testclient import TestClient

from questionnaire.config import Settings
from questionnaire.main import create_app
from questionnaire.models import Question
from questionnaire.services.catalog import Catalog
from questionnaire.services.store import SubmissionStore


@pytest.fixture
def catalog():
    """Two-question catalog: `name` is required, `age` is not."""
    return Catalog([
        Question(id="name", text="Как вас зовут?", type="text", required=True),
        Question(id="age", text="Ваш возраст", type="number", required=False),
    ])


@pytest.fixture
def store():
    return SubmissionStore()


@pytest.fixture
def settings(tmp_path):
    # Point asset dirs at empty locations so / and /static stay disabled.
    return Settings(
        templates_dir=str(tmp_path / "no-templates"),
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def client(settings, catalog, store):
    app = create_app(settings=settings, catalog=catalog, store=store)
    with TestClient(app) as c:
        yield c
