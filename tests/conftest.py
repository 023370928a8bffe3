import pytest

from functions.answer.handler import AnswerConfig, AnswerHandler


@pytest.fixture
def artifact(tmp_path):
    path = tmp_path / "answer.toml"
    path.write_text('key = "alpha"\n', encoding="utf-8")
    return path


@pytest.fixture
def answer_handler(artifact):
    return AnswerHandler(AnswerConfig(artifact_path=artifact))
