import json
from pathlib import Path

import pytest

import config
from db import database
from models.vocabulary import Vocabulary


VOCABULARY = {
    "categoryOrder": ["Numbers", "Greetings"],
    "vocabulary": [
        {"category": "Greetings", "spanish": "hola", "english": "hello"},
        {"category": "Numbers", "spanish": "dos", "english": "two"},
        {"category": "Numbers", "spanish": "dieciocho", "english": "eighteen"},
    ],
}


def _write_test_config(config_path: Path, vocabulary_path: Path) -> None:
    config_path.write_text(
        "\n".join(
            [
                "[grading]",
                "easy_threshold_ms = 8000",
                "good_threshold_ms = 30000",
                "near_miss_threshold = 0.85",
                "",
                "[session]",
                "max_new = 20",
                "direction = \"es-en\"",
                "",
                "[vocabulary]",
                f"path = \"{vocabulary_path.as_posix()}\"",
            ]
        ),
        encoding="utf-8",
    )


@pytest.fixture
def vocabulary() -> Vocabulary:
    return Vocabulary.model_validate(VOCABULARY)


@pytest.fixture
def senderos_home(tmp_path, monkeypatch):
    """Point config and database at a throwaway ~/.senderos."""
    for name in (
        "SENDEROS_MAX_NEW",
        "SENDEROS_DIRECTION",
        "SENDEROS_VOCABULARY",
        "SENDEROS_EASY_THRESHOLD_MS",
        "SENDEROS_GOOD_THRESHOLD_MS",
        "SENDEROS_NEAR_MISS_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
    config_dir = tmp_path / ".senderos"
    config_dir.mkdir()
    config_path = config_dir / "config.toml"
    vocabulary_path = tmp_path / "vocabulary.json"
    vocabulary_path.write_text(json.dumps(VOCABULARY), encoding="utf-8")
    _write_test_config(config_path, vocabulary_path)

    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_path)
    monkeypatch.setattr(database, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(database, "DB_PATH", config_dir / "senderos.db")
    return config_dir
