import json

import pytest
from fastapi.testclient import TestClient

from backend.reader.registry import build_registry
from backend.reader.utils.bible_loader import parse_translation

SAMPLE_BOOKS = [
    {
        "code": "gn",
        "name": "Genesis",
        "chapters": [
            ["A", "B", "C"],
            ["No princípio era a luz", "D", "E", "F"],
            ["G", "H"],
        ],
    },
    {
        "code": "ex",
        "name": "Exodus",
        "chapters": [["Luz sobre o Egito", "I"], ["J"]],
    },
    # Leviticus through Malachi are absent on purpose
    {
        "code": "mt",
        "name": "Matthew",
        "chapters": [["K", "a luz do mundo", "L"]],
    },
    {
        "code": "jo",
        "name": "John",
        "chapters": [["M", "N"], ["O"]],
    },
]

SAMPLE_META = {
    "name": "Nova Versão de Acesso Livre (NVA)",
    "language": "pt-BR",
    "description": "Portuguese Bible translation",
    "summaries": {"gn": "Origens."},
}


@pytest.fixture()
def translation():
    return parse_translation("nva", json.loads(json.dumps(SAMPLE_BOOKS)))


@pytest.fixture()
def assets_dir(tmp_path):
    version_dir = tmp_path / "nva"
    version_dir.mkdir()
    (version_dir / "nva_bible.json").write_text(json.dumps(SAMPLE_BOOKS, ensure_ascii=False), encoding="utf-8")
    (version_dir / "nva_meta.json").write_text(json.dumps(SAMPLE_META, ensure_ascii=False), encoding="utf-8")
    return tmp_path


@pytest.fixture()
def registry(assets_dir):
    return build_registry(assets_dir)


@pytest.fixture()
def client(registry):
    from backend.reader.main import app

    app.state.registry = registry
    with TestClient(app) as test_client:
        yield test_client
    app.state.registry = None
