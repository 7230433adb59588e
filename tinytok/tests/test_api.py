import pytest
from fastapi.testclient import TestClient

from tinytok.api.tokenize import get_tokenization_service
from tinytok.core.config import settings
from tinytok.core.segmentation.base import Segmenter
from tinytok.main import app
from tinytok.services.tokenization_service import TokenizationService

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Frame-Options"] == "DENY"


def test_liveness_and_readiness():
    assert client.get("/liveness").status_code == 204
    assert client.get("/readiness").json() == {"status": "ready"}


def test_tokenize_sentence():
    response = client.post(
        "/api/tokenize",
        json={"text": "The quick brown fox jumps over the lazy dog."},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["tokens"] == [
        "quick",
        "brown",
        "fox",
        "jumps",
        "over",
        "lazy",
        "dog",
    ]
    assert body["data"]["token_count"] == 7
    assert body["data"]["segmenter"] == settings.DEFAULT_SEGMENTER


def test_tokenize_missing_text_is_empty():
    response = client.post("/api/tokenize", json={})
    assert response.status_code == 200
    assert response.json()["data"]["tokens"] == []


def test_tokenize_japanese():
    response = client.post(
        "/api/tokenize",
        json={"text": "私の名前は中野です", "segmenter": "tinysegmenter"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["tokens"] == ["名前", "中野", "です"]


def test_tokenize_with_stopword_overrides():
    response = client.post(
        "/api/tokenize",
        json={
            "text": "not the fox",
            "custom_stopwords": ["fox"],
            "exclude_stopwords": ["not"],
        },
    )
    assert response.json()["data"]["tokens"] == ["not"]


def test_stopword_overrides_are_normalized():
    response = client.post(
        "/api/tokenize",
        json={
            "text": "The fox and the dog ran",
            "custom_stopwords": ["Fox", "dog."],
            "exclude_stopwords": ["THE"],
        },
    )
    assert response.status_code == 200
    assert response.json()["data"]["tokens"] == ["the", "ran"]


def test_batch_tokenize():
    response = client.post(
        "/api/tokenize/batch",
        json={"texts": ["Hello hello HELLO", None, "...!!!???"], "segmenter": "wordpunct"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["results"] == [["hello"], [], []]
    assert data["record_count"] == 3
    assert data["segmenter"] == "wordpunct"
    assert data["elapsed_ms"] >= 0


def test_defaults():
    response = client.get("/api/tokenize/defaults")
    assert response.status_code == 200
    data = response.json()["data"]
    assert "the" in data["stopwords"]
    assert "`" in data["ignore_chars"]
    assert "tinysegmenter" in data["segmenters"]
    assert data["min_token_len"] == 2


# -------------------------------------
# ❌ Unsupported segmenter
# -------------------------------------
def test_unsupported_segmenter():
    response = client.post("/api/tokenize", json={"text": "hi", "segmenter": "mecab"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "UNSUPPORTED_SEGMENTER"


# -------------------------------------
# ❌ Multi-character ignore entry
# -------------------------------------
def test_invalid_ignore_chars():
    response = client.post(
        "/api/tokenize", json={"text": "hi", "ignore_chars": ["ab"]}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_IGNORE_CHARS"


# -------------------------------------
# ❌ Oversized input
# -------------------------------------
def test_text_too_long():
    response = client.post(
        "/api/tokenize", json={"text": "a" * (settings.MAX_TEXT_LENGTH + 1)}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "TEXT_TOO_LONG"


def test_batch_too_large():
    response = client.post(
        "/api/tokenize/batch", json={"texts": ["a"] * (settings.MAX_BATCH_SIZE + 1)}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BATCH_TOO_LARGE"


# -------------------------------------
# ❌ Segmenter failure
# -------------------------------------
class BrokenSegmenter(Segmenter):
    def segment(self, text):
        raise UnicodeError("malformed input")


@pytest.fixture
def broken_segmenter_service():
    service = TokenizationService(segmenter_factory=lambda name: BrokenSegmenter())
    app.dependency_overrides[get_tokenization_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


def test_segmentation_failure(broken_segmenter_service):
    response = client.post("/api/tokenize", json={"text": "anything"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SEGMENTATION_FAILED"


def test_batch_segmentation_failure(broken_segmenter_service):
    response = client.post("/api/tokenize/batch", json={"texts": ["ok", "anything"]})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SEGMENTATION_FAILED"
