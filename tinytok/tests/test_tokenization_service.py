import pytest

from tinytok.core.segmentation.base import SegmentationError, Segmenter
from tinytok.core.tokenization.tokenizer import DEFAULT_IGNORE_CHARS
from tinytok.services.tokenization_service import TokenizationService


@pytest.fixture
def service():
    return TokenizationService(default_segmenter="whitespace")


def test_resolve_config_defaults(service):
    cfg = service.resolve_config()
    assert cfg.segmenter == "whitespace"
    assert cfg.custom_stopwords == frozenset()
    assert cfg.ignore_chars is None


def test_resolve_config_normalizes_overrides(service):
    cfg = service.resolve_config(
        custom_stopwords=["Fox", "dog.", "!!!", " BIRD "],
        exclude_stopwords=["THE"],
    )
    assert cfg.custom_stopwords == frozenset({"fox", "dog", "bird"})
    assert cfg.exclude_stopwords == frozenset({"the"})


def test_mixed_case_overrides_take_effect(service):
    cfg = service.resolve_config(custom_stopwords=["Fox", "dog."], exclude_stopwords=["The"])
    assert service.tokenize("The fox and the dog", cfg) == ["the"]


def test_pipeline_is_reused_for_equal_configs(service):
    a = service.pipeline_for(service.resolve_config(custom_stopwords=["fox"]))
    b = service.pipeline_for(service.resolve_config(custom_stopwords=["Fox"]))
    c = service.pipeline_for(service.resolve_config())
    assert a is b
    assert a is not c


def test_pipeline_cache_is_bounded():
    s = TokenizationService(cache_size=4)
    for i in range(50):
        s.tokenize("some text", s.resolve_config(custom_stopwords=[f"word{i}"]))
    assert s.pipeline_for.cache_info().currsize == 4


def test_default_ignore_chars_when_not_given(service):
    pipeline = service.pipeline_for(service.resolve_config())
    assert pipeline.ignore_chars == DEFAULT_IGNORE_CHARS


def test_tokenize_with_overrides(service):
    cfg = service.resolve_config(
        custom_stopwords=["quick"], exclude_stopwords=["the"]
    )
    assert service.tokenize("The quick brown fox", cfg) == ["the", "brown", "fox"]


def test_tokenize_many_preserves_order(service):
    cfg = service.resolve_config(segmenter="wordpunct")
    result = service.tokenize_many(["Hello, world!", None, "", "world hello"], cfg)
    assert result.tokens == [["hello", "world"], [], [], ["world", "hello"]]
    assert result.config.segmenter == "wordpunct"


def test_unknown_segmenter_raises(service):
    with pytest.raises(ValueError):
        service.tokenize("text", service.resolve_config(segmenter="nope"))


# -------------------------------------
# ❌ Segmenter failures
# -------------------------------------
class BrokenSegmenter(Segmenter):
    def segment(self, text):
        raise UnicodeError("malformed input")


def test_segmenter_failure_surfaces_from_batch():
    s = TokenizationService(segmenter_factory=lambda name: BrokenSegmenter())
    with pytest.raises(SegmentationError):
        s.tokenize_many(["ok", "text"], s.resolve_config())
