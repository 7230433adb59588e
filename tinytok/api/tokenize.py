import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from tinytok.core.config import settings
from tinytok.core.segmentation.base import SegmentationError
from tinytok.core.segmentation.config import SEGMENTATION_METHODS
from tinytok.core.stopword_removal.config import StopwordConfig
from tinytok.core.tokenization.config import TokenizationConfig
from tinytok.core.tokenization.tokenizer import DEFAULT_IGNORE_CHARS, DEFAULT_STOPWORDS
from tinytok.messages.tokenize_messages import (
    BATCH_TOKENIZATION_SUCCESS,
    BATCH_TOO_LARGE,
    DEFAULTS_SUCCESS,
    INVALID_IGNORE_CHARS,
    TEXT_TOO_LONG,
    TOKENIZATION_SUCCESS,
)
from tinytok.middlewares.security import limiter
from tinytok.schemas.tokenize import (
    BatchTokenizeRequest,
    BatchTokenizedResponse,
    TokenizeOptions,
    TokenizeRequest,
    TokenizedResponse,
    TokenizerDefaultsResponse,
)
from tinytok.services.tokenization_service import TokenizationService
from tinytok.utils.exceptions import (
    BadRequestError,
    InputTooLargeError,
    SegmentationFailedError,
    UnsupportedSegmenterError,
)
from tinytok.utils.response_builder import success_response

router = APIRouter(prefix="/api/tokenize", tags=["Tokenization"])
logger = logging.getLogger(__name__)

_service = TokenizationService(
    default_segmenter=settings.DEFAULT_SEGMENTER,
    cache_size=settings.PIPELINE_CACHE_SIZE,
)


def get_tokenization_service() -> TokenizationService:
    # Single place to build the service used by all tokenization routes
    return _service


def _check_text(text: Optional[str]) -> None:
    if text is not None and len(text) > settings.MAX_TEXT_LENGTH:
        raise InputTooLargeError("TEXT_TOO_LONG", TEXT_TOO_LONG, settings.MAX_TEXT_LENGTH)


def _resolve(service: TokenizationService, opts: TokenizeOptions) -> TokenizationConfig:
    segmenter = (opts.segmenter or service.default_segmenter).lower()
    if segmenter not in SEGMENTATION_METHODS:
        raise UnsupportedSegmenterError(SEGMENTATION_METHODS)
    if opts.ignore_chars is not None and any(len(c) != 1 for c in opts.ignore_chars):
        raise BadRequestError(code="INVALID_IGNORE_CHARS", message=INVALID_IGNORE_CHARS)

    return service.resolve_config(
        segmenter=segmenter,
        custom_stopwords=opts.custom_stopwords,
        exclude_stopwords=opts.exclude_stopwords,
        ignore_chars=opts.ignore_chars,
    )


@router.post("", response_model=TokenizedResponse)
@limiter.limit(settings.RATE_LIMIT)
async def tokenize_text(
    request: Request,
    payload: TokenizeRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    _check_text(payload.text)
    cfg = _resolve(service, payload)

    try:
        tokens = service.tokenize(payload.text, cfg)
    except SegmentationError as e:
        logger.warning("Segmentation failed for /api/tokenize: %s", e)
        raise SegmentationFailedError() from e

    return success_response(
        message=TOKENIZATION_SUCCESS,
        data={"tokens": tokens, "token_count": len(tokens), "segmenter": cfg.segmenter},
    )


@router.post("/batch", response_model=BatchTokenizedResponse)
@limiter.limit(settings.RATE_LIMIT)
async def tokenize_batch(
    request: Request,
    payload: BatchTokenizeRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    if len(payload.texts) > settings.MAX_BATCH_SIZE:
        raise InputTooLargeError(
            "BATCH_TOO_LARGE", BATCH_TOO_LARGE, settings.MAX_BATCH_SIZE
        )
    for text in payload.texts:
        _check_text(text)
    cfg = _resolve(service, payload)

    try:
        result = service.tokenize_many(payload.texts, cfg)
    except SegmentationError as e:
        logger.warning("Segmentation failed for /api/tokenize/batch: %s", e)
        raise SegmentationFailedError() from e

    results: List[List[str]] = result.tokens
    return success_response(
        message=BATCH_TOKENIZATION_SUCCESS,
        data={
            "results": results,
            "record_count": len(results),
            "segmenter": result.config.segmenter,
            "elapsed_ms": round(result.elapsed_ms, 3),
        },
    )


@router.get("/defaults", response_model=TokenizerDefaultsResponse)
async def tokenizer_defaults(
    service: TokenizationService = Depends(get_tokenization_service),
):
    return success_response(
        message=DEFAULTS_SUCCESS,
        data={
            "default_segmenter": service.default_segmenter,
            "segmenters": list(SEGMENTATION_METHODS),
            "stopwords": DEFAULT_STOPWORDS,
            "ignore_chars": DEFAULT_IGNORE_CHARS,
            "min_token_len": StopwordConfig().min_token_len,
        },
    )
