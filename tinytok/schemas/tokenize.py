from typing import List, Optional
from pydantic import BaseModel, Field
from tinytok.schemas.common import BaseResponse


class TokenizeOptions(BaseModel):
    segmenter: Optional[str] = None  # falls back to settings.DEFAULT_SEGMENTER
    custom_stopwords: Optional[List[str]] = []
    exclude_stopwords: Optional[List[str]] = []
    ignore_chars: Optional[List[str]] = None  # None keeps the built-in set


# Request & Response for /api/tokenize
class TokenizeRequest(TokenizeOptions):
    text: Optional[str] = None


class TokenizedData(BaseModel):
    tokens: List[str]
    token_count: int
    segmenter: str


class TokenizedResponse(BaseResponse):
    data: TokenizedData


# Request & Response for /api/tokenize/batch
class BatchTokenizeRequest(TokenizeOptions):
    texts: List[Optional[str]] = Field(default_factory=list)


class BatchTokenizedData(BaseModel):
    results: List[List[str]]
    record_count: int
    elapsed_ms: float
    segmenter: str


class BatchTokenizedResponse(BaseResponse):
    data: BatchTokenizedData


# Response for /api/tokenize/defaults
class TokenizerDefaultsData(BaseModel):
    default_segmenter: str
    segmenters: List[str]
    stopwords: List[str]
    ignore_chars: List[str]
    min_token_len: int


class TokenizerDefaultsResponse(BaseResponse):
    data: TokenizerDefaultsData
