# tinytok/messages/tokenize_messages.py

# ✅ Positive
TOKENIZATION_SUCCESS = "Text tokenized successfully."
BATCH_TOKENIZATION_SUCCESS = "Texts tokenized successfully."
DEFAULTS_SUCCESS = "Tokenizer defaults retrieved."

# ❌ Errors
SEGMENTATION_FAILED = "The segmenter could not process the given text."
UNSUPPORTED_SEGMENTER = "Unsupported segmenter. Choose one of: {choices}."
INVALID_IGNORE_CHARS = "Every ignore_chars entry must be a single character."
TEXT_TOO_LONG = "Text exceeds the maximum length of {limit} characters."
BATCH_TOO_LARGE = "Batch exceeds the maximum size of {limit} texts."
