VERSION = "1.0.0"

UNICODE_EMOJI_BASE_URL = "https://unicode.org/Public/emoji/"
EMOJIBASE_BASE_URL = "https://cdn.jsdelivr.net/npm/emojibase-data@latest/"
