import re
import unicodedata

# Administrative units and filler words dropped before scoring.
# Applied in order, whole words only.
STOP_WORDS = (
    "thanh pho", "tinh", "quan", "huyen", "thi xa", "thi tran", "phuong", "xa", "ap",
    "duong", "so", "nha", "ngo", "ngach", "hem", "khu pho", "to", "viet nam", "vn",
)

_STOP_WORD_PATTERNS = tuple(re.compile(rf"\b{re.escape(word)}\b") for word in STOP_WORDS)
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def normalize(text) -> str:
    """
    Fold a free-text string into lower-case ASCII tokens separated by single spaces.

    All Vietnamese tone and vowel marks are dropped (NFD decomposition, combining
    marks removed) and `đ` becomes `d`. Any other character outside [a-z0-9]
    turns into a separator.

    Examples:
        'Liên Chiểu, Đà Nẵng'   → 'lien chieu da nang'
        '123/4 Nguyễn Sinh Sắc' → '123 4 nguyen sinh sac'
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFD", str(text).lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.replace("đ", "d")
    return _NON_ALNUM.sub(" ", text).strip()


def remove_stop_words(text: str) -> str:
    """Remove administrative filler words from normalized text."""
    if not text:
        return ""
    for pattern in _STOP_WORD_PATTERNS:
        text = pattern.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()
