from __future__ import annotations
import re
import logging
from typing import List, Tuple
from .datatypes import Document, Sentence

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
# maximal run of non-terminators followed by any terminators
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]*")
_CURLY_QUOTES_RE = re.compile("[\u2018\u2019\u201C\u201D]")
_NON_TOKEN_RE = re.compile(r"[^a-z0-9']")

STOPWORDS = frozenset((
    "a,about,above,after,again,against,all,am,an,and,any,are,as,at,be,because,been,before,"
    "being,below,between,both,but,by,could,did,do,does,doing,down,during,each,few,for,from,"
    "further,had,has,have,having,he,her,here,hers,him,himself,his,how,i,if,in,into,is,it,"
    "its,itself,just,me,more,most,my,myself,no,nor,not,now,of,off,on,once,only,or,other,our,"
    "ours,ourselves,out,over,own,same,she,should,so,some,such,than,that,the,their,theirs,them,"
    "themselves,then,there,these,they,this,those,through,to,too,under,until,up,very,was,we,"
    "were,what,when,where,which,while,who,whom,why,will,with,you,your,yours,yourself,yourselves,"
    # contractions and common function words
    "also,although,among,another,around,can,cannot,can't,didn't,doesn't,don't,either,else,"
    "etc,ever,every,he's,however,i'm,i've,isn't,it's,let's,many,may,might,much,must,neither,"
    "onto,per,shall,she's,since,still,that's,there's,they're,though,upon,us,via,we're,"
    "whether,whose,within,without,won't,would,yet,you're"
).split(","))

TOKEN_MIN_LENGTH = {
    "summary": 1,
    "keyword": 3,  # stricter to keep noise out of tag candidates
}


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str) -> List[str]:
    """Split text into trimmed sentences, keeping terminal punctuation."""
    if not isinstance(text, str):
        return []
    text = normalize_whitespace(text)
    if not text:
        return []
    parts = (m.group(0).strip() for m in _SENTENCE_RE.finditer(text))
    return [p for p in parts if p]


def normalize_for_tokens(text: str) -> str:
    text = _CURLY_QUOTES_RE.sub("'", text).lower()
    return _NON_TOKEN_RE.sub(" ", text)


def tokenize(text: str, mode: str = "summary") -> List[str]:
    """
    Turn text into normalized content tokens.

    Modes:
      - summary: every non-stopword token
      - keyword: non-stopword tokens longer than two characters
    """
    try:
        min_len = TOKEN_MIN_LENGTH[mode]
    except KeyError:
        raise ValueError(f"Unknown tokenize mode: {mode}") from None
    if not isinstance(text, str):
        return []
    return [t for t in normalize_for_tokens(text).split()
            if len(t) >= min_len and t not in STOPWORDS]


def preprocess_text(text: str, min_sentence_length: int = 10) -> Document:
    if not isinstance(text, str):
        return Document(raw_text="", sentences=[])
    kept: List[Tuple[str, List[str]]] = []
    dropped = 0
    for s in split_sentences(text):
        if len(s) < min_sentence_length:
            dropped += 1
            continue
        kept.append((s, tokenize(s, "summary")))
    if dropped:
        logger.debug("Dropped %d sentence(s) shorter than %d chars", dropped, min_sentence_length)
    sentences = [Sentence(idx=i, text=s, tokens=tuple(toks)) for i, (s, toks) in enumerate(kept)]
    return Document(raw_text=text, sentences=sentences)
