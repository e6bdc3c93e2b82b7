"""
Pytest configuration and fixtures for bunseki tests.

Tests never load a real dictionary unless they say so: the tokenizer is a
FakeTokenizer that returns pre-analyzed tokens, so results are exact and do
not depend on the installed SudachiPy dictionary version.
"""

import pytest

from bunseki import Settings, TextAnalysisService
from bunseki.japanese.tokenizers import Token, TokenizerProvider


NEKO_TEXT = "吾輩は猫である。名前はまだ無い。"


def make_token(surface, pos, detail="", reading="", base=None):
    """Build a Token, defaulting the base form to the surface form."""
    return Token(
        surface_form=surface,
        part_of_speech=pos,
        part_of_speech_detail=detail,
        reading=reading,
        base_form=surface if base is None else base,
    )


NEKO_TOKENS = [
    make_token("吾輩", "名詞", "代名詞", "ワガハイ"),
    make_token("は", "助詞", "係助詞", "ハ"),
    make_token("猫", "名詞", "一般", "ネコ"),
    make_token("で", "助動詞", "", "デ", base="だ"),
    make_token("ある", "助動詞", "", "アル"),
    make_token("。", "記号", "句点", "。"),
    make_token("名前", "名詞", "一般", "ナマエ"),
    make_token("は", "助詞", "係助詞", "ハ"),
    make_token("まだ", "副詞", "助詞類接続", "マダ"),
    make_token("無い", "形容詞", "自立", "ナイ"),
    make_token("。", "記号", "句点", "。"),
]


class FakeTokenizer:
    """
    Tokenizer returning canned tokens.

    Texts found in ``table`` return their tokens. Any other text is split
    into one token per character: whitespace becomes '空白', ASCII
    punctuation and 。、 become '記号', everything else '名詞'.
    """

    def __init__(self, table=None):
        self.table = dict(table or {})
        self.calls = []

    def tokenize(self, text):
        self.calls.append(text)
        if text in self.table:
            return list(self.table[text])
        tokens = []
        for char in text:
            if char.isspace():
                tokens.append(make_token(char, "空白"))
            elif char in "。、.,!?！？「」":
                tokens.append(make_token(char, "記号", "句点" if char == "。" else "一般"))
            else:
                tokens.append(make_token(char, "名詞", "一般"))
        return tokens


class CountingLoader:
    """Loader that records how often it was called."""

    def __init__(self, handle=None, error=None, fail_times=0):
        self.handle = handle if handle is not None else FakeTokenizer({NEKO_TEXT: NEKO_TOKENS})
        self.error = error
        self.fail_times = fail_times
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.error is not None and (self.fail_times == 0 or self.calls <= self.fail_times):
            raise self.error
        return self.handle


@pytest.fixture
def neko_text():
    """Provide the two-sentence opening of 吾輩は猫である."""
    return NEKO_TEXT


@pytest.fixture
def neko_tokens():
    """Provide the IPADIC-style analysis of the neko text."""
    return list(NEKO_TOKENS)


@pytest.fixture
def fake_tokenizer():
    """Create a FakeTokenizer that knows the neko text."""
    return FakeTokenizer({NEKO_TEXT: NEKO_TOKENS})


@pytest.fixture
def settings():
    """Settings with warm-up enabled and no timeout."""
    return Settings()


@pytest.fixture
def service(fake_tokenizer, settings):
    """Create a service whose provider loads the fake tokenizer."""
    provider = TokenizerProvider(loader=lambda: fake_tokenizer)
    return TextAnalysisService(provider=provider, settings=settings)


@pytest.fixture
def failing_service(settings):
    """Create a service whose tokenizer can never be built."""
    loader = CountingLoader(error=OSError("dictionary not found"))
    provider = TokenizerProvider(loader=loader)
    return TextAnalysisService(provider=provider, settings=settings)
