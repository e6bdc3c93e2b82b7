"""
Tests for counting functions and the metrics report.

Run tests with: pytest tests/test_analysis.py -v
"""

import pytest

from bunseki import (
    AnalysisResult,
    Language,
    MalformedInput,
    TokenizerUnavailable,
    analyze,
    build_report,
    count_chars,
    count_words,
)
from bunseki.counting import meaningful_tokens

from conftest import FakeTokenizer, make_token


def _percentages(listing):
    """Parse 'label: 12.34%, other: 56.78%' into a list of floats."""
    if not listing:
        return []
    return [float(part.rsplit(": ", 1)[1].rstrip("%")) for part in listing.split(", ")]


# =============================================================================
# Test Character Counting
# =============================================================================

class TestCountChars:
    """Test whitespace-excluding character counts."""

    @pytest.mark.parametrize("text, expected", [
        ("", 0),
        ("abc", 3),
        ("a b\tc\nd\re", 5),
        ("吾輩は 猫である。\n", 8),
        ("全角　スペース", 6),
        ("   \n\n  ", 0),
    ])
    def test_count_chars(self, text, expected):
        """Every whitespace character is ignored."""
        assert count_chars(text) == expected

    def test_count_chars_is_idempotent(self):
        """Removing whitespace twice changes nothing further."""
        text = " 令和6年度 受験案内\n横浜 "
        stripped = "".join(text.split())
        assert count_chars(text) == len(stripped) == count_chars(stripped)


# =============================================================================
# Test Word Counting
# =============================================================================

class TestCountWords:
    """Test English and Japanese word counts."""

    def test_english_hello_world(self):
        """Two whitespace-delimited words."""
        assert count_words("Hello world", "en") == 2

    def test_english_runs_of_whitespace(self):
        """Runs of mixed whitespace separate words once."""
        assert count_words("  This  product\tis\n\nexcellent  ", Language.ENGLISH) == 4

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_english_empty_input_is_zero(self, text):
        """Blank input has no words."""
        assert count_words(text, "english") == 0

    def test_default_language_is_english(self):
        """Language defaults to English."""
        assert count_words("one two three") == 3

    def test_japanese_excludes_symbols(self, fake_tokenizer, neko_text):
        """Punctuation tokens are not words; particles are."""
        assert count_words(neko_text, "ja", tokenizer=fake_tokenizer) == 9

    def test_japanese_punctuation_and_whitespace_only(self):
        """Text with only symbols and blanks has zero words."""
        tokenizer = FakeTokenizer()
        assert count_words("。、 ！？\n", "japanese", tokenizer=tokenizer) == 0

    def test_japanese_requires_tokenizer(self):
        """Japanese counting without a tokenizer is refused."""
        with pytest.raises(TokenizerUnavailable):
            count_words("猫", "ja")

    def test_unknown_language(self):
        """Unsupported languages are malformed input."""
        with pytest.raises(MalformedInput, match="fr"):
            count_words("bonjour", "fr")

    def test_meaningful_tokens(self, neko_tokens):
        """The counted tokens keep their order."""
        surfaces = [t.surface_form for t in meaningful_tokens(neko_tokens)]
        assert surfaces == ["吾輩", "は", "猫", "で", "ある", "名前", "は", "まだ", "無い"]


class TestLanguage:
    """Test language parsing."""

    @pytest.mark.parametrize("value, expected", [
        ("en", Language.ENGLISH),
        ("English", Language.ENGLISH),
        (" JA ", Language.JAPANESE),
        ("japanese", Language.JAPANESE),
        (Language.JAPANESE, Language.JAPANESE),
    ])
    def test_parse(self, value, expected):
        """Codes and names are accepted in any case."""
        assert Language.parse(value) is expected

    def test_parse_rejects_unknown(self):
        """Anything else raises MalformedInput."""
        with pytest.raises(MalformedInput):
            Language.parse("de")


# =============================================================================
# Test Metrics Report
# =============================================================================

class TestNekoReport:
    """Exact report values for the neko text."""

    @pytest.fixture
    def report(self, neko_text, fake_tokenizer):
        return analyze(neko_text, fake_tokenizer)

    def test_basic_counts(self, report):
        """16 characters, 2 sentences, 11 morphemes."""
        assert isinstance(report, AnalysisResult)
        assert report.total_chars == 16
        assert report.total_sentences == 2
        assert report.total_morphemes == 11

    def test_metric_order(self, report):
        """All nine metrics, in display order."""
        assert [entry.key for entry in report.metrics] == [
            "average_sentence_length",
            "average_morphemes_per_sentence",
            "pos_ratio",
            "particle_ratio",
            "script_type_ratio",
            "vocabulary_diversity",
            "katakana_word_ratio",
            "honorific_frequency",
            "punctuation_per_sentence",
        ]

    def test_averages(self, report):
        """Per-sentence averages."""
        assert report.get("average_sentence_length").value == "8.00"
        assert report.get("average_morphemes_per_sentence").value == "5.50"

    def test_pos_ratio_in_first_occurrence_order(self, report):
        """POS tags appear in order of first occurrence."""
        assert report.get("pos_ratio").value == (
            "名詞: 27.27%, 助詞: 18.18%, 助動詞: 18.18%, "
            "記号: 18.18%, 副詞: 9.09%, 形容詞: 9.09%"
        )

    def test_particle_ratio(self, report):
        """Both particles are は."""
        assert report.get("particle_ratio").value == "は: 100.00%"

    def test_script_type_ratio(self, report):
        """All six categories are listed."""
        assert report.get("script_type_ratio").value == (
            "hiragana: 50.00%, katakana: 0.00%, kanji: 37.50%, "
            "alphabet: 0.00%, digit: 0.00%, other: 12.50%"
        )

    def test_lexical_metrics(self, report):
        """Type/token ratio over base forms, and no katakana words."""
        assert report.get("vocabulary_diversity").value == "81.82"
        assert report.get("katakana_word_ratio").value == "0.00"

    def test_honorific_and_punctuation(self, report):
        """Plain style, one period per sentence."""
        assert report.get("honorific_frequency").value == "0.00"
        assert report.get("punctuation_per_sentence").value == "1.00"

    def test_entries_have_display_fields(self, report):
        """Names, units and descriptions come from the metric table."""
        entry = report.get("average_sentence_length")
        assert entry.name == "平均文長"
        assert entry.unit == "文字／文"
        assert entry.description
        assert report.get("unknown") is None


class TestReportFormulas:
    """Formula details and edge cases of build_report."""

    def test_particle_ratio_keeps_top_ten(self):
        """Only the ten most frequent particles are listed, most frequent first."""
        particles = "はがをにでとものへやかよね"
        tokens = [make_token(p, "助詞") for p in particles]
        tokens += [make_token("の", "助詞")] * 3 + [make_token("を", "助詞")]
        report = build_report("テスト。", tokens)

        listing = report.get("particle_ratio").value.split(", ")
        assert len(listing) == 10
        assert listing[0] == "の: 23.53%"
        assert listing[1] == "を: 11.76%"
        # Ties keep first-seen order
        assert listing[2] == "は: 5.88%"
        assert listing[3] == "が: 5.88%"

    def test_no_particles_gives_empty_listing(self):
        """Zero particles is an empty field, not an error."""
        report = build_report("猫。", [make_token("猫", "名詞"), make_token("。", "記号", "句点")])
        assert report.get("particle_ratio").value == ""

    def test_katakana_and_honorifics(self):
        """Katakana words and honorific tokens are counted."""
        text = "コーヒーをお願いします。"
        tokens = [
            make_token("コーヒー", "名詞"),
            make_token("を", "助詞"),
            make_token("お", "接頭詞"),
            make_token("願い", "名詞", base="願う"),
            make_token("し", "動詞", base="する"),
            make_token("ます", "助動詞"),
            make_token("。", "記号", "句点"),
        ]
        report = build_report(text, tokens)
        assert report.get("katakana_word_ratio").value == "14.29"
        assert report.get("honorific_frequency").value == "2.00"

    def test_custom_honorific_markers(self):
        """Markers can be replaced."""
        tokens = [make_token("ます", "助動詞"), make_token("拝見", "名詞")]
        report = build_report("拝見します。", tokens, honorific_markers=("拝見",))
        assert report.get("honorific_frequency").value == "1.00"

    def test_empty_text(self):
        """Every ratio is guarded against zero denominators."""
        report = build_report("", [])
        assert report.total_chars == 0
        assert report.total_sentences == 0
        assert report.total_morphemes == 0
        values = {entry.key: entry.value for entry in report.metrics}
        assert values["average_sentence_length"] == "0.00"
        assert values["average_morphemes_per_sentence"] == "0.00"
        assert values["pos_ratio"] == ""
        assert values["particle_ratio"] == ""
        assert values["vocabulary_diversity"] == "0.00"
        assert values["katakana_word_ratio"] == "0.00"
        assert values["honorific_frequency"] == "0.00"
        assert values["punctuation_per_sentence"] == "0.00"
        assert _percentages(values["script_type_ratio"]) == [0.0] * 6

    def test_precomputed_inputs_are_used(self):
        """Sentences and script counts may be supplied by the caller."""
        report = build_report("猫", [make_token("猫", "名詞")], sentences=["a", "b", "c", "d"])
        assert report.total_sentences == 4
        assert report.get("average_sentence_length").value == "0.25"

    @pytest.mark.parametrize("text", [
        "吾輩は猫である。名前はまだ無い。",
        "令和6年度 受験案内。AIカタカナを解析！",
        "Hello, world. 123",
    ])
    def test_ratios_sum_to_hundred(self, text):
        """Script and POS distributions each sum to about 100%."""
        report = analyze(text, FakeTokenizer())
        script_total = sum(_percentages(report.get("script_type_ratio").value))
        pos_total = sum(_percentages(report.get("pos_ratio").value))
        assert script_total == pytest.approx(100.0, abs=0.05)
        assert pos_total == pytest.approx(100.0, abs=0.05)


# =============================================================================
# Test Report Rendering
# =============================================================================

class TestReportRendering:
    """Test summary, dict and HTML output of AnalysisResult."""

    def test_summary(self, neko_text, fake_tokenizer):
        """The text block lists counts and every metric."""
        summary = analyze(neko_text, fake_tokenizer).summary()
        assert summary.startswith("# テキスト分析結果")
        assert "- 総文字数: 16文字" in summary
        assert "- 文の数: 2" in summary
        assert "- 総形態素数: 11" in summary
        assert "### 平均文長 (文字／文)\n- 値: 8.00" in summary
        assert "### 句読点の平均数 (個／文)" in summary

    def test_to_dict(self, neko_text, fake_tokenizer):
        """Metrics are keyed by their identifier."""
        data = analyze(neko_text, fake_tokenizer).to_dict()
        assert data["total_sentences"] == 2
        assert data["metrics"]["particle_ratio"]["value"] == "は: 100.00%"
        assert set(data["metrics"]) == {
            "average_sentence_length",
            "average_morphemes_per_sentence",
            "pos_ratio",
            "particle_ratio",
            "script_type_ratio",
            "vocabulary_diversity",
            "katakana_word_ratio",
            "honorific_frequency",
            "punctuation_per_sentence",
        }

