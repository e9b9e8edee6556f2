from dutch_vocab_analyzer.analysis import (
    Mode,
    PhraseAnalyzer,
    WordSuggestion,
    analyze_text,
    classify,
    suggest,
    tokenize,
)
from dutch_vocab_analyzer.analysis.vocab import InMemoryVocabularyStore, VocabularyEntry


def test_smoke():
    assert tokenize("Hallo, hoe gaat het?!") == ["hallo", "hoe", "gaat", "het"]
    assert classify(["honden"], {"hond"}).matched == ("honden",)
    assert suggest(["de kat eet", "de kat slaapt"], {"de"}) == [WordSuggestion("kat", 2)]

    result = analyze_text("Wat een mooi huisje", {"huis"}, Mode.MATCH_MEANS_UNKNOWN)
    assert result.unknown_words == ("huisje",)

    analyzer = PhraseAnalyzer(InMemoryVocabularyStore([VocabularyEntry("hond")]))
    record, _ = analyzer.record_phrase("los perros", target_text="de honden")
    assert record.unknown_word_list == ["de"]
