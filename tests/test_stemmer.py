"""Tests for the stemmer orchestration: guard, cascade and invariants."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from greek_stemmer import GreekStemmer, InvalidBufferError, build_stopword_set, stem, stem_word
from greek_stemmer.stemmer import get_stemmer


@pytest.fixture
def stemmer():
    return GreekStemmer()


def run(stemmer, word):
    buffer = list(word)
    length = stemmer.stem(buffer, len(buffer))
    return buffer, length


class TestScenarios:
    """Reference words and their stems."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("αγριοσ", "αγρι"),
            ("γραμματα", "γραμμα"),
            ("απο", "απο"),
            ("αβ", "αβ"),
            ("ρολογια", "ρολοι"),
            ("διχτυα", "διχτ"),
        ],
    )
    def test_reference_scenarios(self, stemmer, word, expected):
        assert stemmer.stem_word(word) == expected

    def test_returned_length(self, stemmer):
        """The returned length counts letters of the stem."""
        buffer, length = run(stemmer, "αγριοσ")
        assert length == 4
        assert "".join(buffer[:length]) == "αγρι"

    def test_substitution_rewrites_letter(self, stemmer):
        """ρολογια is not simply truncated: the γ is rewritten to ι."""
        buffer, length = run(stemmer, "ρολογια")
        assert length == 5
        assert buffer[4] == "ι"

    def test_long_list_only_when_nothing_fired(self, stemmer):
        """διχτυα reaches the generic endings; αγριοσ never does."""
        assert stemmer.stem_word("διχτυα") == "διχτ"
        # rule 22 alone would strip -οσ and give αγρ
        assert stemmer.stem_word("αγριοσ") == "αγρι"

    def test_degree_rule_runs_after_long_list(self, stemmer):
        """Comparative endings are handled last, after the long list."""
        assert stemmer.stem_word("ψηλοτεροσ") == "ψηλ"
        assert stemmer.stem_word("εξωτεροσ") == "εξωτερ"

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("αρχοντασ", "αρχοντ"),
            ("ονομαστε", "ονομαστ"),
            ("μονοφωτα", "μονοφω"),
            ("παρεα", "παρε"),
            ("στερεα", "στερε"),
            ("κουρεασ", "κουρ"),
            ("φασεωσ", "φασ"),
            ("γιοσ", "γι"),
            ("αγιασ", "αγι"),
            ("σκι", "σκ"),
        ],
    )
    def test_assorted_words(self, stemmer, word, expected):
        assert stemmer.stem_word(word) == expected


class TestGuard:
    """Short tokens and stopwords pass through untouched."""

    @pytest.mark.parametrize("word", ["απο", "δυο", "ελα", "αμα", "ειτε", "εγω", "δεν", "δηλαδη", "κανο"])
    def test_protected_words(self, stemmer, word):
        buffer, length = run(stemmer, word)
        assert length == len(word)
        assert "".join(buffer) == word

    @pytest.mark.parametrize("word", ["", "α", "αβ", "οσ", "εα"])
    def test_below_minimum_length(self, stemmer, word):
        buffer, length = run(stemmer, word)
        assert length == len(word)
        assert "".join(buffer) == word

    def test_custom_stopwords(self):
        """A custom stopword set replaces the bundled one."""
        custom = GreekStemmer(stopwords=build_stopword_set(["αγριοσ"]))
        assert custom.stem_word("αγριοσ") == "αγριοσ"
        # απο is no longer protected: the long list strips the final vowel
        assert custom.stem_word("απο") == "απ"

    def test_guard_uses_length_not_buffer_size(self, stemmer):
        """Only buffer[:length] is compared against the stopword list."""
        buffer = list("αποχχχ")
        assert stemmer.stem(buffer, 3) == 3


class TestInvariants:
    """Properties that hold for every input."""

    WORDS = [
        "αγριοσ", "αγριο", "αγριουσ", "γαλαζιοι", "παπουτσια", "γραμματοκιβωτιο",
        "βιντεοπροβολεισ", "καθεστωτοσ", "αγαπησαμε", "τραγανε", "νησου",
        "αγαπουνε", "φουμε", "γραμματουσ", "ευγενεστερ", "καυτεροσ", "αρχοντασ",
        "βαριομαστε", "ακαταπιεστε", "σκι", "ιοσ", "α", "ουα", "εστερ",
    ]

    @pytest.mark.parametrize("word", WORDS)
    def test_never_grows(self, stemmer, word):
        _, length = run(stemmer, word)
        assert 0 <= length <= len(word)

    @pytest.mark.parametrize("word", WORDS)
    def test_deterministic(self, stemmer, word):
        assert stemmer.stem_word(word) == stemmer.stem_word(word)

    def test_independent_of_previous_calls(self, stemmer):
        """Stemming other words first does not change a result."""
        fresh = GreekStemmer().stem_word("ρολογια")
        for w in self.WORDS:
            stemmer.stem_word(w)
        assert stemmer.stem_word("ρολογια") == fresh

    def test_truncation_keeps_tail(self, stemmer):
        """Letters past the stem are left in place, not cleared."""
        buffer, length = run(stemmer, "αγροσ")
        assert length == 3
        assert buffer == list("αγροσ")

    def test_concurrent_use(self, stemmer):
        """A single stemmer can serve many threads."""
        words = self.WORDS * 20
        expected = [stemmer.stem_word(w) for w in words]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(stemmer.stem_word, words))
        assert results == expected


class TestPreconditions:
    """Invalid buffers are rejected."""

    def test_length_exceeds_buffer(self, stemmer):
        with pytest.raises(InvalidBufferError):
            stemmer.stem(list("αβγ"), 5)

    def test_negative_length(self, stemmer):
        with pytest.raises(InvalidBufferError):
            stemmer.stem(list("αβγ"), -1)

    def test_immutable_buffer(self, stemmer):
        with pytest.raises(InvalidBufferError):
            stemmer.stem("αγριοσ", 6)

    def test_invalid_buffer_is_value_error(self, stemmer):
        with pytest.raises(ValueError):
            stemmer.stem(list("αβγ"), 4)


class TestModuleFunctions:
    """Module-level helpers use the shared stemmer."""

    def test_stem(self):
        buffer = list("γραμματα")
        length = stem(buffer, len(buffer))
        assert "".join(buffer[:length]) == "γραμμα"

    def test_stem_word(self):
        assert stem_word("διχτυα") == "διχτ"

    def test_shared_stemmer_built_once(self):
        with ThreadPoolExecutor(max_workers=8) as pool:
            stemmers = list(pool.map(lambda _: get_stemmer(), range(32)))
        assert all(s is stemmers[0] for s in stemmers)
