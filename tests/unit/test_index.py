"""Unit tests for the n-gram index."""

import math

import pytest
from title_search.core.exceptions import ConfigurationError, InvalidArgumentError
from title_search.core.index import Entry, GramIndex, Match, build


class TestGramIndexConfiguration:
    """Test cases for GramIndex construction."""

    def test_defaults(self):
        index = GramIndex()

        assert index.gram_size_lower == 2
        assert index.gram_size_upper == 3
        assert index.use_edit_distance is True
        assert index.refinement_limit == 50
        assert index.is_empty()

    def test_lower_above_upper_rejected(self):
        with pytest.raises(ConfigurationError):
            GramIndex(gram_size_lower=4, gram_size_upper=2)

    @pytest.mark.parametrize("lower,upper", [(0, 2), (1, 0), (-1, 3)])
    def test_bounds_below_one_rejected(self, lower, upper):
        with pytest.raises(ConfigurationError):
            GramIndex(gram_size_lower=lower, gram_size_upper=upper)

    def test_non_integer_bounds_rejected(self):
        with pytest.raises(ConfigurationError):
            GramIndex(gram_size_lower=2.5, gram_size_upper=3)

    def test_refinement_limit_rejected(self):
        with pytest.raises(ConfigurationError):
            GramIndex(refinement_limit=0)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            GramIndex(gram_size_lower=3, gram_size_upper=1)


class TestGramIndex:
    """Test cases for adding to and querying the GramIndex."""

    @pytest.fixture
    def bigram_index(self):
        """Bigram-only index with a single title."""
        return build([("cat", "ID1")], gram_size_lower=2, gram_size_upper=2)

    @pytest.fixture
    def titles(self):
        return [
            ("The Matrix", "M1"),
            ("The Matrix Reloaded", "M2"),
            ("The Matrix Revolutions", "M3"),
            ("Heat", "H1"),
            ("The Heat", "H2"),
            ("Ocean's Eleven", "O1"),
            ("Ocean's Twelve", "O2"),
            ("Amélie", "A1"),
            ("Casablanca", "C1"),
            ("Cast Away", "C2"),
        ]

    @pytest.fixture
    def title_index(self, titles):
        return GramIndex.build(titles)

    def test_exact_match(self, bigram_index):
        results = bigram_index.query("cat")

        assert results == [Match(1.0, Entry("cat", "ID1"))]
        assert results[0].payload == "ID1"

    def test_exact_match_ignores_case_and_whitespace(self, bigram_index):
        results = bigram_index.query("  CAT ")

        assert len(results) == 1
        assert results[0].score == 1.0
        assert results[0].payload == "ID1"

    def test_exact_match_regardless_of_min_score(self, title_index):
        results = title_index.query("the matrix", min_score=1.0)

        assert results[0] == Match(1.0, Entry("The Matrix", "M1"))

    def test_fuzzy_cosine_score(self):
        """-cat- and -cats- share three bigrams: 3 / (2 * sqrt(5))."""
        index = build(
            [("cat", "ID1")],
            gram_size_lower=2,
            gram_size_upper=2,
            use_edit_distance=False
        )

        results = index.query("cats")

        assert len(results) == 1
        assert results[0].score == pytest.approx(3 / (2 * math.sqrt(5)))
        assert results[0].score == pytest.approx(0.671, abs=1e-3)
        assert results[0].payload == "ID1"

    def test_fuzzy_edit_distance_score(self, bigram_index):
        """With refinement the cosine score is replaced by 1 - 1/4."""
        results = bigram_index.query("cats")

        assert results[0].score == pytest.approx(0.75)
        assert results[0].payload == "ID1"

    def test_no_shared_grams(self, bigram_index):
        assert bigram_index.query("zzz", min_score=0.33) == []

    def test_below_threshold_is_empty(self, bigram_index):
        assert bigram_index.query("cats", min_score=0.9) == []

    def test_add_returns_true(self):
        index = GramIndex()

        assert index.add(("Heat", "H1")) is True
        assert index.add(Entry("Alien", "A1")) is True
        assert len(index) == 2

    def test_duplicate_rejected(self, bigram_index):
        """The first entry for a key wins."""
        assert bigram_index.add(("Cat", "ID2")) is False
        assert bigram_index.add((" CAT ", "ID3")) is False

        assert len(bigram_index) == 1
        assert bigram_index.query("cat")[0].payload == "ID1"
        assert bigram_index.get_stats()["distinct_grams"] == {2: 4}

    @pytest.mark.parametrize("text", ["", "   ", None, 42])
    def test_unusable_text_rejected(self, text):
        index = GramIndex()

        assert index.add((text, "X")) is False
        assert index.is_empty()

    def test_entry_preserved(self):
        index = GramIndex()
        index.add(Entry("The Thing", {"id": 7}))

        match = index.query("the thing")[0]

        assert match.entry.text == "The Thing"
        assert match.payload == {"id": 7}

    def test_query_requires_string(self, bigram_index):
        with pytest.raises(InvalidArgumentError):
            bigram_index.query(123)
        with pytest.raises(TypeError):
            bigram_index.query(None)

    @pytest.mark.parametrize("min_score", [-0.1, 1.5])
    def test_min_score_out_of_range(self, bigram_index, min_score):
        with pytest.raises(InvalidArgumentError):
            bigram_index.query("cat", min_score=min_score)

    def test_cascade_falls_back_to_smaller_grams(self, monkeypatch):
        """-b- shares no trigram with -ab- but shares the bigram b-."""
        index = build([("ab", "X")], use_edit_distance=False)
        sizes = []
        score_candidates = index._score_candidates

        def spy(key, gram_size):
            sizes.append(gram_size)
            return score_candidates(key, gram_size)

        monkeypatch.setattr(index, "_score_candidates", spy)
        results = index.query("b")

        assert sizes == [3, 2]
        assert results[0].payload == "X"
        assert results[0].score == pytest.approx(1 / (math.sqrt(2) * math.sqrt(3)))

    def test_cascade_stops_at_first_match(self, monkeypatch):
        index = build([("cat", "ID1")], use_edit_distance=False)
        sizes = []
        score_candidates = index._score_candidates

        def spy(key, gram_size):
            sizes.append(gram_size)
            return score_candidates(key, gram_size)

        monkeypatch.setattr(index, "_score_candidates", spy)
        results = index.query("cats")

        assert sizes == [3]
        assert results[0].score == pytest.approx(2 / (math.sqrt(3) * 2))

    def test_results_sorted_descending(self, title_index):
        results = title_index.query("the matrx", min_score=0.0)

        assert results[0].payload == "M1"
        scores = [match.score for match in results]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize("query", [
        "matrix", "the heat", "oceans", "amelie", "casa", "cast", "x", "the", "revolution"
    ])
    def test_scores_in_range(self, title_index, query):
        for match in title_index.query(query, min_score=0.0):
            assert 0.0 <= match.score <= 1.0

    @pytest.mark.parametrize("query", ["matrix", "ocean", "the heat wave", "cast"])
    def test_threshold_monotonicity(self, titles, query):
        for use_edit_distance in (True, False):
            index = GramIndex.build(titles, use_edit_distance=use_edit_distance)
            previous = None
            for min_score in (0.0, 0.2, 0.33, 0.5, 0.7, 0.9, 1.0):
                payloads = {match.payload for match in index.query(query, min_score)}
                if previous is not None:
                    assert payloads <= previous
                previous = payloads

    def test_refinement_never_adds_candidates(self, titles):
        cosine_index = GramIndex.build(titles, use_edit_distance=False)
        refined_index = GramIndex.build(titles, refinement_limit=3)

        cosine_top = [match.payload for match in cosine_index.query("the matrix heat", 0.0)][:3]
        refined = [match.payload for match in refined_index.query("the matrix heat", 0.0)]

        assert len(refined) <= 3
        assert set(refined) <= set(cosine_top)

    def test_punctuation_is_ignored_for_scoring(self):
        """Titles differing only by stripped characters score 1.0 but are not exact."""
        index = build([("Ocean's Eleven", "O1")], use_edit_distance=False)

        results = index.query("oceans eleven")

        assert results[0].score == pytest.approx(1.0)
        assert results[0].payload == "O1"

    def test_punctuation_only_title(self):
        index = GramIndex(use_edit_distance=False)

        assert index.add(("!!!", "P")) is True
        assert index.query("?")[0].payload == "P"

    def test_get_returns_default(self, bigram_index):
        assert bigram_index.get("zzz", default="nothing") == "nothing"
        assert bigram_index.get("zzz") is None
        assert bigram_index.get("cat")[0].payload == "ID1"

    def test_collection_helpers(self, title_index):
        assert len(title_index) == 10
        assert not title_index.is_empty()
        assert "THE MATRIX" in title_index
        assert "the matrix 2" not in title_index
        assert 5 not in title_index
        assert title_index.values()[:2] == ["the matrix", "the matrix reloaded"]

    def test_build_skips_none(self):
        index = build([("cat", "ID1"), None, ("dog", "ID2")], gram_size_lower=2, gram_size_upper=2)

        assert len(index) == 2
        assert index.gram_size_upper == 2

    def test_empty_index_returns_nothing(self):
        index = GramIndex()

        assert index.query("anything") == []
        assert index.query("") == []

    def test_get_stats(self, title_index):
        stats = title_index.get_stats()

        assert stats["total_entries"] == 10
        assert stats["gram_sizes"] == [2, 3]
        assert set(stats["distinct_grams"]) == {2, 3}
        assert stats["refinement_limit"] == 50
