"""Tests for locate, exists, locate_all and search_motifs."""

import pytest

from biopatml import (
    Any,
    Gap,
    InvalidPatternError,
    Motif,
    Prosite,
    Regex,
    Repeat,
    Sequence,
    Series,
    Set,
    exists,
    locate,
    locate_all,
    match_pattern,
    search_motifs,
)
from biopatml.literals import MotifHit, available_backends


class TestLocate:
    """Test first-offset scanning."""

    def test_found_at_start(self):
        assert locate("ACGTACGT", Motif("ACGT")) == 0

    def test_not_found(self):
        assert locate("ACGTACGT", Motif("TTTT")) is None

    def test_found_later(self):
        assert locate("GGGACGT", Motif("ACGT")) == 3

    def test_accepts_sequence(self):
        assert locate(Sequence("ggACGT"), Motif("acgt")) == 2

    def test_empty_sequence(self):
        assert locate("", Motif("ACGT")) is None
        assert locate("", Any(0, 3)) is None

    def test_fuzzy_motif(self):
        """Non-exact motifs go through suffix scanning."""
        assert locate("TTACGA", Motif("ACGT", threshold=0.75)) == 2

    def test_wildcard_motif(self):
        assert locate("TTAGGT", Motif("AxxT")) == 2

    @pytest.mark.parametrize("backend", available_backends())
    def test_exact_motif_backends_agree(self, backend):
        """The Aho-Corasick path agrees with suffix scanning."""
        sequence = "TTGACGTGACGTT"
        motif = Motif("gacg")
        expected = next(i for i in range(len(sequence)) if motif.match(sequence[i:]))
        assert locate(sequence, motif, backend=backend) == expected == 2

    def test_exact_motif_near_end(self):
        assert locate("TTTACG", Motif("ACGT")) is None
        assert locate("TTTACGT", Motif("ACGT")) == 3

    def test_series(self):
        series = Series([Motif("ACGT"), Gap(1, 3), Motif("TTTT")])
        assert locate("GGACGTAATTTT", series) == 2

    def test_repeat(self):
        assert locate("GGGTATATAT", Repeat("TA", 0, 0, repeat_count=3)) == 3

    def test_set(self):
        patterns = Set([Motif("CCCC"), Motif("GTGT")])
        assert locate("AAGTGTCCCC", patterns) == 2

    def test_regex_matches_on_first_suffix(self):
        """Regex search is unanchored, so the whole sequence matches first."""
        assert locate("GGGACGT", Regex("acg")) == 0
        assert locate("GGGACGT", Regex("^acg")) == 3

    def test_prosite(self):
        assert locate("TTAGTTG", Prosite("<A-x-T(2)")) == 2

    def test_any(self):
        assert locate("ACGT", Any(2, 3)) == 0

    def test_locate_matches_definition(self):
        """locate returns the smallest offset whose suffix matches."""
        sequence = "TTACCGTAACGT"
        pattern = Motif("ACGT", threshold=0.5)
        expected = min(i for i in range(len(sequence)) if pattern.match(sequence[i:]))
        assert locate(sequence, pattern) == expected

    def test_gap_is_invalid(self):
        with pytest.raises(InvalidPatternError, match="Supplied pattern is invalid"):
            locate("ACGT", Gap(1, 2))

    def test_non_pattern_is_invalid(self):
        with pytest.raises(InvalidPatternError):
            locate("ACGT", "ACGT")  # type: ignore

    def test_gap_on_empty_sequence_is_invalid(self):
        """An invalid pattern is rejected even when there is nothing to scan."""
        with pytest.raises(InvalidPatternError):
            locate("", Gap(1, 2))
        with pytest.raises(InvalidPatternError):
            locate_all("", Gap(1, 2))

    @pytest.mark.parametrize("pattern", [Motif("ACGT"), Motif("ACGT", threshold=0.5), Regex("cg")])
    def test_unknown_backend(self, pattern):
        """The backend name is checked whichever scanning path is taken."""
        with pytest.raises(ValueError):
            locate("ACGT", pattern, backend="grep")


class TestExists:
    """Test existence checks."""

    def test_exists(self):
        assert exists("ACGTACGT", Motif("GTAC"))
        assert not exists("ACGTACGT", Motif("TTTT"))

    @pytest.mark.parametrize(
        "pattern",
        [Motif("CGTA"), Motif("GGGG"), Regex("t.c"), Any(9, 9), Repeat("CG", 2, 2, repeat_count=2)],
    )
    def test_consistent_with_locate(self, pattern):
        sequence = "ACGTACGT"
        assert exists(sequence, pattern) == (locate(sequence, pattern) is not None)

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            exists("ACGT", None)  # type: ignore

    def test_invalid_pattern_on_empty_sequence(self):
        with pytest.raises(InvalidPatternError):
            exists("", Gap(1, 2))


class TestLocateAll:
    """Test all-offset scanning."""

    def test_all_offsets(self):
        assert locate_all("ACGTACGT", Motif("ACGT")) == [0, 4]

    def test_none(self):
        assert locate_all("ACGT", Motif("TTTT")) == []

    def test_first_agrees_with_locate(self):
        sequence = "GACGAACGTT"
        pattern = Motif("ACGT", threshold=0.75)
        offsets = locate_all(sequence, pattern)
        assert offsets[0] == locate(sequence, pattern)


class TestSearchMotifs:
    """Test multi-motif exact search."""

    def test_multiple_motifs(self):
        hits = search_motifs("ACGTATATA", [Motif("ACGT"), "TATA"])
        assert hits == [
            MotifHit(literal="acgt", start=0, end=4),
            MotifHit(literal="tata", start=3, end=7),
            MotifHit(literal="tata", start=5, end=9),
        ]

    def test_case_insensitive(self):
        hits = search_motifs("ggacgt", ["ACGT"])
        assert [h.start for h in hits] == [2]

    def test_empty(self):
        assert search_motifs("ACGT", []) == []

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            search_motifs("ACGT", ["ACGT"], backend="grep")

    def test_wildcards_rejected(self):
        with pytest.raises(ValueError):
            search_motifs("ACGT", [Motif("ANGT")])


class TestMatchPattern:
    """Test dispatch over pattern kinds."""

    def test_threshold_only_reaches_motifs(self):
        assert match_pattern(Motif("ACGT"), "ACTT", threshold=0.5)
        assert not match_pattern(Regex("^acgt"), "ACTT", threshold=0.5)

    def test_invalid(self):
        with pytest.raises(InvalidPatternError):
            match_pattern(object(), "ACGT")  # type: ignore
