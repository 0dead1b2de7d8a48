"""Tests for choosing one game out of detection output."""
import pytest

from scummid.detection import (
    Candidate,
    EmptyCandidateSetError,
    GameMatch,
    NoTableFoundError,
    NotFoundError,
    ScoredCandidate,
    choose_candidate,
    parse_detect_output,
    pick_best,
    score_candidates,
)
from scummid.detection import disambiguate


def _candidate(identifier, description, path="G:\\games\\Astro Chicken (Floppy DOS)\\"):
    return Candidate(identifier=identifier, description=description, source_path=path)


class TestParseDetectOutput:
    def test_not_found(self, not_found_output):
        with pytest.raises(NotFoundError):
            parse_detect_output(not_found_output)

    def test_single_match(self, loom_output):
        assert parse_detect_output(loom_output) == GameMatch(
            identifier="scumm:loom",
            description="Loom (VGA/DOS/English)",
        )

    def test_ambiguous_match_prefers_directory_name(self, astro_chicken_output):
        assert parse_detect_output(astro_chicken_output) == GameMatch(
            identifier="sci:astrochicken",
            description="Astro Chicken (DOS/English)",
        )

    def test_no_table(self):
        with pytest.raises(NoTableFoundError):
            parse_detect_output("Usage: scummvm [OPTIONS]... [GAME]\n")

    def test_crlf_output(self, table_output):
        rows = [
            ("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)",
             "G:\\example\\SCUMMVM\\Astro Chicken (Floppy DOS)\\"),
            ("sci:astrochicken", "Astro Chicken (DOS/English)",
             "G:\\example\\SCUMMVM\\Astro Chicken (Floppy DOS)\\"),
        ]
        assert parse_detect_output(table_output(rows, eol="\r\n")).identifier == "sci:astrochicken"


class TestChooseCandidate:
    def test_empty(self):
        with pytest.raises(EmptyCandidateSetError):
            choose_candidate([])

    def test_single_candidate_is_not_scored(self, monkeypatch):
        def _fail(*args, **kwargs):
            raise AssertionError("scoring must not run for a single candidate")

        monkeypatch.setattr(disambiguate, "score_candidates", _fail)
        only = _candidate("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)")
        assert choose_candidate([only]) is only

    def test_single_candidate_even_if_unstemmable(self):
        only = _candidate("scumm:loom", "???", path="G:\\")
        assert choose_candidate([only]) is only

    def test_tie_goes_to_earlier_row(self):
        first = _candidate("sci:astrochicken", "Astro Chicken (DOS/English)")
        second = _candidate("sci:astrochicken2", "Astro Chicken (DOS/English)")
        assert choose_candidate([first, second]) is first

    def test_best_score_wins_regardless_of_position(self):
        rows = [
            _candidate("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)"),
            _candidate("sci:astrochicken", "Astro Chicken (DOS/English)"),
            _candidate("scumm:loom", "Loom (VGA/DOS/English)"),
        ]
        assert choose_candidate(rows).identifier == "sci:astrochicken"

    def test_all_skipped_defaults_to_first(self):
        rows = [
            _candidate("a:one", "???", path="G:\\"),
            _candidate("b:two", "!!!", path="G:\\"),
        ]
        assert choose_candidate(rows) is rows[0]

    def test_all_zero_scores_default_to_first(self):
        rows = [
            _candidate("a:one", "zzzzzzzz", path="/games/qqqq"),
            _candidate("b:two", "yyyyyyyy", path="/games/qqqq"),
        ]
        assert choose_candidate(rows) is rows[0]

    def test_skipped_first_row_loses_to_scored_row(self):
        rows = [
            _candidate("a:one", "???"),
            _candidate("sci:astrochicken", "Astro Chicken (DOS/English)"),
        ]
        assert choose_candidate(rows) is rows[1]


class TestScoreCandidates:
    def test_scores_in_row_order(self):
        rows = [
            _candidate("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)"),
            _candidate("sci:astrochicken", "Astro Chicken (DOS/English)"),
        ]
        scored = score_candidates(rows)
        assert [s.index for s in scored] == [0, 1]
        assert [s.candidate for s in scored] == rows
        assert scored[1].score > scored[0].score

    def test_skipped_candidate_has_no_score(self):
        scored = score_candidates([_candidate("a:one", "???")])
        assert scored[0].skipped
        assert scored[0].score is None

    def test_identical_description_and_directory(self):
        scored = score_candidates([_candidate("scumm:loom", "Loom", path="/games/loom/")])
        assert scored[0].score == pytest.approx(1.0)


class TestPickBest:
    def test_empty(self):
        with pytest.raises(EmptyCandidateSetError):
            pick_best([])

    def test_uses_given_scores_without_rescoring(self):
        rows = [
            _candidate("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)"),
            _candidate("sci:astrochicken", "Astro Chicken (DOS/English)"),
        ]
        scored = [
            ScoredCandidate(index=0, candidate=rows[0], score=0.9),
            ScoredCandidate(index=1, candidate=rows[1], score=0.2),
        ]
        assert pick_best(scored) is rows[0]

    def test_skipped_and_zero_scores_fall_back_to_first(self):
        rows = [_candidate("a:one", "???"), _candidate("b:two", "zzz")]
        scored = [
            ScoredCandidate(index=0, candidate=rows[0], score=None),
            ScoredCandidate(index=1, candidate=rows[1], score=0.0),
        ]
        assert pick_best(scored) is rows[0]
