"""Unit tests for the leaderboard aggregation."""

from datetime import datetime, timedelta, timezone

from yapascourant.core.leaderboard import build_leaderboard, player_key
from yapascourant.models.data import ScoreRec, to_number

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def rec(name, location, game, score, minutes):
    return ScoreRec(name, location, game, score, date=T0 + timedelta(minutes=minutes))


def rows(leaders):
    return [(l.record.name, l.record.location, l.record.score) for l in leaders]


class TestPlayerKey:

    def test_trims_name_and_location(self):
        assert player_key(rec('  Alice ', ' Dakar', 'panne', 1, 0)) == 'Alice-Dakar'

    def test_includes_game_when_grouping_across_games(self):
        assert player_key(rec('Alice', 'Dakar', ' panne ', 1, 0), per_game=True) == 'Alice-Dakar-panne'

    def test_is_case_sensitive(self):
        assert player_key(rec('Alice', 'Dakar', 'g', 1, 0)) != player_key(rec('alice', 'Dakar', 'g', 1, 0))


class TestToNumber:

    def test_numeric_strings_are_converted(self):
        assert to_number('20') == 20
        assert to_number(' 12.5 ') == 12.5

    def test_non_numbers_are_none(self):
        for value in (None, 'beaucoup', True, float('nan'), float('inf'), 'NaN'):
            assert to_number(value) is None


class TestBuildLeaderboard:

    def test_empty_input(self):
        assert build_leaderboard([]) == []

    def test_single_submission_is_kept(self):
        leaders = build_leaderboard([rec('A', 'L1', 'G', 42, 0)])
        assert rows(leaders) == [('A', 'L1', 42)]
        assert leaders[0].rank == 1

    def test_latest_submission_wins_even_when_lower(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'Game1', 100, 0),
            rec('A', 'L1', 'Game1', 50, 5),
        ])
        assert rows(leaders) == [('A', 'L1', 50)]

    def test_latest_submission_wins_regardless_of_input_order(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'G', 70, 10),
            rec('A', 'L1', 'G', 90, 0),
            rec('A', 'L1', 'G', 20, 5),
        ])
        assert rows(leaders) == [('A', 'L1', 70)]

    def test_sorted_by_score_descending(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'G', 10, 0),
            rec('B', 'L2', 'G', 20, 1),
        ])
        assert rows(leaders) == [('B', 'L2', 20), ('A', 'L1', 10)]
        assert [l.rank for l in leaders] == [1, 2]

    def test_whitespace_variants_are_one_player(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'G', 10, 0),
            rec(' A ', 'L1  ', 'G', 30, 1),
        ])
        assert len(leaders) == 1
        assert leaders[0].record.score == 30

    def test_case_variants_are_distinct_players(self):
        leaders = build_leaderboard([
            rec('Alice', 'L1', 'G', 10, 0),
            rec('alice', 'L1', 'G', 30, 1),
        ])
        assert len(leaders) == 2

    def test_same_name_different_location_are_distinct(self):
        leaders = build_leaderboard([
            rec('A', 'Dakar', 'G', 10, 0),
            rec('A', 'Thies', 'G', 30, 1),
        ])
        assert rows(leaders) == [('A', 'Thies', 30), ('A', 'Dakar', 10)]

    def test_per_game_keeps_one_row_per_player_and_game(self):
        records = [
            rec('A', 'L1', 'panne', 10, 0),
            rec('A', 'L1', 'panne', 15, 1),
            rec('A', 'L1', 'detective', 40, 2),
        ]
        leaders = build_leaderboard(records, per_game=True)
        assert sorted((l.record.game, l.record.score) for l in leaders) == [('detective', 40), ('panne', 15)]
        # Without the game in the key the player collapses to one row
        assert len(build_leaderboard(records)) == 1

    def test_same_date_keeps_first_incoming_record(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'G', 5, 0),
            rec('A', 'L1', 'G', 9, 0),
        ])
        assert leaders[0].record.score == 5

    def test_properties_hold_on_mixed_input(self):
        records = [
            rec(name, loc, 'G', (i * 37) % 101, i)
            for i, (name, loc) in enumerate([('A', 'x'), ('B', 'y'), ('A', 'x'), ('C', 'z'), ('B', 'y'), ('D', 'x')] * 3)
        ]
        leaders = build_leaderboard(records)

        keys = [player_key(l.record) for l in leaders]
        assert len(keys) == len(set(keys)) == 4

        for leader in leaders:
            group = [r for r in records if player_key(r) == player_key(leader.record)]
            assert leader.record.date == max(r.date for r in group)

        scores = [l.record.score for l in leaders]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

        assert rows(build_leaderboard(records)) == rows(leaders)

    def test_string_and_numeric_scores_rank_together(self):
        leaders = build_leaderboard([
            rec('A', 'L1', 'G', 10, 0),
            rec('B', 'L2', 'G', '20', 1),
            rec('C', 'L3', 'G', 'beaucoup', 2),
        ])
        assert rows(leaders) == [('B', 'L2', '20'), ('A', 'L1', 10), ('C', 'L3', 'beaucoup')]
        assert [l.rank for l in leaders] == [1, 2, 3]

    def test_undated_record_loses_to_dated_one(self):
        undated = rec('A', 'L1', 'G', 99, 0)
        undated.date = None
        leaders = build_leaderboard([rec('A', 'L1', 'G', 80, -60), undated])
        assert rows(leaders) == [('A', 'L1', 80)]

    def test_undated_records_keep_incoming_order(self):
        first, second = rec('A', 'L1', 'G', 1, 0), rec('A', 'L1', 'G', 2, 0)
        first.date = second.date = None
        assert rows(build_leaderboard([first, second])) == [('A', 'L1', 1)]
