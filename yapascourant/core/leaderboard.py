"""Leaderboard aggregation: one row per player, latest submission wins."""

from typing import Iterable, List

from ..models.data import Leader, ScoreRec, to_number


def _trim(value) -> str:
    return str(value if value is not None else '').strip()


def player_key(rec: ScoreRec, per_game: bool = False) -> str:
    """
    Build the grouping key identifying a player.

    Name and location are trimmed but otherwise compared exactly, so
    "Alice" and "alice" are two different players. With ``per_game`` the
    game is part of the key, which is what the cross-game board needs.
    """
    parts = [_trim(rec.name), _trim(rec.location)]
    if per_game:
        parts.append(_trim(rec.game))
    return '-'.join(parts)


def _date_key(rec: ScoreRec):
    # Missing dates sort below every real date
    return (rec.date is not None, rec.date)


def _score_key(rec: ScoreRec) -> float:
    score = to_number(rec.score)
    return float('-inf') if score is None else score


def build_leaderboard(records: Iterable[ScoreRec], per_game: bool = False) -> List[Leader]:
    """
    Deduplicate score records and rank them by score.

    - **records**: score records, either every record or those of one game
    - **per_game**: group by player and game instead of player only

    Within a group the most recently submitted record is kept even when an
    older one scored higher. Both sorts are stable: records with the same
    date keep their incoming order, and equal scores keep selection order.
    Records without a date count as the oldest, and scores that are not
    numbers rank last.
    """
    newest_first = sorted(records, key=_date_key, reverse=True)

    latest = {}
    for rec in newest_first:
        latest.setdefault(player_key(rec, per_game), rec)

    ranked = sorted(latest.values(), key=_score_key, reverse=True)
    return [Leader(rec, idx + 1) for idx, rec in enumerate(ranked)]
