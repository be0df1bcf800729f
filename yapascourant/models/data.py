import math
from datetime import datetime, timezone


def _now():
    return datetime.now(timezone.utc)


def _doc_id(doc: dict):
    return str(doc['_id']) if doc.get('_id') is not None else None


def to_number(value):
    """Finite int or float from a stored score, None when it is not a number"""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
        if math.isfinite(value) and value.is_integer():
            return int(value)
    if isinstance(value, (int, float)) and math.isfinite(value):
        return value
    return None


class ScoreRec:
    __slots__ = ('id', 'name', 'location', 'game', 'score', 'date')

    def __init__(self, name: str, location: str, game: str, score, date: datetime = None, id: str = None):
        self.id = id
        self.name = name
        self.location = location
        self.game = game
        self.score = score
        self.date = date or _now()

    @classmethod
    def from_document(cls, doc: dict) -> 'ScoreRec':
        rec = cls(
            name=doc.get('name', ''),
            location=doc.get('location', ''),
            game=doc.get('game', ''),
            score=to_number(doc.get('score')),
            id=_doc_id(doc),
        )
        # Older documents may lack a date; they rank as the oldest submission
        rec.date = doc.get('date')
        return rec

    def to_document(self) -> dict:
        return {
            'name': self.name,
            'location': self.location,
            'game': self.game,
            'score': self.score,
            'date': self.date,
        }

    def to_dict(self):
        return {'id': self.id, **self.to_document()}


class VoteRec:
    __slots__ = ('game', 'client', 'date')

    def __init__(self, game: str, client: str, date: datetime = None):
        self.game = game
        self.client = client
        self.date = date or _now()

    def to_document(self) -> dict:
        return {'game': self.game, 'client': self.client, 'date': self.date}


class CommentRec:
    __slots__ = ('id', 'name', 'comment', 'timestamp')

    def __init__(self, name: str, comment: str, timestamp: datetime = None, id: str = None):
        self.id = id
        self.name = name
        self.comment = comment
        self.timestamp = timestamp or _now()

    @classmethod
    def from_document(cls, doc: dict) -> 'CommentRec':
        return cls(
            name=doc.get('name', ''),
            comment=doc.get('comment', ''),
            timestamp=doc.get('timestamp'),
            id=_doc_id(doc),
        )

    def to_document(self) -> dict:
        return {'name': self.name, 'comment': self.comment, 'timestamp': self.timestamp}

    def to_dict(self):
        return {'id': self.id, **self.to_document()}


class Leader:
    __slots__ = ('record', 'rank')

    def __init__(self, record: ScoreRec, rank: int):
        self.record = record
        self.rank = rank

    def to_dict(self):
        return {**self.record.to_dict(), 'rank': self.rank}
