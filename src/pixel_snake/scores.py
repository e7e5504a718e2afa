"""Persistent top-score storage."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Protocol

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_KEY = "snakeScore"
DEFAULT_CAPACITY = 5


class ScoreRecord(BaseModel):
    """A single finished session's score."""

    date: str = Field(validation_alias=AliasChoices("date", "datetime"))
    score: int = Field(ge=0)

    @classmethod
    def now(cls, score: int, when: datetime | None = None) -> ScoreRecord:
        when = when if when is not None else datetime.now()
        return cls(date=when.strftime("%a %b %d %Y"), score=score)


_RECORDS = TypeAdapter(list[ScoreRecord])


def insert_score(
    records: Sequence[ScoreRecord],
    record: ScoreRecord,
    capacity: int = DEFAULT_CAPACITY,
) -> list[ScoreRecord]:
    """Return *records* with *record* placed in descending score order.

    The new record goes ahead of any existing record with an equal score.
    The result is truncated to *capacity*. A score of 0 is never stored.
    """
    result = list(records)
    if record.score <= 0:
        return result
    for i, existing in enumerate(result):
        if existing.score <= record.score:
            result.insert(i, record)
            break
    else:
        result.append(record)
    return result[:capacity]


class ScoreStore(Protocol):
    def load(self, key: str = DEFAULT_KEY) -> list[ScoreRecord]: ...

    def save(
        self, score: int, key: str = DEFAULT_KEY, when: datetime | None = None,
    ) -> list[ScoreRecord]: ...


class MemoryScoreStore:
    """In-process score store keyed by session key."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._data: dict[str, list[ScoreRecord]] = {}

    def load(self, key: str = DEFAULT_KEY) -> list[ScoreRecord]:
        return list(self._data.get(key, []))

    def save(
        self, score: int, key: str = DEFAULT_KEY, when: datetime | None = None,
    ) -> list[ScoreRecord]:
        if score <= 0:
            return self.load(key)
        records = insert_score(
            self.load(key), ScoreRecord.now(score, when), self.capacity,
        )
        self._data[key] = records
        return list(records)


class JsonScoreStore:
    """Score store backed by a JSON file mapping keys to record lists.

    A missing, unreadable, or malformed file reads as "no prior scores".
    Write failures propagate.
    """

    def __init__(self, path: str | Path, capacity: int = DEFAULT_CAPACITY) -> None:
        self.path = Path(path)
        self.capacity = capacity

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text())
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed score file %s.", self.path)
            return {}
        return raw

    def load(self, key: str = DEFAULT_KEY) -> list[ScoreRecord]:
        raw = self._read_all().get(key)
        if raw is None:
            return []
        try:
            records = _RECORDS.validate_python(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring invalid scores under %r in %s: %d error(s).",
                key, self.path, exc.error_count(),
            )
            return []
        records.sort(key=lambda r: r.score, reverse=True)
        return records[: self.capacity]

    def save(
        self, score: int, key: str = DEFAULT_KEY, when: datetime | None = None,
    ) -> list[ScoreRecord]:
        if score <= 0:
            return self.load(key)
        records = insert_score(
            self.load(key), ScoreRecord.now(score, when), self.capacity,
        )
        data = self._read_all()
        data[key] = [r.model_dump() for r in records]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2))
        logger.info("Saved score %d to %s.", score, self.path)
        return records
