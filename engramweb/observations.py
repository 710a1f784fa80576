"""Observation records and the list operations the project views rely on."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Callable, Iterable, Optional

SIBLINGS_CAP = 20
SIBLINGS_FETCH_LIMIT = 200


@dataclass
class Observation:
    """One stored memory observation."""

    id: int
    type: str = ""
    title: str = ""
    content: str = ""
    created_at: str = ""
    scope: str = ""
    project: Optional[str] = None
    topic_key: Optional[str] = None
    session_id: str = ""
    revision_count: int = 0
    duplicate_count: int = 0
    last_seen_at: Optional[str] = None
    tool_name: Optional[str] = None


def filter_by_type(observations: list[Observation], typ: str) -> list[Observation]:
    """Keep observations of type ``typ``; an empty type keeps everything."""
    if not typ:
        return observations
    return [o for o in observations if o.type == typ]


def filter_by_topic_key_prefix(
    observations: list[Observation], prefix: str
) -> list[Observation]:
    """Keep observations whose topic key starts with ``prefix``."""
    if not prefix:
        return observations
    return [
        o for o in observations if o.topic_key is not None and o.topic_key.startswith(prefix)
    ]


def distinct_types(observations: Iterable[Observation]) -> list[str]:
    """Return the sorted set of non-empty types present in ``observations``."""
    return sorted({o.type for o in observations if o.type})


def union_types(
    canonical: Iterable[str], present: Iterable[str] | None, active: str
) -> list[str]:
    """Return the sorted union of canonical, present and active types.

    The active type is included even when nothing else names it.
    """
    seen = set(canonical)
    seen.update(t for t in (present or ()) if t)
    if active:
        seen.add(active)
    return sorted(seen)


def sorted_observations(
    observations: Iterable[Observation], direction: str
) -> list[Observation]:
    """Return a new list ordered by creation time; oldest first only for "date_asc"."""
    return sorted(
        observations, key=lambda o: o.created_at, reverse=direction != "date_asc"
    )


def latest_activity(timestamps: Iterable[str]) -> str:
    """Return the latest of ISO timestamp strings, or "" when there are none."""
    return max(chain([""], timestamps))


def compute_siblings(
    observation: Optional[Observation],
    fetch_recent: Callable[[str, int], list[Observation]],
) -> tuple[list[Observation], str, bool]:
    """Find observations sharing a topic-key prefix with ``observation``.

    Siblings exist only when the topic key has at least two "/"; the prefix is
    the key with its last segment removed. ``fetch_recent(project, limit)``
    supplies candidates. Returns the siblings ordered by creation time, the
    prefix, and whether more than the cap matched. The observation itself is
    always in the list, also when fetching fails or the cap would drop it.
    """
    if observation is None or observation.topic_key is None:
        return [], "", False
    topic_key = observation.topic_key
    if topic_key.count("/") < 2:
        return [], "", False
    prefix = topic_key[: topic_key.rfind("/") + 1]

    try:
        recent = fetch_recent(observation.project or "", SIBLINGS_FETCH_LIMIT)
    except Exception:
        return [observation], prefix, False

    matched = filter_by_topic_key_prefix(list(recent), prefix)
    if not any(o.id == observation.id for o in matched):
        matched.append(observation)
    matched.sort(key=lambda o: o.created_at)

    has_more = len(matched) > SIBLINGS_CAP
    if has_more:
        matched = matched[:SIBLINGS_CAP]
        if not any(o.id == observation.id for o in matched):
            matched[-1] = observation
    return matched, prefix, has_more