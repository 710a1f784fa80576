import pytest

from engramweb.observations import (
    Observation,
    compute_siblings,
    distinct_types,
    filter_by_topic_key_prefix,
    filter_by_type,
    latest_activity,
    sorted_observations,
    union_types,
)

CANONICAL = [
    "architecture", "bugfix", "config", "decision", "design",
    "discovery", "exploration", "pattern", "plan", "preference",
    "proposal", "report", "spec", "tasks",
]


def _obs(obs_id, created_at, topic_key=None, title="", typ="decision", project="alpha"):
    return Observation(
        id=obs_id,
        type=typ,
        title=title,
        content="c",
        created_at=created_at,
        topic_key=topic_key,
        project=project,
    )


def _fetcher(observations, calls=None):
    def fetch(project, limit):
        if calls is not None:
            calls.append((project, limit))
        return observations

    return fetch


def test_filter_by_type():
    obs = [
        _obs(1, "2026-01-03", title="D1", typ="decision"),
        _obs(2, "2026-01-02", title="B1", typ="bugfix"),
        _obs(3, "2026-01-01", title="D2", typ="decision"),
    ]
    assert [o.title for o in filter_by_type(obs, "decision")] == ["D1", "D2"]
    assert filter_by_type(obs, "") == obs


def test_filter_by_topic_key_prefix():
    obs = [
        _obs(1, "2026-01-01", "sdd/auth/spec", "Auth Spec"),
        _obs(2, "2026-01-02", "sdd/auth/design", "Auth Design"),
        _obs(3, "2026-01-03", "decision/cookie-vs-localstorage", "Other Decision"),
        _obs(4, "2026-01-04", None, "No Key Obs"),
    ]
    got = filter_by_topic_key_prefix(obs, "sdd/auth/")
    assert [o.title for o in got] == ["Auth Spec", "Auth Design"]
    assert filter_by_topic_key_prefix(obs, "") == obs


def test_distinct_types_sorted_and_skips_empty():
    obs = [
        _obs(1, "a", typ="plan"),
        _obs(2, "b", typ=""),
        _obs(3, "c", typ="bugfix"),
        _obs(4, "d", typ="plan"),
    ]
    assert distinct_types(obs) == ["bugfix", "plan"]


@pytest.mark.parametrize(
    "present, active, want_len, want_items",
    [
        (None, "", 14, ["architecture", "tasks"]),
        (["custom-internal"], "", 15, ["custom-internal", "decision"]),
        (None, "phantom-type", 15, ["phantom-type", "architecture"]),
        (["decision"], "", 14, ["decision"]),
        ([], "", 14, ["bugfix"]),
    ],
)
def test_union_types(present, active, want_len, want_items):
    got = union_types(CANONICAL, present, active)
    assert len(got) == want_len
    for item in want_items:
        assert item in got
    assert got == sorted(got)


def test_union_types_ignores_empty_present():
    assert union_types(["a"], ["", "b"], "") == ["a", "b"]


def test_sorted_observations_default_is_newest_first():
    obs = [
        _obs(14, "2026-01-01", title="Fifth"),
        _obs(10, "2026-01-05", title="First"),
        _obs(12, "2026-01-03", title="Third"),
    ]
    got = sorted_observations(obs, "date_desc")
    assert [o.title for o in got] == ["First", "Third", "Fifth"]
    assert [o.title for o in sorted_observations(obs, "garbage")] == ["First", "Third", "Fifth"]


def test_sorted_observations_ascending_and_copy():
    obs = [_obs(1, "2026-01-02", title="Newer"), _obs(2, "2026-01-01", title="Older")]
    got = sorted_observations(obs, "date_asc")
    assert [o.title for o in got] == ["Older", "Newer"]
    assert [o.title for o in obs] == ["Newer", "Older"]


def test_latest_activity():
    assert latest_activity(["2026-01-02", "", "2026-03-15", "2026-01-01"]) == "2026-03-15"
    assert latest_activity([]) == ""
    assert latest_activity(["", ""]) == ""


def test_siblings_two_slashes_filters_prefix():
    obs = [
        _obs(10, "2026-01-01", "sdd/auth/spec", "Auth Spec"),
        _obs(11, "2026-01-02", "sdd/auth/design", "Auth Design"),
        _obs(12, "2026-01-03", "sdd/auth/tasks", "Auth Tasks"),
        _obs(99, "2026-01-04", "decision/x", "Other Decision"),
    ]
    calls = []
    siblings, prefix, has_more = compute_siblings(obs[0], _fetcher(obs, calls))
    assert prefix == "sdd/auth/"
    assert [o.title for o in siblings] == ["Auth Spec", "Auth Design", "Auth Tasks"]
    assert has_more is False
    assert calls == [("alpha", 200)]


def test_siblings_none_for_one_slash():
    current = _obs(5, "2026-01-01", "decision/cookies")
    assert compute_siblings(current, _fetcher([current])) == ([], "", False)


def test_siblings_none_without_topic_key():
    current = _obs(7, "2026-01-01", None)
    assert compute_siblings(current, _fetcher([current])) == ([], "", False)
    assert compute_siblings(None, _fetcher([])) == ([], "", False)


def test_siblings_sorted_by_created_at_ascending():
    obs = [
        _obs(12, "2026-01-03", "sdd/auth/design", "Auth Design"),
        _obs(10, "2026-01-01", "sdd/auth/proposal", "Auth Proposal"),
        _obs(11, "2026-01-02", "sdd/auth/spec", "Auth Spec"),
    ]
    siblings, _, _ = compute_siblings(obs[2], _fetcher(obs))
    assert [o.id for o in siblings] == [10, 11, 12]


def test_siblings_only_current():
    current = _obs(20, "2026-01-01", "sdd/lonely/spec", "Lonely Spec")
    siblings, prefix, has_more = compute_siblings(current, _fetcher([current]))
    assert [o.id for o in siblings] == [20]
    assert prefix == "sdd/lonely/"
    assert has_more is False


def test_siblings_current_added_when_missing_from_batch():
    current = _obs(1, "2026-01-01", "sdd/auth/spec")
    other = _obs(2, "2026-01-02", "sdd/auth/design")
    siblings, _, _ = compute_siblings(current, _fetcher([other]))
    assert [o.id for o in siblings] == [1, 2]


def test_siblings_fetch_error_keeps_current():
    current = _obs(3, "2026-01-01", "sdd/auth/spec")

    def failing(project, limit):
        raise RuntimeError("connection refused")

    assert compute_siblings(current, failing) == ([current], "sdd/auth/", False)


def test_siblings_cap_pins_current():
    batch = [_obs(i, f"2026-01-{i:02d}", f"sdd/x/item{i}") for i in range(1, 26)]
    current = batch[-1]
    siblings, prefix, has_more = compute_siblings(current, _fetcher(batch))
    assert prefix == "sdd/x/"
    assert has_more is True
    assert len(siblings) == 20
    assert siblings[-1].id == 25
    assert [o.id for o in siblings[:19]] == list(range(1, 20))


def test_siblings_cap_keeps_order_when_current_survives():
    batch = [_obs(i, f"2026-01-{i:02d}", f"sdd/x/item{i}") for i in range(1, 26)]
    siblings, _, has_more = compute_siblings(batch[0], _fetcher(batch))
    assert has_more is True
    assert [o.id for o in siblings] == list(range(1, 21))


def test_siblings_project_defaults_to_empty():
    current = _obs(4, "2026-01-01", "a/b/c", project=None)
    calls = []
    compute_siblings(current, _fetcher([], calls))
    assert calls == [("", 200)]