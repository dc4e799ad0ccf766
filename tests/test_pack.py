"""Track packing: greedy first-fit rows, capping and overflow counters."""

import random

import pendulum
import pytest

from tourneycal.errors import InvalidArgumentError
from tourneycal.layout.pack import pack_week
from tourneycal.layout.select import select_events_for_week


def _bar_summary(layout):
    return [
        (bar["event_id"], bar["track"], bar["start_col"], bar["start_col"] + bar["span"] - 1)
        for bar in layout["bars"]
    ]


def _random_events(rng, week_start, count):
    events = []
    for index in range(count):
        start = week_start.add(days=rng.randint(-5, 9))
        end = start.add(days=rng.randint(0, 6))
        events.append(
            {
                "id": f"event-{index:03d}",
                "title": None,
                "date_start": start,
                "date_end": end,
                "priority": rng.randint(0, 1),
            }
        )
    return events


def test_overlapping_events_get_different_tracks(event, week_of):
    """Mon-Wed and Tue-Thu conflict; a Friday event reuses the first track."""
    week = week_of("2024-02-04")
    events = [
        event("E1", "2024-02-05", "2024-02-07"),
        event("E2", "2024-02-06", "2024-02-08"),
        event("E3", "2024-02-09"),
    ]

    layout = pack_week(events, week, max_visible_tracks=3)

    assert _bar_summary(layout) == [
        ("E1", 0, 1, 3),
        ("E3", 0, 5, 5),
        ("E2", 1, 2, 4),
    ]
    assert layout["overflow_count"] == 0


def test_full_week_events_overflow_past_cap(event, week_of):
    week = week_of("2024-02-04")
    events = [event(f"e{i}", "2024-02-04", "2024-02-10") for i in range(1, 6)]

    layout = pack_week(events, week, max_visible_tracks=3)

    assert [bar["track"] for bar in layout["bars"]] == [0, 1, 2]
    assert [bar["event_id"] for bar in layout["bars"]] == ["e1", "e2", "e3"]
    assert all(bar["span"] == 7 and bar["start_col"] == 0 for bar in layout["bars"])
    assert layout["overflow_count"] == 2
    assert layout["overflow_by_day"] == [2] * 7


def test_empty_week(week_of):
    layout = pack_week([], week_of("2024-02-04"))

    assert layout["bars"] == []
    assert layout["overflow_count"] == 0
    assert layout["overflow_by_day"] == [0] * 7


def test_event_starting_in_previous_month_clips_to_sunday(event, february_2024_weeks):
    first_week = february_2024_weeks[0]
    layout = pack_week([event("carry-over", "2024-01-20", "2024-02-02")], first_week)

    (bar,) = layout["bars"]
    assert bar["start_col"] == 0
    assert bar["span"] == 6
    assert bar["continues_before"] is True
    assert bar["continues_after"] is False


def test_default_cap_is_three(event, week_of):
    week = week_of("2024-02-04")
    events = [event(f"e{i}", "2024-02-06") for i in range(4)]

    layout = pack_week(events, week)

    assert len(layout["bars"]) == 3
    assert layout["overflow_count"] == 1
    assert layout["overflow_by_day"] == [0, 0, 1, 0, 0, 0, 0]


def test_longer_span_wins_same_start(event, week_of):
    week = week_of("2024-02-04")
    events = [
        event("a-short", "2024-02-05"),
        event("z-long", "2024-02-05", "2024-02-08"),
    ]

    layout = pack_week(events, week)

    assert _bar_summary(layout) == [("z-long", 0, 1, 4), ("a-short", 1, 1, 1)]


def test_priority_breaks_ties_before_id(event, week_of):
    week = week_of("2024-02-04")
    events = [
        event("a-regular", "2024-02-05", "2024-02-06"),
        event("b-featured", "2024-02-05", "2024-02-06", priority=1),
        event("c-regular", "2024-02-05", "2024-02-06"),
    ]

    layout = pack_week(events, week, max_visible_tracks=2)

    assert [bar["event_id"] for bar in layout["bars"]] == ["b-featured", "a-regular"]
    assert layout["overflow_count"] == 1


def test_boolean_priority_is_accepted(event, week_of):
    week = week_of("2024-02-04")
    events = [event("a", "2024-02-05"), event("b", "2024-02-05", priority=True)]

    layout = pack_week(events, week, max_visible_tracks=1)

    assert [bar["event_id"] for bar in layout["bars"]] == ["b"]


def test_single_day_events_share_one_track(event, week_of):
    week = week_of("2024-02-04")
    events = [event(f"day-{i}", f"2024-02-{4 + i:02d}") for i in range(7)]

    layout = pack_week(events, week, max_visible_tracks=1)

    assert [bar["track"] for bar in layout["bars"]] == [0] * 7
    assert [bar["start_col"] for bar in layout["bars"]] == list(range(7))
    assert layout["overflow_count"] == 0


def test_event_spanning_both_edges(event, week_of):
    week = week_of("2024-02-04")
    layout = pack_week([event("long", "2024-01-01", "2024-03-31")], week)

    (bar,) = layout["bars"]
    assert (bar["start_col"], bar["span"]) == (0, 7)
    assert bar["continues_before"] is True
    assert bar["continues_after"] is True


def test_events_outside_week_are_ignored(event, week_of):
    week = week_of("2024-02-04")
    layout = pack_week(
        [event("before", "2024-01-01"), event("inside", "2024-02-07")], week
    )

    assert [bar["event_id"] for bar in layout["bars"]] == ["inside"]
    assert layout["overflow_count"] == 0


def test_input_order_does_not_change_output(event, week_of):
    week = week_of("2024-02-04")
    events = [
        event("a", "2024-02-04", "2024-02-06"),
        event("b", "2024-02-05", "2024-02-09"),
        event("c", "2024-02-06"),
        event("d", "2024-02-01", "2024-02-05"),
        event("e", "2024-02-08", "2024-02-12"),
    ]

    expected = pack_week(events, week, max_visible_tracks=2)
    for seed in range(5):
        shuffled = list(events)
        random.Random(seed).shuffle(shuffled)
        assert pack_week(shuffled, week, max_visible_tracks=2) == expected


@pytest.mark.parametrize("seed", range(25))
def test_random_inputs_hold_invariants(seed, week_of):
    rng = random.Random(seed)
    week = week_of("2024-02-04")
    events = _random_events(rng, week[0]["date"], rng.randint(0, 30))
    cap = rng.randint(1, 5)

    layout = pack_week(events, week, max_visible_tracks=cap)
    selected = select_events_for_week(events, week)

    # no two bars on one track overlap
    by_track = {}
    for bar in layout["bars"]:
        assert bar["span"] >= 1
        assert 0 <= bar["start_col"]
        assert bar["start_col"] + bar["span"] <= 7
        assert 0 <= bar["track"] < cap
        by_track.setdefault(bar["track"], []).append(bar)
    for bars in by_track.values():
        for index, first in enumerate(bars):
            for second in bars[index + 1 :]:
                first_end = first["start_col"] + first["span"] - 1
                second_end = second["start_col"] + second["span"] - 1
                assert first_end < second["start_col"] or second_end < first["start_col"]

    # every selected event is either drawn once or counted once
    drawn_ids = [bar["event_id"] for bar in layout["bars"]]
    assert len(drawn_ids) == len(set(drawn_ids))
    assert len(drawn_ids) + layout["overflow_count"] == len(selected)

    # bars never imply dates outside the event or the week
    events_by_id = {e["id"]: e for e in events}
    for bar in layout["bars"]:
        source = events_by_id[bar["event_id"]]
        first_day = week[bar["start_col"]]["date"]
        last_day = week[bar["start_col"] + bar["span"] - 1]["date"]
        assert first_day == max(source["date_start"], week[0]["date"])
        assert last_day == min(source["date_end"], week[6]["date"])

    # output order is by track then start column
    keys = [(bar["track"], bar["start_col"]) for bar in layout["bars"]]
    assert keys == sorted(keys)

    assert pack_week(events, week, max_visible_tracks=cap) == layout


@pytest.mark.parametrize("cap", [0, -1, True, 2.5, None])
def test_invalid_cap_is_rejected(cap, week_of):
    with pytest.raises(InvalidArgumentError):
        pack_week([], week_of("2024-02-04"), max_visible_tracks=cap)


def test_event_ending_before_start_is_rejected(event, week_of):
    bad = event("bad", "2024-02-06")
    bad["date_end"] = pendulum.date(2024, 2, 5)

    with pytest.raises(InvalidArgumentError, match="bad"):
        pack_week([bad], week_of("2024-02-04"))


def test_malformed_event_outside_week_is_still_rejected(event, week_of):
    bad = event("bad", "2024-05-06")
    bad["date_end"] = pendulum.date(2024, 5, 1)

    with pytest.raises(InvalidArgumentError):
        pack_week([bad], week_of("2024-02-04"))


def test_duplicate_ids_are_rejected(event, week_of):
    events = [event("same", "2024-02-05"), event("same", "2024-02-06")]

    with pytest.raises(InvalidArgumentError, match="duplicate"):
        pack_week(events, week_of("2024-02-04"))


def test_week_must_be_seven_sunday_first_days(week_of):
    week = week_of("2024-02-04")

    with pytest.raises(InvalidArgumentError):
        pack_week([], week[:6])
    with pytest.raises(InvalidArgumentError):
        pack_week([], week_of("2024-02-05"))
    with pytest.raises(InvalidArgumentError):
        pack_week([], week[:3] + week[4:] + [week[3]])
