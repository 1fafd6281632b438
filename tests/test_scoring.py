import pytest

from models import (
    BirdieEvent,
    EagleEvent,
    PowerupType,
    Score,
    ScoreEvent,
    ScoreStatus,
    SnakeEvent,
    Team,
    User,
)
from scoring import (
    BACK_9_PAR,
    COURSE,
    COURSE_HOLES,
    COURSE_PAR,
    FRONT_9_PAR,
    LeaderboardEntry,
    aggregate_scores,
    approval_events,
    build_leaderboard,
    build_scorecard,
    build_team_standings,
    course_with_handicap,
    format_shots_received,
    hole_info,
    hole_par_and_index,
    net_score,
    rank_leaderboard,
    sabotage_event,
    score_relative_to_par,
    shots_received,
    total_net_score,
)
from scoring.events import joined_event


def _score(player="p1", team="t1", hole=1, strokes=4, putts=2, par=4, net=None,
           shots=0, status=ScoreStatus.APPROVED):
    """Helper: a scored hole with sensible defaults."""
    return Score(
        id=f"{player}-{hole}",
        player_id=player,
        team_id=team,
        hole=hole,
        strokes=strokes,
        putts=putts,
        par=par,
        hole_index=hole,
        net_score=strokes if net is None else net,
        shots_received=shots,
        status=status,
        input_by=player,
    )


# ================================================================
# Handicap allocation
# ================================================================

def test_shots_received_examples():
    assert shots_received(20, 5) == 2
    assert shots_received(10, 5) == 1
    assert shots_received(0, 1) == 0


def test_shots_received_scratch_to_plus_thirty_six():
    for handicap in range(0, 55):
        for index in range(1, 19):
            expected = handicap // 18 + (1 if index <= handicap % 18 else 0)
            assert shots_received(handicap, index) == expected


def test_eighteen_handicap_gets_one_shot_everywhere():
    assert all(shots_received(18, i) == 1 for i in range(1, 19))


def test_total_shots_equal_handicap():
    for handicap in (0, 7, 18, 25, 36, 54):
        assert sum(shots_received(handicap, i) for i in range(1, 19)) == handicap


def test_shots_received_rejects_bad_input():
    with pytest.raises(ValueError):
        shots_received(-1, 5)
    with pytest.raises(ValueError):
        shots_received(10, 0)
    with pytest.raises(ValueError):
        shots_received(10, 19)


def test_net_score_can_go_negative():
    assert net_score(5, 20, 5) == 3
    assert net_score(1, 36, 1) == -1


def test_total_net_score():
    # 10 handicap: index 1 gets a shot, index 15 does not
    assert total_net_score([(5, 1), (4, 15)], 10) == 8


def test_score_relative_to_par_labels():
    assert score_relative_to_par(1, 4).label == "Albatross"
    assert score_relative_to_par(3, 5).label == "Eagle"
    assert score_relative_to_par(3, 4).label == "Birdie"
    assert score_relative_to_par(4, 4).label == "Par"
    assert score_relative_to_par(5, 4).label == "Bogey"
    assert score_relative_to_par(6, 4).label == "Double Bogey"
    assert score_relative_to_par(8, 4).label == "+4"


def test_score_relative_to_par_display():
    assert score_relative_to_par(4, 4).display == "E"
    assert score_relative_to_par(6, 4).display == "+2"
    assert score_relative_to_par(3, 4).display == "-1"
    assert score_relative_to_par(3, 4).relative == -1


def test_format_shots_received():
    assert format_shots_received(0) == "No shots"
    assert format_shots_received(1) == "1 shot"
    assert format_shots_received(2) == "2 shots"


# ================================================================
# Course table
# ================================================================

def test_course_par_constants():
    assert COURSE_PAR == sum(h.par for h in COURSE_HOLES)
    assert FRONT_9_PAR == sum(h.par for h in COURSE_HOLES if h.number <= 9)
    assert BACK_9_PAR == sum(h.par for h in COURSE_HOLES if h.number >= 10)
    assert COURSE_PAR == FRONT_9_PAR + BACK_9_PAR
    assert COURSE_PAR == 72


def test_course_uses_every_index_once():
    assert len(COURSE.holes) == 18
    assert sorted(h.index for h in COURSE.holes) == list(range(1, 19))


def test_hole_par_and_index_lookup_and_default():
    hole = COURSE.get_hole(8)
    assert hole_par_and_index(8) == (hole.par, hole.index)
    assert hole_par_and_index(19) == (4, 9)


def test_hole_info():
    info = hole_info(20, 8)   # hole 8 is index 1
    assert info["number"] == 8
    assert info["index"] == 1
    assert info["shots_received"] == 2
    assert info["player_handicap"] == 20
    assert hole_info(20, 19) is None


def test_course_with_handicap():
    holes = course_with_handicap(18)
    assert len(holes) == 18
    assert all(h["shots_received"] == 1 for h in holes)


# ================================================================
# Approval events
# ================================================================

def test_par_posts_only_score_event():
    events = approval_events(_score(strokes=4, par=4), "Holly", "Sales Sleigh")
    assert [type(e) for e in events] == [ScoreEvent]
    assert events[0].message == "Holly (Sales Sleigh) scored 4 on hole 1"


def test_birdie_posts_birdie_then_score():
    events = approval_events(_score(strokes=3, par=4), "Holly", "Sales Sleigh")
    assert [e.type for e in events] == ["birdie", "score"]


def test_eagle_posts_birdie_eagle_and_score():
    events = approval_events(_score(strokes=3, par=5), "Holly", "Sales Sleigh")
    assert [type(e) for e in events] == [BirdieEvent, EagleEvent, ScoreEvent]


def test_albatross_still_posts_birdie_and_eagle():
    events = approval_events(_score(strokes=2, par=5), "Holly", "Sales Sleigh")
    assert [e.type for e in events] == ["birdie", "eagle", "score"]


def test_three_putt_posts_snake_before_score():
    events = approval_events(_score(strokes=6, putts=3), "Nick", "Sales Sleigh")
    assert [type(e) for e in events] == [SnakeEvent, ScoreEvent]
    assert "3-putted on hole 1" in events[0].message


def test_approval_events_carry_refs():
    events = approval_events(_score(player="p9", team="t9", strokes=2, putts=4, par=4), "X", "Y")
    assert all(e.player_id == "p9" and e.team_id == "t9" for e in events)


def test_missing_par_uses_default():
    s = _score(strokes=3, par=None)
    events = approval_events(s, "Holly", "Sales Sleigh")
    assert events[0].type == "birdie"


def test_sabotage_event_message():
    event = sabotage_event(
        PowerupType.GRENADE,
        user_id="u1", user_name="Holly", team_id="t1", team_name="Sales Sleigh",
        target_team_id="t2", target_team_name="Marketing Elves",
    )
    assert event.type == "sabotage"
    assert event.target_team_id == "t2"
    assert event.message == "💣 GRENADE! Holly (Sales Sleigh) lobbed chaos at Marketing Elves!"


def test_joined_event_mentions_captain():
    assert "captain" in joined_event("u1", "Holly", "t1", "Sales Sleigh", True).message
    assert "captain" not in joined_event("u2", "Nick", "t1", "Sales Sleigh", False).message


# ================================================================
# Aggregation and ranking
# ================================================================

def test_aggregate_counts_only_approved():
    totals = aggregate_scores([
        _score(hole=1, strokes=5, net=4, shots=1),
        _score(hole=2, strokes=3, par=3),
        _score(hole=3, strokes=9, status=ScoreStatus.PENDING),
        _score(hole=4, strokes=9, status=ScoreStatus.REJECTED),
    ])
    assert totals.gross_total == 8
    assert totals.net_total == 7
    assert totals.par_total == 7
    assert totals.shots_total == 1
    assert totals.holes_played == 2
    assert totals.net_relative_to_par == 0
    assert totals.gross_relative_to_par == 1


def test_aggregate_legacy_rows_fall_back():
    s = Score(player_id="p1", team_id="t1", hole=1, strokes=5,
              status=ScoreStatus.APPROVED, input_by="p1")
    totals = aggregate_scores([s])
    assert totals.net_total == 5
    assert totals.par_total == 4
    assert totals.shots_total == 0


def test_leaderboard_order_unplayed_last():
    entries = [
        LeaderboardEntry(team_id="a", name="A", color="#000", net_total=10, holes_played=3),
        LeaderboardEntry(team_id="b", name="B", color="#000", net_total=5, holes_played=2),
        LeaderboardEntry(team_id="c", name="C", color="#000", holes_played=0),
    ]
    assert [e.name for e in rank_leaderboard(entries)] == ["B", "A", "C"]


def test_leaderboard_ties_keep_input_order():
    entries = [
        LeaderboardEntry(team_id="x", name="X", color="#000", net_total=8, holes_played=2),
        LeaderboardEntry(team_id="y", name="Y", color="#000", net_total=8, holes_played=2),
    ]
    assert [e.name for e in rank_leaderboard(entries)] == ["X", "Y"]


def _teams_and_members():
    teams = [
        Team(id="t1", name="Sales Sleigh", color="#d63384"),
        Team(id="t2", name="Marketing Elves", color="#0f5132"),
        Team(id="t3", name="Support Snowmen", color="#0dcaf0"),
    ]
    members = [
        User(id="p1", name="Holly", team_id="t1", avatar_url="a1.png"),
        User(id="p2", name="Nick", team_id="t1"),
        User(id="p3", name="Ivy", team_id="t2"),
    ]
    return teams, members


def test_build_leaderboard():
    teams, members = _teams_and_members()
    scores = [
        _score(player="p1", team="t1", hole=1, strokes=6, net=5),
        _score(player="p2", team="t1", hole=1, strokes=5, net=4),
        _score(player="p3", team="t2", hole=1, strokes=4, net=3),
        _score(player="p3", team="t2", hole=2, strokes=2, status=ScoreStatus.PENDING),
    ]
    board = build_leaderboard(teams, members, scores)

    assert [e.team_id for e in board] == ["t2", "t1", "t3"]
    assert board[1].net_total == 9
    assert board[1].member_count == 2
    assert board[1].avatars == ["a1.png", None]
    assert board[0].holes_played == 1
    assert board[2].holes_played == 0


def test_build_team_standings_ranks_by_gross():
    teams, members = _teams_and_members()
    scores = [
        # t1 wins on net, t2 on gross
        _score(player="p1", team="t1", hole=1, strokes=5, net=2),
        _score(player="p3", team="t2", hole=1, strokes=4, net=4),
    ]
    standings = build_team_standings(teams, members, scores)
    assert [s.team.id for s in standings] == ["t2", "t1", "t3"]
    assert [m.id for m in standings[1].members] == ["p1", "p2"]


def test_build_scorecard():
    _, members = _teams_and_members()
    scores = [
        _score(player="p1", team="t1", hole=1, strokes=5),
        _score(player="p1", team="t1", hole=2, strokes=3),
        _score(player="p2", team="t1", hole=1, strokes=7, status=ScoreStatus.PENDING),
    ]
    rows = build_scorecard(members[:2], scores)

    assert rows[0].player.id == "p1"
    assert rows[0].scores == {1: 5, 2: 3}
    assert rows[0].total_strokes == 8
    assert rows[0].holes_played == 2
    assert rows[1].scores == {}
    assert rows[1].holes_played == 0
