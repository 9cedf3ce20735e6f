import logging
import random

import pytest

from conftest import make_players
from models.player import Player, Position
from services.exceptions import (
    ExtraGoalkeepersError,
    InsufficientPlayersError,
    UnresolvedPlayerIdsError,
)
from services.team_balancer import (
    SKILL_RANKED,
    BalancerConfig,
    TeamBalancer,
)


def goalkeeper_ids(players):
    return {p.id for p in players if p.is_goalkeeper}


@pytest.mark.parametrize("field", range(4, 15))
@pytest.mark.parametrize("goalkeepers", [0, 1, 2])
def test_every_player_lands_in_exactly_one_team(field, goalkeepers):
    players = make_players(field=field, goalkeepers=goalkeepers)
    balancer = TeamBalancer(rng=random.Random(field * 10 + goalkeepers))

    team_a, team_b = balancer.balance(players)

    assert not set(team_a) & set(team_b)
    assert sorted(team_a + team_b) == sorted(p.id for p in players)

    keepers = goalkeeper_ids(players)
    field_a = [p for p in team_a if p not in keepers]
    field_b = [p for p in team_b if p not in keepers]
    assert abs(len(field_a) - len(field_b)) <= 1


def test_four_field_players_split_two_and_two():
    team_a, team_b = TeamBalancer().balance(make_players(field=4))

    assert len(team_a) == 2
    assert len(team_b) == 2


def test_single_goalkeeper_goes_to_team_a():
    players = make_players(field=4, goalkeepers=1)

    team_a, team_b = TeamBalancer().balance(players)

    assert team_a[0] == players[0].id
    assert len(team_a) == 3
    assert len(team_b) == 2
    assert not goalkeeper_ids(players) & set(team_b)


def test_two_goalkeepers_one_per_team():
    players = make_players(field=8, goalkeepers=2)

    team_a, team_b = TeamBalancer().balance(players)

    assert team_a[0] == players[0].id
    assert team_b[0] == players[1].id
    assert len(team_a) == len(team_b) == 5
    assert len(goalkeeper_ids(players) & set(team_a)) == 1
    assert len(goalkeeper_ids(players) & set(team_b)) == 1


def test_goalkeeper_tag_wins_over_other_roles():
    keeper = Player(id=1, name="Miguel", position=[Position.DEFENDER, Position.GOALKEEPER])
    players = [keeper] + make_players(field=4, start_id=2)

    team_a, team_b = TeamBalancer().balance(players)

    assert team_a[0] == keeper.id


def test_extra_goalkeepers_play_as_field_players():
    players = make_players(field=4, goalkeepers=3)

    team_a, team_b = TeamBalancer().balance(players)

    assert team_a[0] == players[0].id
    assert team_b[0] == players[1].id
    assert len(team_a) + len(team_b) == 7
    assert abs(len(team_a) - len(team_b)) <= 1


def test_extra_goalkeepers_rejected_in_strict_mode():
    balancer = TeamBalancer(BalancerConfig(strict_goalkeepers=True))

    with pytest.raises(ExtraGoalkeepersError) as exc:
        balancer.balance(make_players(field=4, goalkeepers=3))

    assert exc.value.goalkeeper_ids == [1, 2, 3]


def test_extra_goalkeepers_logged_only_when_playing_in_the_field(caplog):
    players = make_players(field=4, goalkeepers=3)

    with caplog.at_level(logging.WARNING, logger="services.team_balancer"):
        TeamBalancer().balance(players)
    assert "playing as field players: [3]" in caplog.text

    caplog.clear()
    strict = TeamBalancer(BalancerConfig(strict_goalkeepers=True))
    with caplog.at_level(logging.WARNING, logger="services.team_balancer"):
        with pytest.raises(ExtraGoalkeepersError):
            strict.balance(players)
    assert "field players" not in caplog.text


def test_fewer_than_minimum_players_rejected():
    with pytest.raises(InsufficientPlayersError) as exc:
        TeamBalancer().balance(make_players(field=2, goalkeepers=1))

    assert exc.value.required == 4
    assert exc.value.available == 3


def test_same_seed_gives_same_split():
    players = make_players(field=12, goalkeepers=2)

    first = TeamBalancer(rng=random.Random(42)).balance(players)
    second = TeamBalancer(rng=random.Random(42)).balance(players)

    assert first == second


def test_regenerating_can_change_the_split():
    players = make_players(field=12)
    balancer = TeamBalancer(rng=random.Random(1))

    splits = {tuple(sorted(balancer.balance(players)[0])) for _ in range(20)}

    assert len(splits) > 1


def test_balance_does_not_reorder_input():
    players = make_players(field=6)
    original = list(players)

    TeamBalancer().balance(players)

    assert players == original


def test_resolve_candidates_drops_unknown_ids():
    catalogue = make_players(field=5)
    balancer = TeamBalancer()

    candidates = balancer.resolve_candidates([3, 99, 1, 3], catalogue)

    assert [p.id for p in candidates] == [3, 1]


def test_resolve_candidates_strict_mode_reports_missing_ids():
    balancer = TeamBalancer(BalancerConfig(strict_player_ids=True))

    with pytest.raises(UnresolvedPlayerIdsError) as exc:
        balancer.resolve_candidates([1, 42, 43], make_players(field=4))

    assert exc.value.missing_ids == [42, 43]


def test_skill_ranked_deals_alternately_by_goals():
    players = make_players(field=6)
    for player, goals in zip(players, [1, 9, 4, 7, 0, 3]):
        player.goals_count = goals
    balancer = TeamBalancer(BalancerConfig(strategy=SKILL_RANKED))

    team_a, team_b = balancer.balance(players)

    # ranking: 9, 7, 4, 3, 1, 0
    assert team_a == [2, 3, 1]
    assert team_b == [4, 6, 5]


def test_unknown_strategy_rejected():
    with pytest.raises(ValueError):
        TeamBalancer(BalancerConfig(strategy="captains_draft"))
