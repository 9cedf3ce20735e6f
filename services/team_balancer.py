from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
import logging
import random

from models.player import Player
from services.exceptions import (
    ExtraGoalkeepersError,
    InsufficientPlayersError,
    UnresolvedPlayerIdsError,
)

GOALKEEPER_SPLIT = "goalkeeper_split"
SKILL_RANKED = "skill_ranked"


@dataclass
class BalancerConfig:
    strategy: str = GOALKEEPER_SPLIT
    min_players: int = 4
    strict_player_ids: bool = False
    strict_goalkeepers: bool = False


def goals_skill_score(player: Player) -> float:
    return player.goals_count or 0


class TeamBalancer:
    """
    Splits the confirmed players of a game into Team A and Team B.

    Two strategies are available:

    - goalkeeper_split: the first two goalkeepers go one to each side (a lone
      goalkeeper goes to Team A), the remaining players are shuffled and cut
      in half, Team A taking floor(n/2).
    - skill_ranked: players are ordered by skill score and dealt alternately,
      starting with Team A.

    The random source is injected so callers can seed it.
    """

    def __init__(
        self,
        config: Optional[BalancerConfig] = None,
        rng: Optional[random.Random] = None,
        skill_score: Callable[[Player], float] = goals_skill_score,
    ):
        self.config = config or BalancerConfig()
        self.rng = rng or random.Random()
        self.skill_score = skill_score
        self.logger = logging.getLogger(__name__)

        self._strategies = {
            GOALKEEPER_SPLIT: self._goalkeeper_split,
            SKILL_RANKED: self._skill_ranked,
        }
        if self.config.strategy not in self._strategies:
            raise ValueError(f"Unknown team strategy: {self.config.strategy}")

    def resolve_candidates(
        self, selected_ids: List[int], catalogue: List[Player]
    ) -> List[Player]:
        """Map confirmed ids to roster players, keeping confirmation order"""
        by_id: Dict[int, Player] = {player.id: player for player in catalogue}

        candidates = []
        missing = []
        for player_id in dict.fromkeys(selected_ids):
            player = by_id.get(player_id)
            if player is None:
                missing.append(player_id)
            else:
                candidates.append(player)

        if missing:
            self.logger.warning(f"Confirmed players not in roster: {missing}")
            if self.config.strict_player_ids:
                raise UnresolvedPlayerIdsError(missing)

        return candidates

    def balance(self, candidates: List[Player]) -> Tuple[List[int], List[int]]:
        """
        Build two disjoint rosters from the candidates.

        Returns:
            tuple: (team_a_ids, team_b_ids)
        """
        if len(candidates) < self.config.min_players:
            raise InsufficientPlayersError(self.config.min_players, len(candidates))

        team_a, team_b = self._strategies[self.config.strategy](list(candidates))

        self.logger.info(
            f"Teams generated ({self.config.strategy}): "
            f"A={[p.display_name for p in team_a]} "
            f"B={[p.display_name for p in team_b]}"
        )
        return [p.id for p in team_a], [p.id for p in team_b]

    def _goalkeeper_split(self, players: List[Player]):
        goalkeepers = [p for p in players if p.is_goalkeeper]
        field_players = [p for p in players if not p.is_goalkeeper]

        team_a: List[Player] = []
        team_b: List[Player] = []

        if len(goalkeepers) >= 2:
            team_a.append(goalkeepers[0])
            team_b.append(goalkeepers[1])
            extra = goalkeepers[2:]
            if extra and self.config.strict_goalkeepers:
                raise ExtraGoalkeepersError([p.id for p in goalkeepers])
            if extra:
                self.logger.warning(
                    "More than two goalkeepers, playing as field players: "
                    f"{[p.id for p in extra]}"
                )
                field_players.extend(extra)
        elif len(goalkeepers) == 1:
            team_a.append(goalkeepers[0])

        self.rng.shuffle(field_players)
        half = len(field_players) // 2
        team_a.extend(field_players[:half])
        team_b.extend(field_players[half:])

        return team_a, team_b

    def _skill_ranked(self, players: List[Player]):
        # shuffle first so the stable sort breaks ties randomly
        self.rng.shuffle(players)
        ranked = sorted(players, key=self.skill_score, reverse=True)
        return ranked[0::2], ranked[1::2]
