class ClubManagerError(Exception):
    """Base class for errors reported back to whoever triggered an action"""


class InsufficientPlayersError(ClubManagerError):
    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(
            f"At least {required} confirmed players are needed to generate teams "
            f"({available} available)"
        )


class MatchNotFoundError(ClubManagerError):
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


class PlayerNotFoundError(ClubManagerError):
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found")


class GoalNotFoundError(ClubManagerError):
    def __init__(self, goal_id):
        self.goal_id = goal_id
        super().__init__(f"Goal {goal_id} not found")


class InvalidGoalError(ClubManagerError):
    pass


class PartialPersistenceError(ClubManagerError):
    """
    The game was updated with the new teams but the team records were not
    (all) created. Only team creation needs to be retried.
    """

    def __init__(self, game_id, team_a, team_b, created=None):
        self.game_id = game_id
        self.team_a = team_a
        self.team_b = team_b
        self.created = list(created or [])
        super().__init__(
            f"Game {game_id} was updated with the new teams, "
            f"but the team records were not saved"
        )


class UnresolvedPlayerIdsError(ClubManagerError):
    def __init__(self, missing_ids):
        self.missing_ids = list(missing_ids)
        super().__init__(
            f"Confirmed players not found in the roster: {self.missing_ids}"
        )


class ExtraGoalkeepersError(ClubManagerError):
    def __init__(self, goalkeeper_ids):
        self.goalkeeper_ids = list(goalkeeper_ids)
        super().__init__(
            f"More than two goalkeepers confirmed: {self.goalkeeper_ids}"
        )


class TeamsNotGeneratedError(ClubManagerError):
    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"Teams for game {game_id} have not been generated yet")
