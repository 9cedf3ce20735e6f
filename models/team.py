TEAM_A_NAME = "Equipa A"
TEAM_B_NAME = "Equipa B"
TEAM_NAMES = {"A": TEAM_A_NAME, "B": TEAM_B_NAME}


class Team:
    """
    Team model representing one side of a game, owned by that game.
    """

    def __init__(
        self, game_id=None, name=None, players=None, score=0, is_winner=False, id=None
    ):
        self.id = id
        self.game_id = game_id
        self.name = name
        self.players = list(players or [])
        self.score = score
        self.is_winner = is_winner
        self.created_at = None

    @property
    def side(self):
        """'A' or 'B' derived from the team name, None for unknown names."""
        for side, name in TEAM_NAMES.items():
            if self.name == name:
                return side
        return None

    @classmethod
    def new(cls, game_id, side, players):
        """Fresh team record with no goals and no result."""
        return cls(game_id=game_id, name=TEAM_NAMES[side], players=players)

    @classmethod
    def from_db(cls, db_record):
        team = cls()
        team.id = db_record["id"]
        team.game_id = db_record["game_id"]
        team.name = db_record.get("name")
        team.players = [int(p) for p in db_record.get("players") or []]
        team.score = db_record.get("score") or 0
        team.is_winner = bool(db_record.get("is_winner"))
        team.created_at = db_record.get("created_at")
        return team

    def to_dict(self):
        return {
            "game_id": self.game_id,
            "name": self.name,
            "players": self.players,
            "score": self.score,
            "is_winner": self.is_winner,
        }
