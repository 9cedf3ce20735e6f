class Goal:
    """
    Goal scored in a game by a player of team 'A' or 'B'.
    """

    def __init__(self, game_id=None, player_id=None, team=None, minute=None, id=None):
        self.id = id
        self.game_id = game_id
        self.player_id = player_id
        self.team = team
        self.minute = minute
        self.created_at = None
        self.player_name = None

    @classmethod
    def from_db(cls, db_record, player_name=None):
        goal = cls()
        goal.id = db_record["id"]
        goal.game_id = db_record["game_id"]
        goal.player_id = db_record["player_id"]
        goal.team = db_record["team"]
        goal.minute = db_record.get("minute")
        goal.created_at = db_record.get("created_at")
        goal.player_name = player_name
        return goal

    def to_dict(self):
        return {
            "game_id": int(self.game_id),
            "player_id": int(self.player_id),
            "team": self.team,
            "minute": int(self.minute) if self.minute else None,
        }
