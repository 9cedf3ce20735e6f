def _to_id_list(raw, unique=False):
    """Coerce a raw id array (ints or numeric strings) to a list of ints."""
    if not isinstance(raw, (list, tuple)):
        return []
    ids = [int(value) for value in raw]
    if unique:
        ids = list(dict.fromkeys(ids))
    return ids


def _to_score(record, *keys):
    for key in keys:
        value = record.get(key)
        if isinstance(value, int):
            return value
    return 0


class Game:
    """
    A scheduled match.

    `selected_players` holds the ids of players who confirmed attendance and is
    the source of truth for who can be placed in a team. `team_a` and
    `team_b` are written by team generation.
    """

    def __init__(
        self,
        title=None,
        date=None,
        time=None,
        location=None,
        id=None,
        is_confirmed=False,
        selected_players=None,
        team_a=None,
        team_b=None,
        score_a=0,
        score_b=0,
        created_at=None,
    ):
        self.id = id
        self.title = title
        self.date = date
        self.time = time
        self.location = location
        self.is_confirmed = is_confirmed
        self.selected_players = list(selected_players or [])
        self.team_a = list(team_a or [])
        self.team_b = list(team_b or [])
        self.score_a = score_a
        self.score_b = score_b
        self.created_at = created_at

    @property
    def has_teams(self):
        return bool(self.team_a or self.team_b)

    def team_of(self, player_id):
        """Return 'A', 'B' or None for the given player id."""
        if player_id in self.team_a:
            return "A"
        if player_id in self.team_b:
            return "B"
        return None

    @classmethod
    def from_db(cls, db_record):
        game = cls()
        game.id = db_record["id"]
        game.title = db_record.get("title") or ""
        game.date = db_record.get("date") or ""
        game.time = db_record.get("time") or ""
        game.location = db_record.get("location") or ""
        game.is_confirmed = bool(db_record.get("is_confirmed"))
        game.selected_players = _to_id_list(
            db_record.get("selected_players"), unique=True
        )
        game.team_a = _to_id_list(db_record.get("teamA"))
        game.team_b = _to_id_list(db_record.get("teamB"))
        game.score_a = _to_score(db_record, "scorea", "scoreA")
        game.score_b = _to_score(db_record, "scoreb", "scoreB")
        game.created_at = db_record.get("created_at")
        return game

    def to_dict(self):
        return {
            "title": self.title,
            "date": self.date,
            "time": self.time,
            "location": self.location,
            "is_confirmed": self.is_confirmed,
            "selected_players": self.selected_players,
            "teamA": self.team_a,
            "teamB": self.team_b,
            "scorea": self.score_a,
            "scoreb": self.score_b,
        }
