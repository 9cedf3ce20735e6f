from enum import Enum


class Position(str, Enum):
    """Player role tags as stored by the backend."""

    GOALKEEPER = "Guarda-Redes"
    DEFENDER = "Defesa"
    MIDFIELDER = "Meio-campo"
    FORWARD = "Avançado"

    @property
    def abbreviation(self):
        return POSITION_ABBREVIATIONS[self]


POSITION_ABBREVIATIONS = {
    Position.GOALKEEPER: "GR",
    Position.DEFENDER: "DEF",
    Position.MIDFIELDER: "MED",
    Position.FORWARD: "AV",
}

DEFAULT_POSITIONS = frozenset({Position.DEFENDER})


def parse_positions(raw) -> frozenset:
    """
    Normalize a raw position value into a set of Position tags.

    The backend stores positions as a comma separated string, but older rows
    (and some clients) send a list. Unknown tags are discarded.

    Args:
        raw (str | list | None): Position value as received

    Returns:
        frozenset: Recognized Position tags, possibly empty
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        values = raw.split(",")
    else:
        values = list(raw)

    positions = set()
    for value in values:
        if isinstance(value, Position):
            positions.add(value)
            continue
        try:
            positions.add(Position(str(value).strip()))
        except ValueError:
            continue
    return frozenset(positions)


def format_positions(positions) -> str:
    """Join positions in a stable order for storage."""
    return ",".join(p.value for p in Position if p in positions)


class Player:
    """
    Player model representing a club member.
    Instantiated directly or from database records.
    """

    def __init__(
        self,
        name=None,
        nickname=None,
        position=None,
        is_active=True,
        id=None,
        photo_url=None,
        goals_count=0,
        created_at=None,
    ):
        self.id = id
        self.name = name
        self.nickname = nickname
        self.position = parse_positions(position)
        self.is_active = is_active
        self.photo_url = photo_url
        self.goals_count = goals_count
        self.created_at = created_at

    @property
    def display_name(self):
        return self.nickname or self.name

    @property
    def is_goalkeeper(self):
        return Position.GOALKEEPER in self.position

    @property
    def position_label(self):
        """Short label such as 'GR/DEF'"""
        return "/".join(p.abbreviation for p in Position if p in self.position)

    @classmethod
    def from_db(cls, db_record):
        """
        Create a Player instance from a database record.

        Args:
            db_record (dict): Player data from database

        Returns:
            Player: New Player instance with database values
        """
        player = cls()
        player.id = db_record["id"]
        player.name = db_record.get("name")
        player.nickname = db_record.get("nickname")
        player.position = (
            parse_positions(db_record.get("position")) or DEFAULT_POSITIONS
        )
        player.is_active = db_record.get("is_active", True)
        player.photo_url = db_record.get("photo_url")
        player.goals_count = db_record.get("goals_count") or 0
        player.created_at = db_record.get("created_at")
        return player

    def to_dict(self):
        """
        Convert player instance to dictionary for database storage.

        Returns:
            dict: Player data ready for database insertion/update
        """
        return {
            "name": self.name,
            "nickname": self.nickname,
            "position": format_positions(self.position),
            "is_active": self.is_active,
            "photo_url": self.photo_url,
            "goals_count": self.goals_count,
        }

    def __repr__(self):
        return f"Player({self.id}, {self.display_name!r}, {self.position_label})"
