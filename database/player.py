import logging

from database.base import BaseManager
from models.player import DEFAULT_POSITIONS, Player, format_positions, parse_positions

logger = logging.getLogger(__name__)


class PlayerDBManager(BaseManager):
    def list_players(self) -> list[Player]:
        """Get every player in the roster ordered by name"""
        result = self.supabase.table("players").select("*").order("name").execute()
        players = [Player.from_db(record) for record in result.data or []]
        logger.info(f"Loaded {len(players)} players")
        return players

    def get_player(self, player_id) -> Player | None:
        try:
            result = (
                self.supabase.table("players").select("*").eq("id", player_id).execute()
            )
            return Player.from_db(result.data[0]) if result.data else None
        except Exception as e:
            logger.error(f"Error getting player {player_id}: {e}")
            return None

    def get_players_by_ids(self, player_ids) -> list[Player]:
        if not player_ids:
            return []
        result = (
            self.supabase.table("players")
            .select("*")
            .in_("id", list(player_ids))
            .execute()
        )
        return [Player.from_db(record) for record in result.data or []]

    def create_player(self, player: Player) -> Player:
        """Insert a new player. At least one valid position is required."""
        if not player.position:
            raise ValueError("At least one position must be selected")

        player_data = player.to_dict()
        result = self.supabase.table("players").insert(player_data).execute()
        if not result.data:
            raise RuntimeError("No data returned after creating player")
        return Player.from_db(result.data[0])

    def update_player(self, player_id, **fields) -> Player:
        """
        Update a player's fields.

        Positions are normalized the same way as on read; an empty selection
        falls back to the default position.
        """
        if "position" in fields:
            positions = parse_positions(fields["position"]) or DEFAULT_POSITIONS
            fields["position"] = format_positions(positions)

        update_data = {key: value for key, value in fields.items() if value is not None}
        result = (
            self.supabase.table("players")
            .update(update_data)
            .eq("id", player_id)
            .execute()
        )
        if not result.data:
            raise RuntimeError(f"No data returned after updating player {player_id}")
        return Player.from_db(result.data[0])

    def set_active(self, player_id, is_active: bool) -> Player:
        return self.update_player(player_id, is_active=is_active)

    def delete_player(self, player_id) -> None:
        self.supabase.table("players").delete().eq("id", player_id).execute()

    def change_goals_count(self, player_id, delta: int) -> int | None:
        """Add delta to a player's goal count (never below zero)"""
        result = (
            self.supabase.table("players")
            .select("goals_count")
            .eq("id", player_id)
            .execute()
        )
        if not result.data:
            return None

        new_count = max(0, (result.data[0].get("goals_count") or 0) + delta)
        self.supabase.table("players").update({"goals_count": new_count}).eq(
            "id", player_id
        ).execute()
        return new_count

    def get_top_scorers(self, limit=10) -> list[Player]:
        """Get active players with goals ordered by goal count"""
        result = (
            self.supabase.table("players")
            .select("*")
            .eq("is_active", True)
            .gt("goals_count", 0)
            .order("goals_count", desc=True)
            .limit(limit)
            .execute()
        )
        return [Player.from_db(record) for record in result.data or []]
