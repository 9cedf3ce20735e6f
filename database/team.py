from database.base import BaseManager
from models.team import Team


class TeamDBManager(BaseManager):
    def create_team(self, team: Team) -> Team:
        result = self.supabase.table("teams").insert(team.to_dict()).execute()
        if not result.data:
            raise RuntimeError(f"No data returned after creating {team.name}")
        return Team.from_db(result.data[0])

    def get_teams_by_game(self, game_id) -> list[Team]:
        """Teams of a game, oldest first"""
        result = (
            self.supabase.table("teams")
            .select("*")
            .eq("game_id", game_id)
            .order("created_at")
            .execute()
        )
        return [Team.from_db(record) for record in result.data or []]

    def get_current_teams(self, game_id) -> dict:
        """
        Latest team record per side for a game.

        Regenerating teams can leave older records behind, so only the most
        recent record of each name counts.

        Returns:
            dict: {"A": Team | None, "B": Team | None}
        """
        current = {"A": None, "B": None}
        for team in self.get_teams_by_game(game_id):
            if team.side:
                current[team.side] = team
        return current

    def update_team(self, team_id, update_data: dict) -> Team:
        result = (
            self.supabase.table("teams").update(update_data).eq("id", team_id).execute()
        )
        if not result.data:
            raise RuntimeError(f"No data returned after updating team {team_id}")
        return Team.from_db(result.data[0])

    def delete_team(self, team_id) -> None:
        self.supabase.table("teams").delete().eq("id", team_id).execute()

    def delete_teams_by_game(self, game_id) -> None:
        self.supabase.table("teams").delete().eq("game_id", game_id).execute()
