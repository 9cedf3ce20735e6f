import logging

from database.base import BaseManager
from models.goal import Goal

logger = logging.getLogger(__name__)


class GoalDBManager(BaseManager):
    def create_goal(self, goal: Goal) -> Goal:
        result = self.supabase.table("goals").insert(goal.to_dict()).execute()
        if not result.data:
            raise RuntimeError("No data returned after creating goal")
        return Goal.from_db(result.data[0])

    def get_goal(self, goal_id) -> Goal | None:
        result = self.supabase.table("goals").select("*").eq("id", goal_id).execute()
        return Goal.from_db(result.data[0]) if result.data else None

    def get_goals_by_game(self, game_id) -> list[Goal]:
        """Goals of a game in the order they were scored, with scorer names"""
        result = (
            self.supabase.table("goals")
            .select("*")
            .eq("game_id", game_id)
            .order("created_at")
            .execute()
        )
        goals_data = result.data or []
        if not goals_data:
            return []

        player_ids = list({goal["player_id"] for goal in goals_data})
        players_result = (
            self.supabase.table("players")
            .select("id, name, nickname")
            .in_("id", player_ids)
            .execute()
        )
        names = {
            p["id"]: p.get("nickname") or p.get("name")
            for p in players_result.data or []
        }

        return [Goal.from_db(goal, names.get(goal["player_id"])) for goal in goals_data]

    def delete_goal(self, goal_id) -> None:
        self.supabase.table("goals").delete().eq("id", goal_id).execute()

    def delete_goals_by_game(self, game_id) -> None:
        self.supabase.table("goals").delete().eq("game_id", game_id).execute()
