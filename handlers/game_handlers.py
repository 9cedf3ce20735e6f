from telegram import Update
from telegram.ext import ContextTypes

from decorators.admin import admin_only
from decorators.errors import reports_errors
from models.team import TEAM_NAMES


class GameHandlers:
    def __init__(self, game_manager, game_db_manager, player_db_manager, admin_ids):
        self.game_manager = game_manager
        self.game_db_manager = game_db_manager
        self.player_db_manager = player_db_manager
        self.admin_ids = admin_ids

    @reports_errors()
    async def list_games(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        games = self.game_db_manager.list_games()
        if not games:
            await update.message.reply_text("No games scheduled!")
            return

        lines = ["📅 Games:\n"]
        for game in games:
            status = "✅" if game.is_confirmed else "🕐"
            lines.append(
                f"{status} #{game.id} {game.title} - {game.date} {game.time} "
                f"@ {game.location} ({len(game.selected_players)} confirmed)"
            )
        await update.message.reply_text("\n".join(lines))

    @admin_only
    @reports_errors(usage="/new_game Title; YYYY-MM-DD; HH:MM; Location")
    async def new_game(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        parts = [part.strip() for part in " ".join(context.args).split(";")]
        if len(parts) != 4 or not all(parts):
            raise ValueError
        title, date, time, location = parts

        game = self.game_db_manager.create_game(title, date, time, location)
        await update.message.reply_text(
            f"Game #{game.id} created: {game.title} on {game.date} at {game.time}"
        )

    @reports_errors(usage="/game <game_id>")
    async def show_game(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        game = self.game_manager.get_game(int(context.args[0]))
        players = self.player_db_manager.get_players_by_ids(game.selected_players)
        names = {p.id: p.display_name for p in players}

        text = (
            f"⚽ #{game.id} {game.title}\n"
            f"{game.date} {game.time} @ {game.location}\n\n"
            f"Confirmed ({len(game.selected_players)}):\n"
        )
        text += "\n".join(
            f"{i}. {names.get(player_id, f'Unknown #{player_id}')}"
            for i, player_id in enumerate(game.selected_players, 1)
        )
        if game.has_teams:
            text += f"\n\nScore: {game.score_a} - {game.score_b}"
        await update.message.reply_text(text)

    @admin_only
    @reports_errors(usage="/confirm <game_id> <player_id>")
    async def toggle_confirmation(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ):
        game_id, player_id = int(context.args[0]), int(context.args[1])
        game = self.game_manager.toggle_player_confirmation(game_id, player_id)

        action = "confirmed" if player_id in game.selected_players else "removed"
        await update.message.reply_text(
            f"Player #{player_id} {action} for game #{game.id} "
            f"({len(game.selected_players)} confirmed)"
        )

    @admin_only
    @reports_errors(usage="/generate_teams <game_id>")
    async def generate_teams(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        result = self.game_manager.generate_teams(int(context.args[0]))
        await self._reply_teams(update, result.game_id, "Teams generated!")

    @admin_only
    @reports_errors(usage="/retry_teams <game_id>")
    async def retry_teams(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        result = self.game_manager.retry_team_creation(int(context.args[0]))
        await self._reply_teams(update, result.game_id, "Teams saved!")

    @admin_only
    @reports_errors(usage="/confirm_teams <game_id>")
    async def confirm_teams(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        game = self.game_manager.confirm_teams(int(context.args[0]))
        await update.message.reply_text(f"Teams for game #{game.id} confirmed! ✅")

    @reports_errors(usage="/teams <game_id>")
    async def show_teams(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Command handler to show the current teams of a game"""
        await self._reply_teams(update, int(context.args[0]), "Current Teams:")

    async def _reply_teams(self, update: Update, game_id, title):
        details = self.game_manager.get_teams(game_id)
        game = details["game"]
        if not game.has_teams:
            await update.message.reply_text("No teams generated for this game yet!")
            return

        text = f"{title}\n"
        for side in ("A", "B"):
            team = details["teams"][side]
            score = team.score if team else 0
            text += f"\n{TEAM_NAMES[side]} ({score}):\n"
            text += "\n".join(
                f"• {p.display_name} ({p.position_label})" for p in details[side]
            )
            text += "\n"
        await update.message.reply_text(text.rstrip())

    @admin_only
    @reports_errors(usage="/goal <game_id> <player_id> <A|B> [minute]")
    async def register_goal(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        game_id, player_id, team = (
            int(context.args[0]),
            int(context.args[1]),
            context.args[2],
        )
        minute = int(context.args[3]) if len(context.args) > 3 else None

        goal = self.game_manager.register_goal(game_id, player_id, team, minute)
        minute_text = f" ({goal.minute}')" if goal.minute else ""
        await update.message.reply_text(
            f"⚽ Goal by {goal.player_name} for {TEAM_NAMES[goal.team]}{minute_text}!"
        )

    @reports_errors(usage="/goals <game_id>")
    async def list_goals(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        goals = self.game_manager.list_goals(int(context.args[0]))
        if not goals:
            await update.message.reply_text("No goals in this game yet!")
            return

        lines = ["⚽ Goals:\n"]
        for goal in goals:
            minute_text = f" {goal.minute}'" if goal.minute else ""
            scorer = goal.player_name or f"Unknown #{goal.player_id}"
            lines.append(f"#{goal.id} [{goal.team}]{minute_text} {scorer}")
        await update.message.reply_text("\n".join(lines))

    @admin_only
    @reports_errors(usage="/remove_goal <goal_id>")
    async def remove_goal(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        goal = self.game_manager.delete_goal(int(context.args[0]))
        await update.message.reply_text(f"Goal #{goal.id} removed.")

    @admin_only
    @reports_errors(usage="/score <game_id> <TeamA> <TeamB>")
    async def handle_score(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        if len(context.args) != 3:
            raise ValueError
        game_id, score_a, score_b = map(int, context.args)

        game = self.game_manager.set_final_score(game_id, score_a, score_b)
        await update.message.reply_text(
            f"Final Score:\n"
            f"{TEAM_NAMES['A']}: {game.score_a}\n"
            f"{TEAM_NAMES['B']}: {game.score_b}"
        )

    @admin_only
    @reports_errors(usage="/delete_game <game_id>")
    async def delete_game(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        game_id = int(context.args[0])
        self.game_manager.delete_game(game_id)
        await update.message.reply_text(f"Game #{game_id} deleted.")
