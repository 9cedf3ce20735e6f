from telegram import Update
from telegram.ext import ContextTypes

from decorators.admin import admin_only
from decorators.errors import reports_errors
from models.player import POSITION_ABBREVIATIONS, Player, Position
from services.exceptions import PlayerNotFoundError

POSITION_LABELS = {abbr: pos for pos, abbr in POSITION_ABBREVIATIONS.items()}


def parse_position_labels(text):
    """
    Parse positions typed by a user, e.g. "GR,DEF" or "Guarda-Redes, Defesa".
    Raises ValueError on unknown labels.
    """
    positions = set()
    for label in text.split(","):
        label = label.strip()
        if not label:
            continue
        if label.upper() in POSITION_LABELS:
            positions.add(POSITION_LABELS[label.upper()])
        else:
            positions.add(Position(label))
    return positions


class PlayerHandlers:
    def __init__(self, player_db_manager, admin_ids):
        self.player_db_manager = player_db_manager
        self.admin_ids = admin_ids

    @reports_errors()
    async def list_players(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        players = [p for p in self.player_db_manager.list_players() if p.is_active]
        if not players:
            await update.message.reply_text("No active players!")
            return

        message = f"👥 Players ({len(players)}):\n\n"
        message += "\n".join(
            f"#{p.id} {p.name}"
            + (f" \"{p.nickname}\"" if p.nickname else "")
            + f" - {p.position_label}"
            for p in players
        )
        await update.message.reply_text(message)

    @admin_only
    @reports_errors(usage="/add_player Name; GR,DEF,MED,AV; [Nickname]")
    async def add_player(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        parts = [part.strip() for part in " ".join(context.args).split(";")]
        if len(parts) < 2 or not parts[0]:
            raise ValueError

        player = Player(
            name=parts[0],
            nickname=parts[2] if len(parts) > 2 and parts[2] else None,
            position=parse_position_labels(parts[1]),
        )
        player = self.player_db_manager.create_player(player)
        await update.message.reply_text(
            f"Player #{player.id} {player.display_name} added ({player.position_label})"
        )

    @admin_only
    @reports_errors(usage="/set_positions <player_id> GR,DEF,MED,AV")
    async def set_positions(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        player_id = int(context.args[0])
        positions = parse_position_labels(" ".join(context.args[1:]))
        self._require_player(player_id)

        player = self.player_db_manager.update_player(player_id, position=positions)
        await update.message.reply_text(
            f"{player.display_name} now plays {player.position_label}"
        )

    @admin_only
    @reports_errors(usage="/activate <player_id>")
    async def activate_player(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await self._set_active(update, int(context.args[0]), True)

    @admin_only
    @reports_errors(usage="/deactivate <player_id>")
    async def deactivate_player(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ):
        await self._set_active(update, int(context.args[0]), False)

    async def _set_active(self, update: Update, player_id, is_active):
        self._require_player(player_id)
        player = self.player_db_manager.set_active(player_id, is_active)
        state = "active" if player.is_active else "inactive"
        await update.message.reply_text(f"{player.display_name} is now {state}.")

    @admin_only
    @reports_errors(usage="/remove_player <player_id>")
    async def remove_player(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        player = self._require_player(int(context.args[0]))
        self.player_db_manager.delete_player(player.id)
        await update.message.reply_text(f"{player.display_name} removed.")

    @reports_errors()
    async def show_top_scorers(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ):
        """Display the top 10 active scorers"""
        top_players = self.player_db_manager.get_top_scorers()

        if not top_players:
            await update.message.reply_text("No goals scored yet!")
            return

        message = "⚽ Top Scorers ⚽\n\n"
        for i, player in enumerate(top_players, 1):
            medal = {1: "🥇", 2: "🥈", 3: "🥉"}.get(i, "👤")
            message += f"{medal} {i}. {player.display_name} - {player.goals_count}\n"

        await update.message.reply_text(message)

    def _require_player(self, player_id) -> Player:
        player = self.player_db_manager.get_player(player_id)
        if not player:
            raise PlayerNotFoundError(player_id)
        return player
