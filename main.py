from telegram import Update
from telegram.ext import Application, CommandHandler
import logging
import asyncio
import nest_asyncio
from supabase import create_client

import config
from database.game import GameDBManager
from database.goal import GoalDBManager
from database.player import PlayerDBManager
from database.team import TeamDBManager
from handlers.game_handlers import GameHandlers
from handlers.player_handlers import PlayerHandlers
from services.game_manager import GameManager
from services.team_balancer import BalancerConfig, TeamBalancer

nest_asyncio.apply()

logger = logging.getLogger(__name__)


def build_app(token):
    app = Application.builder().token(token).build()

    # One backend client shared by every store
    supabase = create_client(config.SUPABASE_URL, config.SUPABASE_KEY)
    player_db_manager = PlayerDBManager(supabase)
    game_db_manager = GameDBManager(supabase)
    team_db_manager = TeamDBManager(supabase)
    goal_db_manager = GoalDBManager(supabase)

    # Initialize services and handlers
    balancer = TeamBalancer(
        BalancerConfig(
            strategy=config.TEAM_STRATEGY,
            min_players=config.MIN_PLAYERS,
            strict_player_ids=config.STRICT_PLAYER_IDS,
            strict_goalkeepers=config.STRICT_GOALKEEPERS,
        )
    )
    game_manager = GameManager(
        game_db_manager=game_db_manager,
        player_db_manager=player_db_manager,
        team_db_manager=team_db_manager,
        goal_db_manager=goal_db_manager,
        balancer=balancer,
        replace_existing_teams=config.REPLACE_EXISTING_TEAMS,
    )
    game_handlers = GameHandlers(
        game_manager=game_manager,
        game_db_manager=game_db_manager,
        player_db_manager=player_db_manager,
        admin_ids=config.ADMIN_IDS,
    )
    player_handlers = PlayerHandlers(
        player_db_manager=player_db_manager,
        admin_ids=config.ADMIN_IDS,
    )

    # Games
    app.add_handler(CommandHandler("games", game_handlers.list_games))
    app.add_handler(CommandHandler("new_game", game_handlers.new_game))
    app.add_handler(CommandHandler("game", game_handlers.show_game))
    app.add_handler(CommandHandler("delete_game", game_handlers.delete_game))
    app.add_handler(CommandHandler("confirm", game_handlers.toggle_confirmation))

    # Teams
    app.add_handler(CommandHandler("generate_teams", game_handlers.generate_teams))
    app.add_handler(CommandHandler("retry_teams", game_handlers.retry_teams))
    app.add_handler(CommandHandler("confirm_teams", game_handlers.confirm_teams))
    app.add_handler(CommandHandler("teams", game_handlers.show_teams))

    # Goals and score
    app.add_handler(CommandHandler("goal", game_handlers.register_goal))
    app.add_handler(CommandHandler("goals", game_handlers.list_goals))
    app.add_handler(CommandHandler("remove_goal", game_handlers.remove_goal))
    app.add_handler(CommandHandler("score", game_handlers.handle_score))

    # Players
    app.add_handler(CommandHandler("players", player_handlers.list_players))
    app.add_handler(CommandHandler("add_player", player_handlers.add_player))
    app.add_handler(CommandHandler("set_positions", player_handlers.set_positions))
    app.add_handler(CommandHandler("activate", player_handlers.activate_player))
    app.add_handler(CommandHandler("deactivate", player_handlers.deactivate_player))
    app.add_handler(CommandHandler("remove_player", player_handlers.remove_player))
    app.add_handler(CommandHandler("top_scorers", player_handlers.show_top_scorers))

    return app


async def main():
    if not config.TOKEN:
        raise ValueError("TELEGRAM_BOT_TOKEN not found in environment variables!")

    app = build_app(config.TOKEN)
    logger.info("Club bot started! Press Ctrl+C to exit.")

    # Start the bot
    await app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("Bot stopped!")
    except Exception as e:
        logger.error(f"Error occurred: {e}")
