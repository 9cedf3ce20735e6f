import logging
from functools import wraps
from telegram import Update
from telegram.ext import ContextTypes

from services.exceptions import ClubManagerError, PartialPersistenceError

logger = logging.getLogger(__name__)


def reports_errors(usage=None):
    """
    Decorator turning failures of a command into a reply.

    Domain errors are shown as they are, bad arguments get the usage text and
    anything else is logged and answered with a generic message.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
            try:
                return await func(self, update, context)
            except PartialPersistenceError as e:
                await update.message.reply_text(
                    f"⚠️ {e}.\nUse /retry_teams {e.game_id} to save the teams again."
                )
            except ClubManagerError as e:
                await update.message.reply_text(f"⚠️ {e}")
            except (ValueError, IndexError):
                await update.message.reply_text(
                    f"Invalid arguments.\nUsage: {usage}" if usage else "Invalid arguments."
                )
            except Exception as e:
                logger.exception(f"Error handling {func.__name__}: {e}")
                await update.message.reply_text(
                    "Something went wrong, please try again."
                )

        return wrapper

    return decorator
