from functools import wraps
from telegram import Update
from telegram.ext import ContextTypes


def admin_only(func):
    """Decorator to restrict commands to the handler's admin_ids"""

    @wraps(func)
    async def wrapper(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        if update.effective_user.id not in self.admin_ids:
            await update.message.reply_text("This command is only available to admins.")
            return
        return await func(self, update, context)

    return wrapper
