from supabase import create_client
import logging
import os

logger = logging.getLogger(__name__)


class BaseManager:
    def __init__(self, client=None):
        if client is not None:
            self.supabase = client
            return

        supabase_url = os.getenv("SUPABASE_URL")
        supabase_key = os.getenv("SUPABASE_KEY")

        try:
            self.supabase = create_client(supabase_url, supabase_key)
            logger.info("Supabase client created successfully")
        except Exception as e:
            logger.error(f"Error creating Supabase client: {e}")
            raise
