from supabase import Client, create_client

from config import Config

_client: Client | None = None


def get_supabase() -> Client:
    """Return the shared Supabase client, creating it on first use."""
    global _client
    if _client is None:
        if not Config.SUPABASE_URL or not Config.SUPABASE_KEY:
            raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set in the environment")
        _client = create_client(Config.SUPABASE_URL, Config.SUPABASE_KEY)
    return _client
