from domain.core.settings import settings
from infrastructure.bot_client import BotClient


def get_bot_client() -> BotClient:
    # one client per request; its requests.Session is used by that request's background task only
    return BotClient.from_settings(settings)
