import logging
import requests

from domain.core.errors import UpstreamNotificationError
from domain.core.settings import Settings

logger = logging.getLogger(__name__)


class BotClient:
    """HTTP client for the chat-bot service that talks to customers."""

    def __init__(
            self,
            notify_url: str | None,
            broadcast_url: str | None = None,
            api_key: str | None = None,
            broadcast_secret: str | None = None,
            timeout: float = 10,
            session: requests.Session | None = None,
    ):
        self.notify_url = notify_url
        self.broadcast_url = broadcast_url
        self.api_key = api_key
        self.broadcast_secret = broadcast_secret
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotClient":
        return cls(
            notify_url=settings.BOT_NOTIFY_URL,
            broadcast_url=settings.BROADCAST_URL,
            api_key=settings.ADMIN_SERVER_API_KEY,
            broadcast_secret=settings.BROADCAST_SECRET_KEY,
            timeout=settings.BOT_REQUEST_TIMEOUT,
        )

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def _post(self, url: str, payload: dict) -> requests.Response:
        try:
            response = self.session.post(url, json=payload, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise UpstreamNotificationError(f"Bot server request failed: {e}") from e
        return response

    def notify(self, chat_id: str, message: str) -> bool:
        if not self.notify_url:
            logger.warning("Bot_notify_url_not_set_skipping_notification")
            return False
        if not chat_id:
            logger.warning("Notification_skipped_missing_chat_id")
            return False

        self._post(self.notify_url, {"chatId": chat_id, "message": message})
        logger.info(f"Notification_sent chat_id={chat_id}")
        return True

    def broadcast(self, title: str, message: str, image_url: str | None = None) -> dict:
        response = self._post(self.broadcast_url, {
            "title": title,
            "message": message,
            "imageUrl": image_url,
            "secretKey": self.broadcast_secret,
        })
        try:
            return response.json()
        except ValueError:
            return {}
