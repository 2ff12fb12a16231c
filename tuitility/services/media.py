import logging
from urllib.parse import urlparse

import requests

from tuitility.core.errors import MediaResolutionError

logger = logging.getLogger(__name__)


class MediaResolver:
    """
    Client for the third-party media lookup API used by the video downloader tools.
    One attempt per request; failures come back as an error message.
    """
    DEFAULT_URL = "https://instagram-downloader-download-instagram-videos-stories1.p.rapidapi.com/get-info-rapidapi"

    def __init__(self, api_key, api_url=None, timeout=15):
        self.api_key = api_key
        self.api_url = api_url or self.DEFAULT_URL
        self.timeout = timeout

    def resolve(self, url):
        """
        Look up the direct media URL for a post.

        Returns:
            dict: {'media_url': ...} on success, {'error': ...} otherwise
        """
        if not self.api_key:
            return {"error": "API key not configured."}

        host = urlparse(self.api_url).netloc
        headers = {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": host,
        }

        try:
            response = requests.get(self.api_url, params={"url": url}, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Media API error for {url}: {e}")
            return {"error": "Failed to fetch video. Please try again later."}
        except ValueError as e:
            logger.error(f"Media API returned invalid JSON for {url}: {e}")
            return {"error": "Failed to fetch video. Please try again later."}

        media_url = self._find_media_url(data)
        if not media_url:
            logger.info(f"Media API response had no video URL for {url}")
            return {"error": "Video URL not found. Please check if the link is correct."}
        return {"media_url": media_url}

    def resolve_or_raise(self, url):
        outcome = self.resolve(url)
        if "error" in outcome:
            raise MediaResolutionError(outcome["error"])
        return outcome["media_url"]

    @staticmethod
    def _find_media_url(data):
        if not isinstance(data, dict):
            return None
        media = data.get("media") if isinstance(data.get("media"), dict) else {}
        items = data.get("items") if isinstance(data.get("items"), list) else []
        first = items[0] if items and isinstance(items[0], dict) else {}
        return (
            data.get("url")
            or data.get("video_url")
            or data.get("download_url")
            or media.get("url")
            or first.get("video_url")
            or first.get("url")
        )
