"""Client for the external content service that writes calculator page copy.

The service is opaque: POST {topic, keywords} and get back {title, body}.
It can fail at any time, and callers always get usable text back through
generate_content().
"""

import logging
from typing import List, Optional, Sequence, Union

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from projection_engine.config import settings
from projection_engine.domain.exceptions import ContentServiceError

logger = logging.getLogger(__name__)


class GeneratedContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    body: str
    generated: bool = True


class ContentClient:
    """Client for the external content generation API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or settings.content_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def generate(self, topic: str, keywords: Sequence[str]) -> GeneratedContent:
        """
        Request page copy for a topic.

        Raises:
            ContentServiceError: On timeout, HTTP errors, or an unusable response
        """
        if not self.base_url:
            raise ContentServiceError("Content service is not configured")

        with httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
            try:
                response = client.post("/generate", json={"topic": topic, "keywords": list(keywords)})
                response.raise_for_status()
                data = response.json()
                return GeneratedContent(title=data["title"], body=data["body"], generated=True)

            except httpx.TimeoutException as e:
                raise ContentServiceError(f"Content service timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise ContentServiceError(f"Content service error: {e.response.status_code}") from e
            except httpx.HTTPError as e:
                raise ContentServiceError(f"Content service unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, ValidationError) as e:
                raise ContentServiceError(f"Invalid content payload: {e}") from e


def fallback_content(topic: str, keywords: Sequence[str]) -> GeneratedContent:
    keyword_text = ", ".join(keywords) if keywords else "investing"
    body = (
        f"The {topic} gives a quick, deterministic projection from the numbers you enter. "
        f"Adjust the inputs to see how each assumption changes the outcome. "
        f"Related topics: {keyword_text}. "
        "Results are estimates for planning purposes and are not financial advice."
    )
    return GeneratedContent(title=topic, body=body, generated=False)


def _normalize_keywords(keywords: Union[str, Sequence[str], None]) -> List[str]:
    if keywords is None:
        return []
    if isinstance(keywords, str):
        return [part.strip() for part in keywords.split(",") if part.strip()]
    return [str(part) for part in keywords]


def generate_content(
    topic: str,
    keywords: Union[str, Sequence[str], None] = None,
    client: Optional[ContentClient] = None,
) -> GeneratedContent:
    """Generated copy when the service answers, fallback copy otherwise."""
    keyword_list = _normalize_keywords(keywords)
    client = client or ContentClient()

    if not client.base_url:
        return fallback_content(topic, keyword_list)

    try:
        return client.generate(topic, keyword_list)
    except ContentServiceError as exc:
        logger.warning("Content generation failed, using fallback", extra={"topic": topic, "error": str(exc)})
        return fallback_content(topic, keyword_list)
