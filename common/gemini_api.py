import httpx
from enum import Enum
from typing import Dict, Optional
from pydantic import ValidationError
from common.config import Config
from common.logging import logger
from common.models import GeminiResponse
from common.exceptions import UpstreamError


class ModelVariant(str, Enum):
    ANALYSIS = "analysis"
    CHAT = "chat"


FALLBACK_REPLIES = {
    ModelVariant.ANALYSIS: "No valid response from Gemini.",
    ModelVariant.CHAT: "No response received.",
}


class GeminiAPI:
    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 models: Optional[Dict[ModelVariant, str]] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key if api_key is not None else Config.GOOGLE_API_KEY
        self.base_url = (base_url or Config.GEMINI_BASE_URL).rstrip("/")
        self.models = models or {
            ModelVariant.ANALYSIS: Config.GEMINI_ANALYSIS_MODEL,
            ModelVariant.CHAT: Config.GEMINI_CHAT_MODEL,
        }
        self.timeout = timeout if timeout is not None else Config.GEMINI_TIMEOUT
        self.transport = transport

    def _endpoint(self, variant: ModelVariant) -> str:
        return f"{self.base_url}/models/{self.models[variant]}:generateContent"

    @staticmethod
    def build_payload(prompt: str) -> dict:
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    async def generate(self, prompt: str, variant: ModelVariant) -> str:
        """Send prompt as one user turn and return the first text part of the reply.

        Falls back to the variant's fixed reply when the envelope carries no
        text. Raises UpstreamError when the call itself fails.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                res = await client.post(
                    self._endpoint(variant),
                    params={"key": self.api_key},
                    json=self.build_payload(prompt),
                    headers={"Content-Type": "application/json"},
                )
                res.raise_for_status()
            except httpx.HTTPStatusError as e:
                body = e.response.text
                raise UpstreamError(
                    f"Gemini returned {e.response.status_code}: {body}",
                    status_code=e.response.status_code, body=body) from e
            except httpx.HTTPError as e:
                raise UpstreamError(f"Gemini request failed: {e}") from e

        try:
            data = res.json()
        except ValueError as e:
            raise UpstreamError(f"Gemini returned a non-JSON body: {res.text[:500]}",
                                status_code=res.status_code, body=res.text) from e

        try:
            text = GeminiResponse.model_validate(data).first_text()
        except ValidationError as e:
            logger.warning(f"Unexpected Gemini envelope: {e}")
            text = None

        return text or FALLBACK_REPLIES[variant]
