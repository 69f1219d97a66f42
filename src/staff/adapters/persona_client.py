"""Gemini API client - suggests a formal job title for a new staff member."""

import abc
import json
import logging
from typing import Optional

import httpx

import config

logger = logging.getLogger(__name__)

FALLBACK_ROLE = "Vector Control Officer"

PROMPT_TEMPLATE = (
    "Generate a formal job title for a Dengue Control Program staff member "
    "(e.g., Vector Control Specialist, Field Entomologist, Surveillance Officer) "
    'for a person named "{name}".'
)


class PersonaClientError(Exception):
    """Raised when the persona service cannot be used at all."""
    pass


class AbstractPersonaClient(abc.ABC):

    @abc.abstractmethod
    def suggest_role(self, name: str) -> str:
        """
        Suggest an official job title for a staff member.

        Args:
            name: The staff member's name

        Returns:
            The suggested title

        Raises:
            PersonaClientError: If the client is not configured
        """
        raise NotImplementedError


class GeminiPersonaClient(AbstractPersonaClient):
    """Calls the Gemini generateContent REST endpoint with a JSON response schema."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        gemini_config = config.get_gemini_config()
        self.api_key = api_key or gemini_config["api_key"]
        self.model = model or gemini_config["model"]
        self.base_url = base_url or gemini_config["base_url"]
        self.timeout = timeout or gemini_config["timeout"]
        self.transport = transport

    def _request_body(self, name: str) -> dict:
        return {
            "contents": [{"parts": [{"text": PROMPT_TEMPLATE.format(name=name)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": {
                    "type": "OBJECT",
                    "properties": {
                        "role": {
                            "type": "STRING",
                            "description": "Official Dengue Control job title",
                        },
                    },
                    "required": ["role"],
                },
            },
        }

    def suggest_role(self, name: str) -> str:
        if not self.api_key:
            raise PersonaClientError("API Key not found")

        url = f"{self.base_url}/models/{self.model}:generateContent"

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    url,
                    params={"key": self.api_key},
                    json=self._request_body(name),
                )
                response.raise_for_status()
                payload = response.json()

            text = payload["candidates"][0]["content"]["parts"][0]["text"]
            if not text:
                raise ValueError("No response from AI")

            role = json.loads(text)["role"]
            if not isinstance(role, str) or not role.strip():
                raise ValueError(f"Unusable role in response: {role!r}")
            logger.info(f"Suggested role for {name}: {role}")
            return role

        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
            logger.error(f"Gemini API Error: {e}")
            return FALLBACK_ROLE
