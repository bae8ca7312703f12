"""
Standup Notes Backend - Google Gemini Completion Service
========================================================

What:  CompletionService implementation backed by Google Gemini.
How:   Maps the role-tagged message list onto Gemini's chat contents:
       "system" messages become the model's system_instruction, "user" stays
       "user" and "assistant" becomes "model". One generate_content_async call
       per completion; no retries, no timeouts beyond the SDK's own.
Who:   Instantiated once at import (`gemini_service`); used by SummaryService
       and the health route.
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Tuple

import google.generativeai as genai

from standup_notes.config import settings
from standup_notes.exceptions import LLMServiceError
from standup_notes.services.llm_base import CompletionService, Message

logger = logging.getLogger(__name__)

_ROLE_MAP = {"user": "user", "assistant": "model", "model": "model"}


def to_gemini_contents(messages: List[Message]) -> Tuple[Optional[str], List[Dict[str, Any]]]:
    """
    Split a message list into (system_instruction, contents).

    Several system messages are joined with a blank line. Unknown roles are
    sent as "user".
    """
    system_parts = []
    contents = []
    for message in messages:
        role = message.get("role", "user")
        content = message.get("content", "")
        if role == "system":
            system_parts.append(content)
            continue
        contents.append({"role": _ROLE_MAP.get(role, "user"), "parts": [content]})
    system_instruction = "\n\n".join(system_parts) if system_parts else None
    return system_instruction, contents


class GeminiService(CompletionService):
    """
    Gemini-backed text generation.

    The SDK is configured once with the API key. A GenerativeModel is built
    per distinct system instruction, since Gemini binds the instruction to the
    model object rather than to the request.
    """

    def __init__(self, model_name: Optional[str] = None):
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)

        self.model_name = model_name or settings.gemini_model
        self._models: Dict[Optional[str], Any] = {}

        logger.info("GeminiService initialized with model=%s", self.model_name)

    def _model_for(self, system_instruction: Optional[str]):
        model = self._models.get(system_instruction)
        if model is None:
            model = genai.GenerativeModel(
                self.model_name,
                system_instruction=system_instruction,
            )
            self._models[system_instruction] = model
        return model

    async def complete(self, messages: List[Message]) -> str:
        """
        Generate text for `messages` with the configured Gemini model.

        Raises:
            LLMServiceError: SDK error, blocked response, or empty text. The
                error's details name the failure type and the call id that
                appears in the logs.
        """
        call_id = str(uuid.uuid4())[:8]
        system_instruction, contents = to_gemini_contents(messages)
        start_time = time.time()

        logger.info(
            "[%s] Gemini completion: model=%s, %d message(s)",
            call_id,
            self.model_name,
            len(contents),
        )

        try:
            model = self._model_for(system_instruction)
            response = await model.generate_content_async(contents)
            # .text raises ValueError when the candidate was blocked
            text = response.text
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                "[%s] Gemini call failed after %.0fms: %s",
                call_id,
                duration_ms,
                str(e),
                exc_info=True,
            )
            raise LLMServiceError(
                message=str(e) or "Completion provider request failed",
                details={"type": type(e).__name__, "call_id": call_id},
                context={"model": self.model_name},
            ) from e

        duration_ms = (time.time() - start_time) * 1000
        if not text:
            logger.error("[%s] Gemini returned no text after %.0fms", call_id, duration_ms)
            raise LLMServiceError(
                message="Completion provider returned no text",
                details={"type": "EmptyCompletion", "call_id": call_id},
            )

        logger.info(
            "[%s] Gemini completion finished in %.0fms, %d chars",
            call_id,
            duration_ms,
            len(text),
        )
        return text

    async def health_check(self) -> bool:
        """
        Lists the available models; a lightweight authenticated call that
        spends no tokens.
        """
        try:
            model_names = [m.name for m in genai.list_models()]
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False
        target = f"models/{self.model_name}"
        if target not in model_names:
            logger.warning("Configured model %s not found in available models", target)
        return True


gemini_service = GeminiService()
