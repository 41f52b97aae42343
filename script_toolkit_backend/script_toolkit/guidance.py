import logging

from .models import GuidanceState, ResultStatus
from .prompts import GUIDANCE_SYSTEM_PROMPT
from .settings import GUIDANCE_MAX_TOKENS, GUIDANCE_MODEL, GUIDANCE_TEMPERATURE, GUIDANCE_THINKING_BUDGET

logger = logging.getLogger(__name__)

GUIDANCE_FALLBACK = "Sorry, I was unable to get feedback right now."


class GuidanceRequester:
    """
    Quick script feedback. A single short call, independent of generation
    sessions; failures never escape, the caller gets the fallback text instead.
    """

    def __init__(self, client, model: str = GUIDANCE_MODEL):
        self.client = client
        self.model = model
        self.is_loading = False
        self.state = GuidanceState()

    def reset(self) -> None:
        self.state = GuidanceState()

    async def request_guidance(self, script_text: str) -> str:
        self.is_loading = True
        self.state = GuidanceState(status=ResultStatus.PENDING)
        try:
            text = await self.client.generate(
                self.model,
                script_text,
                instruction=GUIDANCE_SYSTEM_PROMPT,
                temperature=GUIDANCE_TEMPERATURE,
                max_tokens=GUIDANCE_MAX_TOKENS,
                thinking_budget=GUIDANCE_THINKING_BUDGET,
            )
            text = text.strip()
            self.state = GuidanceState(status=ResultStatus.SUCCEEDED, text=text)
        except Exception as e:
            logger.error(f"Failed to get guidance: {str(e)}")
            text = GUIDANCE_FALLBACK
            self.state = GuidanceState(status=ResultStatus.FAILED, text=text, error=type(e).__name__)
        finally:
            self.is_loading = False
        return text
