import time

from fastapi import Depends

from src.app.config.settings import Settings, get_settings
from src.app.services.api_service import ApiService
from src.app.utils.custom_exceptions import ConfigurationError, ProviderError
from src.app.utils.logging_util import loggers


class OpenAIService:
    def __init__(
        self,
        api_service: ApiService = Depends(ApiService),
        app_settings: Settings = Depends(get_settings),
    ) -> None:
        self.api_service = api_service
        self.api_key = app_settings.OPENAI_API_KEY
        self.base_url = app_settings.OPENAI_BASE_URL
        self.completion_endpoint = app_settings.OPENAI_COMPLETION_ENDPOINT
        self.openai_model = app_settings.OPENAI_MODEL
        self.temperature = app_settings.OPENAI_TEMPERATURE
        self.log_raw_content = app_settings.LOG_RAW_MODEL_CONTENT

    async def _completions(
        self,
        user_prompt: str,
        system_prompt: str,
    ) -> dict:
        """
        This method is responsible for sending a POST request to the OpenAI API
        to get completions for the given prompt.
        :param user_prompt: The prompt sent as the user message.
        :param system_prompt: The prompt sent as the system message.
        :return: The decoded chat completion response.
        """
        if not self.api_key:
            raise ConfigurationError(
                "Set OPENAI_API_KEY in the environment or the .env file"
            )

        url = f"{self.base_url}{self.completion_endpoint}"

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        payload = {
            "model": self.openai_model,
            "messages": [
                {
                    "role": "system",
                    "content": system_prompt,
                },
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self.temperature,
        }

        start_time = time.perf_counter()
        try:
            response = await self.api_service.post(
                url=url, headers=headers, data=payload
            )
        except ProviderError as e:
            loggers["main"].error(
                f"OpenAI API error (status {e.provider_status}): {e.details}"
            )
            raise

        duration = time.perf_counter() - start_time
        usage = response.get("usage") or {}
        loggers["time_tracker"].info(
            f"OpenAI completion took {duration:.2f} seconds "
            f"(model={self.openai_model}, total_tokens={usage.get('total_tokens', 0)})"
        )

        return response

    async def completions(
        self,
        user_prompt: str,
        system_prompt: str,
    ) -> str:
        """Return the first completion's message content verbatim."""
        if not system_prompt or not user_prompt:
            raise ValueError("Both system and user prompts must be non-empty")

        response = await self._completions(
            user_prompt=user_prompt,
            system_prompt=system_prompt,
        )

        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                f"Unexpected completion response shape: {response}"
            ) from e

        if self.log_raw_content:
            loggers["main"].info(f"OpenAI raw content: {content}")
        else:
            loggers["main"].debug(f"OpenAI raw content: {content}")

        return content
