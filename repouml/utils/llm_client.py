"""
Chat model access for the diagram prompts.

Requests go through a LangChain ChatOpenAI model. Transient failures
are retried with a growing delay; prompts that do not fit the model's
context window fail at once so the caller can shrink them.
"""

import time
import logging
from typing import Optional

import openai
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

logger = logging.getLogger(__name__)


class ContextLengthExceededError(RuntimeError):
    """Raised when a prompt does not fit the model's context window."""


def is_context_length_error(error: Exception) -> bool:
    """Check if a model error reports an exceeded context window."""
    if isinstance(error, openai.BadRequestError):
        if getattr(error, "code", None) == "context_length_exceeded":
            return True
    return "maximum context length" in str(error)


class LLMClient:
    """
    Retrying wrapper around a chat model.

    The system and user texts are bound as template variables, never
    used as templates themselves, so braces in source code reach the
    model unchanged.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-4o-mini",
        max_retries: int = 3,
        retry_delay: float = 2.0,
        temperature: float = 0.2,
        max_tokens: int = 4000,
    ):
        """
        Args:
            api_key: OpenAI API key
            model_name: Chat model to request
            max_retries: Attempts per call, including the first
            retry_delay: Base delay in seconds; attempt n waits n times this
            temperature: Sampling temperature
            max_tokens: Completion length limit
        """
        self.api_key = api_key
        self.model_name = model_name
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.llm = self._create_model()

    def _create_model(self) -> ChatOpenAI:
        try:
            return ChatOpenAI(
                model=self.model_name,
                api_key=self.api_key,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("Could not create chat model %s: %s", self.model_name, str(e))
            raise

    def call(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """
        Send one prompt and return the reply text.

        Args:
            prompt: User message
            system_prompt: System message, if any

        Returns:
            The model's reply

        Raises:
            ContextLengthExceededError: The prompt is too long; not retried
            RuntimeError: Every attempt failed
        """
        messages = [("human", "{prompt}")]
        variables = {"prompt": prompt}
        if system_prompt:
            messages.insert(0, ("system", "{system_prompt}"))
            variables["system_prompt"] = system_prompt

        chain = ChatPromptTemplate.from_messages(messages) | self.llm

        last_error = None
        for attempt in range(1, self.max_retries + 1):
            try:
                reply = chain.invoke(variables)
            except Exception as e:
                if is_context_length_error(e):
                    logger.warning("Prompt too long for %s: %s", self.model_name, str(e))
                    raise ContextLengthExceededError(str(e)) from e

                last_error = e
                logger.warning(
                    "Model call %d/%d failed: %s", attempt, self.max_retries, str(e)
                )
                if attempt < self.max_retries:
                    time.sleep(self.retry_delay * attempt)
                continue

            return reply.content if hasattr(reply, "content") else str(reply)

        message = f"All {self.max_retries} LLM call attempts failed. Last error: {last_error}"
        logger.error(message)
        raise RuntimeError(message)
