"""
Dossier writer.

Renders section prompts and sends them to OpenAI chat models through
LangChain. Free-text sections (summary, roast, praise) return plain strings;
career and fun facts use schema-constrained structured output.

Dependencies: langchain_openai, langchain_core
System role: LLM calls for dossier sections
"""

import logging
from typing import Any, TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import BaseModel

from researcher.core.agents.dossier_prompt import (
    CAREER_PROMPT,
    FUN_FACTS_PROMPT,
    TEXT_SECTION_PROMPTS,
)
from researcher.core.agents.dossier_schema import CareerProfile, FunFactList
from researcher.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class DossierWriter:
    """
    LLM writer for the dossier sections.

    Chat models are created lazily so that a missing API key surfaces as a
    per-request failure instead of an import/startup error.
    """

    def __init__(
        self,
        model_id: str = "gpt-4.1",
        structured_model_id: str = "gpt-4.1-mini",
        api_key: str | None = None,
        temperature: float = 0.7,
        timeout: float = 60.0,
        chat_model: BaseChatModel | None = None,
        structured_chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize writer.

        Args:
            model_id: OpenAI model for free-text sections
            structured_model_id: OpenAI model for structured sections
            api_key: OpenAI API key (falls back to OPENAI_API_KEY env var)
            temperature: Sampling temperature for free-text sections
            timeout: Request timeout in seconds
            chat_model: Prebuilt model for free-text sections (tests)
            structured_chat_model: Prebuilt model for structured sections (tests)
        """
        self._model_id = model_id
        self._structured_model_id = structured_model_id
        self._api_key = api_key
        self._temperature = temperature
        self._timeout = timeout
        self._chat_model = chat_model
        self._structured_chat_model = structured_chat_model
        self._parser = StrOutputParser()

    @property
    def chat_model(self) -> BaseChatModel:
        if self._chat_model is None:
            self._chat_model = ChatOpenAI(
                model=self._model_id,
                api_key=self._api_key,
                temperature=self._temperature,
                timeout=self._timeout,
            )
        return self._chat_model

    @property
    def structured_chat_model(self) -> BaseChatModel:
        if self._structured_chat_model is None:
            self._structured_chat_model = ChatOpenAI(
                model=self._structured_model_id,
                api_key=self._api_key,
                temperature=0.0,
                timeout=self._timeout,
            )
        return self._structured_chat_model

    async def write_text(self, section: str, context_prompt: str) -> str:
        """
        Write a free-text section.

        Args:
            section: One of "summary", "roast", "praise"
            context_prompt: Shared context prompt

        Returns:
            str: Generated paragraph, stripped

        Raises:
            KeyError: Unknown section name
        """
        prompt = TEXT_SECTION_PROMPTS[section]
        messages = prompt.invoke({"context": context_prompt}).to_messages()

        logger.info(
            f"{__name__}:write_text - START section={section}, "
            f"context_len={len(context_prompt)}"
        )
        logger.debug(f"{__name__}:write_text - context={safe_log_value(context_prompt, 200)}")
        response = await self.chat_model.ainvoke(messages)
        text = self._parser.invoke(response).strip()
        logger.info(f"{__name__}:write_text - DONE section={section}, output_len={len(text)}")
        return text

    async def write_career(self, context_prompt: str) -> CareerProfile | None:
        """
        Extract skills and a career timeline.

        Args:
            context_prompt: Shared context prompt

        Returns:
            CareerProfile: Structured skills and timeline, or None when the
            model made no tool call
        """
        return await self._write_structured(
            CAREER_PROMPT,
            CareerProfile,
            {"context": context_prompt},
        )

    async def write_fun_facts(self, profile_prompt: str, search_results: str) -> FunFactList | None:
        """
        Produce fun facts grounded on the profile and web results.

        Args:
            profile_prompt: Rendered profile block
            search_results: JSON-rendered web search results about the person

        Returns:
            FunFactList: Structured fun facts
        """
        return await self._write_structured(
            FUN_FACTS_PROMPT,
            FunFactList,
            {"profile": profile_prompt, "search_results": search_results},
        )

    async def _write_structured(
        self,
        prompt: ChatPromptTemplate,
        schema: type[SchemaT],
        variables: dict[str, Any],
    ) -> SchemaT | None:
        messages = prompt.invoke(variables).to_messages()
        model = self.structured_chat_model.with_structured_output(
            schema,
            method="function_calling",
        )

        logger.info(
            f"{__name__}:_write_structured - START schema={schema.__name__}, "
            f"variables={sorted(variables)}"
        )
        result = await model.ainvoke(messages)
        if isinstance(result, dict):
            result = schema.model_validate(result)
        logger.info(f"{__name__}:_write_structured - DONE schema={schema.__name__}")
        return result
