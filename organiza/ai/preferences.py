"""Client preference summary — LCEL chain over the configured chat model."""

import structlog
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from organiza.ai.llm import get_llm
from organiza.ai.prompts import PREFERENCE_ANALYSIS_PROMPT

logger = structlog.get_logger(__name__)


def build_preference_chain(llm=None):
    """prompt → llm → text"""
    prompt = ChatPromptTemplate.from_template(PREFERENCE_ANALYSIS_PROMPT)
    return prompt | (llm or get_llm()) | StrOutputParser()


def analyze_client_preferences(client_name: str, client_details: str, llm=None) -> str:
    """Summarize what a client likes from their notes, visits and projects."""
    chain = build_preference_chain(llm)
    summary = chain.invoke({"client_name": client_name, "client_details": client_details})
    logger.info("Client preferences analyzed", client_name=client_name, chars=len(summary))
    return summary.strip()
