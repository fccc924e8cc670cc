"""New-user notification — drafts the approval request e-mail for the admin.

No mail transport is configured; the drafted message is logged.
"""

import structlog
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from organiza.ai.llm import get_llm
from organiza.ai.prompts import NEW_USER_EMAIL_PROMPT, NEW_USER_EMAIL_TEMPLATE
from organiza.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


def draft_new_user_email(user_name: str, user_email: str, llm=None) -> str:
    """LLM-written e-mail when an AI provider is configured, fixed template otherwise."""
    values = {"user_name": user_name, "user_email": user_email}
    if llm is None and not settings.ai_enabled:
        return NEW_USER_EMAIL_TEMPLATE.format(**values)

    chain = ChatPromptTemplate.from_template(NEW_USER_EMAIL_PROMPT) | (llm or get_llm()) | StrOutputParser()
    return chain.invoke(values)


def notify_admin_of_new_user(user_name: str, user_email: str) -> None:
    """Background task run after sign-up; failures are logged, never raised."""
    try:
        body = draft_new_user_email(user_name, user_email)
    except Exception as e:
        logger.error("Could not draft new user notification", error=str(e), user_email=user_email)
        body = NEW_USER_EMAIL_TEMPLATE.format(user_name=user_name, user_email=user_email)

    logger.info("New user notification", to=settings.ADMIN_NOTIFICATION_EMAIL, body=body)
