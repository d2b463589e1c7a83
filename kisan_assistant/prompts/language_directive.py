from langchain_core.prompts import PromptTemplate

from kisan_assistant.models.language import language_name

LANGUAGE_DIRECTIVE = PromptTemplate.from_template(
    "{prompt}\n\n(IMPORTANT: Reply strictly in {language} language/script)"
)


def localize_prompt(prompt: str, language: str) -> str:
    """Suffix ``prompt`` with the reply-language instruction for ``language`` (a code like "hi")."""
    return LANGUAGE_DIRECTIVE.format(prompt=prompt, language=language_name(language))
