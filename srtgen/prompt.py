"""Prompt construction for SRT generation."""
from srtgen.constants import PROMPT_TEMPLATE


def build_prompt(language: str) -> str:
    """Return the SRT instruction with `language` substituted verbatim."""
    return PROMPT_TEMPLATE.replace("{language}", language)
