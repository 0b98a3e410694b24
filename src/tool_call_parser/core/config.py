"""Configuration for provider detection and dispatch."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .providers import Provider

DEFAULT_FALLBACK_ORDER: Tuple[Provider, ...] = (
    Provider.OPENAI,
    Provider.ANTHROPIC,
    Provider.GOOGLE,
    Provider.BEDROCK,
    Provider.COHERE,
)


class ParserConfig(BaseModel):
    """
    Settings for a parser registry.

    Attributes:
        permissive_anthropic_detection: Also treat a ``content`` array holding ``text`` blocks
            as an Anthropic response. Off by default because any typed text block matches.
        fallback_order: Parsers tried, in order, when detection cannot attribute a response.
    """

    model_config = ConfigDict(frozen=True)

    permissive_anthropic_detection: bool = False
    fallback_order: Tuple[Provider, ...] = Field(default=DEFAULT_FALLBACK_ORDER)

    @field_validator("fallback_order")
    @classmethod
    def _reject_auto(cls, value: Tuple[Provider, ...]) -> Tuple[Provider, ...]:
        if Provider.AUTO in value:
            raise ValueError("fallback_order cannot contain the auto-detect sentinel")
        return value
