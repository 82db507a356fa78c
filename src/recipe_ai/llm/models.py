"""LLM gateway data models.

Generation options and results exchanged with the orchestrator, plus the
request/response envelopes of each provider's HTTP API.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recipe_ai.schemas.enums import FailureKind
from recipe_ai.schemas.generation import TokenUsage, UsageMetadata
from recipe_ai.schemas.recipe import Recipe


class GenerationOptions(BaseModel):
    """Per-call generation options.

    Accepts both snake_case and camelCase keys (``maxTokens``, ``timeoutMs``,
    ``timeoutMillis``); unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: int = Field(default=2000, ge=1)
    timeout_ms: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("timeout_ms", "timeoutMs", "timeoutMillis"),
        description="Deadline; client default when None",
    )
    model: str | None = None
    system_prompt: str | None = None


class CompletionResult(BaseModel):
    """Raw text completion from a provider."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Raw text returned by the model")
    model: str = Field(..., description="Model that produced the text")
    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)


class ProviderResult(BaseModel):
    """Outcome of one provider generation; failures are values, not exceptions."""

    model_config = ConfigDict(frozen=True)

    success: bool
    recipe: Recipe | None = None
    error: str | None = None
    failure: FailureKind | None = None
    usage: TokenUsage | None = None
    cost: float = Field(default=0.0, ge=0, description="US cents")
    metadata: UsageMetadata


# =============================================================================
# Anthropic Messages API
# =============================================================================


class AnthropicMessageRequest(BaseModel):
    """Request body for Anthropic POST /v1/messages."""

    model: str
    max_tokens: int
    messages: list[dict[str, str]]
    system: str | None = None
    temperature: float | None = None


class AnthropicContentBlock(BaseModel):
    """One block of an Anthropic message; only text blocks carry output."""

    model_config = ConfigDict(extra="ignore")

    type: str
    text: str | None = None


class AnthropicUsage(BaseModel):
    """Token usage from an Anthropic response."""

    model_config = ConfigDict(extra="ignore")

    input_tokens: int = 0
    output_tokens: int = 0


class AnthropicMessageResponse(BaseModel):
    """Response from Anthropic POST /v1/messages."""

    model_config = ConfigDict(extra="ignore")

    id: str
    model: str
    content: list[AnthropicContentBlock]
    stop_reason: str | None = None
    usage: AnthropicUsage = Field(default_factory=AnthropicUsage)

    @property
    def text(self) -> str:
        for block in self.content:
            if block.type == "text" and block.text is not None:
                return block.text
        return ""


# =============================================================================
# Groq API Models (OpenAI-compatible chat format)
# =============================================================================


class GroqMessage(BaseModel):
    """Single message in Groq chat format."""

    role: str = Field(..., description="Message role: system, user, or assistant")
    content: str = Field(..., description="Message content")


class GroqChatRequest(BaseModel):
    """Request body for Groq /chat/completions endpoint."""

    model: str
    messages: list[dict[str, str]]
    temperature: float = 0.7
    max_tokens: int | None = None
    stream: bool = False


class GroqUsage(BaseModel):
    """Token usage from Groq response."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class GroqChoice(BaseModel):
    """Single choice in Groq response."""

    index: int
    message: GroqMessage
    finish_reason: str | None = None


class GroqChatResponse(BaseModel):
    """Response from Groq /chat/completions endpoint."""

    model_config = ConfigDict(extra="ignore")

    id: str
    model: str
    choices: list[GroqChoice]
    usage: GroqUsage = Field(default_factory=GroqUsage)
    created: int | None = None

    def first_text(self) -> str:
        return self.choices[0].message.content if self.choices else ""


def coerce_options(options: GenerationOptions | dict[str, Any] | None) -> GenerationOptions:
    """Coerce a loose options mapping into GenerationOptions."""
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    return GenerationOptions.model_validate(options)
