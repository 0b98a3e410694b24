"""Provider identifiers and the wire formats they speak."""

from enum import Enum
from typing import Dict, Optional


class ProviderFormat(str, Enum):
    """Base tool calling wire formats."""

    UNKNOWN = "unknown"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    COHERE = "cohere"
    BEDROCK = "bedrock"


class Provider(str, Enum):
    """
    Known LLM providers.

    ``AUTO`` is the auto-detect sentinel: it is what detection returns when a response
    cannot be attributed, and it is never a valid key for parser lookup.
    """

    AUTO = "auto"

    # Commercial cloud providers
    OPENAI = "openai"
    AZURE_OPENAI = "azure_openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    XAI = "xai"
    MISTRAL = "mistral"
    COHERE = "cohere"
    DEEPSEEK = "deepseek"
    BEDROCK = "bedrock"

    # Open source / self-hosted
    OLLAMA = "ollama"
    GPUSTACK = "gpustack"
    VLLM = "vllm"
    QWEN = "qwen"
    LMSTUDIO = "lmstudio"
    LOCALAI = "localai"
    TGI = "tgi"

    # Generic compatibility modes
    OPENAI_COMPATIBLE = "openai_compatible"
    ANTHROPIC_COMPATIBLE = "anthropic_compatible"

    @property
    def wire_format(self) -> ProviderFormat:
        """The wire format this provider uses for tool calls."""
        return _FORMATS.get(self, ProviderFormat.UNKNOWN)

    @property
    def is_openai_compatible(self) -> bool:
        return self.wire_format is ProviderFormat.OPENAI

    @property
    def is_anthropic_compatible(self) -> bool:
        return self.wire_format is ProviderFormat.ANTHROPIC

    @property
    def documentation_url(self) -> Optional[str]:
        """Link to the provider's function calling documentation, if there is one."""
        return _DOCUMENTATION_URLS.get(self)


_FORMATS: Dict[Provider, ProviderFormat] = {
    Provider.OPENAI: ProviderFormat.OPENAI,
    Provider.AZURE_OPENAI: ProviderFormat.OPENAI,
    Provider.XAI: ProviderFormat.OPENAI,
    Provider.MISTRAL: ProviderFormat.OPENAI,
    Provider.DEEPSEEK: ProviderFormat.OPENAI,
    Provider.OLLAMA: ProviderFormat.OPENAI,
    Provider.GPUSTACK: ProviderFormat.OPENAI,
    Provider.VLLM: ProviderFormat.OPENAI,
    Provider.QWEN: ProviderFormat.OPENAI,
    Provider.LMSTUDIO: ProviderFormat.OPENAI,
    Provider.LOCALAI: ProviderFormat.OPENAI,
    Provider.TGI: ProviderFormat.OPENAI,
    Provider.OPENAI_COMPATIBLE: ProviderFormat.OPENAI,
    Provider.ANTHROPIC: ProviderFormat.ANTHROPIC,
    Provider.ANTHROPIC_COMPATIBLE: ProviderFormat.ANTHROPIC,
    Provider.GOOGLE: ProviderFormat.GOOGLE,
    Provider.COHERE: ProviderFormat.COHERE,
    Provider.BEDROCK: ProviderFormat.BEDROCK,
}

_DOCUMENTATION_URLS: Dict[Provider, str] = {
    Provider.OPENAI: "https://platform.openai.com/docs/guides/function-calling",
    Provider.AZURE_OPENAI: "https://learn.microsoft.com/azure/ai-services/openai/how-to/function-calling",
    Provider.ANTHROPIC: "https://docs.anthropic.com/en/docs/build-with-claude/tool-use",
    Provider.GOOGLE: "https://ai.google.dev/gemini-api/docs/function-calling",
    Provider.XAI: "https://docs.x.ai/docs/guides/function-calling",
    Provider.MISTRAL: "https://docs.mistral.ai/capabilities/function_calling",
    Provider.COHERE: "https://docs.cohere.com/docs/tool-use-overview",
    Provider.DEEPSEEK: "https://api-docs.deepseek.com/guides/function_calling",
    Provider.BEDROCK: "https://docs.aws.amazon.com/bedrock/latest/userguide/tool-use.html",
    Provider.OLLAMA: "https://ollama.com/blog/tool-support",
    Provider.GPUSTACK: "https://docs.gpustack.ai/",
    Provider.VLLM: "https://docs.vllm.ai/en/latest/features/tool_calling/",
    Provider.QWEN: "https://qwen.readthedocs.io/en/latest/framework/function_call.html",
}
