"""Provider Factory utilities.

Purpose
-------
Centralize creation of provider instances by canonical name. Providers are
imported lazily with ``importlib`` so importing the factory never pulls in
every vendor package.

The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownProviderError`.

Supported providers: ``openai`` and ``anthropic``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the class is missing.
    - The provider constructor rejected its arguments.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create providers based on a canonical name (e.g., ``"openai"``)."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "unified_providers.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "unified_providers.anthropic.client", "class": "AnthropicProvider"},
    }

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Create a provider instance.

        Parameters
        ----------
        provider:
            Canonical provider name (case-insensitive).
        **kwargs:
            Constructor keyword arguments (``api_key``, ``model``,
            ``base_url``, ``http_client``, ``stream_tool_calls``...).

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, its module fails to import, the class
            is missing, or the constructor raises.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Provider class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' provider constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
