"""Provider Protocol (single-class module).

Defines the capability contract every backend adapter implements. Hosts pick
an implementation by configuration (see ``base.factory``) and talk to it only
through this surface.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

from ..models import Message, ModelConfig, ProviderMetadata, ProviderUsage, Tool


@runtime_checkable
class Provider(Protocol):
    """Chat-completion backend contract.

    Implementations translate the agnostic conversation into their wire format,
    perform exactly one network round trip per ``complete`` call, and translate
    the answer back. Instance state must not change after construction so that
    concurrent calls are independent.
    """

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        """Static descriptor; pure and callable without an instance."""
        ...

    def get_model_config(self) -> ModelConfig:
        """Return the model configuration bound at construction."""
        ...

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
    ) -> Tuple[Message, ProviderUsage]:
        """Run one completion and return the assistant message with its usage.

        Failure handling: raise ``ExecutionError`` for local failures,
        ``RequestFailed`` for non-2xx responses. Missing usage must not fail the
        call; return an empty ``Usage`` instead.
        """
        ...
