"""Public shared application context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from termstack.api.verbs import VerbStore, create_verb_store

if TYPE_CHECKING:
    from termstack.runtime.config import RuntimeConfig


class ServiceLike(Protocol):
    """Opaque service contract for context boundaries."""


@dataclass(frozen=True, slots=True)
class AppContext:
    """Read-only, process-wide configuration consulted by every state."""

    config: RuntimeConfig
    verbs: VerbStore
    launch_dir: Path
    services: Mapping[str, ServiceLike] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, name: str) -> ServiceLike | None:
        """Return named service if present."""
        return self.services.get(name)

    def require(self, name: str) -> ServiceLike:
        """Return named service or raise KeyError."""
        value = self.get(name)
        if value is None:
            raise KeyError(f"missing context service: {name}")
        return value


def create_app_context(
    *,
    config: RuntimeConfig | None = None,
    verbs: VerbStore | None = None,
    launch_dir: Path | None = None,
    services: Mapping[str, ServiceLike] | None = None,
) -> AppContext:
    """Create an app context, filling unset parts from runtime defaults."""
    from termstack.runtime.config import get_runtime_config

    resolved_services: dict[str, ServiceLike] = {}
    for name, service in (services or {}).items():
        normalized = name.strip()
        if not normalized:
            raise ValueError("service name must not be empty")
        resolved_services[normalized] = service
    return AppContext(
        config=config if config is not None else get_runtime_config(),
        verbs=verbs if verbs is not None else create_verb_store(),
        launch_dir=launch_dir if launch_dir is not None else Path.cwd(),
        services=MappingProxyType(resolved_services),
    )
