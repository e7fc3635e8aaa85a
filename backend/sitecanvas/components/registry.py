"""
Component registry: type identifier -> rendering contract.

Built once by ``create_app`` and read-only afterwards, so concurrent
requests share it without locking.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Type

from markupsafe import Markup

from .schemas import ComponentConfig

Renderer = Callable[..., Markup]


@dataclass(frozen=True)
class ComponentSpec:
    type: str
    label: str
    description: str
    schema: Type[ComponentConfig]
    render: Renderer

    def parse_config(self, config: Optional[Mapping[str, Any]]) -> ComponentConfig:
        """Validate a raw payload and fill in defaults for absent keys."""
        return self.schema.model_validate(dict(config or {}))

    def defaults(self) -> dict:
        return self.schema().model_dump(by_alias=True)


class ComponentRegistry:
    def __init__(self, specs: Iterable[ComponentSpec]):
        entries = {}
        for spec in specs:
            if spec.type in entries:
                raise ValueError(f"Component type registered twice: {spec.type}")
            entries[spec.type] = spec
        self._entries = MappingProxyType(entries)

    def resolve(self, component_type: str) -> Optional[ComponentSpec]:
        return self._entries.get(component_type)

    def types(self) -> Tuple[str, ...]:
        return tuple(sorted(self._entries))

    def __contains__(self, component_type: object) -> bool:
        return component_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)
