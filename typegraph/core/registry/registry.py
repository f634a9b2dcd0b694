"""
TypeRegistry implementation.

The registry is the single output of a compilation run: a mapping from type
name to ``TypeDescriptor``.

Invariants:
    - Type names are unique
    - Registering an identical descriptor twice is a no-op
    - Once frozen, no descriptor can be added; only the ``generated`` flag
      may still be switched by the consuming schema layer
"""

import hashlib
import json
import logging
from typing import Iterable, Iterator, Optional

from .types import TypeDescriptor

logger = logging.getLogger(__name__)


class RegistryFrozenError(Exception):
    """Raised when attempting to modify a frozen registry."""
    pass


class DuplicateTypeError(Exception):
    """Raised when a different descriptor is registered under a taken name."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class TypeRegistry:
    """
    Mapping from type name to descriptor, filled during one compilation run.

    Example:
        >>> registry = TypeRegistry()
        >>> order = registry.register(TypeDescriptor("Order", TypeCategory.OBJECT))
        >>> registry.freeze()
        'sha256:...'
        >>> registry["Order"].category
        <TypeCategory.OBJECT: 'OBJECT'>
    """

    def __init__(self) -> None:
        self._types: dict[str, TypeDescriptor] = {}
        self._frozen = False
        self._fingerprint: Optional[str] = None

    @property
    def frozen(self) -> bool:
        """Whether the registry is frozen."""
        return self._frozen

    @property
    def fingerprint(self) -> str:
        """SHA-256 of the exported registry, cached once frozen."""
        if self._fingerprint is not None:
            return self._fingerprint
        return self._compute_fingerprint()

    def register(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        """Register a descriptor and return the one stored under its name.

        Raises:
            RegistryFrozenError: If registry is frozen
            DuplicateTypeError: If a different descriptor holds the name
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register type '{descriptor.name}': registry is frozen"
            )

        existing = self._types.get(descriptor.name)
        if existing is not None:
            if existing == descriptor:
                return existing
            raise DuplicateTypeError(
                f"Type name '{descriptor.name}' already registered as {existing.category.value}",
                type_name=descriptor.name,
            )

        self._types[descriptor.name] = descriptor
        logger.debug(f"Registered type: {descriptor.name} ({descriptor.category.value})")
        return descriptor

    def merge(self, descriptors: Iterable[TypeDescriptor]) -> None:
        """Register every descriptor of a compilation result, in order."""
        for descriptor in descriptors:
            self.register(descriptor)

    def get(self, name: str) -> Optional[TypeDescriptor]:
        return self._types.get(name)

    def names(self) -> list[str]:
        return list(self._types)

    def mark_generated(self, name: str) -> None:
        """Flag a descriptor as consumed by the schema layer."""
        descriptor = self._types.get(name)
        if descriptor is None:
            raise KeyError(name)
        descriptor.generated = True

    def freeze(self) -> str:
        """Freeze the registry and compute its fingerprint.

        Raises:
            RegistryFrozenError: If already frozen
        """
        if self._frozen:
            raise RegistryFrozenError("Registry is already frozen")

        self._fingerprint = self._compute_fingerprint()
        self._frozen = True
        logger.info(
            f"Type registry frozen with {len(self._types)} types, "
            f"fingerprint={self._fingerprint}"
        )
        return self._fingerprint

    def as_dict(self) -> dict[str, dict]:
        """JSON-ready export, keyed by type name."""
        return {name: descriptor.as_dict() for name, descriptor in self._types.items()}

    def _compute_fingerprint(self) -> str:
        canonical = json.dumps(self.as_dict(), sort_keys=True, separators=(",", ":"))
        return "sha256:" + hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    def __getitem__(self, name: str) -> TypeDescriptor:
        return self._types[name]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
