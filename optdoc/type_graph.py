"""Index of extracted types with inheritance lookups."""

import logging
from collections.abc import Iterable

from optdoc.type_definition import TypeDefinition

logger = logging.getLogger(__name__)


class TypeGraph:
    """Name -> TypeDefinition mapping built from one extraction run."""

    def __init__(self, name_to_type: dict[str, TypeDefinition]) -> None:
        self.name_to_type = name_to_type

    @classmethod
    def index(cls, types: Iterable[TypeDefinition]) -> "TypeGraph":
        """Build a graph from a flat list; later duplicates replace earlier ones."""
        name_to_type: dict[str, TypeDefinition] = {}
        for ty in types:
            name_to_type[ty.name] = ty
        return cls(name_to_type)

    def get(self, name: str) -> TypeDefinition | None:
        """Return the type with the given name, if extracted."""
        return self.name_to_type.get(name)

    def __len__(self) -> int:
        return len(self.name_to_type)

    def is_inherited(self, type_name: str, field_name: str) -> bool:
        """Check whether ``field_name`` is declared anywhere in the base chain.

        Bases are searched depth-first in declared order. Unknown base names
        are dead ends and a cyclic chain is reported as not inherited.
        """
        ty = self.get(type_name)
        if ty is None:
            return False
        return self._search_bases(ty, field_name, {ty.name})

    def _search_bases(
        self, ty: TypeDefinition, field_name: str, visited: set[str]
    ) -> bool:
        for base in ty.bases:
            if base in visited:
                logger.debug("Cyclic base chain through %s", base)
                continue
            base_ty = self.get(base)
            if base_ty is None:
                continue
            visited.add(base)
            if base_ty.has_member(field_name):
                return True
            if self._search_bases(base_ty, field_name, visited):
                return True
        return False
