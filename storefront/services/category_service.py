"""Category tree resolution.

Resolves a section's filter value (category id, slug or name) to the target
category and expands it into its family: the target plus every transitive
descendant, identified by normalized name.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set

import structlog

from storefront.core.exceptions import CategoryCycleError
from storefront.models.category import Category
from storefront.utils.normalizer import normalize_key

logger = structlog.get_logger(__name__)


class CategoryTree:
    """Index over a flat category list for lookup and descendant expansion.

    The ``parent_id -> children`` map is built once so each expansion is
    linear in the size of the family instead of rescanning the whole list
    per node.
    """

    def __init__(self, categories: Iterable[Category]):
        """Build the adjacency index.

        Args:
            categories: Category list in catalog order
        """
        self.categories: List[Category] = list(categories)
        self._children: Dict[str, List[Category]] = defaultdict(list)
        for category in self.categories:
            if category.parent_id is not None:
                self._children[category.parent_id].append(category)
        self.logger = logger.bind(service="category_tree")

    def children_of(self, category_id: str) -> List[Category]:
        """Direct children of a category, in catalog order."""
        return list(self._children.get(category_id, []))

    def find(self, value: Optional[str]) -> Optional[Category]:
        """Find the first category whose id, slug or name matches ``value``.

        Matching is case-insensitive and ignores surrounding whitespace.
        When several categories match, the first in catalog order wins.

        Args:
            value: Category id, slug or name

        Returns:
            Matching Category or None
        """
        key = normalize_key(value)
        if not key:
            return None

        for category in self.categories:
            if key in (
                normalize_key(category.id),
                normalize_key(category.slug),
                normalize_key(category.name),
            ):
                return category
        return None

    def descendants(self, category: Category) -> List[Category]:
        """All transitive descendants of ``category``, depth-first.

        Raises:
            CategoryCycleError: If the parent chain loops back to a
                category that was already visited
        """
        visited: Set[str] = {category.id}
        result: List[Category] = []
        stack = list(reversed(self._children.get(category.id, [])))

        while stack:
            node = stack.pop()
            if node.id in visited:
                self.logger.error("category_cycle_detected", category_id=node.id, root=category.id)
                raise CategoryCycleError(node.id)
            visited.add(node.id)
            result.append(node)
            stack.extend(reversed(self._children.get(node.id, [])))

        return result

    def family(self, value: Optional[str]) -> Set[str]:
        """Normalized names of the matching category and all its descendants.

        If no category matches, the normalized value itself is returned as
        the only member so sections configured against a raw category label
        still work.

        Args:
            value: Section filter value

        Returns:
            Set of normalized category names
        """
        target = self.find(value)
        if target is None:
            self.logger.debug("category_lookup_miss", filter_value=value)
            return {normalize_key(value)}

        names = {normalize_key(target.name)}
        names.update(normalize_key(child.name) for child in self.descendants(target))

        self.logger.debug(
            "category_family_resolved",
            target_id=target.id,
            family_size=len(names),
        )
        return names


def resolve_category_family(categories: Iterable[Category], filter_value: Optional[str]) -> Set[str]:
    """Resolve ``filter_value`` to its category family.

    Convenience wrapper that builds a fresh ``CategoryTree`` per call.
    """
    return CategoryTree(categories).family(filter_value)
