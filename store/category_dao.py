from dataclasses import replace
from typing import Optional
from store.memory_store import MemoryStore
from models.category import Category


class CategoryDAO:
    def __init__(self, store: MemoryStore):
        self._store = store

    def _index_of(self, category_id: str) -> int:
        for i, c in enumerate(self._store.categories):
            if c.id == category_id:
                return i
        return -1

    def get_all(self) -> list[Category]:
        return [replace(c) for c in self._store.categories]

    def get_by_id(self, category_id: str) -> Optional[Category]:
        i = self._index_of(category_id)
        return replace(self._store.categories[i]) if i > -1 else None

    def create(self, name: str, icon: str, color: str) -> Category:
        category = Category(
            id=self._store.new_id("cat"), name=name, icon=icon, color=color,
        )
        self._store.categories.append(category)
        return replace(category)

    def update(self, category: Category) -> Optional[Category]:
        """Replace the stored entry with the same id. None if there is none."""
        i = self._index_of(category.id)
        if i == -1:
            return None
        self._store.categories[i] = replace(category)
        return replace(category)

    def delete(self, category_id: str) -> Optional[Category]:
        i = self._index_of(category_id)
        if i == -1:
            return None
        return self._store.categories.pop(i)
