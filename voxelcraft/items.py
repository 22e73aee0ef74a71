"""Items, item stacks and slot-based inventories."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Item:
    """An item type."""

    id: int
    unlocalized_name: str
    max_stack_size: int = 64


class ItemRegistry:
    """Maps item ids to item types."""

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}

    def register(self, item: Item) -> None:
        """Register (or replace) an item type under its id."""
        self._items[int(item.id)] = item

    def get(self, item_id: int) -> Item | None:
        """Return the item type for an id, or None."""
        return self._items.get(int(item_id))


ITEM_REGISTRY = ItemRegistry()
"""Registry consulted by item stacks and inventories."""


@dataclass
class ItemStack:
    """A number of items of one type and metadata value."""

    item_id: int = 0
    count: int = 1
    metadata: int = 0

    def is_empty(self) -> bool:
        """Whether the stack holds nothing."""
        return self.item_id == 0 or self.count <= 0

    def get_item(self) -> Item | None:
        """The registered item type of this stack, or None."""
        return ITEM_REGISTRY.get(self.item_id)


def _empty() -> ItemStack:
    return ItemStack(0, 0, 0)


class Inventory:
    """A fixed number of item slots."""

    def __init__(self, size: int) -> None:
        self._slots = [_empty() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._slots)

    def _valid(self, slot: int) -> bool:
        return 0 <= slot < len(self._slots)

    def set_stack(self, slot: int, stack: ItemStack) -> None:
        """Store a copy of ``stack`` in a slot; invalid slots are ignored."""
        if self._valid(slot):
            self._slots[slot] = replace(stack)

    def get_stack(self, slot: int) -> ItemStack:
        """Return a copy of a slot's stack; an empty stack for invalid slots."""
        if self._valid(slot):
            return replace(self._slots[slot])
        return _empty()

    def add_item(self, stack: ItemStack) -> bool:
        """Move items from ``stack`` into the inventory.

        Merges into matching stacks first, then takes the first empty slot.
        ``stack.count`` is reduced by what was taken; returns True if nothing is left.
        Raises LookupError when merging into a stack whose item is not registered.
        """
        for slot in self._slots:
            if slot.is_empty() or slot.item_id != stack.item_id or slot.metadata != stack.metadata:
                continue
            item = slot.get_item()
            if item is None:
                raise LookupError(f"item {slot.item_id} is not registered")
            to_add = min(item.max_stack_size - slot.count, stack.count)
            slot.count += to_add
            stack.count -= to_add
            if stack.count <= 0:
                return True

        for index, slot in enumerate(self._slots):
            if slot.is_empty():
                self._slots[index] = replace(stack)
                stack.count = 0
                return True

        return stack.count <= 0

    def remove_stack(self, slot: int, count: int) -> None:
        """Take ``count`` items from a slot, clearing it when none remain."""
        if not self._valid(slot):
            return
        current = self._slots[slot]
        current.count -= count
        if current.count <= 0:
            self._slots[slot] = _empty()