"""A bounded collection of items."""

from .console import Console
from .obiect import Arma, Potiune


class Inventar:
    """Holds up to ``capacity`` items in the order they were added."""

    def __init__(self, capacity, console=None):
        self.capacity = capacity
        self.console = console if console is not None else Console()
        self.items = []

    def is_full(self):
        return len(self.items) >= self.capacity

    def add(self, item):
        """Add an item; report and return False when there is no room."""
        if self.is_full():
            self.console.write("Inventarul este plin!\n")
            return False
        self.items.append(item)
        return True

    def describe(self):
        """Write every item with its count and its effect."""
        for item in self.items:
            self.console.write(f"{item.name} {item.count}, ")
            if isinstance(item, Arma):
                self.console.write(f"Putere bonus oferita: {item.bonus_strength}\n")
            if isinstance(item, Potiune):
                self.console.write(f"Viata vindecata: {item.healing}\n")

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)