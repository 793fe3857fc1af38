"""Items the player can carry: weapons and potions."""

from dataclasses import dataclass, replace


@dataclass(eq=False)
class Obiect:
    """An item with a name and a stack count."""

    name: str
    count: int

    def decrement(self):
        """Take one item off the stack."""
        self.count -= 1

    def __eq__(self, other):
        if not isinstance(other, Obiect):
            return NotImplemented
        return self.name == other.name

    __hash__ = None

    def __add__(self, other):
        """Merge two stacks of the same name; a different name leaves the count."""
        if not isinstance(other, Obiect):
            return NotImplemented
        if self.name == other.name:
            return replace(self, count=self.count + other.count)
        return replace(self)


@dataclass(eq=False)
class Arma(Obiect):
    """A weapon that adds to the wielder's strength."""

    bonus_strength: int


@dataclass(eq=False)
class Potiune(Obiect):
    """A potion that restores health."""

    healing: int