"""Places in the world and the exits between them."""


class Locatie:
    """A named place with a description, a visit counter and exits."""

    def __init__(self, name="o locatie necunoscuta",
                 description="Nu poti distinge nimic in jurul tau!"):
        self.name = name
        self.description = description
        self.visited = 0
        self.exits = {}

    def mark_visited(self):
        """Count one more visit and return the total."""
        self.visited += 1
        return self.visited

    def add_exit(self, direction, destination):
        self.exits[direction] = destination

    def exit(self, direction):
        """Return the place in that direction, or None."""
        return self.exits.get(direction)

    def describe(self):
        """Return the text shown on arrival."""
        return f"Te afli in {self.name}\n{self.description}"

    def exits_text(self):
        """Return the exit directions in sorted order, each followed by a space."""
        return "".join(f"{direction} " for direction in sorted(self.exits))