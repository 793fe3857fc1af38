"""The player and the enemies."""

import random

from .console import Console
from .inventar import Inventar


class EmptyNameError(RuntimeError):
    """Raised when the player gives a blank name."""


class Entitate:
    """A creature with a name, health and strength."""

    def __init__(self, name="", health=0, strength=0, console=None):
        self.name = name
        self.health = health
        self.strength = strength
        self.console = console if console is not None else Console()

    def wound(self, amount):
        """Lose health, never going below zero."""
        self.health = max(self.health - amount, 0)

    def _report_health(self, other):
        self.console.write(f"{other.name} mai are {other.health} viata\n")

    def attack(self, other):
        self.console.write(f"{self.name} ataca {other.name}\n")
        other.wound(self.strength)
        self._report_health(other)


class Jucator(Entitate):
    """The player, with an inventory and a chance of critical hits."""

    def __init__(self, name="", health=100, strength=10, agility=3,
                 console=None, rng=None):
        super().__init__(name, health, strength, console)
        self.agility = agility
        self.inventory = Inventar(10, self.console)
        self.rng = rng if rng is not None else random.Random()

    def attack(self, other):
        self.console.write(f"{self.name} ataca {other.name}\n")
        other.wound(self.strength)
        if self.rng.randrange(10) < self.agility:
            self.console.write("Lovire critica!\n")
            other.wound(5)
        self._report_health(other)

    def equip_weapon(self, weapon):
        self.strength += weapon.bonus_strength
        self.console.write(
            f"Ai echipat {weapon.name} (+{weapon.bonus_strength} putere). "
            f"Putere curenta: {self.strength}\n"
        )

    def use_potion(self, potion, max_health):
        self.health = min(self.health + potion.healing, max_health)
        self.console.write(
            f"Ai folosit {potion.name} (+{potion.healing} viata). "
            f"Viata curenta: {self.health}\n"
        )

    def read_name(self):
        """Ask for the player's name; raise EmptyNameError if it is blank."""
        self.console.write("Nume: ")
        self.name = self.console.read_line()
        if not self.name.strip(" \t\n\r"):
            raise EmptyNameError("Numele jucatorului nu poate fi gol!")
        return self.name

    def __str__(self):
        return (f"Nume: {self.name}, Viata: {self.health}, "
                f"Putere: {self.strength}, Agilitate: {self.agility}")


class Inamic(Entitate):
    """An enemy; the class counts how many have been created."""

    _created = 0

    def __init__(self, name, health, strength, console=None):
        super().__init__(name, health, strength, console)
        Inamic._created += 1

    @classmethod
    def count(cls):
        """Return how many enemies have been created."""
        return Inamic._created

    def attack(self, other):
        self.console.write(f"{self.name} contraataca {other.name}\n")
        other.wound(self.strength)
        self._report_health(other)