"""The player's actions: moving, fighting, using and sorting items."""

from dataclasses import dataclass

from .console import Console
from .entitate import Jucator
from .locatie import Locatie
from .obiect import Arma, Potiune

_BREAK_COMMAND_LIMIT = 10


@dataclass
class GameState:
    """What the actions change: the player, where they are and their limits."""

    player: Jucator
    location: Locatie
    max_health: int = 100
    equipped_weapons: int = 0


class Actiune:
    """Carries out the player's commands and writes what happens."""

    def __init__(self, console=None):
        self.console = console if console is not None else Console()

    def _say(self, text):
        self.console.write(f"{text}\n")

    def _read_word(self):
        try:
            return self.console.read_word()
        except EOFError:
            return ""

    def show_location(self, location):
        self._say(location.describe())

    def can_move(self, direction, location):
        """Return True if the location has an exit in that direction."""
        return location.exit(direction) is not None

    def battle(self, player, enemy):
        """Trade blows until one side has no health left."""
        while True:
            player.attack(enemy)
            if enemy.health <= 0:
                self._say(f"{enemy.name} a fost invins!")
                break
            enemy.attack(player)
            if player.health <= 0:
                self._say(f"{player.name} a fost invins!")
                break
            if enemy.name == "Rege" and 65 <= enemy.health <= 100:
                self._say("'Nu te voi lasa sa distrugi regatul meu!' striga regele")

    def _take_from_stack(self, items, item):
        if item.count > 1:
            item.decrement()
        else:
            items.remove(item)

    def _find(self, items, name):
        return next((item for item in items if item.name == name), None)

    def use_potion(self, state):
        """Ask for a potion by name and drink it.

        Raises TypeError if the item with that name is not a potion.
        """
        self.console.write("Introduceti numele potiunii pe care doriti sa o folositi: ")
        name = self.console.read_line()
        items = state.player.inventory.items
        item = self._find(items, name)
        if item is None:
            self._say("Potiunea nu exista in inventar!")
            return
        if not isinstance(item, Potiune):
            raise TypeError(f"{item.name} nu este o potiune")
        state.player.use_potion(item, state.max_health)
        self._say("Potiunea a fost consumata!")
        self._take_from_stack(items, item)

    def equip(self, state):
        """Ask for a weapon by name and equip it, if none is equipped yet.

        Raises TypeError if the item with that name is not a weapon.
        """
        self.console.write("Introduceti numele armei pe care doriti sa o echipati: ")
        name = self.console.read_line()
        if state.equipped_weapons >= 1:
            self._say("Ai echipat deja o arma!")
            return
        items = state.player.inventory.items
        item = self._find(items, name)
        if item is None:
            self._say("Arma nu exista in inventar!")
            return
        if not isinstance(item, Arma):
            raise TypeError(f"{item.name} nu este o arma")
        state.player.equip_weapon(item)
        self._say("Arma a fost echipata!")
        state.equipped_weapons += 1
        self._take_from_stack(items, item)

    def unequip(self, state):
        """Destroy the equipped weapon, resetting the player's strength."""
        if state.equipped_weapons > 0:
            state.player.strength = 10
            state.equipped_weapons -= 1
            self._say("Arma a fost distrusa!")
        else:
            self._say("Nu ai nicio arma echipata!")

    def walk(self, state):
        """Show the exits, read a direction and move there if possible."""
        self._say("Poti merge in")
        self._say(state.location.exits_text())
        direction = self._read_word()
        if self.can_move(direction, state.location):
            state.location = state.location.exit(direction)
        else:
            self._say("Nu poti merge in partea aia!")
        self.show_location(state.location)

    def inventory(self, player):
        """Merge stacks of the same name, sort them and show the inventory."""
        items = player.inventory.items
        merged = []
        for item in items:
            existing = self._find(merged, item.name)
            if existing is None:
                merged.append(item)
            else:
                existing.count = (existing + item).count

        def order(item):
            if isinstance(item, Arma):
                return (0, -item.bonus_strength)
            if isinstance(item, Potiune):
                return (1, -item.healing)
            return (2, 0)

        items[:] = sorted(merged, key=order)
        self._say("Inventarul tau este: ")
        player.inventory.describe()

    def _pause(self, state):
        """Let the player act between rounds; True if the tournament goes on."""
        self._say("Daca vrei sa continui turneul, scrie 'continua'.")
        self._say("Daca vrei sa abandonezi, scrie 'abandoneaza'.")
        handlers = {
            "informatii": lambda: self._say(str(state.player)),
            "echipare": lambda: self.equip(state),
            "dezechipare": lambda: self.unequip(state),
            "foloseste": lambda: self.use_potion(state),
            "inventar": lambda: self.inventory(state.player),
        }
        commands = 0
        while True:
            commands += 1
            self.console.write("Actiunea ta este: ")
            command = self._read_word()
            if command == "abandoneaza":
                self._say("Ai abandonat turneul.")
                return False
            handler = handlers.get(command)
            if handler is not None:
                handler()
            if command == "continua":
                return True
            if commands > _BREAK_COMMAND_LIMIT:
                self._say("Ai depasit numarul maxim de comenzi permise!")
                return False
            if handler is None:
                self._say("Comanda invalida! Te rog sa incerci din nou.")

    def tournament(self, state, bandit1, bandit2, bandit3):
        """Fight three bandits in turn, with rewards and a pause between rounds."""
        player = state.player
        self.battle(player, bandit1)
        if bandit1.health != 0:
            return
        self._say("Ai invins banditul si ai primit o recompensa!")
        self._say("Gasesti pe jos o potiune de viata.")
        player.inventory.add(Potiune("Potiune de viata", 1, 50))
        if not self._pause(state):
            return

        self.battle(player, bandit2)
        if bandit2.health != 0:
            return
        self._say("Ai invins capitanul banditilor si ai primit o recompensa!")
        self._say("Gasesti pe jos o sabie de argint.")
        player.inventory.add(Arma("Sabie de argint", 1, 20))
        if not self._pause(state):
            return

        self.battle(player, bandit3)
        if bandit3.health != 0:
            return
        self._say("Ai invins regele banditilor si ai primit o recompensa!")
        self._say("Te simti mai rezistent.")
        player.health = 150
        state.max_health = 150
        self._say("Felicitari! Ai terminat turneul si ai devenit Ucigasul de Banditi!")
        self._say(str(player))
        self._say("Gasesti pe jos o potiune de viata mare si o sabie de diamant.")
        player.inventory.add(Potiune("Potiune de viata mare", 1, 50))
        player.inventory.add(Arma("Sabie de diamant", 1, 30))
        state.location.name = "Tabara Abandonata"
        state.location.description = (
            "Te afli in Tabara Abandonata. Inainte se numea Tabara Banditilor, "
            "dar acum este mai linistita."
        )

    def _reward(self, state, enemy_text, health, weapon_text, weapon):
        player = state.player
        self._say(enemy_text)
        self._say("Te simti mai rezistent.")
        player.health = health
        state.max_health = health
        self._say(str(player))
        self._say(weapon_text)
        player.inventory.add(weapon)

    def fight_bear(self, state, bear):
        """Fight the bear; victory calms the cave and strengthens the player."""
        self.battle(state.player, bear)
        if bear.health != 0:
            return
        state.location.name = "Pestera Intunecata"
        state.location.description = (
            "Te afli in Pestera Intunecata. Inainte se numea Pestera Ursului, "
            "dar acum este mai linistita."
        )
        self._reward(state, "Ai invins ursul!", 125,
                     "Gasesti pe jos o sabie de fier.", Arma("Sabie de fier", 1, 10))

    def fight_strigoi(self, state, strigoi):
        """Fight the strigoi; victory calms the forest and strengthens the player."""
        self.battle(state.player, strigoi)
        if strigoi.health != 0:
            return
        state.location.name = "Padurea Linistita"
        state.location.description = (
            "Te afli in Padurea Linistita. Inainte era Padurea Strigoilor, "
            "dar acum este mai linistita."
        )
        self._reward(state, "Ai invins strigoiul!", 110,
                     "Gasesti pe jos o sabie de lemn.", Arma("Sabie de lemn", 1, 1))