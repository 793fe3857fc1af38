import io

import pytest

from aventura.actiune import Actiune, GameState
from aventura.console import Console
from aventura.entitate import Inamic, Jucator
from aventura.locatie import Locatie
from aventura.obiect import Arma, Potiune


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


def _setup(text="", strength=10, health=100):
    out = io.StringIO()
    console = Console(io.StringIO(text), out)
    player = Jucator("Ana", health, strength, 3, console, _FixedRng(9))
    location = Locatie("Tabara Banditilor", "corturi")
    state = GameState(player, location)
    return Actiune(console), state, out, console


def test_show_location_writes_description():
    actiune, state, out, _ = _setup()
    actiune.show_location(state.location)
    assert out.getvalue() == state.location.describe() + "\n"


def test_can_move():
    actiune, state, _, _ = _setup()
    other = Locatie("Campia", "iarba")
    state.location.add_exit("nord", other)
    assert actiune.can_move("nord", state.location) is True
    assert actiune.can_move("sud", state.location) is False


def test_battle_player_wins():
    actiune, state, out, console = _setup()
    enemy = Inamic("Bandit", 20, 1, console)
    actiune.battle(state.player, enemy)
    assert enemy.health == 0
    assert "Bandit a fost invins!" in out.getvalue()
    assert state.player.health > 0


def test_battle_player_loses():
    actiune, state, out, console = _setup(health=5)
    enemy = Inamic("Urs", 500, 50, console)
    actiune.battle(state.player, enemy)
    assert state.player.health == 0
    assert "Ana a fost invins!" in out.getvalue()


def test_battle_king_shouts():
    actiune, state, out, console = _setup(health=1000)
    enemy = Inamic("Rege", 110, 1, console)
    actiune.battle(state.player, enemy)
    assert "'Nu te voi lasa sa distrugi regatul meu!' striga regele" in out.getvalue()


def test_use_potion_caps_at_max_and_removes():
    actiune, state, out, _ = _setup("Potiune de viata\n", health=90)
    state.player.inventory.add(Potiune("Potiune de viata", 1, 30))
    actiune.use_potion(state)
    assert state.player.health == state.max_health
    assert len(state.player.inventory) == 0
    assert "Potiunea a fost consumata!" in out.getvalue()


def test_use_potion_decrements_stack():
    actiune, state, _, _ = _setup("Apa\n", health=10)
    potion = Potiune("Apa", 2, 5)
    state.player.inventory.add(potion)
    actiune.use_potion(state)
    assert potion.count == 1
    assert list(state.player.inventory) == [potion]
    assert state.player.health == 10 + potion.healing


def test_use_potion_missing():
    actiune, state, out, _ = _setup("Nimic\n")
    actiune.use_potion(state)
    assert "Potiunea nu exista in inventar!" in out.getvalue()


def test_use_potion_on_weapon_raises():
    actiune, state, _, _ = _setup("Sabie de lemn\n")
    state.player.inventory.add(Arma("Sabie de lemn", 1, 1))
    with pytest.raises(TypeError):
        actiune.use_potion(state)


def test_equip_weapon():
    actiune, state, out, _ = _setup("Sabie de fier\n")
    weapon = Arma("Sabie de fier", 1, 10)
    state.player.inventory.add(weapon)
    before = state.player.strength
    actiune.equip(state)
    assert state.player.strength == before + weapon.bonus_strength
    assert state.equipped_weapons == 1
    assert len(state.player.inventory) == 0
    assert "Arma a fost echipata!" in out.getvalue()


def test_equip_twice_refused():
    actiune, state, out, _ = _setup("Sabie\n")
    state.equipped_weapons = 1
    state.player.inventory.add(Arma("Sabie", 1, 10))
    actiune.equip(state)
    assert "Ai echipat deja o arma!" in out.getvalue()
    assert len(state.player.inventory) == 1


def test_equip_missing_and_wrong_type():
    actiune, state, out, _ = _setup("Sabie\nApa\n")
    actiune.equip(state)
    assert "Arma nu exista in inventar!" in out.getvalue()
    state.player.inventory.add(Potiune("Apa", 1, 5))
    with pytest.raises(TypeError):
        actiune.equip(state)


def test_unequip():
    actiune, state, out, _ = _setup(strength=30)
    actiune.unequip(state)
    assert "Nu ai nicio arma echipata!" in out.getvalue()
    state.equipped_weapons = 1
    actiune.unequip(state)
    assert state.player.strength == 10
    assert state.equipped_weapons == 0


def test_walk_valid_and_invalid():
    actiune, state, out, _ = _setup("nord\nvest\n")
    other = Locatie("Campia", "iarba")
    state.location.add_exit("nord", other)
    actiune.walk(state)
    assert state.location is other
    actiune.walk(state)
    assert state.location is other
    assert "Nu poti merge in partea aia!" in out.getvalue()


def test_inventory_merges_and_sorts():
    actiune, state, out, _ = _setup()
    inv = state.player.inventory
    inv.add(Potiune("Apa", 1, 100))
    inv.add(Arma("Sabie de lemn", 1, 1))
    inv.add(Potiune("Apa", 2, 100))
    inv.add(Arma("Sabie de fier", 1, 10))
    inv.add(Potiune("Potiune de viata", 1, 30))
    actiune.inventory(state.player)
    names = [item.name for item in inv]
    assert names == ["Sabie de fier", "Sabie de lemn", "Apa", "Potiune de viata"]
    assert next(item for item in inv if item.name == "Apa").count == 3
    assert "Inventarul tau este: " in out.getvalue()


def _bandits(console):
    return (Inamic("Bandit", 110, 18, console),
            Inamic("Capitanul Bandit", 115, 23, console),
            Inamic("Regele Bandit", 120, 25, console))


def test_tournament_full_victory():
    actiune, state, out, console = _setup("continua\ncontinua\n", strength=1000)
    b1, b2, b3 = _bandits(console)
    actiune.tournament(state, b1, b2, b3)
    assert (b1.health, b2.health, b3.health) == (0, 0, 0)
    assert state.player.health == 150
    assert state.max_health == 150
    assert state.location.name == "Tabara Abandonata"
    names = [item.name for item in state.player.inventory]
    assert "Sabie de diamant" in names
    assert "Potiune de viata mare" in names


def test_tournament_abandon():
    actiune, state, out, console = _setup("abandoneaza\n", strength=1000)
    b1, b2, b3 = _bandits(console)
    actiune.tournament(state, b1, b2, b3)
    assert b1.health == 0
    assert b2.health == 115
    assert "Ai abandonat turneul." in out.getvalue()


def test_tournament_too_many_commands():
    actiune, state, out, console = _setup("x\n" * 12 + "continua\n", strength=1000)
    b1, b2, b3 = _bandits(console)
    actiune.tournament(state, b1, b2, b3)
    assert b2.health == 115
    assert "Ai depasit numarul maxim de comenzi permise!" in out.getvalue()


def test_tournament_ends_at_end_of_input():
    actiune, state, out, console = _setup("", strength=1000)
    b1, b2, b3 = _bandits(console)
    actiune.tournament(state, b1, b2, b3)
    assert b2.health == 115
    assert "Ai depasit numarul maxim de comenzi permise!" in out.getvalue()


def test_tournament_lost_first_round():
    actiune, state, out, console = _setup("continua\n", health=5, strength=1)
    b1, b2, b3 = _bandits(console)
    actiune.tournament(state, b1, b2, b3)
    assert state.player.health == 0
    assert len(state.player.inventory) == 0
    assert state.location.name == "Tabara Banditilor"


def test_fight_bear_victory():
    actiune, state, _, console = _setup(strength=1000)
    bear = Inamic("Urs", 100, 15, console)
    actiune.fight_bear(state, bear)
    assert state.player.health == 125
    assert state.max_health == 125
    assert state.location.name == "Pestera Intunecata"
    assert [item.name for item in state.player.inventory] == ["Sabie de fier"]


def test_fight_strigoi_victory():
    actiune, state, _, console = _setup(strength=1000)
    strigoi = Inamic("Strigoi", 90, 8, console)
    actiune.fight_strigoi(state, strigoi)
    assert state.player.health == 110
    assert state.location.name == "Padurea Linistita"
    assert [item.name for item in state.player.inventory] == ["Sabie de lemn"]


def test_fight_strigoi_defeat_leaves_location():
    actiune, state, _, console = _setup(health=5, strength=1)
    strigoi = Inamic("Strigoi", 90, 8, console)
    actiune.fight_strigoi(state, strigoi)
    assert state.player.health == 0
    assert state.location.name == "Tabara Banditilor"
    assert state.max_health == 100