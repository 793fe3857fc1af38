import io

from aventura.console import Console
from aventura.inventar import Inventar
from aventura.obiect import Arma, Potiune


def make(capacity):
    out = io.StringIO()
    return Inventar(capacity, Console(io.StringIO(""), out)), out


def test_add_keeps_order():
    inv, _ = make(10)
    sword = Arma("Sabie de lemn", 1, 1)
    potion = Potiune("Potiune de viata", 1, 30)
    inv.add(sword)
    inv.add(potion)
    assert list(inv) == [sword, potion]
    assert len(inv) == 2


def test_full_inventory_refuses_and_reports():
    inv, out = make(2)
    assert inv.add(Arma("a", 1, 1))
    assert inv.add(Arma("b", 1, 1))
    assert inv.is_full()
    assert not inv.add(Arma("c", 1, 1))
    assert len(inv) == 2
    assert "Inventarul este plin!" in out.getvalue()


def test_empty_inventory_is_not_full():
    inv, _ = make(1)
    assert not inv.is_full()


def test_describe_lists_items_and_effects():
    inv, out = make(10)
    inv.add(Arma("Sabie de fier", 2, 10))
    inv.add(Potiune("Apa vindecatoare", 1, 100))
    inv.describe()
    lines = out.getvalue().splitlines()
    assert lines[0] == "Sabie de fier 2, Putere bonus oferita: 10"
    assert lines[1] == "Apa vindecatoare 1, Viata vindecata: 100"