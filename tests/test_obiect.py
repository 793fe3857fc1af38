from aventura.obiect import Arma, Obiect, Potiune


def test_equality_is_by_name_only():
    assert Arma("Sabie de lemn", 1, 1) == Arma("Sabie de lemn", 3, 20)
    assert Arma("Sabie de lemn", 1, 1) != Arma("Sabie de fier", 1, 1)


def test_equality_across_kinds_uses_name():
    assert Obiect("Potiune de viata", 1) == Potiune("Potiune de viata", 2, 30)


def test_add_same_name_sums_counts_and_keeps_kind():
    a = Arma("Sabie de fier", 2, 10)
    b = Arma("Sabie de fier", 3, 10)
    merged = a + b
    assert isinstance(merged, Arma)
    assert merged.count == a.count + b.count
    assert merged.bonus_strength == a.bonus_strength
    assert a.count == 2


def test_add_different_names_keeps_left_stack():
    a = Potiune("Potiune de viata", 2, 30)
    merged = a + Potiune("Apa vindecatoare", 5, 100)
    assert merged.name == a.name
    assert merged.count == a.count
    assert merged.healing == a.healing


def test_decrement_takes_one_off():
    item = Potiune("Potiune de viata", 3, 50)
    item.decrement()
    item.decrement()
    assert item.count == 1