# aventura

A small text adventure played in the terminal. You wake up in an unknown
land, explore locations, fight enemies, collect weapons and potions and
decide the fate of the kingdom. The game text is in Romanian.

## Installing

```
pip install .
```

## Playing

```
aventura
```

The game first asks for your name. A blank name stops the game, and the
error message is written to standard error. After that, type one command
per turn:

- `mers`: walk. The game lists the exits of your location in sorted order
  (for example `est`, `nord`, `sud`, `vest`, `usa`) and you type one.
- `batalie`: fight the enemy at your location, where there is one.
- `echipare`: equip a weapon from your inventory. The game asks for the
  weapon's name on the next line. Only one weapon can be equipped at a time.
- `dezechipare`: destroy the equipped weapon. Your strength goes back to 10.
- `foloseste`: drink a potion from your inventory. The game asks for the
  potion's name on the next line. Health never rises above your current
  maximum.
- `inventar`: merge items that have the same name, sort the inventory and
  show it. Weapons come first, strongest first, then potions, strongest
  first.
- `informatii`: show your name, health, strength and agility.
- `ajutor`: list the commands.
- `oprire`: end the game.

Some places offer commands of their own: `turneu` at the bandit camp,
`ingenuncheaza` before the king and `sacrificiu` on the plain. During the
tournament you can type `continua` or `abandoneaza` between rounds, and you
can also use `informatii`, `echipare`, `dezechipare`, `foloseste` and
`inventar` there.

The inventory holds at most ten items. Your attacks can land a critical hit
for extra damage.

The game ends in any of these cases:

- you die or stop the game
- you have used more than 40 actions
- you have typed more than five invalid commands
- the input runs out

Commands can also be piped in from a file:

```
aventura < commands.txt
```

## Using it from Python

The game reads and writes through `aventura.console.Console`, so any text
streams can drive it. Pass a `random.Random` to `Joc` to make critical hits
repeatable:

```python
import io
import random

from aventura.console import Console
from aventura.joc import Joc

out = io.StringIO()
console = Console(io.StringIO("Ana\ninformatii\noprire\n"), out)
Joc(console, random.Random(1)).start()
print(out.getvalue())
```

The building blocks can also be used on their own:

- `aventura.locatie.Locatie`: places and the exits between them
- `aventura.obiect.Arma` and `aventura.obiect.Potiune`: items
- `aventura.inventar.Inventar`: the bounded item collection
- `aventura.entitate.Jucator` and `aventura.entitate.Inamic`: the player
  and the enemies
- `aventura.actiune.Actiune`: the commands, which act on an
  `aventura.actiune.GameState`

## What it does not do

There is no saving or loading of a game. Each run starts a new adventure
from the beginning.

## Running the tests

```
pip install .[test]
pytest
```