# tavernquest

A small role-playing toolkit. `Barbarian`, `Mage`, `Ranger` and `Scoundrel`
are all kinds of `Character`, and each belongs to a `Race`. They gather in a
`Tavern`, which is a fixed-capacity `Bag`. The tavern keeps a running level
sum and enemy count. It reports the average level, the enemy percentage and
a tally of each race, and it can feed everyone tainted stew. The package also
has a general-purpose `DoublyLinkedList`.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Characters

```python
from tavernquest.barbarian import Barbarian
from tavernquest.mage import Mage
from tavernquest.ranger import Arrows, Ranger
from tavernquest.scoundrel import Scoundrel

bonk = Barbarian("Bonk", "HUMAN", 11, 5, 5, True, "mace", "anothermace", True)
spynach = Mage("Spynach", "ELF", 6, 4, 4, False, "illusion", "wand", True)
marrow = Ranger("Marrow", "UNDEAD", 9, 4, 6, False,
                [Arrows("wood", 30), Arrows("fire", 5)], ["fire", "poison"], True)
flea = Scoundrel("Flea", "DWARF", 6, 4, 4, True, "adamant", "cutpurse", True)

print(spynach.describe())
marrow.fire_arrow("WOOD")
bonk.eat_tainted_stew()
```

These rules apply to every character:

- A name keeps only its ASCII letters, in upper case. If none are left, the
  name is `NAMELESS`.
- An unknown race becomes `Race.NONE`.
- Vitality, armor and level are never set to a negative value.

Two characters are equal when their name, race, level and enemy flag match.

`describe()` returns the display text, and `display(file)` writes it to a
file, or to standard output by default.

`Scoundrel` takes an optional `rng` argument, which is any object with a
`random()` method. The silvertongue's 70% stew recovery draws on it. Pass
`random.Random(seed)` to get repeatable results.

## The tavern

```python
from tavernquest.tavern import Tavern

tavern = Tavern.from_csv("characters.csv")
tavern.enter(spynach)

print(tavern.report())
tavern.display_race("ELF")
tavern.tainted_stew()
tavern.display_characters()
tavern.exit(spynach)
```

The tavern keeps track of characters by identity. `enter` returns False once
the tavern is full (100 characters). `exit` returns False for a character who
is not inside.

The characters CSV starts with one header line. After that, each line holds
one character, with these columns:

1. name
2. race
3. subclass (`BARBARIAN`, `MAGE`, `RANGER` or `SCOUNDREL`)
4. level
5. vitality
6. armor
7. enemy (0/1)
8. main
9. offhand
10. school/faction
11. summoning (0/1)
12. affinity
13. disguise (0/1)
14. enraged (0/1)

A ranger writes its arrows in the main column as `TYPE QTY;TYPE QTY`, and its
affinities as `A;B`. Rows with an unknown subclass are skipped. A row with
fewer than 14 fields raises `ValueError`.

## Collections

`tavernquest.bag.Bag` is an unordered collection with a capacity limit. It
has `add`, `remove`, `count` and `to_list`. `+=` merges another bag with its
duplicates kept, and `/=` merges it without them.

`tavernquest.linkedlist.DoublyLinkedList` is a positional doubly linked list.
It has `insert`, `remove`, `node_at`, indexing, `swap` (which exchanges items)
and `swap_nodes` (which relinks the nodes).

## What the package does not do

The package has no quest log, and it installs no command-line program. Use it
as a library from Python code.