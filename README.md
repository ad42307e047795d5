# starshooter

A small vertical space shooter. You fly a plane along the bottom of the
screen and shoot down the enemy ship across two levels. You dodge its
bullets and the falling asteroids along the way. Your score can go onto a
high-score table.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window and plays the sounds.

## Playing

```
starshooter
```

The command accepts two options:

| Option            | Default          | Meaning                                         |
|-------------------|------------------|-------------------------------------------------|
| `--assets DIR`    | `.`              | Directory holding `Image/`, `Audio/`, `Fonts/` and `video/` |
| `--scores FILE`   | `highscores.txt` | The high-score file                             |

The game opens with a short intro animation. Press **Space** to reach the
main menu. From the menu you can do the following:

- start a game
- look at the high scores
- read the instructions
- view the credits
- exit

The small square in the top-left corner takes you back to the menu from any
other screen except the title screen.

When a new game starts you are asked for your name. Type it and press
**Enter**.

### Controls

| Key        | Action                                                   |
|------------|----------------------------------------------------------|
| Arrow keys | Move the plane                                           |
| Space      | Fire (uses one round of ammo)                            |
| P          | Fire a rocket power-up (3 damage)                        |
| R          | Reload ammo when it is empty (costs 5 points)            |
| B          | Reload power-ups when they are empty (costs 10 points)   |

### Scoring

- Each hit on the enemy earns as many points as the damage it does.
- Bring the enemy's health to zero on level 1 to move on to level 2.
- Beat the enemy on level 2 to win. Your remaining health is then added to your score.
- Being hit by enemy fire or by an asteroid costs one health.
- The game is over when your health runs out.
- The game is also over when you have no ammo and no power-ups left and have fewer than 5 points.

At the end of a game your score is written to the high-score file, which
keeps the five best `name  score` lines. An existing entry with the same
name has its score replaced.

### Assets

Images, fonts and sounds are read below the `--assets` directory. When an
image or sound cannot be loaded, a warning is logged and the game carries
on without it:

- Ships, shots and asteroids missing their image are drawn as coloured rectangles.
- A missing font falls back to pygame's default font.
- Without an audio device the game runs silently.

## What it does not do

The high-score file is not created for you. If it does not exist, the
following happens:

- "Error opening highscore file." is printed.
- No score is recorded.
- The high-score screen shows no table.

Create an empty file first, for example `touch highscores.txt`.

## Using the pieces

The game rules can be driven without a window:

```python
import random

from starshooter.game import Battle
from starshooter.scores import HighScoreFile
from starshooter.state import GameState, Screen

state = GameState(screen=Screen.BATTLE_ONE)
battle = Battle(state, HighScoreFile("highscores.txt"), random.Random(1))
battle.press_fire()
battle.step(1140, 670, 0.016, None)
print(state.ammo, len(battle.player.shots))
```

The package is made up of these modules:

- `starshooter.state`: the shared `GameState` and the `Screen` enum.
- `starshooter.scores`: `HighScoreFile`, `parse_scores` and the name-entry helpers (`type_character`, `erase_character`, `submit_name`).
- `starshooter.entities`: the `Player`, `Enemy`, `Asteroids`, `Body` and `Projectile` models.
- `starshooter.menu`: the clickable `Menu` and its `MenuItem`s.
- `starshooter.background`: the `Backdrops` loader for images and music.
- `starshooter.game`: `Battle` and the `main` entry point.