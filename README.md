# gophertypist

A small typing game. You type a short sentence one character at a time. The current character is shown in large type and underlined. Up to three neighbours on each side fade out with distance. Characters you have typed turn green, and misses turn red.

## Modes

- **Quick game**: a wrong key shakes the text and the cursor stays where it is. Keep going until the sentence is done.
- **Hard game**: the text jumps to a random place on screen after every key. A wrong key is marked as a miss and the cursor moves on anyway. A countdown starts on your first key press. It gives you the time needed at 20 words per minute, plus a 15 second grace period. The remaining time is shown in the bottom-left corner. When it reaches zero you get the "Out of time!" screen, where you can retry or go back to the menu.

There are seven levels. After each level you see your words per minute, accuracy and characters per second, and you are asked for a name for the leaderboard. Press Enter or click Submit to save it. An empty name is saved as "Anonymous". The score screen then shows your rank, with buttons for the next level (while one remains), playing again from level 1, or returning to the main menu. Press Escape at any time to go back to the main menu.

## Installing and running

```
pip install .
gopher-typist
```

The command opens a 900×600 window and takes no options apart from `--help`.

## Leaderboard

The game keeps the 20 best scores, ranked by words per minute. They are stored in a compact binary file at `~/.config/rusty-typist/leaderboard.bin`. If that directory cannot be written to, the file is placed next to the program as `rusty-typist-leaderboard.bin`. A missing or unreadable file gives an empty leaderboard. The file is loaded in the background while the menu appears. The menu and score screens show each entry's rank, name, WPM, accuracy, CPS, level and date (UTC), with the top score in gold.

## Sounds

Sound effects are optional and are played through the pygame mixer. The game looks for WAV files in `assets/wav/` under the current directory first, then next to the program:

- `keypress.wav`
- `keypress_wrong.wav`
- `level_complete.wav`
- `new_best.wav`
- `timeout.wav`
- `background.wav` (looped at reduced volume while a game is running)

Missing files are skipped without an error. If no audio device is available, the game runs without sound.

## Using it as a library

The game logic does not depend on the display:

```python
from gophertypist.game import Game, Mode, GameEvent

game = Game(Mode.QUICK, 0)
for ch in game.text:
    event = game.handle_char(ch)
assert event is GameEvent.LEVEL_COMPLETE
print(game.score())
```

`gophertypist.leaderboard` reads and writes the leaderboard file format:

- `serialize` and `deserialize` convert between entries and bytes. `deserialize` raises `LeaderboardFormatError` on data that is too short or has a bad header.
- `Leaderboard` holds the entries and provides `insert`, `rank_of`, `is_new_best` and `save`.
- `load_leaderboard` and `empty_leaderboard` create a `Leaderboard`, each taking an optional path.

`gophertypist.router.Router` holds the screen navigation. It accepts a custom leaderboard loader, an `AudioManager` and a leaderboard path.

## What it does not do

There is no online or shared leaderboard; scores are kept only in the local file. The sentences are fixed and cannot be changed. There are no settings for window size, sound volume or key bindings.

## Running the tests

```
pip install .[test]
pytest
```