# practicebox

A collection of small, self-contained programs for people learning to
program: a few console games, a chatbot, a tiny web game and a set of short
demonstrations of everyday language features. Each one lives in a single
module and comes with its own command.

Only the standard library is needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Games and toys

| Command | What it does |
| --- | --- |
| `practicebox-eliza` | Chat with Eliza, the pattern-matching therapist. Type `quit` (or end the input) to leave. |
| `practicebox-bitcoin-miner` | Run Make Me Rich, Inc. for up to ten years: buy and sell computers, pay your staff, fund maintenance, and survive hackers and market crashes. At the end you are asked whether to play again; any key but `n` plays again. |
| `practicebox-rps` | One round of rock, paper, scissors against the computer. |
| `practicebox-rps-web` | Rock, paper, scissors over HTTP, on port 8080 by default. |
| `practicebox-guess` | A "think of a number" trick: follow the steps and the program tells you the answer. |
| `practicebox-coffee` | A coffee menu: press 1–6 to pick a drink, `q` to quit. |
| `practicebox-keys` | Echoes every key you press, from a listener thread, until you press `q`. |
| `practicebox-prompts` | Asks for your name, age, favourite number and whether you own a dog (a single `y` or `n` key press), re-asking until each answer is valid, then sums it all up. |

The single-key programs read keys straight from the terminal; when standard
input is not a terminal they read one character at a time from it instead.
`practicebox-rps` and `practicebox-bitcoin-miner` clear the screen by running
the system's `clear` (or `cls` on Windows) command. The Bitcoin Miner colours
its warnings and final rating only when writing to a terminal.

### The web game

```
practicebox-rps-web [--port PORT] [--template PATH] [--static DIR]
```

The server answers:

* `/play` — POST a JSON body such as `{"playerChoice": "rock"}`. The reply is
  JSON naming `playerChoice`, `computerChoice`, `result` (`win`, `lose` or
  `draw`) and a `message`. A body that is not valid JSON is rejected with 400
  `Invalid request body`, a choice other than `rock`, `paper` or `scissors`
  with 400 `Invalid choice`, and any method other than POST with 405.
* `/static/...` — files from the static directory (`static` by default), with
  a plain listing for directories that have no `index.html`.
* every other path — the page file (`index.html` by default), sent as is.

### What the web game does not include

The package ships no page or static files for the browser. You supply the
`index.html` and the `static` directory yourself; until the page exists, the
home page answers with 500. The page is sent unchanged, not filled in as a
template.

## Demonstrations

| Command | What it shows |
| --- | --- |
| `practicebox-basics` | Comparisons, boolean logic, arithmetic operators and variable scope. |
| `practicebox-vehicles` | Composition (a car built around a vehicle) and a shared animal interface. |
| `practicebox-builtins` | Records, lists, dictionaries, sorting and variadic functions. |
| `practicebox-strings` | Bytes of a string in hex, slicing, prefix and suffix checks, searching, replacing and comparing. |
| `practicebox-staff` | An office's staff list filtered into the overpaid (70000 and up) and the underpaid (60000 and below), written to the log. |
| `practicebox-concurrency` | `practicebox-concurrency loop` (the default) counts, rolls random numbers, then logs five lines you type from a background thread; `practicebox-concurrency select` waits on two tasks that finish after one and two seconds. |

Some demonstrations write part of their output to standard error.

## Using the modules directly

The pieces behind the commands can be used from Python too. Programs that
read input take the input function (or key reader) and output stream as
arguments, and random choices take a `random.Random`, so they are easy to
drive from code:

```python
import io
import random

from practicebox.eliza import intro, response
from practicebox.rps import Choice, determine_winner, verdict
from practicebox.rps_web import play_round
from practicebox.bitcoin_miner import BitcoinMiner

print(intro())
print(response("I need a holiday", random.Random(1)))

print(determine_winner(Choice.ROCK, Choice.SCISSORS))  # win
print(verdict(Choice.PAPER, Choice.SCISSORS))          # Scissors beats paper! You lose!

print(play_round(b'{"playerChoice": "paper"}', random.Random(2)).to_json())

answers = iter(["0\n"] * 4)
miner = BitcoinMiner(
    rng=random.Random(3),
    input_fn=lambda: next(answers),
    out=io.StringIO(),
    clear=lambda: None,
)
miner.update_computer_price()
print(miner.summary())
```

Other useful entry points include `practicebox.staff.Office`,
`practicebox.vehicles.riddle`, `practicebox.builtins_demo.sum_many`,
`practicebox.strings_demo.hex_bytes` and `practicebox.concurrency.run_tasks`.