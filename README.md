# pixeltraders

A small pixel client for the Space Traders game. When it starts, it loads your
agent, the waypoint of its headquarters and its contracts from the Space
Traders API, and asks the API to negotiate a contract. It then opens an
800×600 window that shows:

- a red square for your ship, which you can move around,
- brown squares for the bodies that orbit your starting waypoint,
- an orange panel at the bottom with your agent's symbol, headquarters,
  credits, faction and fleet size.

## Installation

```
pip install .
```

This needs `pygame`.

## Tokens

The client reads two bearer tokens from plain files:

- `../.token-agent` holds the agent token. It is used for ordinary game
  requests.
- `../.token-account` holds the account token. It is used to register a new
  agent.

If a game request is answered with `401 Unauthorized`, the client registers a
new agent (symbol `Roger2`, faction `COBALT` by default) with the account
token, and writes the new agent token to the agent token file, readable by the
owner only.

## Running

```
pixeltraders
```

The command takes no options besides `--help`. It exits with status 1 if a
token file cannot be read, the API cannot be reached, or the window cannot be
created.

| Key | Action |
| --- | --- |
| Left arrow or `q` | Move left |
| Right arrow or `d` | Move right |
| Up arrow or `z` | Move up |
| Down arrow or `s` | Move down |
| Escape, or closing the window | Quit |

The panel text uses the font at `./../assets/test.ttf`. If that font cannot be
opened, the error is logged and the panel is drawn without text.

## Using it as a library

```python
from pixeltraders.api import SpaceTradersClient
from pixeltraders.models import init_game_state

client = SpaceTradersClient()
state = init_game_state(client)
print(state.agent.credits_label())
```

- `SpaceTradersClient` takes `base_url`, `agent_token_path`,
  `account_token_path` and `logger`. Its `get`, `post` and `post_register`
  methods return the raw response body. `TokenFileError` is raised when a
  token file cannot be read.
- `pixeltraders.models` holds the data classes (`Agent`, `System`,
  `Contracts`, `GameState` and the smaller ones they contain). Each of
  `Agent`, `System` and `Contracts` has a `from_json` class method. The module
  also has the fetch functions `fetch_agent`, `fetch_agent_start`,
  `fetch_contracts`, `negotiate_contract` and `fetch_systems`.
- `pixeltraders.render.run(state)` opens the window for a state you have
  already loaded. `draw_frame(surface, state, player, font)` draws a single
  frame onto any pygame surface.

Log lines are tagged with their service name (`API` or `SDL`). They come from
`pixeltraders.logger.init_logger_by_service`. At `logging.ERROR` level the
logger writes to `playing.log`; at every other level it writes to standard
output.

## What it does not do

The client only shows your agent and its starting waypoint. Moving the ship in
the window does not send anything to the API. There is no trading, navigation
or contract management. The waypoints call does nothing yet, and the data it
loads is not saved between runs.