from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from statemachine import State as MachineState
from statemachine import StateMachine
from statemachine.exceptions import TransitionNotAllowed

from islands.player import PLAYER_IDS

StateEvent = Literal["add_player", "position_islands", "set_islands", "guess_coord", "win_check", "stop"]


class GameProgress(StrEnum):
    initialized = "initialized"
    players_set = "players_set"
    player1_turn = "player1_turn"
    player2_turn = "player2_turn"
    game_over = "game_over"


class PlayerProgress(StrEnum):
    islands_not_set = "islands_not_set"
    islands_set = "islands_set"


class GameProgressMachine(StateMachine):
    """Guards the overall game progress.

    initialized -> players_set -> player1_turn <-> player2_turn -> game_over
    """

    initialized = MachineState(GameProgress.initialized.value, value=GameProgress.initialized.value, initial=True)
    players_set = MachineState(GameProgress.players_set.value, value=GameProgress.players_set.value)
    player1_turn = MachineState(GameProgress.player1_turn.value, value=GameProgress.player1_turn.value)
    player2_turn = MachineState(GameProgress.player2_turn.value, value=GameProgress.player2_turn.value)
    game_over = MachineState(GameProgress.game_over.value, value=GameProgress.game_over.value, final=True)

    add_player = initialized.to(players_set)
    position_islands = players_set.to.itself()
    set_islands = players_set.to.itself()
    all_islands_set = players_set.to(player1_turn)
    player1_guessed = player1_turn.to(player2_turn)
    player2_guessed = player2_turn.to(player1_turn)
    no_win = player1_turn.to.itself() | player2_turn.to.itself()
    win = player1_turn.to(game_over) | player2_turn.to(game_over)
    stop = players_set.to(game_over) | player1_turn.to(game_over) | player2_turn.to(game_over)

    def __init__(self, progress: GameProgress):
        super().__init__(start_value=progress.value)

    @property
    def progress(self) -> GameProgress:
        return GameProgress(str(self.current_state.value))


class State(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_state: GameProgress = GameProgress.initialized
    player1_state: PlayerProgress = PlayerProgress.islands_not_set
    player2_state: PlayerProgress = PlayerProgress.islands_not_set

    @classmethod
    def new(cls) -> "State":
        return cls()

    def player_state(self, player_id: str) -> PlayerProgress:
        if player_id not in PLAYER_IDS:
            raise ValueError(f"Unknown player id: {player_id!r}")
        return getattr(self, f"{player_id}_state")

    def check(self, event: StateEvent, arg: str | None = None) -> "State":
        """Return the state reached by `event`, or raise ValueError if it is not allowed.

        `arg` is the acting player id, except for `win_check` where it is
        "win" or "no_win".
        """

        machine = GameProgressMachine(self.game_state)
        updates: dict[str, PlayerProgress] = {}
        try:
            if event == "add_player":
                machine.add_player()
            elif event == "position_islands":
                if self.player_state(arg or "") is PlayerProgress.islands_set:
                    raise ValueError(f"Islands of {arg} are already set")
                machine.position_islands()
            elif event == "set_islands":
                self.player_state(arg or "")
                machine.set_islands()
                updates[f"{arg}_state"] = PlayerProgress.islands_set
                others = [self.player_state(p) for p in PLAYER_IDS if p != arg]
                if all(s is PlayerProgress.islands_set for s in others):
                    machine.all_islands_set()
            elif event == "guess_coord":
                self.player_state(arg or "")
                machine.send(f"{arg}_guessed")
            elif event == "win_check":
                if arg not in ("win", "no_win"):
                    raise ValueError(f"Unknown win check: {arg!r}")
                machine.send(arg)
            elif event == "stop":
                self.player_state(arg or "")
                machine.stop()
            else:
                raise ValueError(f"Unknown state event: {event!r}")
        except TransitionNotAllowed as e:
            raise ValueError(f"Event '{event}' not allowed in state '{self.game_state.value}'") from e

        return self.model_copy(update={"game_state": machine.progress, **updates})
