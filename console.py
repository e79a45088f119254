import time
from enum import Enum
from typing import Callable, Optional

from display import Screen
from rules.rules import MAX_VALUE, MIN_VALUE
from solver.solver import VISUALIZE_DELAY_SECONDS
from solver.state import Board
from solver.types import SearchOutcome


STATUS_DELAY_SECONDS = 3.0
INVALID_INPUT = "Invalid Input!"
SOLVED_MESSAGE = "Entry Solved!"
NOT_SOLVABLE_MESSAGE = "There is no valid solution to this sudoku puzzle!"
MENU = "\n".join(
    [
        "List of Commands:",
        "[E]nter value to board",
        "[D]elete value from board",
        "[R]eset board values",
        "[S]olve the board",
        "[V]isualize and solve the board",
        "[U]nsolve the board",
        "[Q]uit",
    ]
)


class GameState(Enum):
    WAITING_ENTRY = "waiting_entry"
    SOLVED = "solved"
    NOT_SOLVABLE = "not_solvable"
    QUIT = "quit"


class Command(Enum):
    ENTER = "E"
    DELETE = "D"
    RESET = "R"
    SOLVE = "S"
    VISUALIZE = "V"
    UNSOLVE = "U"
    QUIT = "Q"


class EndOfInput(Exception):
    pass


def parse_command(text: str) -> Optional[Command]:
    try:
        return Command(text.strip())
    except ValueError:
        return None


def parse_digit(text: str) -> Optional[int]:
    try:
        value = int(text.strip())
    except ValueError:
        return None
    if value < MIN_VALUE or value > MAX_VALUE:
        return None
    return value


def transition(state: GameState, command: Optional[Command] = None, outcome: Optional[SearchOutcome] = None) -> GameState:
    if state in {GameState.SOLVED, GameState.NOT_SOLVABLE}:
        return GameState.WAITING_ENTRY
    if state is GameState.QUIT:
        return GameState.QUIT
    if command is Command.QUIT:
        return GameState.QUIT
    if command in {Command.SOLVE, Command.VISUALIZE}:
        if outcome is None:
            raise ValueError("solve commands need a search outcome")
        return GameState.SOLVED if outcome is SearchOutcome.SOLVED else GameState.NOT_SOLVABLE
    return GameState.WAITING_ENTRY


class CommandLoop:
    def __init__(
        self,
        board: Optional[Board] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
        visualize_delay: float = VISUALIZE_DELAY_SECONDS,
        status_delay: float = STATUS_DELAY_SECONDS,
        color: bool = True,
    ) -> None:
        self.board = board if board is not None else Board()
        self.read = read
        self.write = write
        self.sleep = sleep
        self.visualize_delay = visualize_delay
        self.status_delay = status_delay
        self.screen = Screen(write=write, color=color)
        self.state = GameState.WAITING_ENTRY

    def run(self) -> GameState:
        while self.state is not GameState.QUIT:
            try:
                self.step()
            except EndOfInput:
                self.state = GameState.QUIT
        return self.state

    def step(self) -> None:
        self.screen.draw(self.board.grid, self.board.fixed_mask)
        if self.state is GameState.SOLVED:
            self._acknowledge(SOLVED_MESSAGE)
        elif self.state is GameState.NOT_SOLVABLE:
            self._acknowledge(NOT_SOLVABLE_MESSAGE)
        elif self.state is GameState.WAITING_ENTRY:
            self.write(MENU)
            command = parse_command(self._read("Enter Command: "))
            if command is None:
                self.write(INVALID_INPUT)
                return
            self.state = transition(self.state, command, self.handle(command))

    def handle(self, command: Command) -> Optional[SearchOutcome]:
        if command is Command.ENTER:
            self.write("Adding new number to the board. Enter details.")
            row = self.prompt_digit("Row of the number: ")
            col = self.prompt_digit("Column of the number: ")
            value = self.prompt_digit("Value of the number: ")
            self.board.enter(row - 1, col - 1, value)
        elif command is Command.DELETE:
            self.write("Deleting a number from the board. Enter details.")
            row = self.prompt_digit("Row of the number: ")
            col = self.prompt_digit("Column of the number: ")
            self.board.delete(row - 1, col - 1)
        elif command is Command.RESET:
            self.board.reset()
        elif command is Command.UNSOLVE:
            self.board.unsolve()
        elif command is Command.SOLVE:
            return self.board.solve()
        elif command is Command.VISUALIZE:
            return self.board.solve(
                visualize=True,
                render=self.screen.visualizer(),
                delay=self.visualize_delay,
                sleep=self.sleep,
            )
        return None

    def prompt_digit(self, label: str) -> int:
        while True:
            value = parse_digit(self._read(label))
            if value is not None:
                return value
            self.write(INVALID_INPUT)

    def _acknowledge(self, message: str) -> None:
        self.write(message)
        self.sleep(self.status_delay)
        self.state = transition(self.state)

    def _read(self, prompt: str) -> str:
        try:
            return self.read(prompt)
        except EOFError as exc:
            raise EndOfInput() from exc
