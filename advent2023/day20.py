"""Pulses travelling through a network of flip-flop and conjunction modules."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from typing import Iterator, Mapping, Sequence

from advent2023.days import Day
from advent2023.mathutil import lcm
from advent2023.runner import solution_main

DAY = Day(20)

BROADCASTER = "broadcaster"
FINAL_MODULE = "rx"
BUTTON_PRESSES = 1000
MAX_PRESSES = 10_000

Network = dict[str, list[str]]


class Pulse(Enum):
    HIGH = "high"
    LOW = "low"

    def flip(self) -> Pulse:
        return Pulse.LOW if self is Pulse.HIGH else Pulse.HIGH


class ModuleKind(Enum):
    BROADCASTER = "broadcaster"
    FLIP_FLOP = "%"
    CONJUNCTION = "&"


@dataclass(frozen=True)
class Signal:
    """A pulse sent from one module to another."""

    source: str
    target: str
    strength: Pulse


def _module_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise ValueError("module name is empty")
    if name.startswith("broadcast"):
        return BROADCASTER
    return name


@dataclass
class Module:
    """A module in the network together with its internal state."""

    name: str
    kind: ModuleKind
    state: Pulse = Pulse.LOW
    memory: dict[str, Pulse] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> Module:
        """Parse the left side of a line: ``broadcaster``, ``%name`` or ``&name``."""
        text = text.strip()
        if not text:
            raise ValueError("cannot make a module from an empty string")
        prefix = text[0]
        if prefix == "b":
            return cls(BROADCASTER, ModuleKind.BROADCASTER)
        if prefix == "%":
            return cls(_module_name(text[1:]), ModuleKind.FLIP_FLOP)
        if prefix == "&":
            return cls(_module_name(text[1:]), ModuleKind.CONJUNCTION)
        raise ValueError(f"cannot make a module from {text!r}")

    def _send(self, pulse: Pulse, network: Mapping[str, Sequence[str]]) -> list[Signal]:
        return [Signal(self.name, target, pulse) for target in network[self.name]]

    def handle_signal(self, signal: Signal, network: Mapping[str, Sequence[str]]) -> list[Signal]:
        """Update the module's state for an incoming signal and return what it sends."""
        if self.kind is ModuleKind.BROADCASTER:
            return self._send(signal.strength, network)
        if self.kind is ModuleKind.FLIP_FLOP:
            if signal.strength is Pulse.HIGH:
                return []
            self.state = self.state.flip()
            return self._send(self.state, network)
        self.memory[signal.source] = signal.strength
        all_high = all(pulse is Pulse.HIGH for pulse in self.memory.values())
        return self._send(Pulse.LOW if all_high else Pulse.HIGH, network)


def _button() -> Signal:
    return Signal(BROADCASTER, BROADCASTER, Pulse.LOW)


class Stepper:
    """Runs button presses through a copy of the modules, counting pulses."""

    def __init__(self, modules: Mapping[str, Module], network: Network) -> None:
        self.modules: dict[str, Module] = copy.deepcopy(dict(modules))
        self.network = network
        self.queue: deque[Signal] = deque()
        self.lows = 0
        self.highs = 0

    def _run(self, signal: Signal) -> Iterator[Signal]:
        self.queue.append(signal)
        while self.queue:
            current = self.queue.popleft()
            if current.strength is Pulse.HIGH:
                self.highs += 1
            else:
                self.lows += 1
            receiver = self.modules.get(current.target)
            if receiver is None:
                continue
            for new_signal in receiver.handle_signal(current, self.network):
                yield new_signal
                self.queue.append(new_signal)

    def start(self, signal: Signal) -> None:
        """Process a signal and everything it sets off."""
        for _ in self._run(signal):
            pass

    def investigate(self, signal: Signal, parent: str) -> list[str]:
        """Process a signal; return the senders of high pulses to ``parent``."""
        return [
            sent.source
            for sent in self._run(signal)
            if sent.target == parent and sent.strength is Pulse.HIGH
        ]


def _parse_line(line: str) -> tuple[Module, list[str]]:
    left, sep, right = line.partition("->")
    if not sep:
        raise ValueError(f"expected 'module -> outputs': {line!r}")
    return Module.parse(left), [_module_name(item) for item in right.split(",")]


def parse_input(text: str) -> tuple[dict[str, Module], Network]:
    """Modules by name and the outputs of each module; conjunctions remember their inputs."""
    lines = [_parse_line(line) for line in text.splitlines() if line.strip()]
    network: Network = {module.name: outputs for module, outputs in lines}
    modules = {module.name: module for module, _ in lines}

    for name, outputs in network.items():
        for child in outputs:
            receiver = modules.get(child)
            if receiver is not None and receiver.kind is ModuleKind.CONJUNCTION:
                receiver.memory[name] = Pulse.LOW

    return modules, network


def part_one(text: str) -> int | None:
    modules, network = parse_input(text)
    stepper = Stepper(modules, network)
    for _ in range(BUTTON_PRESSES):
        stepper.start(_button())
    return stepper.highs * stepper.lows


def part_two(text: str) -> int | None:
    modules, network = parse_input(text)
    parent = next(
        (name for name, outputs in network.items() if FINAL_MODULE in outputs),
        None,
    )
    if parent is None:
        raise ValueError(f"no module sends to {FINAL_MODULE!r}")
    parent_module = modules[parent]
    if parent_module.kind is not ModuleKind.CONJUNCTION:
        raise ValueError(f"module {parent!r} feeding {FINAL_MODULE!r} is not a conjunction")
    target_len = len(parent_module.memory)

    stepper = Stepper(modules, network)
    cycles: dict[str, int] = {}
    for press in range(1, MAX_PRESSES + 1):
        senders = stepper.investigate(_button(), parent)
        for sender in senders:
            cycles[sender] = press
        if senders and len(cycles) >= target_len:
            break

    return reduce(lcm, cycles.values(), 1)


def main(argv: Sequence[str] | None = None) -> None:
    solution_main(DAY, part_one, part_two, argv)


if __name__ == "__main__":
    main()