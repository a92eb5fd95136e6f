from __future__ import annotations

import random
from dataclasses import dataclass

from sealed.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol
    rng: random.Random | None = None


def build_context() -> CLIContext:
    return CLIContext(console=RichConsole())
