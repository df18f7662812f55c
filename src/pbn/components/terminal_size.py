from dataclasses import dataclass


@dataclass(slots=True)
class TerminalSize:
    """Singleton holding the terminal size seen at the start of the current frame."""
    width: int = 80
    height: int = 24
