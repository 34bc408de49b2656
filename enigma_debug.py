# enigma_debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "config",
)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# silent until a program attaches a handler; the root logger is never touched
logging.getLogger("ENIGMA").addHandler(logging.NullHandler())


class Debug:
    """Per-component trace switches over the "ENIGMA" logger."""

    def __init__(self) -> None:
        self.logger = logging.getLogger("ENIGMA")
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    # ── output ───────────────────────────────────────────────────
    def attach(self, handler: logging.Handler) -> logging.Handler:
        """Send trace records to *handler* (stderr stream, session file, …)."""
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.setLevel(logging.DEBUG)
        self.logger.addHandler(handler)
        return handler

    def detach(self, handler: logging.Handler) -> None:
        self.logger.removeHandler(handler)
        handler.close()
        if all(isinstance(h, logging.NullHandler) for h in self.logger.handlers):
            self.logger.setLevel(logging.NOTSET)

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug active={active}>"


# one shared instance so the CLI can switch components on for every module
debug = Debug()
