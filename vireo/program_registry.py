# vireo/program_registry.py
"""
Simple in-memory registry for named list programs.

This lets the API and the CLI talk in terms of string names like
"succ-list" instead of passing closures around.

Design:

- Registry is just a dict[str, Program].
- Basic helpers:
    * register_program(name, program)
    * get_program(name)
    * has_program(name)
    * clear_registry()
    * list_programs() / list_program_names()

- Built-in programs from vireo.programs are seeded once, on first lookup,
  so clear_registry() followed by a lookup restores them.
"""

from __future__ import annotations

from typing import Dict

from .programs import BUILTIN_PROGRAMS, Program

# Internal registry mapping string names -> programs.
_REGISTRY: Dict[str, Program] = {}
_SEEDED = False


# ---------------------------------------------------------------------------
# Core registry operations
# ---------------------------------------------------------------------------

def register_program(name: str, program: Program) -> None:
    """Register (or overwrite) a named program."""
    _REGISTRY[name] = program


def get_program(name: str) -> Program | None:
    """
    Look up a named program by string name.

    Returns:
        Program if present, or None if not registered.
    """
    _ensure_defaults()
    return _REGISTRY.get(name)


def has_program(name: str) -> bool:
    _ensure_defaults()
    return name in _REGISTRY


def clear_registry() -> None:
    """
    Remove all registered programs.

    Used by tests and callers that want a clean slate.
    """
    global _SEEDED
    _REGISTRY.clear()
    _SEEDED = False


def list_programs() -> list[str]:
    """Return all registered program names, sorted for stability."""
    _ensure_defaults()
    return sorted(_REGISTRY.keys())


def list_program_names() -> list[str]:
    """Alias of list_programs()."""
    return list_programs()


# ---------------------------------------------------------------------------
# Default / built-in programs
# ---------------------------------------------------------------------------

def _ensure_defaults() -> None:
    """Seed built-in programs once, without overwriting user entries."""
    global _SEEDED
    if _SEEDED:
        return
    for make in BUILTIN_PROGRAMS:
        program = make()
        if program.name not in _REGISTRY:
            register_program(program.name, program)
    _SEEDED = True
