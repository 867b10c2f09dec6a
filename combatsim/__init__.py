"""Turn-based console combat simulator: combatants, prompts, battle loop and command."""

__version__ = "0.1.0"