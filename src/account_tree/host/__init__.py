from .base import EXTENSION_OPEN_COMMAND, SET_CONTEXT_COMMAND, TreeHost, WizardPromptStep

__all__ = ["EXTENSION_OPEN_COMMAND", "SET_CONTEXT_COMMAND", "TreeHost", "WizardPromptStep"]
