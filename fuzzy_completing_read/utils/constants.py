"""Constants used throughout fuzzy-completing-read."""

import os

# Default config directory and filename
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/fuzzy-completing-read")

DEFAULT_CONFIG_FILE = "config.json"

# Candidate sets larger than this are handed to the fallback routine
DEFAULT_MAX_ITEMS = 30000

# Fallback used when nothing else is configured: the host function at load time
DEFAULT_FALLBACK_NAME = "host"

# Key sequence of the picker's own "switch to standard completion" command
FALLBACK_COMMAND_KEYS = ("c-x", "c-f")

# Marker drawn in front of the first (selected-on-enter) match
CURRENT_MATCH_MARKER = "▶ "

# Default completion menu style (used by prompt_toolkit in both readers)
DEFAULT_COMPLETION_STYLE = {
    'prompt': 'ansibrightyellow bold',
    'completion-menu.completion': 'bg:#1e1e1e #ffffff',
    'completion-menu.completion.current': 'bg:#1e1e1e #00ff00 bold reverse',
    'completion-menu.meta': 'bg:#1e1e1e #888888 italic',
    'completion-menu.meta.current': 'bg:#1e1e1e #ffffff italic reverse',
    'bottom-toolbar': 'reverse',
}
