"""Configuration management for the ansitext viewer.

This module handles loading user configuration from ~/.config/ansitext/init.py
and provides a sandboxed execution environment for user settings.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Optional


class AnsiTextConfig:
    """Configuration container for viewer settings.

    Values can be set by the user's init.py file; every setting has a default.
    """

    def __init__(self):
        # Display settings
        self.fullscreen: bool = False
        self.show_footer: bool = False

        # Input handling
        self.normalize_line_endings: bool = True  # CRLF / CR -> LF before converting

        # Logging
        self.log_file: Optional[str] = None  # Defaults to ansitext.log when --logging is given


def get_config_path() -> Path:
    """Get the path to the user's config directory."""
    config_home = os.environ.get('XDG_CONFIG_HOME')
    if config_home:
        return Path(config_home) / 'ansitext'
    return Path.home() / '.config' / 'ansitext'


def get_init_script_path() -> Path:
    """Get the path to the user's init.py script."""
    return get_config_path() / 'init.py'


def load_config() -> tuple[AnsiTextConfig, Optional[str]]:
    """Load configuration from ~/.config/ansitext/init.py.

    The init.py file is executed in a sandboxed environment where it can set
    configuration values on a 'config' object.

    Returns:
        A tuple of (config, error_message). If loading fails, error_message
        will contain details about the failure.
    """
    config = AnsiTextConfig()
    init_path = get_init_script_path()

    if not init_path.exists():
        return config, None

    sandbox = {
        '__builtins__': {
            'True': True,
            'False': False,
            'None': None,
            'str': str,
            'int': int,
            'bool': bool,
            'list': list,
            'dict': dict,
            'tuple': tuple,
            'len': len,
            'print': print,  # Allow print for debugging config
            # Explicitly deny dangerous operations
            '__import__': None,
            'open': None,
            'exec': None,
            'eval': None,
            'compile': None,
        },
        'config': config,
    }

    try:
        code = init_path.read_text()
        exec(code, sandbox)
        return config, None

    except Exception:
        error_msg = f"Error loading config from {init_path}:\n{traceback.format_exc()}"
        return config, error_msg
