"""Diagnostic logging for ColorPicker.

Off by default; enable with COLORPICKER_DEBUG=1. Errors an operator should see
(e.g. a failed PNG write) always go to stderr through report_error.
"""
import os
import sys
import time
from pathlib import Path

DEBUG_ENABLED = os.getenv('COLORPICKER_DEBUG') == '1'
DEBUG_RESET = os.getenv('COLORPICKER_DEBUG_RESET') == '1'
DEBUG_LOG_PATH = Path(os.getenv('COLORPICKER_DEBUG_LOG') or (Path.home() / '.colorpicker_debug.log'))

if DEBUG_RESET:
    try:
        if DEBUG_LOG_PATH.exists():
            DEBUG_LOG_PATH.unlink()
    except OSError:
        pass


def debug_log(message: str):
    if not DEBUG_ENABLED:
        return
    try:
        ts = time.strftime('%Y-%m-%d %H:%M:%S')
        with open(DEBUG_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write(f'[{ts}] {message}\n')
    except OSError:
        pass


def report_error(message: str):
    print(message, file=sys.stderr)
    debug_log(message)
