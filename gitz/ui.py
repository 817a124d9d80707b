"""
ui — Terminal primitives for gitz.

Colours, the credential prompt, and error output.
"""

import sys

# ── Colour constants ─────────────────────────────────────────────────────

CYAN    = "\033[36m"
DIM     = "\033[2m"
RED     = "\033[31m"
RESET   = "\033[0m"

QUIT = "__QUIT__"


# ── Output ───────────────────────────────────────────────────────────────

def setup_encoding(stream=None):
    """Replace characters the terminal encoding cannot represent."""
    stream = stream or sys.stdout
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="replace")


def error(message):
    print(f"{RED}❌ {message}{RESET}", file=sys.stderr)


# ── Input ────────────────────────────────────────────────────────────────

def prompt(text, default=None):
    """Prompt for text input on stderr. Returns QUIT on EOF."""
    suffix = f" {DIM}[{default}]{RESET}" if default else ""
    print(f"  {CYAN}▸{RESET} {text}{suffix}: ", end="", file=sys.stderr, flush=True)
    try:
        raw = input().strip()
    except EOFError:
        return QUIT
    return raw if raw else default
