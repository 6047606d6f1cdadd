"""CLI helpers for GAKUMU.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, message emitters that write to stderr with emoji→ASCII fallbacks,
and rendering of the endpoint summary.
"""

from .hyperlinks import hyperlink
from .messages import error, info, notice, success, warn
from .summary import render_summary

__all__ = ["error", "hyperlink", "info", "notice", "render_summary", "success", "warn"]
