"""Exceptions raised by the emoji release tools.

None of these are recovered from. They propagate to the script's entry
point, where the excepthook installed by
:func:`emojitools.logging.setup_logging` reports them and the process exits
with a non-zero status.
"""


class EmojiToolsError(Exception):
    pass


class ConfigurationError(EmojiToolsError):
    """A required environment variable or setting is missing."""


class UpstreamUnavailable(EmojiToolsError):
    """A GitHub API call failed (network, auth, rate limit or bad payload)."""


class IOFailure(EmojiToolsError, OSError):
    """Copying, reading or writing a file failed."""


class RenderFailure(EmojiToolsError):
    """The SVG renderer could not rasterize an input file."""
