"""Release automation for the emoji asset repository."""
from emojitools._version import version as __version__
