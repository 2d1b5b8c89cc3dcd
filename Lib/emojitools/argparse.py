from argparse import ArgumentParser

from emojitools.constants import LOG_LEVELS


class EmojiArgumentParser(ArgumentParser):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_argument(
            "--show-tracebacks", action="store_true", help="Show tracebacks"
        )
        self.add_argument(
            "-l",
            "--log-level",
            choices=LOG_LEVELS,
            default="INFO",
        )
