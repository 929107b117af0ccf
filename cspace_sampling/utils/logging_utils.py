import logging

color2num = dict(
    gray=30,
    red=31,
    green=32,
    yellow=33,
    blue=34,
    magenta=35,
    cyan=36,
    white=37,
    crimson=38,
)


def colorize(
    string: str, color: str, bold: bool = False, highlight: bool = False
) -> str:
    """Wraps ``string`` in terminal colour codes.

    Args:
        string: the message to colour
        color: one of gray, red, green, yellow, blue, magenta, cyan, white, crimson
        bold: whether to bold the string
        highlight: whether to use the background colour instead
    """
    num = color2num[color]
    if highlight:
        num += 10
    attrs = [str(num)]
    if bold:
        attrs.append("1")
    return f"\x1b[{';'.join(attrs)}m{string}\x1b[0m"


class CustomFormatter(logging.Formatter):
    LEVEL_STYLES = {
        logging.DEBUG: dict(color="blue"),
        logging.INFO: dict(color="green"),
        logging.WARNING: dict(color="yellow", bold=True),
        logging.ERROR: dict(color="red", bold=True, highlight=True),
    }

    def format(self, record):
        s = super().format(record)
        style = self.LEVEL_STYLES.get(record.levelno)
        if style is not None:
            s = colorize(s, **style)
        return s


logger = logging.getLogger("cspace_sampling")
logger.setLevel(logging.INFO)
logger.propagate = False
if not logger.hasHandlers():
    ch = logging.StreamHandler()
    ch.setFormatter(
        CustomFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(ch)
