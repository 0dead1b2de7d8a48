"""scummid - identify ScummVM game directories.

Parses ``scummvm --detect`` output and, when ScummVM reports several possible
games for one directory, picks the one whose description best matches the
directory name.
"""

from scummid.detection import GameMatch, parse_detect_output

__version__ = "0.1.0"

__all__ = ["GameMatch", "parse_detect_output", "__version__"]
