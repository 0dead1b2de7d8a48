"""Shared test fixtures: captured and synthesised ScummVM --detect output."""
import pytest

HEADER = f"{'GameID':<31}{'Description':<59}Full Path"
RULE = f"{'-' * 30} {'-' * 58} {'-' * 57}"


def render_table(rows, eol="\n", preamble=()):
    """Render (game_id, description, path) rows the way ScummVM pads them."""
    lines = list(preamble)
    lines.append(HEADER)
    lines.append(RULE)
    for game_id, description, path in rows:
        lines.append(f"{game_id:<31}{description:<59}{path}")
    return eol.join(lines) + eol


@pytest.fixture
def table_output():
    return render_table


@pytest.fixture
def not_found_output():
    return (
        "WARNING: ScummVM could not find any game in G:\\example\\SCUMMVM\\\n"
        "WARNING: Consider using --recursive to search inside subdirectories\n"
    )


@pytest.fixture
def loom_output():
    return render_table([
        ("scumm:loom", "Loom (VGA/DOS/English)", "G:\\example\\scummvm\\Loom (CD DOS VGA)\\"),
    ])


@pytest.fixture
def astro_chicken_output():
    preamble = (
        "The game in 'Astro Chicken (Floppy DOS)\\' seems to be an unknown game variant.",
        "",
        "Please report the following data to the ScummVM team at",
        "https://bugs.scummvm.org/ along with the name of the game you tried to add and",
        "its version, language, etc.:",
        "",
        "Matched game IDs for the director engine: iwave-mac",
        "",
        '  {"!", 0, "d:52807765c2438df92ebf1ab1fdbe6dfc", 1792},',
        "",
    )
    return render_table(
        [
            ("director:iwave", "Interactive Wave (Issue 1/Macintosh/English)",
             "G:\\example\\SCUMMVM\\Astro Chicken (Floppy DOS)\\"),
            ("sci:astrochicken", "Astro Chicken (DOS/English)",
             "G:\\example\\SCUMMVM\\Astro Chicken (Floppy DOS)\\"),
        ],
        preamble=preamble,
    )
