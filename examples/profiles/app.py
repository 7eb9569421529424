"""Profiles — the deep-linking tutorial app, minus the phone.

Four screens (home, my profile, someone else's profile, settings) reached
through links like ``deeplinker://example.com/profile/42``. The link table
lives in ``links.yaml``; this module plays the host that turns a
destination into a screen.

Run:
    python app.py deeplinker://example.com/profile/42
"""

import sys
from pathlib import Path

from deeplinker import LinkResolver, MalformedParameterError, MatchResult, load_table

resolver = LinkResolver()
resolver.register(load_table(Path(__file__).parent / "links.yaml"))


def home(result: MatchResult) -> str:
    return "Home"


def my_profile(result: MatchResult) -> str:
    return "My profile"


def other_profile(result: MatchResult) -> str:
    return f"Profile #{result.parameters['id']}"


def settings(result: MatchResult) -> str:
    return "Settings"


SCREENS = {
    "HOME": home,
    "PROFILE": my_profile,
    "PROFILE_OTHER": other_profile,
    "SETTINGS": settings,
}


def open_link(uri: str) -> str:
    """Show the screen for *uri*. Broken profile links land on Home."""
    try:
        result = resolver.resolve(uri)
    except MalformedParameterError:
        result = resolver.default_result()
    return SCREENS[result.destination](result)


if __name__ == "__main__":
    for arg in sys.argv[1:] or ["deeplinker://example.com/"]:
        print(f"{arg} -> {open_link(arg)}")
