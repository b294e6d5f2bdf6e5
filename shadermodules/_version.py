"""
Versioning for shadermodules. The version number is hard-coded here; dev
installs from a git checkout get extra info appended.
"""

import logging
import subprocess
from pathlib import Path


# Bump before each release. setup.py reads this definition.
__version__ = "0.1.0"


logger = logging.getLogger("shadermodules")

# The repo dir if this is a git checkout, otherwise None.
repo_dir = Path(__file__).parents[1]
repo_dir = repo_dir if repo_dir.joinpath(".git").is_dir() else None


def get_version():
    """Get the version string."""
    if repo_dir:
        return get_extended_version()
    else:
        return __version__


def get_extended_version():
    """Get the version string, extended with the number of commits since the
    last tag and the git hash.
    """
    release, post, labels = get_version_info_from_git()

    base_release = ".".join(__version__.split(".")[:3])
    if not release:
        release = base_release
    elif release != base_release:
        logger.warning("shadermodules version from git and __version__ don't match.")

    version = release
    if post and post != "0":
        version += f".post{post}"
    if labels:
        version += "+" + ".".join(labels)
    return version


def get_version_info_from_git():
    """Get (release, post, labels) from `git describe`."""
    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as e:
        logger.warning("Could not get shadermodules version: " + str(e))
        p = None

    if p is None or p.returncode:
        if p is not None:
            logger.warning(
                "Could not get shadermodules version:\n"
                + p.stderr.decode(errors="ignore")
            )
        parts = (None, None, "unknown")
    else:
        parts = p.stdout.decode(errors="ignore").strip().lstrip("v").split("-")
        if len(parts) <= 2:
            # No tags, only the hash and maybe 'dirty'
            parts = (None, None, *parts)

    release, post, *labels = parts
    return release, post, labels


__version__ = get_version()
version_info = tuple(
    int(i) if i.isnumeric() else i for i in __version__.split("+")[0].split(".")
)
