"""Configuration constants for vault-sync."""

from pathlib import Path

# Directory used by the local storage provider. First directory which is found is used.
DATA_DIRECTORIES: list[Path] = [
    Path("~/.local/share/vault-sync").expanduser(),
    Path("~/.vault-sync").expanduser(),
    Path("~/.config/vault-sync").expanduser(),
]

# File reference used when pushing without an explicit name.
DEFAULT_FILE_REF: str = "database.vault.json"

# hashlib algorithm name for attachment content fingerprints.
ATTACHMENT_DIGEST: str = "sha256"

# Version of the JSON database document format.
FORMAT_VERSION: int = 1


def resolve_data_directory() -> Path:
    """Return the first existing data directory, or the first candidate if none exist."""
    for candidate in DATA_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return DATA_DIRECTORIES[0]
