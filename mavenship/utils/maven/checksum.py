"""
Checksum companions for Maven artifacts.

Maven Central expects an .md5 and a .sha1 file next to every artifact,
each holding the bare lowercase hex digest.
"""

import hashlib
import os
from pathlib import Path
from typing import Dict, Union

CHECKSUM_ALGORITHMS = {
    'md5': hashlib.md5,
    'sha1': hashlib.sha1,
}

_CHUNK_SIZE = 8192


def file_digest(file_path: Union[str, Path], algorithm: str) -> str:
    """
    Calculate the hex digest of a file.

    Args:
        file_path: Path to file
        algorithm: 'md5' or 'sha1'

    Returns:
        Lowercase hex digest
    """
    if algorithm not in CHECKSUM_ALGORITHMS:
        raise ValueError(f"Unsupported checksum algorithm: {algorithm}")

    digest = CHECKSUM_ALGORITHMS[algorithm]()
    with open(file_path, 'rb') as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b''):
            digest.update(chunk)
    return digest.hexdigest()


def write_checksums(file_path: Union[str, Path]) -> Dict[str, str]:
    """
    Write <name>.md5 and <name>.sha1 next to the file.

    Returns:
        Mapping of algorithm to the path of the written checksum file
    """
    written = {}
    for algorithm in CHECKSUM_ALGORITHMS:
        checksum_path = f"{file_path}.{algorithm}"
        with open(checksum_path, 'w', encoding='ascii', newline='') as f:
            f.write(file_digest(file_path, algorithm))
        written[algorithm] = checksum_path
    return written


def verify_checksum(file_path: Union[str, Path], algorithm: str) -> bool:
    """Check an existing checksum companion against the file contents."""
    checksum_path = f"{file_path}.{algorithm}"
    if not os.path.isfile(checksum_path):
        return False
    with open(checksum_path, 'r', encoding='utf-8', errors='replace') as f:
        # tolerate the "<digest>  <name>" layout of md5sum/sha1sum
        tokens = f.read().split()
    if not tokens:
        return False
    return tokens[0].lower() == file_digest(file_path, algorithm)
