"""British National Grid reference handling.

Modules:
 - types: coordinate value types and the Ok/Invalid result variant
 - tiles: 100 km tile letter table and the 25-letter grid sequence
 - codec: grid reference encode/decode
"""

__all__ = [
    "types",
    "tiles",
    "codec",
]
