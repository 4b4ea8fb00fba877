"""
Terra node graph decoding: definition registry and discriminated decoder.

All functions in this module are pure (no network I/O).
"""

from domain.taxonomy.decoder import decode_as, decode_list, decode_many, decode_one, decode_strings, parse_json
from domain.taxonomy.registry import MODEL_BY_DEFINITION, model_for

__all__ = [
    "decode_one",
    "decode_many",
    "decode_as",
    "decode_list",
    "decode_strings",
    "parse_json",
    "MODEL_BY_DEFINITION",
    "model_for",
]
