"""
cslist — comma-separated списки для pydantic

Обёртки, которые в памяти ведут себя как упорядоченные коллекции,
а на wire (JSON-строки, query-параметры, заголовки) передаются одной
строкой "1,2,3".

    >>> from pydantic import BaseModel
    >>> from cslist import CS, CSArray, U32
    >>> class Query(BaseModel):
    ...     ids: CS[U32]
    ...     rgb: CSArray[U32, 3]
    >>> Query.model_validate_json('{"ids": ",1,,2", "rgb": "255,"}')
    Query(ids=CS[int]([1, 2]), rgb=CSArray[int, 3]((255, 0, 0)))
"""

import logging

from cslist.core.contracts import WireContractValidator, validate_wire, wire_schema
from cslist.core.domain import CS, CSArray, StrictCSArray
from cslist.core.elements import ElementCodec
from cslist.core.errors import CommaSeparatedError, ElementParseError, LengthMismatchError
from cslist.core.grammar import SEPARATOR, iter_tokens, join_tokens, split_tokens
from cslist.core.serde import EXPECTING, dumps, loads
from cslist.core.types import I8, I16, I32, I64, U8, U16, U32, U64

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Wrappers
    "CS",
    "CSArray",
    "StrictCSArray",
    # Element contract
    "ElementCodec",
    "U8",
    "U16",
    "U32",
    "U64",
    "I8",
    "I16",
    "I32",
    "I64",
    # Grammar
    "SEPARATOR",
    "iter_tokens",
    "split_tokens",
    "join_tokens",
    # Serde
    "EXPECTING",
    "dumps",
    "loads",
    # Errors
    "CommaSeparatedError",
    "ElementParseError",
    "LengthMismatchError",
    # Contracts
    "WireContractValidator",
    "wire_schema",
    "validate_wire",
]
