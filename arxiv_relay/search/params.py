"""
Purpose:
- Normalize inbound list-ish query parameters at the HTTP boundary.
- Clients send either one value (?keywords=a), repeated values
  (?keywords=a&keywords=b) or bracketed forms (?keywords[]=a, ?keywords[0]=a).
- Everything becomes a TermParam first, then one ordered tuple of strings.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union
import re

@dataclass(frozen=True)
class Single:
    value: str

@dataclass(frozen=True)
class Multiple:
    values: Tuple[str, ...]

TermParam = Union[Single, Multiple]

class ParamShapeError(ValueError):
    """Raised for object-style keys such as keywords[field]=x."""

_BRACKET = re.compile(r"^(?P<name>[^\[\]]+)\[(?P<key>[^\[\]]*)\]$")

def _collect(items: Iterable[Tuple[str, str]], name: str):
    """
    Split the values sent for `name` into plain / name[] values (in order),
    indexed name[N] values, whether name[] was used, and object-style keys.
    """
    plain: List[str] = []
    indexed: List[Tuple[int, str]] = []
    bracketed = False
    objects: List[str] = []

    for key, value in items:
        if key == name:
            plain.append(value)
            continue
        m = _BRACKET.match(key)
        if not m or m.group("name") != name:
            continue
        idx = m.group("key")
        if idx == "":
            bracketed = True
            plain.append(value)
        elif idx.isdigit():
            indexed.append((int(idx), value))
        else:
            objects.append(idx)

    return plain, indexed, bracketed, objects

def _ordered(plain: List[str], indexed: List[Tuple[int, str]]) -> List[str]:
    return plain + [v for _, v in sorted(indexed, key=lambda p: p[0])]

def parse_term_param(items: Iterable[Tuple[str, str]], name: str) -> Optional[TermParam]:
    """
    Collect every value sent for `name` from (key, value) pairs.

    Returns None when the parameter is absent. Indexed values (name[0], name[1])
    are ordered by index and follow any plain or name[] values.
    """
    plain, indexed, bracketed, objects = _collect(items, name)
    if objects:
        raise ParamShapeError(f"{name} must be a string or a list of strings")
    if not plain and not indexed:
        return None
    if len(plain) == 1 and not indexed and not bracketed:
        return Single(plain[0])
    return Multiple(tuple(_ordered(plain, indexed)))

def normalize_terms(param: Optional[TermParam]) -> Tuple[str, ...]:
    if param is None:
        return ()
    if isinstance(param, Single):
        return (param.value,)
    return tuple(param.values)

def is_empty(param: Optional[TermParam]) -> bool:
    if param is None:
        return True
    if isinstance(param, Single):
        return param.value == ""
    return len(param.values) == 0

def joined_value(items: Iterable[Tuple[str, str]], name: str) -> Optional[str]:
    """
    Scalar parameters: repeated, name[] and name[N] values are joined with ','
    rather than rejected. Object-style keys are ignored.
    """
    plain, indexed, _bracketed, _objects = _collect(items, name)
    values = _ordered(plain, indexed)
    if not values:
        return None
    return ",".join(values)
