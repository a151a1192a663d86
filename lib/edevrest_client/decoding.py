from __future__ import annotations

import dataclasses
import json
import types
import typing
from typing import Any, Callable, TypeVar, Union, overload

from .errors import DecodeError

T = TypeVar("T")

_NONE_TYPE = type(None)
_SCALARS = (str, int, float, bool)


@overload
def decode(target: type[T], text: str) -> T: ...


@overload
def decode(target: Callable[[Any], T], text: str) -> T: ...


def decode(target, text):
    """Decode a JSON document into ``target``.

    ``target`` is a class with ``from_json``/``from_dict``, a dataclass, one of
    the plain JSON types, or a decoding function taking the parsed value.
    """
    from_json = getattr(target, "from_json", None)
    if isinstance(target, type) and callable(from_json):
        try:
            return from_json(text)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError(f"cannot decode {_name(target)}: {e}", e) from e

    try:
        data = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"response body is not valid JSON: {e}", e) from e
    return convert(target, data)


def convert(target, data: Any) -> Any:
    """Convert an already parsed JSON value into ``target``."""
    try:
        return _convert(target, data, "$")
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError(f"cannot decode {_name(target)}: {e}", e) from e


def _convert(tp, data: Any, where: str) -> Any:
    if tp is Any or tp is object:
        return data

    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = typing.get_args(tp)
        if data is None:
            if _NONE_TYPE in args:
                return None
            raise DecodeError(f"{where}: null is not allowed")
        errors = []
        for arg in args:
            if arg is _NONE_TYPE:
                continue
            try:
                return _convert(arg, data, where)
            except DecodeError as e:
                errors.append(str(e))
        raise DecodeError("; ".join(errors) or f"{where}: no matching type")

    if origin in (list, tuple, set, frozenset):
        if not isinstance(data, list):
            raise DecodeError(f"{where}: expected array, got {_json_kind(data)}")
        args = typing.get_args(tp)
        if origin is tuple and args and Ellipsis not in args:
            if len(data) != len(args):
                raise DecodeError(f"{where}: expected {len(args)} items, got {len(data)}")
            return tuple(_convert(item_tp, item, f"{where}[{i}]") for i, (item_tp, item) in enumerate(zip(args, data)))
        item_tp = args[0] if args else Any
        items = [_convert(item_tp, item, f"{where}[{i}]") for i, item in enumerate(data)]
        return origin(items)

    if origin is dict:
        if not isinstance(data, dict):
            raise DecodeError(f"{where}: expected object, got {_json_kind(data)}")
        args = typing.get_args(tp)
        value_tp = args[1] if len(args) == 2 else Any
        return {str(k): _convert(value_tp, v, f"{where}.{k}") for k, v in data.items()}

    if isinstance(tp, type):
        from_dict = getattr(tp, "from_dict", None)
        if callable(from_dict):
            return from_dict(data)
        if dataclasses.is_dataclass(tp):
            return _convert_dataclass(tp, data, where)
        if tp in (list, tuple, set, frozenset, dict) or tp in _SCALARS:
            return _convert_plain(tp, data, where)

    if callable(tp):
        return tp(data)

    raise DecodeError(f"{where}: unsupported target type {tp!r}")


def _convert_plain(tp: type, data: Any, where: str) -> Any:
    if tp is dict:
        if isinstance(data, dict):
            return data
    elif tp in (list, tuple, set, frozenset):
        if isinstance(data, list):
            return data if tp is list else tp(data)
    elif tp is bool:
        if isinstance(data, bool):
            return data
    elif tp is int:
        if isinstance(data, int) and not isinstance(data, bool):
            return data
    elif tp is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            return float(data)
    elif isinstance(data, tp):
        return data
    raise DecodeError(f"{where}: expected {tp.__name__}, got {_json_kind(data)}")


def _convert_dataclass(tp: type, data: Any, where: str) -> Any:
    if not isinstance(data, dict):
        raise DecodeError(f"{where}: expected object for {tp.__name__}, got {_json_kind(data)}")
    hints = typing.get_type_hints(tp)
    kwargs: dict[str, Any] = {}
    missing: list[str] = []
    for f in dataclasses.fields(tp):
        if not f.init:
            continue
        if f.name not in data:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                missing.append(f.name)
            continue
        kwargs[f.name] = _convert(hints.get(f.name, Any), data[f.name], f"{where}.{f.name}")
    if missing:
        raise DecodeError(f"{where}: missing field(s) for {tp.__name__}: {', '.join(missing)}")
    return tp(**kwargs)


def _json_kind(data: Any) -> str:
    if data is None:
        return "null"
    if isinstance(data, bool):
        return "boolean"
    if isinstance(data, (int, float)):
        return "number"
    if isinstance(data, str):
        return "string"
    if isinstance(data, list):
        return "array"
    if isinstance(data, dict):
        return "object"
    return type(data).__name__


def _name(target) -> str:
    return getattr(target, "__name__", None) or repr(target)
