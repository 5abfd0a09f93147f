"""Build converters from JSON configuration documents."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from typing import Any, BinaryIO

from .binary_dict import InvalidFormat
from .conversion import Conversion
from .conversion_chain import ConversionChain
from .converter import Converter
from .darts_dict import DartsDict
from .dict import Dict
from .dict_group import DictGroup
from .segmentation import MaxMatchSegmentation

_LOADERS: dict[str, Callable[[BinaryIO], Dict]] = {
    "ocd": DartsDict.from_stream,
}


class FileNotFound(FileNotFoundError):
    """Raised when a configuration or dictionary file cannot be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} not found or not accessible.")
        self.path = path


def _property(doc: dict[str, Any], name: str) -> Any:
    if name not in doc:
        raise InvalidFormat(f"Required property not found: {name}")
    return doc[name]


def _object_property(doc: dict[str, Any], name: str) -> dict[str, Any]:
    value = _property(doc, name)
    if not isinstance(value, dict):
        raise InvalidFormat(f"Property must be an object: {name}")
    return value


def _array_property(doc: dict[str, Any], name: str) -> list[Any]:
    value = _property(doc, name)
    if not isinstance(value, list):
        raise InvalidFormat(f"Property must be an array: {name}")
    return value


def _string_property(doc: dict[str, Any], name: str) -> str:
    value = _property(doc, name)
    if not isinstance(value, str):
        raise InvalidFormat(f"Property must be a string: {name}")
    return value


def _can_open(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


class Config:
    """Loads converters from configuration files, caching loaded dictionaries."""

    def __init__(self, data_directory: str = "") -> None:
        self.data_directory = data_directory
        self._cache: dict[tuple[str, str, str], Dict] = {}

    def new_from_file(self, file_name: str) -> Converter:
        """Find a configuration file, read it and build its converter."""
        path = self._find_config_file(file_name)
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
        normalized = path.replace("\\", "/") if os.sep == "\\" else path
        slash = normalized.rfind("/")
        config_directory = normalized[: slash + 1] if slash >= 0 else ""
        return self.new_from_string(content, config_directory)

    def new_from_string(self, json_text: str, config_directory: str) -> Converter:
        """Build a converter from JSON text; dictionaries are also looked up
        relative to ``config_directory``."""
        try:
            doc = json.loads(json_text)
        except json.JSONDecodeError as exc:
            raise InvalidFormat("Error parsing JSON") from exc
        if not isinstance(doc, dict):
            raise InvalidFormat("Root of configuration must be an object")

        name = doc.get("name")
        if not isinstance(name, str):
            name = ""

        if config_directory and not config_directory.endswith(("/", "\\")):
            config_directory += "/"

        segmentation = self._parse_segmentation(
            _object_property(doc, "segmentation"), config_directory
        )
        chain = self._parse_conversion_chain(
            _array_property(doc, "conversion_chain"), config_directory
        )
        return Converter(name, segmentation, chain)

    def _find_config_file(self, file_name: str) -> str:
        candidates = [file_name]
        if self.data_directory:
            prefixed = os.path.join(self.data_directory, file_name)
            candidates += [prefixed, prefixed + ".json"]
        for candidate in candidates:
            if _can_open(candidate):
                return candidate
        raise FileNotFound(file_name)

    def _parse_segmentation(
        self, doc: dict[str, Any], config_directory: str
    ) -> MaxMatchSegmentation:
        kind = _string_property(doc, "type")
        if kind != "mmseg":
            raise InvalidFormat(f"Unknown segmentation type: {kind}")
        dictionary = self._parse_dict(_object_property(doc, "dict"), config_directory)
        return MaxMatchSegmentation(dictionary)

    def _parse_conversion_chain(
        self, docs: list[Any], config_directory: str
    ) -> ConversionChain:
        return ConversionChain(
            Conversion(self._parse_dict(_object_property(doc, "dict"), config_directory))
            for doc in docs
            if isinstance(doc, dict)
        )

    def _parse_dict(self, doc: dict[str, Any], config_directory: str) -> Dict:
        kind = _string_property(doc, "type")
        if kind == "group":
            members = []
            for item in _array_property(doc, "dicts"):
                if not isinstance(item, dict):
                    raise InvalidFormat("Element of the array must be an object")
                members.append(self._parse_dict(item, config_directory))
            return DictGroup(members)

        file_name = _string_property(doc, "file")
        cache_key = (kind, config_directory, file_name)
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached
        loader = _LOADERS.get(kind)
        if loader is None:
            raise InvalidFormat(f"Unknown dictionary type: {kind}")
        dictionary = self._load_dict(loader, file_name, config_directory)
        self._cache[cache_key] = dictionary
        return dictionary

    def _load_dict(
        self,
        loader: Callable[[BinaryIO], Dict],
        file_name: str,
        config_directory: str,
    ) -> Dict:
        candidates = [file_name]
        if config_directory:
            candidates.append(config_directory + file_name)
        if self.data_directory:
            candidates.append(os.path.join(self.data_directory, file_name))
        for candidate in candidates:
            try:
                stream = open(candidate, "rb")
            except OSError:
                continue
            with stream:
                return loader(stream)
        raise FileNotFound(file_name)