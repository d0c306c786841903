"""
I/O Registry
============
Factories that look up readers and writers by MIME type.

Why is this file needed?
------------------------
Readers and writers register themselves with a class decorator, the same way
editors are registered by key elsewhere. Callers then ask a factory for an
implementation of a MIME type without importing concrete classes, and user
interfaces can list the supported formats (e.g. for a file dialog).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IOCapabilities:
    """Description of a file format."""
    format: str
    name: str
    mime_type: str
    extensions: tuple[str, ...]


class IOComponent:
    """
    Base of readers and writers: a MIME type plus settings with defaults.

    `get_setting` falls back to the default when a setting wasn't set.
    """

    def __init__(self, mime_type: str) -> None:
        self.mime_type = mime_type
        self._settings: dict[str, Any] = {}
        self._defaults: dict[str, Any] = {}

    def get_setting(self, key: str) -> Any:
        if key in self._settings:
            return self._settings[key]
        return self._defaults.get(key)

    def set_setting(self, key: str, value: Any) -> None:
        self._settings[key] = value

    def set_default(self, key: str, value: Any) -> None:
        self._defaults[key] = value


class IOFactory:
    """
    Registry of implementations keyed by MIME type. Every subclass keeps its
    own registry.
    """
    _REGISTRY: ClassVar[dict[str, tuple[type[IOComponent], IOCapabilities]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._REGISTRY = {}

    @classmethod
    def register(cls, *capabilities: IOCapabilities) -> Callable[[type[IOComponent]], type[IOComponent]]:
        """Class decorator that registers an implementation for the given formats."""
        def decorator(component: type[IOComponent]) -> type[IOComponent]:
            for capability in capabilities:
                cls._REGISTRY[capability.mime_type] = (component, capability)
                logger.debug(f"{cls.__name__}: {capability.mime_type} -> {component.__name__}")
            return component
        return decorator

    @classmethod
    def get(cls, mime_type: str, **settings: Any) -> Any:
        """
        Create the implementation registered for `mime_type`.

        Raises:
            KeyError: If no implementation supports the MIME type.
        """
        entry = cls._REGISTRY.get(mime_type)
        if entry is None:
            raise KeyError(f"No implementation registered for MIME type '{mime_type}'")
        component = entry[0](mime_type)
        for key, value in settings.items():
            component.set_setting(key, value)
        return component

    @classmethod
    def get_capabilities(cls) -> list[IOCapabilities]:
        return [capability for _, capability in cls._REGISTRY.values()]

    @classmethod
    def supports(cls, mime_type: str) -> bool:
        return mime_type in cls._REGISTRY

    @classmethod
    def mime_type_for_path(cls, path: str | os.PathLike) -> str:
        """
        MIME type of the registered format whose extension matches `path`.

        Raises:
            KeyError: If no format uses the extension.
        """
        extension = os.path.splitext(os.fspath(path))[1].lstrip(".").lower()
        for _, capability in cls._REGISTRY.values():
            if extension in capability.extensions:
                return capability.mime_type
        raise KeyError(f"No format registered for extension '{extension}'")
