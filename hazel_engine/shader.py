"""Shader programs and a named collection of them."""

from __future__ import annotations

from typing import Any


class Shader:
    """A named shader program with its sources and uploaded uniform values."""

    def __init__(self, name: str, vertex_src: str = "", fragment_src: str = "") -> None:
        self.name = name
        self.vertex_src = vertex_src
        self.fragment_src = fragment_src
        self.uniforms: dict[str, Any] = {}
        self.bound = False

    def bind(self) -> None:
        self.bound = True

    def unbind(self) -> None:
        self.bound = False

    def set_uniform(self, name: str, value: Any) -> None:
        self.uniforms[name] = value

    def __repr__(self) -> str:
        return f"Shader({self.name!r})"


class ShaderLibrary:
    """Shaders stored by name; each name may be used once."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"Shader already exists: {key!r}")
        self._shaders[key] = shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"Shader not found: {name!r}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders