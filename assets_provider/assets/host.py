"""Host environments that receive enqueued assets."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from html import escape
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class AssetHost(Protocol):
    """Asset API of the environment pages are rendered in."""

    def enqueue_style(
        self,
        handle: str,
        src: str,
        dependencies: list[str],
        version: str | None,
        media: str,
    ) -> None: ...

    def register_script(
        self,
        handle: str,
        src: str,
        dependencies: list[str],
        version: str | None,
        in_footer: bool,
    ) -> None: ...

    def set_script_translations(
        self, handle: str, domain: str, path: str | None
    ) -> None: ...

    def enqueue_script(self, handle: str) -> None: ...

    def preload(self, src: str, kind: str) -> None: ...


@dataclass
class PageAssets:
    """Rendered asset markup for a single page."""

    head: str = ""
    footer: str = ""


@dataclass
class _ScriptEntry:
    handle: str
    src: str
    dependencies: list[str]
    version: str | None
    in_footer: bool
    translations: dict[str, str | None] = field(default_factory=dict)


def _ordered(handles: list[str], graph: dict[str, list[str]]) -> list[str]:
    """Order handles so that known dependencies come first."""
    ordered: list[str] = []
    visiting: set[str] = set()

    def visit(handle: str) -> None:
        if handle in ordered or handle in visiting or handle not in graph:
            return
        visiting.add(handle)
        for dependency in graph[handle]:
            visit(dependency)
        visiting.discard(handle)
        ordered.append(handle)

    for handle in handles:
        visit(handle)
    return ordered


def _versioned(src: str, version: str | None) -> str:
    if not version:
        return src
    separator = "&" if "?" in src else "?"
    return f"{src}{separator}ver={version}"


class HtmlAssetHost:
    """Collect enqueued assets and render them as HTML tags.

    Scripts are emitted after any registered dependency, which is pulled in
    even when only its dependent was enqueued. Translation catalogs with a
    path are inlined as JSON and cached by path; unreadable catalogs are
    skipped. Path-less bindings are announced through a
    ``data-i18n-domains`` attribute on the script tag.
    """

    def __init__(self) -> None:
        self._styles: dict[str, tuple[str, list[str], str | None, str]] = {}
        self._scripts: dict[str, _ScriptEntry] = {}
        self._queue: list[str] = []
        self._preloads: list[tuple[str, str]] = []
        # Parsed catalogs survive reset; only the per-page buffer is cleared
        self._catalogs: dict[str, object] = {}

    def enqueue_style(
        self,
        handle: str,
        src: str,
        dependencies: list[str],
        version: str | None,
        media: str,
    ) -> None:
        self._styles[handle] = (src, list(dependencies), version, media)

    def register_script(
        self,
        handle: str,
        src: str,
        dependencies: list[str],
        version: str | None,
        in_footer: bool,
    ) -> None:
        self._scripts[handle] = _ScriptEntry(
            handle=handle,
            src=src,
            dependencies=list(dependencies),
            version=version,
            in_footer=in_footer,
        )

    def set_script_translations(
        self, handle: str, domain: str, path: str | None
    ) -> None:
        entry = self._scripts.get(handle)
        if entry is None:
            logger.warning(
                "assets.translation_unknown_script",
                extra={"handle": handle, "domain": domain},
            )
            return
        entry.translations[domain] = path

    def enqueue_script(self, handle: str) -> None:
        if handle not in self._queue:
            self._queue.append(handle)

    def preload(self, src: str, kind: str) -> None:
        self._preloads.append((src, kind))

    def render(self) -> PageAssets:
        """Render collected assets and reset for the next page."""
        try:
            return self._render_page()
        finally:
            self.reset()

    def _render_page(self) -> PageAssets:
        head: list[str] = []
        footer: list[str] = []

        for src, kind in self._preloads:
            head.append(
                f'<link rel="preload" href="{escape(src)}" as="{escape(kind)}">'
            )

        style_graph = {handle: style[1] for handle, style in self._styles.items()}
        for handle in _ordered(list(self._styles), style_graph):
            src, _, version, media = self._styles[handle]
            head.append(
                f'<link rel="stylesheet" id="{escape(handle)}-css" '
                f'href="{escape(_versioned(src, version))}" media="{escape(media)}">'
            )

        script_graph = {
            handle: entry.dependencies for handle, entry in self._scripts.items()
        }
        for handle in _ordered(self._queue, script_graph):
            entry = self._scripts[handle]
            target = footer if entry.in_footer else head
            target.extend(self._render_script(entry))

        return PageAssets(head="\n".join(head), footer="\n".join(footer))

    def reset(self) -> None:
        self._styles.clear()
        self._scripts.clear()
        self._queue.clear()
        self._preloads.clear()

    def _render_script(self, entry: _ScriptEntry) -> list[str]:
        tags: list[str] = []
        pathless: list[str] = []

        for domain, path in entry.translations.items():
            if path is None:
                pathless.append(domain)
                continue
            catalog = self._read_catalog(path)
            if catalog is None:
                continue
            payload = json.dumps(catalog).replace("</", "<\\/")
            tags.append(
                f'<script type="application/json" '
                f'id="{escape(entry.handle)}-translations-{escape(domain)}">'
                f"{payload}</script>"
            )

        src = _versioned(entry.src, entry.version)
        attributes = f'id="{escape(entry.handle)}-js" src="{escape(src)}"'
        if pathless:
            attributes += f' data-i18n-domains="{escape(" ".join(pathless))}"'
        tags.append(f"<script {attributes}></script>")
        return tags

    def _read_catalog(self, path: str) -> object | None:
        if path in self._catalogs:
            return self._catalogs[path]

        catalog_path = Path(path)
        if not catalog_path.is_file():
            logger.warning("assets.translation_missing", extra={"path": path})
            return None
        try:
            with open(catalog_path) as f:
                catalog = json.load(f)
        except json.JSONDecodeError:
            logger.warning("assets.translation_invalid", extra={"path": path})
            return None

        self._catalogs[path] = catalog
        return catalog
