"""Script assets the theme enqueues."""

from __future__ import annotations

from dataclasses import dataclass

from markupsafe import Markup


@dataclass(frozen=True)
class ScriptAsset:
    """A script handle with its dependencies."""
    handle: str
    path: str
    deps: tuple[str, ...] = ()
    version: str = ""
    in_footer: bool = False

    def src_for(self, template_url: str) -> str:
        src = f"{template_url.rstrip('/')}/{self.path.lstrip('/')}"
        if self.version:
            src += f"?ver={self.version}"
        return src


class ScriptQueue:
    """Enqueued scripts, in enqueue order. Re-enqueueing a handle is a no-op."""

    def __init__(self):
        self._scripts: dict[str, ScriptAsset] = {}

    def enqueue(self, asset: ScriptAsset) -> bool:
        if asset.handle in self._scripts:
            return False
        self._scripts[asset.handle] = asset
        return True

    def get(self, handle: str) -> ScriptAsset | None:
        return self._scripts.get(handle)

    def handles(self) -> list[str]:
        return list(self._scripts)

    def render_tags(self, template_url: str, in_footer: bool) -> Markup:
        """Script tags for the head (in_footer=False) or the footer."""
        tags = [
            Markup('<script type="text/javascript" src="{0}"></script>').format(
                asset.src_for(template_url)
            )
            for asset in self._scripts.values()
            if asset.in_footer == in_footer
        ]
        return Markup("\n").join(tags)
