from pagewright.infra.navigation import SidebarNavigation
from pagewright.infra.sinks import ManifestSink, PageRegistry
from pagewright.infra.source import FilesystemContentSource, InMemoryContentSource

__all__ = [
    "FilesystemContentSource",
    "InMemoryContentSource",
    "ManifestSink",
    "PageRegistry",
    "SidebarNavigation",
]
