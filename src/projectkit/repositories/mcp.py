"""MCP server repository."""

from abc import ABC, abstractmethod
from pathlib import Path

from projectkit.models.mcp import McpServer
from projectkit.repositories.locking import ReadWriteLock
from projectkit.repositories.store import JsonDocumentStore


class McpServerRepository(ABC):
    @abstractmethod
    def add_mcp_server(self, server: McpServer) -> None: ...

    @abstractmethod
    def get_all(self) -> list[McpServer]: ...

    @abstractmethod
    def remove_all(self) -> None: ...


class FilesystemMcpServerRepository(McpServerRepository):
    def __init__(self, directory: Path) -> None:
        self._store = JsonDocumentStore(directory, McpServer)
        self._lock = ReadWriteLock()

    def add_mcp_server(self, server: McpServer) -> None:
        with self._lock.write():
            self._store.write(self._store.new_path(), server)

    def get_all(self) -> list[McpServer]:
        with self._lock.read():
            return [server for _, server in self._store.read_all()]

    def remove_all(self) -> None:
        with self._lock.write():
            self._store.remove_all()
