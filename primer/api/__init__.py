"""HTTP API for Python Primer."""


def start_server(host: str = None, port: int = None, reload: bool = False):
    """Start the API server (imports FastAPI lazily)."""
    from primer.api.main import start_server as _start_server
    _start_server(host=host, port=port, reload=reload)


__all__ = ["start_server"]
