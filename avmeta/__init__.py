"""UPnP A/V and DLNA metadata helpers: ProtocolInfo, LastChange and XML utilities."""

__version__ = "0.1.0"